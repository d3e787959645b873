"""Shared fixtures for UpdateKit tests."""
import os

import pytest

from updatekit.config.prefs import IgnoredVersionStore, PreferenceStore
from updatekit.core.models import UpdateDescriptor

FIXTURE_CONTENT = b"hello world"
FIXTURE_MD5 = "5eb63bbbe01eeed093cb22bb8f5acdc3"


@pytest.fixture
def cache_root(tmp_path):
    root = tmp_path / "cache"
    root.mkdir()
    return str(root)


@pytest.fixture
def descriptor(cache_root):
    return UpdateDescriptor(
        version_name="2.0.1",
        download_url="https://example.com/releases/app-2.0.1.apk",
        checksum=FIXTURE_MD5,
        cache_root_dir=cache_root,
    )


@pytest.fixture
def cached_artifact(descriptor):
    """Write the fixture content where the descriptor expects its artifact."""
    folder = os.path.join(descriptor.cache_root_dir, descriptor.version_name)
    os.makedirs(folder, exist_ok=True)
    path = os.path.join(folder, "app-2.0.1.apk")
    with open(path, "wb") as f:
        f.write(FIXTURE_CONTENT)
    return path


@pytest.fixture
def prefs(tmp_path):
    return PreferenceStore(str(tmp_path / "data"))


@pytest.fixture
def ignored_store(prefs):
    return IgnoredVersionStore(prefs)


@pytest.fixture
def fixture_md5():
    return FIXTURE_MD5
