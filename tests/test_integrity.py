"""Tests for cached artifact verification."""
import dataclasses
import os

from updatekit.core import integrity
from updatekit.core.integrity import file_md5, is_artifact_ready


class TestFileMd5:
    def test_known_content(self, cached_artifact, fixture_md5):
        assert file_md5(cached_artifact) == fixture_md5

    def test_missing_file(self, tmp_path):
        assert file_md5(str(tmp_path / "nope.apk")) is None

    def test_directory_is_unreadable(self, tmp_path):
        assert file_md5(str(tmp_path)) is None


class TestIsArtifactReady:
    def test_ready(self, descriptor, cached_artifact):
        assert is_artifact_ready(descriptor)

    def test_checksum_case_insensitive(self, descriptor, cached_artifact, fixture_md5):
        upper = dataclasses.replace(descriptor, checksum=fixture_md5.upper())
        assert is_artifact_ready(upper)

    def test_missing_file(self, descriptor):
        assert not is_artifact_ready(descriptor)

    def test_empty_checksum_never_ready(self, descriptor, cached_artifact):
        assert not is_artifact_ready(dataclasses.replace(descriptor, checksum=""))

    def test_wrong_checksum(self, descriptor, cached_artifact):
        bad = dataclasses.replace(descriptor, checksum="0" * 32)
        assert not is_artifact_ready(bad)

    def test_corrupt_content(self, descriptor, cached_artifact):
        with open(cached_artifact, "ab") as f:
            f.write(b"!")
        assert not is_artifact_ready(descriptor)

    def test_read_error_reports_not_ready(self, descriptor, cached_artifact, monkeypatch):
        def fail(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(integrity, "open", fail, raising=False)
        assert os.path.exists(cached_artifact)
        assert not is_artifact_ready(descriptor)
