"""Local file name and cache path derivation for update artifacts."""

import os

from updatekit.core.models import UpdateDescriptor

ARTIFACT_EXTENSION = ".apk"
FALLBACK_FILE_NAME = "temp" + ARTIFACT_EXTENSION


def local_file_name(download_url: str) -> str:
    """File name to store a download under.

    Uses the last URL path segment when it ends with the artifact extension,
    otherwise (empty URL, query string, no extension) the fallback name.
    """
    if not download_url:
        return FALLBACK_FILE_NAME
    name = download_url[download_url.rfind('/') + 1:]
    if not name.endswith(ARTIFACT_EXTENSION):
        return FALLBACK_FILE_NAME
    return name


def artifact_path(descriptor: UpdateDescriptor) -> str:
    """<cache_root_dir>/<version_name>/<file name>. No I/O."""
    return (descriptor.cache_root_dir
            + os.sep + descriptor.version_name
            + os.sep + local_file_name(descriptor.download_url))
