"""Integrity check for cached update artifacts.

MD5 is shared with the download pipeline and used for integrity only.
Hashing reads the whole file on the calling thread — run it off the UI
thread for large artifacts.
"""

import hashlib
import logging
import os

from updatekit.core.artifact import artifact_path
from updatekit.core.models import UpdateDescriptor

logger = logging.getLogger(__name__)

# Read buffer for hashing (80 KB)
HASH_BUFFER = 81920


def file_md5(path: str) -> str | None:
    """Lowercase MD5 hex digest of a file, or None if it can't be read."""
    md5 = hashlib.md5()
    try:
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(HASH_BUFFER), b''):
                md5.update(chunk)
    except OSError as e:
        logger.warning("Cannot hash %s: %s", path, e)
        return None
    return md5.hexdigest()


def is_artifact_ready(descriptor: UpdateDescriptor) -> bool:
    """True if the artifact is already cached and matches its checksum.

    An empty checksum is never considered verified. Unreadable files are
    reported as not ready, same as missing ones.
    """
    if not descriptor.checksum:
        return False

    path = artifact_path(descriptor)
    if not os.path.exists(path):
        return False

    digest = file_md5(path)
    if digest is None:
        return False

    if digest.lower() != descriptor.checksum.lower():
        logger.info("Cached artifact %s has wrong checksum", path)
        return False
    return True
