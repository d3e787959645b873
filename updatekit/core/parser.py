"""Update-check response → UpdateDescriptor."""

import json
import logging
from collections.abc import Mapping

from updatekit.core.models import UpdateDescriptor

logger = logging.getLogger(__name__)

# Accepted key spellings, first match wins
_KEYS = {
    'version_name': ('versionName', 'version_name'),
    'download_url': ('downloadUrl', 'download_url'),
    'checksum': ('md5', 'checksum'),
    'cache_root_dir': ('apkCacheDir', 'cache_root_dir'),
}


def _pick(data: Mapping, field: str) -> str:
    for key in _KEYS[field]:
        value = data.get(key)
        if value is not None:
            return str(value)
    return ""


def parse_update_descriptor(raw, cache_root_dir: str = "") -> UpdateDescriptor | None:
    """Build a descriptor from a JSON string/bytes or a decoded mapping.

    Returns None (and logs) for malformed JSON, a non-object payload or a
    missing version name.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Malformed update response: %s", e)
            return None

    if not isinstance(raw, Mapping):
        logger.warning("Update response is not an object: %s", type(raw).__name__)
        return None

    version_name = _pick(raw, 'version_name')
    if not version_name:
        logger.warning("Update response has no version name")
        return None

    return UpdateDescriptor(
        version_name=version_name,
        download_url=_pick(raw, 'download_url'),
        checksum=_pick(raw, 'checksum'),
        cache_root_dir=_pick(raw, 'cache_root_dir') or cache_root_dir,
    )
