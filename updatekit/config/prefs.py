"""Small persisted key-value region and the ignored-version record."""

import json
import logging
import os
import threading

logger = logging.getLogger(__name__)

PREFS_NAME = "update_prefs"
IGNORE_VERSION_KEY = "ignore_version"


class PreferenceStore:
    """String key-value pairs persisted as one JSON file.

    Reads and writes are serialized internally. Every set() rewrites the
    file before returning, so values survive a process exit right after.
    Unreadable files read as empty; failed writes are logged, not raised.
    """

    def __init__(self, data_dir: str, name: str = PREFS_NAME):
        self.data_dir = data_dir
        self.path = os.path.join(data_dir, f"{name}.json")
        self._lock = threading.Lock()

    def get(self, key: str, default: str | None = "") -> str | None:
        with self._lock:
            value = self._read().get(key, default)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str):
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def _read(self) -> dict:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read preferences %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict):
        tmp_path = self.path + '.tmp'
        try:
            os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("Failed to save preferences %s: %s", self.path, e)
            try:
                os.remove(tmp_path)
            except OSError:
                pass


class IgnoredVersionStore:
    """Remembers the single most recently dismissed remote version."""

    def __init__(self, prefs: PreferenceStore):
        self._prefs = prefs

    def save(self, version: str):
        """Replace the ignored version with `version`."""
        self._prefs.set(IGNORE_VERSION_KEY, version)
        logger.info("Ignoring version %s", version)

    def is_ignored(self, version: str) -> bool:
        """Exact string match against the stored version ("" before any save)."""
        return self._prefs.get(IGNORE_VERSION_KEY) == version
