"""Updater settings — persistence via JSON."""

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict

from updatekit.branding import AppBranding
from updatekit.config.prefs import PREFS_NAME

logger = logging.getLogger(__name__)


def _platform_cache_root() -> str:
    if sys.platform == 'win32':
        return os.environ.get('LOCALAPPDATA', '.')
    return os.environ.get('XDG_CACHE_HOME') or os.path.join(os.path.expanduser('~'), '.cache')


def _platform_data_root() -> str:
    if sys.platform == 'win32':
        return os.environ.get('LOCALAPPDATA', '.')
    return os.environ.get('XDG_DATA_HOME') or os.path.join(
        os.path.expanduser('~'), '.local', 'share')


DEFAULT_DATA_DIR = os.path.join(_platform_data_root(), AppBranding.APP_NAME)


def disk_cache_dir(unique_name: str, base_dir: str | None = None) -> str:
    """Path of a named cache directory. Does not create it."""
    return os.path.join(base_dir or _platform_cache_root(), unique_name)


@dataclass
class UpdateSettings:
    """Persistent updater settings."""
    # Paths
    data_dir: str = ""
    cache_dir: str = ""
    prefs_name: str = PREFS_NAME

    # Behaviour
    only_unmetered: bool = False        # Only download over WiFi/LAN
    distribution: str = AppBranding.DISTRIBUTION

    def __post_init__(self):
        if not self.data_dir:
            self.data_dir = DEFAULT_DATA_DIR
        if not self.cache_dir:
            self.cache_dir = disk_cache_dir(os.path.join(AppBranding.APP_NAME, 'update'))

    @staticmethod
    def load(path: str | None = None) -> 'UpdateSettings':
        """Load settings from JSON. Returns defaults if file doesn't exist."""
        if path is None:
            path = os.path.join(DEFAULT_DATA_DIR, 'settings.json')

        if not os.path.isfile(path):
            logger.info("No settings file, using defaults")
            return UpdateSettings()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            settings = UpdateSettings(**{k: v for k, v in data.items()
                                         if k in UpdateSettings.__dataclass_fields__})
            logger.info("Loaded settings from %s", path)
            return settings
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load settings: %s", e)
            return UpdateSettings()

    def save(self, path: str | None = None):
        """Save settings to JSON."""
        if path is None:
            path = os.path.join(self.data_dir, 'settings.json')

        os.makedirs(os.path.dirname(path), exist_ok=True)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self), f, indent=2)
            logger.info("Saved settings to %s", path)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)
