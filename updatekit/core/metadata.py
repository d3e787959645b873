"""Installed version lookup from package metadata."""

import logging
from importlib import metadata

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "0"


class InstalledVersionProvider:
    """Answers "what version is installed" for one distribution.

    A missing distribution is not an error here: the fallback version is
    returned instead, which any real release compares newer than.
    """

    def __init__(self, distribution: str, fallback: str = DEFAULT_VERSION):
        self.distribution = distribution
        self.fallback = fallback

    def get_installed_version(self) -> str:
        try:
            return metadata.version(self.distribution)
        except metadata.PackageNotFoundError:
            logger.warning("Distribution %s not installed, assuming %s",
                           self.distribution, self.fallback)
            return self.fallback

    def get_version_code(self) -> int:
        """Leading numeric component of the installed version, 0 if none."""
        major = self.get_installed_version().split('.')[0]
        return int(major) if major.isdecimal() else 0

    def get_metadata(self, name: str) -> str | None:
        """A single metadata field (e.g. 'Summary', 'Home-page') or None."""
        try:
            return metadata.metadata(self.distribution).get(name)
        except metadata.PackageNotFoundError:
            logger.warning("No metadata for %s", self.distribution)
            return None


class StaticVersionProvider:
    """Fixed installed version, for frozen builds and tests."""

    def __init__(self, version: str):
        self.version = version

    def get_installed_version(self) -> str:
        return self.version
