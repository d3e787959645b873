"""Update system data models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class UpdateDescriptor:
    """A candidate update: what to compare, where it lives, how to verify it."""

    version_name: str       # Dot-delimited, e.g. "1.2.10"
    download_url: str       # Absolute URL of the artifact
    checksum: str = ""      # Expected MD5 hex digest, case-insensitive
    cache_root_dir: str = ""


class UpdateStatus(Enum):
    NO_UPDATE = "no_update"
    IGNORED = "ignored"
    UPDATE_AVAILABLE = "update_available"
    UNKNOWN = "unknown"     # Could not determine (bad response, no data)


@dataclass
class UpdateDecision:
    """Outcome of an update check."""

    status: UpdateStatus
    installed_version: str = ""
    remote_version: str = ""
    artifact_path: str = ""
    artifact_ready: bool = False

    @property
    def needs_download(self) -> bool:
        return self.status is UpdateStatus.UPDATE_AVAILABLE and not self.artifact_ready
