"""Update decision service — ignored versions, comparison, cached artifacts.

Architecture:
  UpdateChecker — pure Python logic (no Qt dependency), blocking methods
  UpdateWorker  — QThread wrapper with pyqtSignal for thread-safe UI updates
"""

import logging

from updatekit.config.prefs import IgnoredVersionStore
from updatekit.core.artifact import artifact_path
from updatekit.core.integrity import is_artifact_ready
from updatekit.core.models import UpdateDecision, UpdateDescriptor, UpdateStatus
from updatekit.core.parser import parse_update_descriptor
from updatekit.core.version import is_newer

logger = logging.getLogger(__name__)


class UpdateChecker:
    """Decides whether to offer an update and whether it must be downloaded.

    All methods are synchronous; evaluate() hashes the cached artifact and
    may block on large files — run it in a worker thread from a UI.
    """

    def __init__(self, version_provider, ignored_store: IgnoredVersionStore,
                 network_probe=None):
        self.version_provider = version_provider
        self.ignored_store = ignored_store
        self.network_probe = network_probe

    # ── Check ────────────────────────────────────────────────────────

    def evaluate(self, descriptor: UpdateDescriptor | None) -> UpdateDecision:
        """Run ignore → compare → locate → verify for one descriptor."""
        if descriptor is None:
            return UpdateDecision(UpdateStatus.UNKNOWN)

        installed = self.version_provider.get_installed_version()
        remote = descriptor.version_name
        decision = UpdateDecision(UpdateStatus.NO_UPDATE,
                                  installed_version=installed,
                                  remote_version=remote)

        if self.ignored_store.is_ignored(remote):
            logger.info("Version %s was dismissed, not prompting", remote)
            decision.status = UpdateStatus.IGNORED
            return decision

        if not is_newer(remote, installed):
            logger.info("Up to date (installed %s, remote %s)", installed, remote)
            return decision

        decision.status = UpdateStatus.UPDATE_AVAILABLE
        decision.artifact_path = artifact_path(descriptor)
        decision.artifact_ready = is_artifact_ready(descriptor)
        logger.info("Update %s available, cached artifact %s",
                    remote, "ready" if decision.artifact_ready else "missing")
        return decision

    def check(self, raw_response, cache_root_dir: str = "") -> UpdateDecision:
        """Parse a raw update-check response, then evaluate it."""
        return self.evaluate(parse_update_descriptor(raw_response, cache_root_dir))

    # ── Dismiss ──────────────────────────────────────────────────────

    def ignore(self, target):
        """Stop prompting for a version (descriptor or version string)."""
        version = target.version_name if isinstance(target, UpdateDescriptor) else target
        self.ignored_store.save(version)

    # ── Network ──────────────────────────────────────────────────────

    def can_download(self, only_unmetered: bool = False) -> bool:
        """Whether the network allows a download right now.

        Without a probe the network is assumed usable.
        """
        if self.network_probe is None:
            return True
        if not self.network_probe.is_network_available():
            return False
        return not only_unmetered or self.network_probe.is_unmetered()


# ── QThread Worker ───────────────────────────────────────────────────

# PyQt6 is imported only when the worker is actually used, keeping
# UpdateChecker itself free of the Qt dependency.

def _get_worker_class():
    """Lazy import to avoid PyQt6 at module level."""
    from PyQt6.QtCore import QThread, pyqtSignal

    class UpdateWorker(QThread):
        """Runs UpdateChecker.evaluate() off the UI thread."""

        decision_ready = pyqtSignal(object)     # UpdateDecision
        check_failed = pyqtSignal(str)          # Error message

        def __init__(self, checker: UpdateChecker, parent=None):
            super().__init__(parent)
            self._checker = checker
            self._descriptor: UpdateDescriptor | None = None

        def evaluate(self, descriptor: UpdateDescriptor):
            """Start background evaluation."""
            self._descriptor = descriptor
            self.start()

        def run(self):
            try:
                self.decision_ready.emit(self._checker.evaluate(self._descriptor))
            except Exception as e:
                logger.error("Update check failed: %s", e)
                self.check_failed.emit(str(e))

    return UpdateWorker


# Module-level accessor
_UpdateWorkerClass = None


def get_update_worker_class():
    """Get the UpdateWorker class (lazy-imported to avoid PyQt6 at import time)."""
    global _UpdateWorkerClass
    if _UpdateWorkerClass is None:
        _UpdateWorkerClass = _get_worker_class()
    return _UpdateWorkerClass
