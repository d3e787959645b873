"""UpdateKit — command line entry point."""

import argparse
import logging
import os
import sys

from updatekit.config.prefs import IgnoredVersionStore, PreferenceStore
from updatekit.config.settings import UpdateSettings
from updatekit.core.metadata import InstalledVersionProvider, StaticVersionProvider
from updatekit.core.models import UpdateStatus
from updatekit.core.update_checker import UpdateChecker
from updatekit.core.version import compare_version_name
from updatekit.network.detector import NetworkDetector

logger = logging.getLogger(__name__)


def setup_logging(data_dir: str, verbose: bool = False):
    """Configure logging to file and console."""
    log_dir = os.path.join(data_dir, 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'updatekit.log')

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='updatekit')
    parser.add_argument('--settings', help='Path to settings.json')
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    check = sub.add_parser('check', help='Evaluate an update-check response')
    check.add_argument('response', help='JSON file with the update response')
    check.add_argument('--cache-dir', help='Artifact cache root')
    check.add_argument('--installed', help='Installed version (default: from metadata)')

    ignore = sub.add_parser('ignore', help='Stop prompting for a version')
    ignore.add_argument('version')

    compare = sub.add_parser('compare', help='Compare two version names')
    compare.add_argument('a')
    compare.add_argument('b')
    return parser


def _make_checker(settings: UpdateSettings, installed: str | None = None) -> UpdateChecker:
    prefs = PreferenceStore(settings.data_dir, settings.prefs_name)
    if installed:
        provider = StaticVersionProvider(installed)
    else:
        provider = InstalledVersionProvider(settings.distribution)
    return UpdateChecker(provider, IgnoredVersionStore(prefs), NetworkDetector())


def _run_check(args, settings: UpdateSettings) -> int:
    try:
        with open(args.response, 'rb') as f:
            raw = f.read()
    except OSError as e:
        logger.error("Cannot read %s: %s", args.response, e)
        return 1

    checker = _make_checker(settings, args.installed)
    decision = checker.check(raw, args.cache_dir or settings.cache_dir)
    print(f"status: {decision.status.value}")
    if decision.remote_version:
        print(f"installed: {decision.installed_version}")
        print(f"remote: {decision.remote_version}")
    if decision.artifact_path:
        print(f"artifact: {decision.artifact_path}")
        print(f"ready: {'yes' if decision.artifact_ready else 'no'}")
    if decision.needs_download and not checker.can_download(settings.only_unmetered):
        print("download: deferred (no suitable network)")
    return 1 if decision.status is UpdateStatus.UNKNOWN else 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = UpdateSettings.load(args.settings)
    setup_logging(settings.data_dir, args.verbose)

    if args.command == 'compare':
        diff = compare_version_name(args.a, args.b)
        print((diff > 0) - (diff < 0))
        return 0

    if args.command == 'ignore':
        _make_checker(settings).ignore(args.version)
        return 0

    return _run_check(args, settings)


if __name__ == '__main__':
    sys.exit(main())
