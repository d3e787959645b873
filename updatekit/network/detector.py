"""Network availability probe — is there a link, and is it unmetered."""

import logging

import psutil

logger = logging.getLogger(__name__)


class ConnectionType:
    WIFI = "wifi"
    LAN = "lan"
    UNKNOWN = "unknown"
    NONE = "none"


_WIFI_HINTS = ('wi-fi', 'wifi', 'wlan', 'wireless', 'wlp')
_LAN_HINTS = ('ethernet', 'eth', 'enp', 'eno', 'ens', 'en0')


def _is_loopback(name_lower: str) -> bool:
    return 'loopback' in name_lower or name_lower == 'lo'


class NetworkDetector:
    """Connectivity probe backed by psutil interface stats.

    Failures while probing are logged and reported as "no network".
    """

    @staticmethod
    def get_type() -> str:
        """Return 'wifi', 'lan', 'unknown' or 'none'."""
        try:
            stats = psutil.net_if_stats()
        except (OSError, psutil.Error) as e:
            logger.warning("Network detection failed: %s", e)
            return ConnectionType.NONE

        found_up = False
        for iface_name, iface_stats in stats.items():
            if not iface_stats.isup:
                continue
            name_lower = iface_name.lower()
            if _is_loopback(name_lower):
                continue
            found_up = True
            if any(h in name_lower for h in _WIFI_HINTS):
                return ConnectionType.WIFI
            if any(h in name_lower for h in _LAN_HINTS):
                return ConnectionType.LAN
        return ConnectionType.UNKNOWN if found_up else ConnectionType.NONE

    def is_network_available(self) -> bool:
        return self.get_type() != ConnectionType.NONE

    def is_unmetered(self) -> bool:
        """WiFi or wired LAN; unclassified links are treated as metered."""
        return self.get_type() in (ConnectionType.WIFI, ConnectionType.LAN)
