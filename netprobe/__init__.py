"""netprobe - host interface listing and internet reachability probe."""

from netprobe.version.netprobe_version import NETPROBE_VERSION, Version

__version__ = str(NETPROBE_VERSION)
__version_info__ = NETPROBE_VERSION

__all__ = [
    "NETPROBE_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
