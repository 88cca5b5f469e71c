"""Backends for interface enumeration and reachability probing."""

from netprobe.backends.network import Network
from netprobe.backends.reachability import ReachabilityCheck, probe_internet

__all__ = [
    "Network",
    "ReachabilityCheck",
    "probe_internet",
]
