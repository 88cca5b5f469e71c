from netprobe.version.netprobe_version import NETPROBE_VERSION, Version

__all__ = ["NETPROBE_VERSION", "Version"]
