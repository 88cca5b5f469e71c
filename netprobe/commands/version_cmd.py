"""
Version command - displays netprobe version information
"""

from netprobe.version import NETPROBE_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display netprobe version information.

    Args:
        verbose: If True, also show the release date
    """
    if verbose:
        print(f"netprobe version {NETPROBE_VERSION.full_version()}")
        print(f"  Semantic Version: {NETPROBE_VERSION}")
        print(f"  Release Date:     {NETPROBE_VERSION.date_string()}")
    else:
        print(f"netprobe {NETPROBE_VERSION}")
