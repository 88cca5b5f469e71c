"""Constants for netprobe backends and commands."""

# Well-known public resolver; port 53 is only used as a generically open port.
REACHABILITY_HOST = "8.8.8.8"
REACHABILITY_PORT = 53
REACHABILITY_TARGET = (REACHABILITY_HOST, REACHABILITY_PORT)

DEFAULT_PROBE_TIMEOUT_SECONDS = 2.0

# Added to the probe timeout when the report waits for the probe result.
REPORT_WAIT_GRACE_SECONDS = 1.0

# Linux ioctl request for an interface's hardware address (<linux/sockios.h>).
SIOCGIFHWADDR = 0x8927
IFNAMSIZ = 16

# "lo" on Linux, "lo0" on BSD/macOS
LOOPBACK_NAME_PATTERN = r"^lo\d*$"

ENV_LOG_LEVEL = "NETPROBE_LOG_LEVEL"
ENV_PROBE_TIMEOUT = "NETPROBE_PROBE_TIMEOUT"
DEFAULT_LOG_LEVEL = "WARNING"
