"""Report command - lists interfaces and internet reachability."""

from netprobe.backends.network import Network
from netprobe.backends.reachability import ReachabilityCheck, probe_internet
from netprobe.models.constants import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    REPORT_WAIT_GRACE_SECONDS,
)
from netprobe.models.network_models import InterfaceRecord, NetworkReport
from netprobe.utils.logger import Logger


def format_interfaces(records: list[InterfaceRecord]) -> str:
    """Render the interface section of the report."""
    lines = ["Network Interfaces:"]
    for record in records:
        lines.append(f"Interface: {record.name}")
        lines.append(f"  IPv4:    {record.ipv4}")
        lines.append(f"  MAC:     {record.mac}")
        lines.append("  --------")
    return "\n".join(lines)


def format_reachability(internet_available: bool) -> str:
    """Render the reachability line of the report."""
    status = "Available" if internet_available else "Unavailable"
    return f"Internet Access: {status}"


def run_report(
    timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
    wait_seconds: float | None = None,
) -> NetworkReport:
    """Enumerate interfaces and probe reachability concurrently.

    Interfaces are printed as soon as enumeration finishes; the probe runs
    on its own thread and its result is printed once it completes or the
    wait bound expires, whichever comes first.

    Args:
        timeout_seconds: Reachability probe timeout.
        wait_seconds: How long to wait for the probe after printing the
            interfaces. Defaults to the probe timeout plus a teardown grace.

    Returns:
        The NetworkReport that was printed.
    """
    if wait_seconds is None:
        wait_seconds = timeout_seconds + REPORT_WAIT_GRACE_SECONDS

    records = Network().enumerate()

    check = ReachabilityCheck(timeout_seconds=timeout_seconds)
    check.start()

    print(format_interfaces(records), flush=True)

    internet_available = check.wait(wait_seconds)
    Logger.get("commands.report").debug(
        f"Probe finished={check.done} available={internet_available}"
    )
    print(f"\n{format_reachability(internet_available)}")

    return NetworkReport(interfaces=records, internet_available=internet_available)


def run_interfaces(name: str | None = None) -> list[InterfaceRecord]:
    """Print only the interface section, optionally for a single interface."""
    network = Network()
    records = network.get_interface_by_name(name) if name else network.enumerate()
    print(format_interfaces(records))
    return records


def run_check(timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS) -> bool:
    """Print only the reachability line, blocking on the probe."""
    internet_available = probe_internet(timeout_seconds)
    print(format_reachability(internet_available))
    return internet_available
