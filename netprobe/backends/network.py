"""Network backend - enumerates reportable interfaces using psutil and socket."""

from __future__ import annotations

import re
import socket
import struct
import sys
from typing import Any

import psutil

from netprobe.models.constants import IFNAMSIZ, LOOPBACK_NAME_PATTERN, SIOCGIFHWADDR
from netprobe.models.network_models import MAC_PATTERN, InterfaceRecord
from netprobe.utils.logger import Logger

# SIOCGIFHWADDR is Linux-only; other platforms read the AF_LINK entry instead.
USE_IOCTL = sys.platform.startswith("linux")

_LOOPBACK_NAME = re.compile(LOOPBACK_NAME_PATTERN)


def format_mac(raw: bytes) -> str:
    """Render six raw octets as lowercase colon-separated hex."""
    return ":".join(f"{octet:02x}" for octet in raw[:6])


def query_hardware_address(name: str) -> str | None:
    """Ask the kernel for an interface's hardware address.

    Issues SIOCGIFHWADDR against a transient datagram socket. The socket is
    closed before returning on every path.

    Args:
        name: Interface name (e.g., 'eth0').

    Returns
    -------
        MAC address string, or None if the query failed.
    """
    import fcntl

    request = struct.pack("256s", name.encode()[: IFNAMSIZ - 1])
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            response = fcntl.ioctl(sock.fileno(), SIOCGIFHWADDR, request)
    except OSError as e:
        Logger.get("backends.network").debug(
            f"SIOCGIFHWADDR failed for {name}: {e.strerror or e}"
        )
        return None

    # struct ifreq: 16-byte name, then sockaddr (2-byte family + data)
    return format_mac(response[18:24])


def link_layer_address(entries: list[Any]) -> str | None:
    """Return the normalized AF_LINK address among psutil entries, if any."""
    for entry in entries:
        if entry.family != psutil.AF_LINK or not entry.address:
            continue
        mac = entry.address.lower().replace("-", ":")
        if MAC_PATTERN.match(mac):
            return mac
    return None


class Network:
    """Interface enumeration backend using psutil and socket.

    Produces one InterfaceRecord per OS address entry that carries an IPv4
    address on a non-loopback interface with a resolvable MAC. Every call is
    a fresh pass over the OS listing; nothing is cached.
    """

    def __init__(self) -> None:
        """Initialize network backend."""
        Logger.ensure_configured()
        self._log = Logger.get("backends.network")

    def enumerate(self) -> list[InterfaceRecord]:
        """Enumerate reportable network interfaces.

        Returns
        -------
            InterfaceRecords in OS listing order, or an empty list if the
            interface listing could not be retrieved.
        """
        try:
            addrs = psutil.net_if_addrs()
        except OSError as e:
            self._log.error(f"Interface enumeration failed ({e.strerror or e})")
            return []

        stats = self._interface_stats()
        records = []

        for interface_name, entries in addrs.items():
            loopback = self.is_loopback(interface_name, stats.get(interface_name))

            for entry in entries:
                if not entry.address or loopback:
                    continue

                ipv4 = entry.address if entry.family == socket.AF_INET else None

                # Resolved per entry, not per interface
                mac = self.resolve_hardware_address(interface_name, entries)

                if not ipv4 or not mac:
                    continue

                records.append(
                    InterfaceRecord(name=interface_name, ipv4=ipv4, mac=mac)
                )

        self._log.debug(f"Retained {len(records)} interface record(s)")
        return records

    def get_interface_by_name(self, name: str) -> list[InterfaceRecord]:
        """Get the records of a specific network interface.

        Args:
            name: Interface name (e.g., 'eth0', 'en0')

        Returns
        -------
            Records for that interface (one per IPv4 address), possibly empty.
        """
        return [record for record in self.enumerate() if record.name == name]

    @staticmethod
    def resolve_hardware_address(name: str, entries: list[Any]) -> str | None:
        """Resolve an interface's MAC address.

        Args:
            name: Interface name.
            entries: The psutil address entries listed for that interface.

        Returns
        -------
            Lowercase colon-separated MAC, or None if unavailable.
        """
        if USE_IOCTL:
            return query_hardware_address(name)
        return link_layer_address(entries)

    @staticmethod
    def is_loopback(name: str, if_stats: Any = None) -> bool:
        """Check if an interface is a loopback interface.

        Uses the interface flags reported by psutil and falls back to the
        conventional loopback names when flags are unavailable.
        """
        flags = getattr(if_stats, "flags", "") if if_stats is not None else ""
        if flags:
            return "loopback" in flags.split(",")
        return bool(_LOOPBACK_NAME.match(name))

    def _interface_stats(self) -> dict[str, Any]:
        try:
            return psutil.net_if_stats()
        except OSError as e:
            self._log.debug(f"Interface flags unavailable ({e.strerror or e})")
            return {}
