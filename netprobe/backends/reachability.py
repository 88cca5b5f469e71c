"""Reachability backend - bounded TCP connect probe toward a fixed endpoint."""

from __future__ import annotations

import errno
import selectors
import socket
import threading

from netprobe.models.constants import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    REACHABILITY_TARGET,
)
from netprobe.utils.logger import Logger

# connect_ex results that mean "handshake started" on a non-blocking socket
_IN_PROGRESS = frozenset({0, errno.EINPROGRESS, errno.EWOULDBLOCK, errno.EALREADY})


def wait_writable(sock: socket.socket, timeout_seconds: float) -> bool:
    """Wait until a connecting socket is writable or the timeout expires."""
    with selectors.DefaultSelector() as selector:
        selector.register(sock, selectors.EVENT_WRITE)
        return bool(selector.select(timeout_seconds))


def probe_internet(
    timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
    target: tuple[str, int] = REACHABILITY_TARGET,
) -> bool:
    """Check outbound reachability with a non-blocking TCP connect.

    No payload is exchanged. A timeout and a refused connection both yield
    False; callers cannot tell them apart.

    Args:
        timeout_seconds: Upper bound on the wait for the connect to resolve.
        target: IPv4 literal and port to connect to.

    Returns
    -------
        True if the connection was established within the timeout.
    """
    Logger.ensure_configured()
    log = Logger.get("backends.reachability")
    host, port = target

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        log.error(f"Socket creation failed ({e.strerror or e})")
        return False

    with sock:
        try:
            socket.inet_pton(socket.AF_INET, host)
        except OSError:
            log.debug(f"Invalid probe address: {host}")
            return False

        sock.setblocking(False)

        result = sock.connect_ex((host, port))
        if result not in _IN_PROGRESS:
            log.debug(f"Connect to {host}:{port} failed immediately ({result})")
            return False

        writable = wait_writable(sock, timeout_seconds)
        pending = sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)

    reachable = writable and pending == 0
    log.debug(
        f"Probe {host}:{port} ready={writable} so_error={pending} "
        f"-> {reachable}"
    )
    return reachable


class ReachabilityCheck:
    """Runs probe_internet on a detached daemon thread.

    The thread writes the result once and then signals completion. It is
    never joined or cancelled; if still running at process exit it is
    abandoned. Readers wait on the completion signal with their own bound.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
        target: tuple[str, int] = REACHABILITY_TARGET,
    ):
        """Create an unstarted check.

        Args:
            timeout_seconds: Probe timeout, must be positive.
            target: IPv4 literal and port to probe.
        """
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be greater than zero")

        Logger.ensure_configured()
        self.timeout_seconds = timeout_seconds
        self.target = target
        self.internet_available = False

        self._done = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="netprobe-reachability", daemon=True
        )
        self._started = False

    def start(self) -> None:
        """Launch the probe and return immediately."""
        if self._started:
            return
        self._started = True
        self._thread.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the probe to finish, for at most ``timeout`` seconds.

        Returns
        -------
            The probe result, or False if it has not finished in time.
        """
        if not self._done.wait(timeout):
            Logger.get("backends.reachability").warning(
                f"Reachability probe still running after {timeout}s"
            )
            return False
        return self.internet_available

    @property
    def done(self) -> bool:
        """Whether the probe has finished."""
        return self._done.is_set()

    def _run(self) -> None:
        try:
            self.internet_available = probe_internet(self.timeout_seconds, self.target)
        except Exception as e:
            Logger.get("backends.reachability").error(
                f"Reachability probe crashed: {e}"
            )
        finally:
            self._done.set()
