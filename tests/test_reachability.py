"""Tests for the reachability probe and its background check."""

import socket
import sys
import threading
import time

import pytest

from netprobe.backends import reachability as reachability_module
from netprobe.backends.reachability import ReachabilityCheck, probe_internet


@pytest.fixture
def listener():
    """A local TCP socket listening on an ephemeral port."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    yield server.getsockname()
    server.close()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()


def test_probe_succeeds_against_listener(listener):
    """Connecting to an open local port reports reachable."""
    assert probe_internet(timeout_seconds=1.0, target=listener) is True


def test_probe_fails_on_refused_port(closed_port):
    """A refused connection is reported as unreachable within the timeout."""
    start = time.monotonic()
    assert probe_internet(timeout_seconds=1.0, target=closed_port) is False
    assert time.monotonic() - start < 1.5


def test_probe_bounded_by_timeout(listener, monkeypatch):
    """A connect that never becomes ready returns False after the timeout."""

    def never_ready(_sock, timeout_seconds):
        time.sleep(timeout_seconds)
        return False

    monkeypatch.setattr(reachability_module, "wait_writable", never_ready)

    start = time.monotonic()
    assert probe_internet(timeout_seconds=0.3, target=listener) is False
    elapsed = time.monotonic() - start
    assert 0.3 <= elapsed < 0.8


@pytest.mark.parametrize("host", ["not-an-ip", "8.8", "127.1", "256.1.1.1"])
def test_probe_rejects_invalid_address(host):
    """Only full dotted-quad IPv4 literals are accepted."""
    assert probe_internet(timeout_seconds=0.5, target=(host, 53)) is False


@pytest.mark.skipif(sys.platform == "win32", reason="needs RLIMIT_NOFILE")
def test_probe_with_high_file_descriptors(listener):
    """The readiness wait works for descriptors above FD_SETSIZE."""
    import resource

    soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    wanted = 2048 if hard == resource.RLIM_INFINITY else min(hard, 2048)
    if wanted < 1200:
        pytest.skip("file descriptor limit too low")
    resource.setrlimit(resource.RLIMIT_NOFILE, (max(soft, wanted), hard))

    held = []
    try:
        for _ in range(1100):
            held.append(socket.socket(socket.AF_INET, socket.SOCK_DGRAM))
        assert held[-1].fileno() >= 1024

        assert probe_internet(timeout_seconds=1.0, target=listener) is True
    finally:
        for sock in held:
            sock.close()
        resource.setrlimit(resource.RLIMIT_NOFILE, (soft, hard))


def test_probe_socket_creation_failure(monkeypatch, log_output):
    """Socket creation errors are logged and yield False."""

    def no_sockets(*_args, **_kwargs):
        raise OSError(24, "Too many open files")

    monkeypatch.setattr(reachability_module.socket, "socket", no_sockets)

    assert probe_internet(timeout_seconds=0.5) is False
    assert "Too many open files" in log_output.getvalue()


def test_check_delivers_result(monkeypatch):
    """The background check hands its result to the waiter."""
    monkeypatch.setattr(reachability_module, "probe_internet", lambda *_a: True)

    check = ReachabilityCheck(timeout_seconds=0.5)
    check.start()

    assert check.wait(1.0) is True
    assert check.done


def test_check_start_does_not_block(monkeypatch):
    """start() returns while the probe is still running."""
    release = threading.Event()

    def slow_probe(*_args):
        release.wait(5)
        return True

    monkeypatch.setattr(reachability_module, "probe_internet", slow_probe)

    check = ReachabilityCheck(timeout_seconds=0.5)
    start = time.monotonic()
    check.start()
    assert time.monotonic() - start < 0.5
    assert not check.done

    # Bounded wait gives up and reports unavailable
    assert check.wait(0.05) is False

    release.set()
    assert check.wait(1.0) is True


def test_check_survives_probe_crash(monkeypatch, log_output):
    """A crashing probe still signals completion with a False result."""

    def crash(*_args):
        raise RuntimeError("boom")

    monkeypatch.setattr(reachability_module, "probe_internet", crash)

    check = ReachabilityCheck(timeout_seconds=0.5)
    check.start()

    assert check.wait(1.0) is False
    assert check.done
    assert "boom" in log_output.getvalue()


def test_check_against_listener(listener):
    """End-to-end: the real probe on a thread reaches a local listener."""
    check = ReachabilityCheck(timeout_seconds=1.0, target=listener)
    check.start()
    assert check.wait(2.0) is True


def test_check_rejects_non_positive_timeout():
    """Timeouts must be positive."""
    with pytest.raises(ValueError):
        ReachabilityCheck(timeout_seconds=0)
