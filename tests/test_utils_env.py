"""Tests for the environment variable utility."""

import pytest

from netprobe.utils.env import EnvVarTypeError, get_env


def test_get_env_basic(monkeypatch):
    """Test getting set variables and missing variables with defaults."""
    monkeypatch.setenv("NETPROBE_TEST_VAR", "test_value")
    monkeypatch.delenv("NETPROBE_MISSING_VAR", raising=False)

    assert get_env("NETPROBE_TEST_VAR") == "test_value"
    assert get_env("NETPROBE_MISSING_VAR", default="default") == "default"
    assert get_env("NETPROBE_MISSING_VAR") is None


def test_get_env_coercion(monkeypatch):
    """Test type coercion for common types."""
    monkeypatch.setenv("NETPROBE_BOOL_TRUE", "true")
    monkeypatch.setenv("NETPROBE_BOOL_FALSE", "0")
    monkeypatch.setenv("NETPROBE_INT", "123")
    monkeypatch.setenv("NETPROBE_FLOAT", "1.5")

    assert get_env("NETPROBE_BOOL_TRUE", as_type=bool) is True
    assert get_env("NETPROBE_BOOL_FALSE", as_type=bool) is False
    assert get_env("NETPROBE_INT", as_type=int) == 123
    assert get_env("NETPROBE_FLOAT", as_type=float) == 1.5

    monkeypatch.setenv("NETPROBE_INVALID_FLOAT", "soon")
    with pytest.raises(EnvVarTypeError):
        get_env("NETPROBE_INVALID_FLOAT", as_type=float)


def test_get_env_logs_access(monkeypatch, log_output):
    """Logged reads appear at debug level."""
    monkeypatch.setenv("NETPROBE_LOGGED", "yes")

    get_env("NETPROBE_LOGGED", log=True)

    assert "ENV GET NETPROBE_LOGGED=yes" in log_output.getvalue()
