"""Shared fixtures for netprobe tests."""

from io import StringIO

import pytest

from netprobe.utils.logger import Logger


@pytest.fixture(autouse=True)
def log_output():
    """Route netprobe diagnostics into a buffer for every test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    return output
