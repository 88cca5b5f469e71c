"""Pydantic models for structured output."""

from netprobe.models.network_models import InterfaceRecord, NetworkReport

__all__ = [
    "InterfaceRecord",
    "NetworkReport",
]
