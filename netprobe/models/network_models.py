"""Pydantic models for interface records and the network report."""

from __future__ import annotations

import ipaddress
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAC_PATTERN = re.compile(r"^[0-9a-f]{2}(:[0-9a-f]{2}){5}$")


class InterfaceRecord(BaseModel):
    """A reportable network interface with both IPv4 and MAC present."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ..., min_length=1, description="Interface name (e.g., 'eth0', 'en0')"
    )
    ipv4: str = Field(..., description="Dotted-decimal IPv4 address")
    mac: str = Field(..., description="MAC address as xx:xx:xx:xx:xx:xx")

    @field_validator("ipv4")
    @classmethod
    def _check_ipv4(cls, value: str) -> str:
        return str(ipaddress.IPv4Address(value))

    @field_validator("mac")
    @classmethod
    def _normalize_mac(cls, value: str) -> str:
        mac = value.strip().lower().replace("-", ":")
        if not MAC_PATTERN.match(mac):
            raise ValueError(f"not a six-octet hardware address: {value!r}")
        return mac


class NetworkReport(BaseModel):
    """Interfaces plus the outcome of the reachability probe."""

    model_config = ConfigDict(frozen=True)

    interfaces: list[InterfaceRecord] = Field(
        default_factory=list, description="Retained interfaces in OS order"
    )
    internet_available: bool = Field(
        False, description="Whether the reachability probe connected"
    )
