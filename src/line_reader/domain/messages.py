from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Line:
    # One LF-delimited record; line_no is the 1-based position in the source.
    line_no: int
    text: str


@dataclass(frozen=True, slots=True)
class InterfaceAddress:
    # Single address bound to a network interface (family is IPv4, IPv6 or MAC).
    family: str
    address: str
    netmask: str | None = None


@dataclass(frozen=True, slots=True)
class HostFacts:
    # Flat record of host facts; values are taken as-is from a HostProbe.
    os_type: str
    architecture: str
    network_interfaces: Mapping[str, tuple[InterfaceAddress, ...]]
    home_dir: str
    hostname: str
    uptime_seconds: float
