from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from line_reader.domain.messages import InterfaceAddress


# HostProbe port answers each host-fact accessor; collectors never reach for globals.
@runtime_checkable
class HostProbe(Protocol):
    def os_type(self) -> str:
        raise NotImplementedError("HostProbe is a port; use a concrete adapter.")

    def architecture(self) -> str:
        raise NotImplementedError("HostProbe is a port; use a concrete adapter.")

    def network_interfaces(self) -> Mapping[str, tuple[InterfaceAddress, ...]]:
        raise NotImplementedError("HostProbe is a port; use a concrete adapter.")

    def home_dir(self) -> str:
        raise NotImplementedError("HostProbe is a port; use a concrete adapter.")

    def hostname(self) -> str:
        raise NotImplementedError("HostProbe is a port; use a concrete adapter.")

    def uptime_seconds(self) -> float:
        raise NotImplementedError("HostProbe is a port; use a concrete adapter.")
