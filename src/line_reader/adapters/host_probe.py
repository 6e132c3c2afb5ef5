from __future__ import annotations

import platform
import socket
import time
from collections.abc import Mapping
from pathlib import Path

import psutil

from line_reader.domain.messages import InterfaceAddress
from line_reader.ports.host_probe import HostProbe

class SystemHostProbe(HostProbe):
    # HostProbe backed by the running machine (platform, socket, psutil).
    def os_type(self) -> str:
        return platform.system()

    def architecture(self) -> str:
        return platform.machine()

    def network_interfaces(self) -> Mapping[str, tuple[InterfaceAddress, ...]]:
        interfaces: dict[str, tuple[InterfaceAddress, ...]] = {}
        for name, addrs in psutil.net_if_addrs().items():
            interfaces[name] = tuple(
                InterfaceAddress(family=family, address=addr.address, netmask=addr.netmask or None)
                for addr in addrs
                if (family := _family_label(addr.family)) is not None
            )
        return interfaces

    def home_dir(self) -> str:
        return str(Path.home())

    def hostname(self) -> str:
        return socket.gethostname()

    def uptime_seconds(self) -> float:
        return max(0.0, time.time() - psutil.boot_time())


def _family_label(family: int) -> str | None:
    if family == socket.AF_INET:
        return "IPv4"
    if family == socket.AF_INET6:
        return "IPv6"
    if family == psutil.AF_LINK:
        return "MAC"
    return None
