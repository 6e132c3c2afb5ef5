from __future__ import annotations

import pytest

from line_reader.adapters.host_probe import SystemHostProbe
from line_reader.ports.host_probe import HostProbe


@pytest.mark.parametrize(
    "accessor",
    ["os_type", "architecture", "network_interfaces", "home_dir", "hostname", "uptime_seconds"],
)
def test_host_probe_port_default_raises(accessor: str) -> None:
    class _PortOnly(HostProbe):
        pass

    with pytest.raises(NotImplementedError):
        getattr(_PortOnly(), accessor)()  # type: ignore[misc]


def test_system_probe_satisfies_port() -> None:
    assert isinstance(SystemHostProbe(), HostProbe)
