from __future__ import annotations

from dataclasses import asdict

from line_reader.domain.messages import HostFacts
from line_reader.ports.host_probe import HostProbe


def collect_host_facts(probe: HostProbe) -> HostFacts:
    # The probe is always explicit; interfaces are sorted by name for stable output.
    interfaces = probe.network_interfaces()
    return HostFacts(
        os_type=probe.os_type(),
        architecture=probe.architecture(),
        network_interfaces={name: tuple(interfaces[name]) for name in sorted(interfaces)},
        home_dir=probe.home_dir(),
        hostname=probe.hostname(),
        uptime_seconds=float(probe.uptime_seconds()),
    )


def host_facts_to_dict(facts: HostFacts) -> dict[str, object]:
    # Stable key order for JSON output.
    return {
        "os_type": facts.os_type,
        "architecture": facts.architecture,
        "network_interfaces": {
            name: [asdict(addr) for addr in addrs] for name, addrs in facts.network_interfaces.items()
        },
        "home_dir": facts.home_dir,
        "hostname": facts.hostname,
        "uptime_seconds": facts.uptime_seconds,
    }
