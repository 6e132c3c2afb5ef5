from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from line_reader.domain.messages import HostFacts, InterfaceAddress, Line


def test_line_is_immutable() -> None:
    line = Line(line_no=1, text="a")
    with pytest.raises(FrozenInstanceError):
        line.text = "b"  # type: ignore[misc]


def test_line_equality_is_by_value() -> None:
    assert Line(line_no=2, text="x") == Line(line_no=2, text="x")
    assert Line(line_no=2, text="x") != Line(line_no=3, text="x")


def test_host_facts_is_immutable() -> None:
    facts = HostFacts(
        os_type="Linux",
        architecture="x86_64",
        network_interfaces={"lo": (InterfaceAddress(family="IPv4", address="127.0.0.1"),)},
        home_dir="/home/user",
        hostname="box",
        uptime_seconds=1.0,
    )
    with pytest.raises(FrozenInstanceError):
        facts.hostname = "other"  # type: ignore[misc]
