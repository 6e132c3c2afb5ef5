from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from line_reader.domain.messages import Line


# A line stream is a single-use iterator that owns its source handle until closed.
@runtime_checkable
class LineStreamPort(Protocol):
    def __iter__(self) -> Iterator[Line]: ...

    def __next__(self) -> Line: ...

    def close(self) -> None: ...


# LineSource port: how raw text lines enter the tool.
@runtime_checkable
class LineSource(Protocol):
    @property
    def name(self) -> str:
        """Human-readable source identifier (a path for file sources) used in logs."""
        raise NotImplementedError("LineSource is a port; use a concrete adapter.")

    def read(self) -> LineStreamPort:
        """Open the source and return a single-use stream of lines in source order."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LineSource is a port; use a concrete adapter.")
