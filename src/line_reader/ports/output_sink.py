from __future__ import annotations

from typing import Protocol, runtime_checkable


# OutputSink port: how lines leave the tool.
@runtime_checkable
class OutputSink(Protocol):
    def write_line(self, line: str) -> None:
        """Write a single output line (without terminator)."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Finalize and release resources held by the sink."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def abort(self) -> None:
        """Release resources after a failed run without committing partial output."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
