from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from line_reader.config.models import OutputConfig
from line_reader.ports.output_sink import OutputSink


@dataclass
class StreamOutputSink(OutputSink):
    # Writes to an already open text stream (stdout by default); the stream is not owned.
    stream: TextIO | None = None

    def write_line(self, line: str) -> None:
        self._target().write(line + "\n")

    def close(self) -> None:
        self._target().flush()

    def abort(self) -> None:
        # Lines already written to a stream cannot be taken back; just flush them.
        self.close()

    def _target(self) -> TextIO:
        # Resolve sys.stdout at call time so redirected/captured stdout is honored.
        return self.stream if self.stream is not None else sys.stdout


@dataclass
class FileOutputSink(OutputSink):
    # File-based OutputSink adapter, optionally committed through a temp file.
    path: Path
    encoding: str = "utf-8"
    atomic_replace: bool = False
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _temp_path: Path | None = field(default=None, init=False, repr=False)
    _closed: bool = field(default=False, init=False, repr=False)

    def write_line(self, line: str) -> None:
        if self._closed:
            raise ValueError(f"FileOutputSink for {self.path} is closed")
        # Open lazily so construction does not touch filesystem.
        if self._handle is None:
            self._open()
        assert self._handle is not None
        self._handle.write(line + "\n")

    def close(self) -> None:
        # Close is idempotent; a sink closed before any write still leaves an empty output file.
        if self._closed:
            return
        self._closed = True
        if self._handle is None:
            self._open()
        assert self._handle is not None
        self._handle.flush()
        self._handle.close()
        self._handle = None

        if self.atomic_replace and self._temp_path is not None:
            # Atomic replace commits the temp file to the final path.
            self._temp_path.replace(self.path)
            self._temp_path = None

    def abort(self) -> None:
        # Atomic mode drops the temp file so the previous target survives; plain mode keeps what was written.
        if self._closed:
            return
        self._closed = True
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        if self._temp_path is not None:
            self._temp_path.unlink(missing_ok=True)
            self._temp_path = None

    def _open(self) -> None:
        if self.atomic_replace:
            self._temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            self._handle = self._temp_path.open("w", encoding=self.encoding)
        else:
            self._handle = self.path.open("w", encoding=self.encoding)


def build_output_sink(config: OutputConfig) -> OutputSink:
    if config.kind == "file":
        assert config.file_path is not None
        return FileOutputSink(
            path=Path(config.file_path),
            encoding=config.encoding,
            atomic_replace=config.atomic_replace,
        )
    return StreamOutputSink()
