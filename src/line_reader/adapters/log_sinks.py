from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from line_reader.config.models import LoggingConfig
from line_reader.observability.logging import LogMessage
from line_reader.ports.log_sink import LogSink


class StderrLogSink(LogSink):
    # One JSON object per line on stderr; stdout stays reserved for data.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(_encode(message) + "\n")
        stream.flush()

    def close(self) -> None:
        # Process streams are never closed by the sink.
        pass


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends so repeated runs accumulate.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            raise ValueError(f"JsonlLogSink for {self._path} is closed")
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        pass


def build_log_sink(config: LoggingConfig) -> LogSink:
    if config.sink == "stderr":
        return StderrLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return NullLogSink()


def _encode(message: LogMessage) -> str:
    return json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "logger": message.logger,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
