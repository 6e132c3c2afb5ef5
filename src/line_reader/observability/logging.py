from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from line_reader.ports.log_sink import LogSink

LEVELS: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload; sinks decide how to render it. logger names the emitting component.
    level: str
    message: str
    logger: str = "line_reader"
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in LEVELS:
            raise ValueError(f"Unknown log level: {self.level!r}")


class Logger:
    """Level-filtering front end over a single LogSink.

    Messages below ``level`` are dropped before a LogMessage is built.
    Child loggers share the sink and threshold and extend the dotted name.
    """

    def __init__(self, sink: LogSink, *, level: str = "info", name: str = "line_reader") -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        self._sink = sink
        self._level = level
        self._threshold = LEVELS[level]
        self._name = name

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def name(self) -> str:
        return self._name

    def child(self, suffix: str) -> Logger:
        return Logger(self._sink, level=self._level, name=f"{self._name}.{suffix}")

    def is_enabled(self, level: str) -> bool:
        return LEVELS[level] >= self._threshold

    def log(self, level: str, message: str, **fields: object) -> None:
        if not self.is_enabled(level):
            return
        self._sink.emit(LogMessage(level=level, message=message, logger=self._name, fields=dict(fields)))

    def debug(self, message: str, **fields: object) -> None:
        self.log("debug", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.log("info", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.log("warning", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.log("error", message, **fields)

    def close(self) -> None:
        self._sink.close()
