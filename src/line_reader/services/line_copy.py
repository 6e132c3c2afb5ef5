from __future__ import annotations

from contextlib import closing

from line_reader.domain.errors import SourceDecodeError, SourceError
from line_reader.observability.logging import Logger
from line_reader.ports.line_source import LineSource
from line_reader.ports.output_sink import OutputSink


def copy_lines(source: LineSource, sink: OutputSink, logger: Logger) -> int:
    """Write every line of ``source`` to ``sink`` in source order.

    Returns the number of lines written. Open, read and write failures are
    logged with the source path and re-raised; the source handle is released
    on every exit path. The sink is left open for the caller to close or abort.
    """
    log = logger.child("line_copy")
    count = 0
    try:
        with closing(source.read()) as lines:
            for line in lines:
                sink.write_line(line.text)
                count += 1
    except (SourceError, SourceDecodeError) as exc:
        _log_failure(log, "source", source.name, exc, count)
        raise
    except OSError as exc:
        # Anything else raised as OSError here comes from the sink.
        _log_failure(log, "sink", source.name, exc, count)
        raise
    log.info("line copy finished", path=source.name, lines=count)
    return count


def _log_failure(logger: Logger, stage: str, path: str, exc: Exception, count: int) -> None:
    logger.error(
        "line copy failed",
        stage=stage,
        path=path,
        error=type(exc).__name__,
        detail=str(exc),
        lines_written=count,
    )
