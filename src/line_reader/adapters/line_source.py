from __future__ import annotations

from collections.abc import Generator, Iterator
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Literal

from line_reader.domain.errors import (
    SourceAccessDenied,
    SourceDecodeError,
    SourceError,
    SourceNotFound,
    SourceReadError,
)
from line_reader.domain.encodings import require_lf_encoding
from line_reader.domain.messages import Line
from line_reader.ports.line_source import LineSource

DecodeErrors = Literal["strict", "replace"]


class LineStream(Iterator[Line]):
    """Single-use iterator of lines over an already opened binary handle.

    Records are split on LF only; a CR before the LF stays in the text. The
    handle is released when the stream is exhausted, when reading fails, on
    ``close()`` (also via ``with``), and when an unfinished stream is dropped.
    """

    def __init__(
        self,
        handle: BinaryIO,
        *,
        name: str,
        encoding: str = "utf-8",
        decode_errors: DecodeErrors = "strict",
    ) -> None:
        self._handle = handle
        self._name = name
        # The generator must not reference self, otherwise dropping the stream waits for the GC.
        self._lines = _iter_records(handle, name, encoding, decode_errors)

    @property
    def name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __iter__(self) -> LineStream:
        return self

    def __next__(self) -> Line:
        return next(self._lines)

    def __enter__(self) -> LineStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        handle = getattr(self, "_handle", None)
        if handle is not None:
            handle.close()

    def close(self) -> None:
        # Closing the generator runs its finally block; a never-started generator skips it.
        self._lines.close()
        self._handle.close()


def _iter_records(
    handle: BinaryIO,
    name: str,
    encoding: str,
    decode_errors: DecodeErrors,
) -> Generator[Line, None, None]:
    try:
        line_no = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as exc:
                raise SourceReadError(exc.errno, exc.strerror or str(exc), name) from exc
            if not raw:
                return
            line_no += 1
            try:
                text = raw.rstrip(b"\n").decode(encoding, errors=decode_errors)
            except UnicodeDecodeError as exc:
                raise SourceDecodeError(name, line_no, encoding) from exc
            yield Line(line_no=line_no, text=text)
    finally:
        handle.close()


@dataclass(frozen=True, slots=True)
class FileLineSource(LineSource):
    # File-backed LineSource: the file is opened in read(), never lazily on first next().
    path: Path
    encoding: str = "utf-8"
    decode_errors: DecodeErrors = "strict"

    def __post_init__(self) -> None:
        if self.decode_errors not in {"strict", "replace"}:
            raise ValueError("decode_errors must be one of: strict, replace")
        require_lf_encoding(self.encoding)
        # Library callers may pass a plain str path.
        object.__setattr__(self, "path", Path(self.path))

    @property
    def name(self) -> str:
        return str(self.path)

    def read(self) -> LineStream:
        name = self.name
        try:
            handle = self.path.open("rb")
        except FileNotFoundError as exc:
            raise SourceNotFound(exc.errno, exc.strerror, name) from exc
        except PermissionError as exc:
            raise SourceAccessDenied(exc.errno, exc.strerror, name) from exc
        except OSError as exc:
            raise SourceError(exc.errno, exc.strerror or str(exc), name) from exc
        return LineStream(handle, name=name, encoding=self.encoding, decode_errors=self.decode_errors)


def read_lines(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: DecodeErrors = "strict",
) -> LineStream:
    # Convenience for library callers: open now, iterate later.
    return FileLineSource(Path(path), encoding=encoding, decode_errors=decode_errors).read()
