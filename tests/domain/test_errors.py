from __future__ import annotations

from line_reader.domain.errors import (
    SourceAccessDenied,
    SourceDecodeError,
    SourceError,
    SourceNotFound,
    SourceReadError,
)


def test_source_errors_are_os_errors_of_the_matching_kind() -> None:
    assert issubclass(SourceNotFound, FileNotFoundError)
    assert issubclass(SourceAccessDenied, PermissionError)
    for cls in (SourceNotFound, SourceAccessDenied, SourceReadError):
        assert issubclass(cls, SourceError)
    assert issubclass(SourceError, OSError)


def test_source_error_keeps_errno_and_filename() -> None:
    exc = SourceNotFound(2, "No such file or directory", "in.txt")
    assert exc.errno == 2
    assert exc.filename == "in.txt"


def test_decode_error_message_names_location() -> None:
    exc = SourceDecodeError("in.txt", 7, "utf-8")
    assert isinstance(exc, ValueError)
    assert exc.line_no == 7
    assert str(exc) == "in.txt:7: cannot decode line as utf-8"
