from __future__ import annotations


class SourceError(OSError):
    # Base for failures to open or read a line source.
    pass


class SourceNotFound(SourceError, FileNotFoundError):
    pass


class SourceAccessDenied(SourceError, PermissionError):
    pass


class SourceReadError(SourceError):
    # Raised mid-iteration; the stream ends and the handle is released.
    pass


class SourceDecodeError(ValueError):
    # Strict decoding failed for one record.
    def __init__(self, path: str, line_no: int, encoding: str) -> None:
        super().__init__(f"{path}:{line_no}: cannot decode line as {encoding}")
        self.path = path
        self.line_no = line_no
        self.encoding = encoding
