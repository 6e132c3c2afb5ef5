from __future__ import annotations

import codecs


def require_known_encoding(encoding: str) -> str:
    # Returns the canonical codec name; unknown names fail here instead of on first decode.
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise ValueError(f"Unknown encoding: {encoding!r}") from exc


def require_lf_encoding(encoding: str) -> str:
    # Records are split on the byte b"\n", so LF must encode to exactly that byte.
    name = require_known_encoding(encoding)
    try:
        newline = "\n".encode(name)
    except (UnicodeError, LookupError) as exc:
        raise ValueError(f"Encoding {encoding!r} cannot encode a line feed") from exc
    if newline != b"\n":
        raise ValueError(f"Encoding {encoding!r} does not store LF as a single 0x0A byte")
    return name
