from .encodings import require_known_encoding, require_lf_encoding
from .errors import SourceAccessDenied, SourceDecodeError, SourceError, SourceNotFound, SourceReadError
from .messages import HostFacts, InterfaceAddress, Line

__all__ = [
    "HostFacts",
    "InterfaceAddress",
    "Line",
    "SourceAccessDenied",
    "SourceDecodeError",
    "SourceError",
    "SourceNotFound",
    "SourceReadError",
    "require_known_encoding",
    "require_lf_encoding",
]
