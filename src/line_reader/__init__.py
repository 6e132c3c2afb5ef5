from line_reader.adapters.line_source import FileLineSource, LineStream, read_lines
from line_reader.domain.errors import (
    SourceAccessDenied,
    SourceDecodeError,
    SourceError,
    SourceNotFound,
    SourceReadError,
)
from line_reader.domain.messages import HostFacts, InterfaceAddress, Line
from line_reader.services.host_facts import collect_host_facts, host_facts_to_dict

__version__ = "0.1.0"

__all__ = [
    "FileLineSource",
    "HostFacts",
    "InterfaceAddress",
    "Line",
    "LineStream",
    "SourceAccessDenied",
    "SourceDecodeError",
    "SourceError",
    "SourceNotFound",
    "SourceReadError",
    "collect_host_facts",
    "host_facts_to_dict",
    "read_lines",
]
