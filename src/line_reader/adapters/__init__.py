from .host_probe import SystemHostProbe
from .line_source import FileLineSource, LineStream, read_lines
from .log_sinks import JsonlLogSink, NullLogSink, StderrLogSink, build_log_sink
from .output_sink import FileOutputSink, StreamOutputSink, build_output_sink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileLineSource",
    "FileOutputSink",
    "JsonlLogSink",
    "LineStream",
    "NullLogSink",
    "StderrLogSink",
    "StreamOutputSink",
    "SystemHostProbe",
    "build_log_sink",
    "build_output_sink",
    "read_lines",
]
