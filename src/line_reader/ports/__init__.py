from .host_probe import HostProbe
from .line_source import LineSource, LineStreamPort
from .log_sink import LogSink
from .output_sink import OutputSink

# Public port exports keep wiring explicit at composition time.
__all__ = ["HostProbe", "LineSource", "LineStreamPort", "LogSink", "OutputSink"]
