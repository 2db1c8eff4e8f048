"""Output sinks for exporting map links."""

from map_link.sinks.console import ConsoleSink
from map_link.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
