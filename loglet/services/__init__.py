"""
Output sinks for Loglet: the rich console and the JSON file sinks.
"""

from .console import ConsoleSink
from .file_sink import (
    JsonArrayFileSink,
    JsonLinesFileSink,
    RecordSink,
    read_records,
    sink_for,
)

__all__ = [
    "ConsoleSink",
    "JsonArrayFileSink",
    "JsonLinesFileSink",
    "RecordSink",
    "read_records",
    "sink_for",
]
