"""Byte source and sink adapters."""
from pcmwav.streams.source import BytesSource, StreamSource
from pcmwav.streams.sink import BytesSink, StreamSink

__all__ = ["BytesSource", "StreamSource", "BytesSink", "StreamSink"]
