"""pcmwav: strict codec for canonical integer PCM WAV streams."""

from typing import BinaryIO

from pcmwav.codec import Loader, Saver, SaveInfoValidator, load, preload, save
from pcmwav.config import ByteSink, ByteSource, Format, PreloadedInfo, SaveInfo
from pcmwav.exceptions import (
    InvalidFieldError,
    MalformedHeaderError,
    TruncatedStreamError,
    UnsupportedFormatError,
    WavError,
    WavFormatError,
)
from pcmwav.output import DiagnosticSink
from pcmwav.streams import BytesSink, BytesSource, StreamSink, StreamSource


def read_wav(
    stream: BinaryIO | bytes | bytearray | memoryview,
    *,
    diagnostics: DiagnosticSink | None = None,
) -> tuple[PreloadedInfo, bytearray]:
    """Preload a WAV stream and load its payload into a fresh buffer.

    Args:
        stream: Binary file object or bytes-like object holding the WAV data
        diagnostics: Optional sink for header rejection reasons

    Returns:
        Tuple of (info, payload) where payload holds exactly ``info.num_bytes`` bytes
    """
    if isinstance(stream, (bytes, bytearray, memoryview)):
        source: ByteSource = BytesSource(stream)
    else:
        source = StreamSource(stream)
    loader = Loader(diagnostics)
    info = loader.preload(source)
    payload = bytearray(info.num_bytes)
    loader.load(source, info, payload)
    return info, payload


def write_wav(stream: BinaryIO, info: SaveInfo, *, validate: bool = False) -> None:
    """Serialize ``info`` as a WAV stream onto a binary file object."""
    Saver(validate=validate).save(StreamSink(stream), info)


__all__ = [
    "Format",
    "PreloadedInfo",
    "SaveInfo",
    "ByteSource",
    "ByteSink",
    "BytesSource",
    "StreamSource",
    "BytesSink",
    "StreamSink",
    "Loader",
    "Saver",
    "SaveInfoValidator",
    "preload",
    "load",
    "save",
    "read_wav",
    "write_wav",
    "DiagnosticSink",
    "WavError",
    "WavFormatError",
    "MalformedHeaderError",
    "UnsupportedFormatError",
    "InvalidFieldError",
    "TruncatedStreamError",
]
