"""WAV header parsing and sample loading for pcmwav."""

import logging
from typing import NoReturn

from pcmwav.config.defaults import (
    DATA_ID,
    FMT_ID,
    MAX_CHANNELS,
    MAX_SAMPLE_RATE,
    MIN_CHANNELS,
    MIN_SAMPLE_RATE,
    PCM_AUDIO_FORMAT,
    PCM_FMT_SIZE,
    RIFF_ID,
    WAVE_ID,
)
from pcmwav.config.enums import Format
from pcmwav.config.models import PreloadedInfo
from pcmwav.config.protocols import ByteSource
from pcmwav.exceptions import (
    InvalidFieldError,
    MalformedHeaderError,
    UnsupportedFormatError,
    WavFormatError,
)
from pcmwav.output.protocols import DiagnosticSink
from pcmwav.streams.endian import unpack_le

logger = logging.getLogger(__name__)


class Loader:
    """Parse canonical PCM WAV headers and copy sample data.

    Loading is two-phase: ``preload`` validates the 44-byte header and
    describes the audio, then ``load`` copies the payload into a buffer the
    caller sized from ``PreloadedInfo.num_bytes``.
    """

    def __init__(self, diagnostics: DiagnosticSink | None = None) -> None:
        """Initialize the loader.

        Args:
            diagnostics: Optional sink that receives the reason for every
                rejected header. It never changes the exception raised.
        """
        self.diagnostics = diagnostics

    def preload(self, source: ByteSource) -> PreloadedInfo:
        """Parse and validate a WAV header without reading sample data.

        Checks run in header order and stop at the first failure.

        Args:
            source: Byte source positioned at the start of the RIFF stream

        Returns:
            PreloadedInfo describing the audio payload that follows

        Raises:
            MalformedHeaderError: If a chunk identifier does not match
            UnsupportedFormatError: If the stream is not plain integer PCM
            InvalidFieldError: If a numeric field is out of range or inconsistent
            TruncatedStreamError: If the source ends inside the header
        """
        # RIFF chunk descriptor (12 bytes); the chunk size is not checked
        if source.read_exact(4) != RIFF_ID:
            self._fail(MalformedHeaderError("missing RIFF header", identifier=RIFF_ID))
        source.skip(4)
        if source.read_exact(4) != WAVE_ID:
            self._fail(MalformedHeaderError("missing WAVE identifier", identifier=WAVE_ID))

        # "fmt " sub-chunk
        if source.read_exact(4) != FMT_ID:
            self._fail(MalformedHeaderError("missing fmt header", identifier=FMT_ID))
        if self._read_int(source, 4) != PCM_FMT_SIZE:
            self._fail(UnsupportedFormatError("not PCM"))
        if self._read_int(source, 2) != PCM_AUDIO_FORMAT:
            self._fail(UnsupportedFormatError("not integer PCM"))

        num_channels = self._read_int(source, 2)
        sample_rate = self._read_int(source, 4)
        byte_rate = self._read_int(source, 4)
        block_align = self._read_int(source, 2)
        bits_per_sample = self._read_int(source, 2)

        if not MIN_CHANNELS <= num_channels <= MAX_CHANNELS:
            self._fail(InvalidFieldError("num_channels", num_channels))
        if not MIN_SAMPLE_RATE <= sample_rate <= MAX_SAMPLE_RATE:
            self._fail(InvalidFieldError("sample_rate", sample_rate))
        try:
            fmt = Format.from_bits_per_sample(bits_per_sample)
        except ValueError:
            self._fail(InvalidFieldError("bits_per_sample", bits_per_sample))

        frame_size = num_channels * fmt.byte_width
        if byte_rate != sample_rate * frame_size:
            self._fail(InvalidFieldError("byte_rate", byte_rate))
        if block_align != frame_size:
            self._fail(InvalidFieldError("block_align", block_align))

        # "data" sub-chunk header; any other chunk here is rejected
        if source.read_exact(4) != DATA_ID:
            self._fail(MalformedHeaderError("missing data header", identifier=DATA_ID))
        subchunk2_size = self._read_int(source, 4)
        if subchunk2_size % frame_size != 0:
            self._fail(InvalidFieldError("subchunk2_size", subchunk2_size))

        info = PreloadedInfo(
            num_channels=num_channels,
            sample_rate=sample_rate,
            format=fmt,
            num_samples=subchunk2_size // frame_size,
        )
        logger.debug(
            f"Parsed WAV header: {info.num_channels} ch, {info.sample_rate} Hz, "
            f"{info.format.value}, {info.num_samples} frames"
        )
        return info

    def load(self, source: ByteSource, preloaded: PreloadedInfo, out_buffer) -> None:
        """Copy the audio payload into a caller-owned buffer.

        Args:
            source: Byte source positioned just after the header
            preloaded: Description returned by ``preload`` for this source
            out_buffer: Writable buffer of at least ``preloaded.num_bytes`` bytes;
                only that many leading bytes are written

        Raises:
            TruncatedStreamError: If the source holds fewer bytes than described
            TypeError: If out_buffer is read-only; nothing is read in that case
        """
        num_bytes = preloaded.num_bytes
        view = memoryview(out_buffer).cast("B")
        assert len(view) >= num_bytes, "out_buffer is smaller than the audio payload"
        # Reject the buffer before the source is consumed
        if view.readonly:
            raise TypeError("out_buffer must be a writable buffer")
        view[:num_bytes] = source.read_exact(num_bytes)

    @staticmethod
    def _read_int(source: ByteSource, width: int) -> int:
        return unpack_le(width, source.read_exact(width))

    def _fail(self, error: WavFormatError) -> NoReturn:
        message = str(error)
        logger.debug(f"Rejected WAV header: {message}")
        if self.diagnostics is not None:
            self.diagnostics.error(message)
        raise error


_default_loader = Loader()


def preload(source: ByteSource, diagnostics: DiagnosticSink | None = None) -> PreloadedInfo:
    """Parse a WAV header from ``source``; see ``Loader.preload``."""
    loader = _default_loader if diagnostics is None else Loader(diagnostics)
    return loader.preload(source)


def load(source: ByteSource, preloaded: PreloadedInfo, out_buffer) -> None:
    """Copy the audio payload from ``source``; see ``Loader.load``."""
    _default_loader.load(source, preloaded, out_buffer)
