"""WAV serialization for pcmwav."""

import logging

from pcmwav.config.defaults import (
    DATA_CHUNK_OFFSET,
    DATA_ID,
    FMT_ID,
    PCM_AUDIO_FORMAT,
    PCM_FMT_SIZE,
    RIFF_ID,
    WAVE_ID,
)
from pcmwav.config.models import SaveInfo
from pcmwav.config.protocols import ByteSink
from pcmwav.codec.validation import SaveInfoValidator

logger = logging.getLogger(__name__)


class Saver:
    """Write raw PCM sample bytes as a canonical 44-byte-header WAV stream."""

    def __init__(self, validate: bool = False) -> None:
        """Initialize the saver.

        Args:
            validate: Run ``SaveInfoValidator`` before writing. Off by default,
                in which case only the sink can make ``save`` fail.
        """
        self.validator = SaveInfoValidator() if validate else None

    def save(self, sink: ByteSink, info: SaveInfo) -> None:
        """Write a complete WAV stream in one pass.

        Integer fields too large for their header slot keep only their
        low-order bits.

        Args:
            sink: Destination byte sink
            info: Audio description and raw sample bytes

        Raises:
            InvalidFieldError: Only when validation is enabled
        """
        if self.validator is not None:
            self.validator.validate(info)

        data_length = len(info.data)
        file_length = DATA_CHUNK_OFFSET + 8 + data_length

        sink.write_exact(RIFF_ID)
        sink.write_int_le(4, file_length - 8)
        sink.write_exact(WAVE_ID)

        sink.write_exact(FMT_ID)
        sink.write_int_le(4, PCM_FMT_SIZE)
        sink.write_int_le(2, PCM_AUDIO_FORMAT)
        sink.write_int_le(2, info.num_channels)
        sink.write_int_le(4, info.sample_rate)
        sink.write_int_le(4, info.byte_rate)
        sink.write_int_le(2, info.block_align)
        sink.write_int_le(2, info.format.bits_per_sample)

        sink.write_exact(DATA_ID)
        sink.write_int_le(4, data_length)
        sink.write_exact(info.data)

        logger.debug(f"Wrote WAV stream of {file_length} bytes")


_default_saver = Saver()


def save(sink: ByteSink, info: SaveInfo) -> None:
    """Write ``info`` to ``sink``; see ``Saver.save``."""
    _default_saver.save(sink, info)
