"""Opt-in consistency checks for audio about to be saved."""

from pcmwav.config.defaults import (
    MAX_CHANNELS,
    MAX_DATA_LENGTH,
    MAX_SAMPLE_RATE,
    MIN_CHANNELS,
    MIN_SAMPLE_RATE,
)
from pcmwav.config.models import SaveInfo
from pcmwav.exceptions import InvalidFieldError


class SaveInfoValidator:
    """Validate a ``SaveInfo`` against the ranges the loader accepts.

    The saver never runs this on its own; a file that passes is one
    ``Loader.preload`` will accept.
    """

    def validate(self, info: SaveInfo) -> None:
        """Check channel count, sample rate and payload length.

        Args:
            info: Audio description to check

        Raises:
            InvalidFieldError: Naming the first field that fails
        """
        if not MIN_CHANNELS <= info.num_channels <= MAX_CHANNELS:
            raise InvalidFieldError("num_channels", info.num_channels)
        if not MIN_SAMPLE_RATE <= info.sample_rate <= MAX_SAMPLE_RATE:
            raise InvalidFieldError("sample_rate", info.sample_rate)

        data_length = len(info.data)
        if data_length % info.block_align != 0:
            raise InvalidFieldError("data", data_length)
        # The RIFF size field must also fit: data plus the 36 bytes after it
        if data_length > MAX_DATA_LENGTH - 36:
            raise InvalidFieldError("data", data_length)
