"""Exception hierarchy for pcmwav."""
from pcmwav.exceptions.base import WavError, WavFormatError
from pcmwav.exceptions.header import (
    MalformedHeaderError,
    UnsupportedFormatError,
    InvalidFieldError,
)
from pcmwav.exceptions.stream import TruncatedStreamError

__all__ = [
    "WavError",
    "WavFormatError",
    "MalformedHeaderError",
    "UnsupportedFormatError",
    "InvalidFieldError",
    "TruncatedStreamError",
]
