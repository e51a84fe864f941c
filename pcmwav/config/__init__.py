"""Configuration package for pcmwav."""

# Re-export enums
from pcmwav.config.enums import Format

# Re-export models
from pcmwav.config.models import PreloadedInfo, SaveInfo

# Re-export protocols
from pcmwav.config.protocols import ByteSink, ByteSource

# Re-export defaults
from pcmwav.config.defaults import (
    HEADER_SIZE,
    MAX_CHANNELS,
    MAX_SAMPLE_RATE,
    MIN_CHANNELS,
    MIN_SAMPLE_RATE,
)

__all__ = [
    # Enums
    "Format",
    # Models
    "PreloadedInfo",
    "SaveInfo",
    # Protocols
    "ByteSource",
    "ByteSink",
    # Defaults
    "HEADER_SIZE",
    "MIN_CHANNELS",
    "MAX_CHANNELS",
    "MIN_SAMPLE_RATE",
    "MAX_SAMPLE_RATE",
]
