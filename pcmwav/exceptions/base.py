"""Base exception classes for pcmwav."""


class WavError(Exception):
    """Base class for errors raised by the WAV codec.

    All codec failures inherit from this class so callers can handle
    any rejected or unreadable stream with a single ``except`` clause.
    """


class WavFormatError(WavError):
    """Base class for headers that do not describe canonical integer PCM WAV."""
