"""Byte stream exceptions for pcmwav."""

from pcmwav.exceptions.base import WavError


class TruncatedStreamError(WavError):
    """Raised when a byte source ends before the requested bytes are available."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"Stream truncated: expected {expected} bytes, got {received}.")
        self.expected = expected
        self.received = received
