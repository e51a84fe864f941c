"""Byte source implementations for pcmwav."""

import errno
from typing import BinaryIO

from pcmwav.exceptions import TruncatedStreamError


class BytesSource:
    """Byte source over an in-memory bytes-like object."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._view = memoryview(data).cast("B")
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    def read_exact(self, n: int) -> bytes:
        if n > self.remaining:
            received = self.remaining
            self._pos = len(self._view)
            raise TruncatedStreamError(n, received)
        chunk = self._view[self._pos:self._pos + n].tobytes()
        self._pos += n
        return chunk

    def skip(self, n: int) -> None:
        if n > self.remaining:
            received = self.remaining
            self._pos = len(self._view)
            raise TruncatedStreamError(n, received)
        self._pos += n


class StreamSource:
    """Byte source over a binary file object.

    Works with anything exposing ``read(n)``: open files, ``io.BytesIO``,
    socket files and pipes. Short reads are retried until end of stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def read_exact(self, n: int) -> bytes:
        """Read exactly ``n`` bytes from the wrapped stream.

        Args:
            n: Number of bytes to read

        Returns:
            The bytes read

        Raises:
            TruncatedStreamError: If the stream ends before ``n`` bytes
            BlockingIOError: If a non-blocking raw stream has no data ready
        """
        buf = bytearray()
        while len(buf) < n:
            chunk = self.stream.read(n - len(buf))
            # Non-blocking raw streams return None when no data is available
            if chunk is None:
                raise BlockingIOError(
                    errno.EAGAIN, "Source would block; a blocking stream is required", len(buf)
                )
            if not chunk:
                raise TruncatedStreamError(n, len(buf))
            buf += chunk
        return bytes(buf)

    def skip(self, n: int) -> None:
        # Read rather than seek so truncation is detected on any stream
        self.read_exact(n)
