"""Byte sink implementations for pcmwav."""

import errno
from typing import BinaryIO

from pcmwav.streams.endian import pack_le


class StreamSink:
    """Byte sink over a binary file object.

    Errors raised by the wrapped object's ``write`` propagate unchanged.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write_exact(self, data: bytes) -> None:
        """Write every byte of ``data`` to the wrapped stream.

        Raises:
            BlockingIOError: If a non-blocking raw stream cannot take more bytes
            OSError: For any failure raised by the wrapped stream
        """
        view = memoryview(data).cast("B")
        total = len(view)
        while view:
            written = self.stream.write(view)
            # Non-blocking raw streams return None when nothing was written
            if written is None:
                raise BlockingIOError(
                    errno.EAGAIN, "Sink would block; a blocking stream is required", total - len(view)
                )
            if written == 0:
                raise OSError("Sink accepted no bytes")
            view = view[written:]

    def write_int_le(self, width: int, value: int) -> None:
        self.write_exact(pack_le(width, value))


class BytesSink:
    """Byte sink that accumulates everything written into a ``bytearray``."""

    def __init__(self) -> None:
        self.buffer = bytearray()

    def write_exact(self, data: bytes) -> None:
        self.buffer += data

    def write_int_le(self, width: int, value: int) -> None:
        self.write_exact(pack_le(width, value))

    def getvalue(self) -> bytes:
        return bytes(self.buffer)
