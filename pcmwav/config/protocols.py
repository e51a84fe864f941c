"""Protocol definitions for the byte sources and sinks the codec consumes."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for readable byte sources.

    The loader depends on this abstraction rather than on files or sockets.

    Implementations include:
    - BytesSource: an in-memory bytes-like object
    - StreamSource: any binary file object with ``read``
    """

    def read_exact(self, n: int) -> bytes:
        """Read exactly ``n`` bytes.

        Raises:
            TruncatedStreamError: If fewer than ``n`` bytes are available
        """
        ...

    def skip(self, n: int) -> None:
        """Discard exactly ``n`` bytes.

        Raises:
            TruncatedStreamError: If fewer than ``n`` bytes are available
        """
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for writable byte sinks used by the saver.

    Write failures are raised by the implementation unchanged.
    """

    def write_exact(self, data: bytes) -> None:
        """Write every byte of ``data``."""
        ...

    def write_int_le(self, width: int, value: int) -> None:
        """Write ``value`` as a little-endian unsigned integer of ``width`` bytes."""
        ...
