"""NumPy views of PCM sample bytes for pcmwav."""

import numpy as np

from pcmwav.config.enums import Format
from pcmwav.config.models import PreloadedInfo

_WIRE_DTYPES = {
    Format.U8: np.dtype(np.uint8),
    Format.S16LSB: np.dtype("<i2"),
    Format.S32LSB: np.dtype("<i4"),
}

_NATIVE_DTYPES = {
    Format.U8: np.dtype(np.uint8),
    Format.S16LSB: np.dtype(np.int16),
    Format.S24LSB: np.dtype(np.int32),
    Format.S32LSB: np.dtype(np.int32),
}


def sample_dtype(fmt: Format) -> np.dtype:
    """Return the NumPy dtype ``to_array`` produces for ``fmt``."""
    return _NATIVE_DTYPES[fmt]


def to_array(info: PreloadedInfo, buffer) -> np.ndarray:
    """Decode loaded sample bytes into a ``(num_samples, num_channels)`` array.

    Args:
        info: Description returned by ``preload``
        buffer: Bytes-like object holding at least ``info.num_bytes`` bytes

    Returns:
        Integer array; 24-bit samples are sign-extended into int32
    """
    count = info.num_samples * info.num_channels
    if info.format is Format.S24LSB:
        raw = np.frombuffer(buffer, dtype=np.uint8, count=count * 3).reshape(-1, 3)
        wide = raw.astype(np.int32)
        values = wide[:, 0] | (wide[:, 1] << 8) | (wide[:, 2] << 16)
        # Scale to 24-bit signed integer range: [-2^23, 2^23-1]
        values = np.where(values >= 0x800000, values - 0x1000000, values)
    else:
        values = np.frombuffer(buffer, dtype=_WIRE_DTYPES[info.format], count=count)
    return values.astype(sample_dtype(info.format), copy=False).reshape(
        info.num_samples, info.num_channels
    )


def from_array(data: np.ndarray, fmt: Format) -> bytes:
    """Encode an integer sample array as interleaved little-endian bytes.

    A 2-D array is treated as ``(frames, channels)`` and interleaved row by
    row. For ``S24LSB`` only the low three bytes of each value are kept.
    """
    values = np.ascontiguousarray(data)
    if fmt is Format.S24LSB:
        wide = values.astype("<i4", copy=False).reshape(-1, 1).view(np.uint8)
        return wide[:, :3].tobytes()
    return values.astype(_WIRE_DTYPES[fmt], copy=False).tobytes()
