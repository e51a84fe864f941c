"""Sample encoding enums for pcmwav."""

from enum import Enum


class Format(str, Enum):
    """Integer PCM sample encodings supported by the codec."""

    U8 = "u8"
    S16LSB = "s16lsb"
    S24LSB = "s24lsb"
    S32LSB = "s32lsb"

    @property
    def byte_width(self) -> int:
        """Return the number of bytes used by one sample of this format."""
        return _BYTE_WIDTHS[self]

    @property
    def bits_per_sample(self) -> int:
        return self.byte_width * 8

    @property
    def is_signed(self) -> bool:
        # 8-bit WAV samples are offset binary, wider ones are two's complement
        return self is not Format.U8

    @classmethod
    def from_bits_per_sample(cls, bits: int) -> "Format":
        """Map a header ``bits_per_sample`` value to a format.

        Raises:
            ValueError: If ``bits`` is not 8, 16, 24 or 32
        """
        for member in cls:
            if member.bits_per_sample == bits:
                return member
        raise ValueError(f"Unsupported bits per sample: {bits}")

    def __str__(self) -> str:  # pragma: no cover - convenience for display
        return self.value


_BYTE_WIDTHS = {
    Format.U8: 1,
    Format.S16LSB: 2,
    Format.S24LSB: 3,
    Format.S32LSB: 4,
}
