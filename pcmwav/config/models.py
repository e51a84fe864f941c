"""Pydantic models describing WAV audio for pcmwav."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pcmwav.config.enums import Format


class PreloadedInfo(BaseModel):
    """Audio description produced by parsing a WAV header.

    Values are exactly the validated header fields; ``num_samples`` is the
    number of sample frames derived from the ``data`` chunk length.
    """

    model_config = ConfigDict(frozen=True)

    num_channels: int = Field(..., ge=1, description="Interleaved channel count")
    sample_rate: int = Field(..., ge=1, description="Frames per second in Hz")
    format: Format
    num_samples: int = Field(..., ge=0, description="Number of sample frames")

    @property
    def block_align(self) -> int:
        """Return the byte length of one sample frame."""
        return self.num_channels * self.format.byte_width

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align

    @property
    def num_bytes(self) -> int:
        """Return the byte length of the whole audio payload.

        Callers size the buffer handed to ``Loader.load`` with this value.
        """
        return self.num_samples * self.block_align

    @property
    def duration_seconds(self) -> float:
        return self.num_samples / self.sample_rate


class SaveInfo(BaseModel):
    """Caller-supplied description of audio to serialize.

    ``data`` is a view of the caller's buffer, not a copy; later changes to
    that buffer are what gets saved.

    Deliberately unconstrained: the saver trusts these values. Use
    ``SaveInfoValidator`` for an explicit consistency check.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    num_channels: int
    sample_rate: int
    format: Format
    data: memoryview = Field(..., repr=False, description="Raw interleaved PCM sample bytes")

    @field_validator("data", mode="before")
    @classmethod
    def borrow_buffer(cls, value) -> memoryview:
        """Wrap the caller's buffer in a byte view without copying it."""
        if isinstance(value, str):
            raise ValueError("data must be a bytes-like object, not str")
        try:
            return memoryview(value).cast("B")
        except TypeError:
            raise ValueError(
                f"data must be a contiguous bytes-like object, got {type(value).__name__}"
            ) from None

    @property
    def block_align(self) -> int:
        return self.num_channels * self.format.byte_width

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align
