"""Header validation exceptions for pcmwav."""

from pcmwav.exceptions.base import WavFormatError


class MalformedHeaderError(WavFormatError):
    """Raised when a four-character chunk identifier does not match.

    This covers a missing ``RIFF`` descriptor, a RIFF form type other than
    ``WAVE``, and any chunk other than ``fmt `` or ``data`` appearing where
    one of them is required.
    """

    def __init__(self, message: str, *, identifier: bytes | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class UnsupportedFormatError(WavFormatError):
    """Raised when a RIFF/WAVE stream is not plain integer PCM.

    This exception is raised for extensible or otherwise oversized ``fmt ``
    chunks and for any audio format tag other than 1 (e.g. IEEE float).
    """


class InvalidFieldError(WavFormatError):
    """Raised when a numeric header field is out of range or inconsistent."""

    def __init__(self, field: str, value: int | None = None) -> None:
        message = f"invalid {field}" if value is None else f"invalid {field}: {value}"
        super().__init__(message)
        self.field = field
        self.value = value
