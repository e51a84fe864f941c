"""Diagnostic sink protocols for pcmwav."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for optional human-readable diagnostics (console, logging, etc.)."""

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Report a warning message."""
        ...

    def error(self, message: str) -> None:
        """Report an error message."""
        ...
