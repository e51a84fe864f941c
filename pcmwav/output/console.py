"""Console-based diagnostic sink for pcmwav."""

from rich.console import Console
from rich.markup import escape


class ConsoleDiagnosticSink:
    """Rich Console-based diagnostic sink."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def print(self, message: str, **kwargs) -> None:
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(escape(message))

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {escape(message)}")
