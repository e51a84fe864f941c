"""Diagnostic sink that forwards to the standard logging module."""

import logging


class LoggingDiagnosticSink:
    """Forward diagnostics to a ``logging.Logger``."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("pcmwav")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
