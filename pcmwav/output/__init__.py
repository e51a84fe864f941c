"""Diagnostic output for pcmwav."""
from pcmwav.output.protocols import DiagnosticSink
from pcmwav.output.console import ConsoleDiagnosticSink
from pcmwav.output.log import LoggingDiagnosticSink

__all__ = ["DiagnosticSink", "ConsoleDiagnosticSink", "LoggingDiagnosticSink"]
