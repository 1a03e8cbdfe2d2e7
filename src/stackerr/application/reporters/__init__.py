"""Reporters for traced errors.

Output goes to a string or a caller-chosen stream, never a global logger.
"""

from stackerr.application.reporters.console import ConsoleConfig, ConsoleReporter
from stackerr.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
