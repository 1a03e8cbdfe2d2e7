"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from stackerr.application.reporters._base import display_type
from stackerr.application.traced import trace
from stackerr.domain.template import STANDARD_LINE_FORMAT

if TYPE_CHECKING:
    from stackerr.domain.template import LineTemplate


class PlainTextReporter:
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    Each frame rendered through a LineTemplate.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        template: LineTemplate = STANDARD_LINE_FORMAT,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            template: Line template for each frame
        """
        self._output = output if output is not None else sys.stdout
        self._template = template

    def report(self, error: BaseException) -> None:
        """Report error message and stack trace as plain text.

        Nothing is written if the template fails.

        Args:
            error: Exception to report

        Raises:
            TracedError: Wrapping TemplateRenderError when the template fails.
        """
        lines = trace(error, self._template).check_error()

        self._write(f"{display_type(error)}: {error}")
        if not lines:
            self._write("  (no stack trace captured)")
            return
        for line in lines:
            self._write(f"  at {line}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
