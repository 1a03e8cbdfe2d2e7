"""stackerr - exceptions that remember where they were created."""

__version__ = "0.1.0"

from stackerr.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from stackerr.application.traced import (
    TracedError,
    TraceResult,
    errorf,
    has_trace,
    new,
    stack_frames,
    trace,
    wrap,
)
from stackerr.domain.exceptions import (
    InvalidDepthError,
    StackErrError,
    TemplateRenderError,
    TemplateSyntaxError,
)
from stackerr.domain.frame import Frame
from stackerr.domain.ports import MatchProtocol, UnwrapProtocol
from stackerr.domain.template import STANDARD_LINE_FORMAT, LineTemplate
from stackerr.infrastructure.chain import find, matches, walk
from stackerr.infrastructure.errorfmt import FormattedError

__all__ = [
    "STANDARD_LINE_FORMAT",
    "ConsoleConfig",
    "ConsoleReporter",
    "FormattedError",
    "Frame",
    "InvalidDepthError",
    "LineTemplate",
    "MatchProtocol",
    "PlainTextReporter",
    "StackErrError",
    "TemplateRenderError",
    "TemplateSyntaxError",
    "TraceResult",
    "TracedError",
    "UnwrapProtocol",
    "__version__",
    "errorf",
    "find",
    "has_trace",
    "matches",
    "new",
    "stack_frames",
    "trace",
    "walk",
    "wrap",
]
