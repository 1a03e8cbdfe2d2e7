"""Application layer for stack-traced errors.

- traced: TracedError and its constructors (wrap, new, errorf), trace queries
- reporters: Output formatting (Console via rich, PlainText)
"""

from stackerr.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    PlainTextReporter,
)
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

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    "TraceResult",
    "TracedError",
    "errorf",
    "has_trace",
    "new",
    "stack_frames",
    "trace",
    "wrap",
]
