"""Infrastructure layer: interpreter adapters.

- capture: stack snapshots from sys._getframe
- chain: exception chain traversal (find, matches, walk)
- errorfmt: printf-style error construction with %w
"""

from stackerr.infrastructure.capture import MAX_FRAMES, ProgramCounter, capture, iter_frames
from stackerr.infrastructure.chain import causes, find, matches, walk
from stackerr.infrastructure.errorfmt import FormattedError, format_error

__all__ = [
    "MAX_FRAMES",
    "FormattedError",
    "ProgramCounter",
    "capture",
    "causes",
    "find",
    "format_error",
    "iter_frames",
    "matches",
    "walk",
]
