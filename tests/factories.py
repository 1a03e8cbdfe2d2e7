"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

import sys
from collections.abc import Callable
from typing import TypeVar

from stackerr.domain.frame import Frame
from stackerr.infrastructure.capture import ProgramCounter

T = TypeVar("T")

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = "/test/file.py"


def make_frame(
    function: str = "app.module.func",
    file: str = DEFAULT_TEST_FILE,
    line: int = 1,
) -> Frame:
    """Create a Frame for tests.

    Args:
        function: Qualified function name
        file: File path (default test file)
        line: Line number (default 1)

    Returns:
        Frame instance
    """
    return Frame(function=function, file=file, line=line)


def make_program_counter(line: int = 1, module: str | None = "app.module") -> ProgramCounter:
    """Create a ProgramCounter pointing into this function's code object.

    Args:
        line: Line number to record
        module: Module name (None = no __name__ in globals)

    Returns:
        ProgramCounter instance
    """
    return ProgramCounter(code=make_program_counter.__code__, line=line, module=module)


def here() -> Frame:
    """Frame of the caller, resolved the way capture() resolves it.

    Use on the same line as the capturing call:
        err, origin = stackerr.new("x"), here()
    """
    frame = sys._getframe(1)  # noqa: SLF001
    module = frame.f_globals.get("__name__")
    qualname = frame.f_code.co_qualname
    return Frame(
        function=f"{module}.{qualname}" if module else qualname,
        file=frame.f_code.co_filename,
        line=frame.f_lineno,
    )


def recurse(depth: int, func: Callable[[], T]) -> T:
    """Call func() from depth nested frames."""
    if depth <= 0:
        return func()
    return recurse(depth - 1, func)
