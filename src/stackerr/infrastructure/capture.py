"""Stack snapshot capture and lazy frame resolution.

capture() records (code, line, module) triples walking f_back from a
starting frame. Resolution into Frame objects is deferred to iter_frames(),
which returns a new single-use generator on every call.

Code objects only: holding frames would keep their locals alive.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stackerr.domain.exceptions import InvalidDepthError
from stackerr.domain.frame import Frame

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import CodeType

MAX_FRAMES = 20


@dataclass(frozen=True, slots=True)
class ProgramCounter:
    """Raw captured position: code object + executing line.

    Attributes:
        code: Code object of the frame
        line: Line executing when captured
        module: Value of __name__ in the frame's globals, None if absent
    """

    code: CodeType
    line: int
    module: str | None


def capture(skip: int = 0, limit: int = MAX_FRAMES) -> tuple[ProgramCounter, ...]:
    """Capture the calling stack, innermost first.

    The first entry is the caller of the function that called capture(),
    after skipping ``skip`` more frames. Deeper stacks are truncated to ``limit``.

    Args:
        skip: Extra frames to skip above the caller's caller.
        limit: Maximum number of entries.

    Returns:
        Captured positions, innermost first.

    Raises:
        InvalidDepthError: limit < 1.
        ValueError: skip < 0.
    """
    # FAIL-FIRST
    if limit < 1:
        raise InvalidDepthError(limit)
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")

    # 0 = capture, 1 = caller of capture, 2 = its caller
    # SLF001: sys._getframe is the documented CPython frame access API
    try:
        frame = sys._getframe(skip + 2)  # noqa: SLF001
    except ValueError:
        return ()

    pcs: list[ProgramCounter] = []
    while frame is not None and len(pcs) < limit:
        code = frame.f_code
        pcs.append(
            ProgramCounter(
                code=code,
                line=frame.f_lineno if frame.f_lineno is not None else code.co_firstlineno,
                module=frame.f_globals.get("__name__"),
            )
        )
        frame = frame.f_back
    return tuple(pcs)


def iter_frames(pcs: tuple[ProgramCounter, ...]) -> Iterator[Frame]:
    """Resolve captured positions into Frames.

    Returns a fresh generator. Generators are single-use: callers
    that need a second walk call iter_frames() again.
    """
    for pc in pcs:
        yield _resolve(pc)


def _resolve(pc: ProgramCounter) -> Frame:
    """Convert ProgramCounter to Frame."""
    qualname = pc.code.co_qualname
    function = f"{pc.module}.{qualname}" if pc.module else qualname
    return Frame(function=function, file=pc.code.co_filename, line=pc.line)
