"""printf-style error construction with a %w wrap directive.

format_error("loading %s: %w", path, exc) formats like "%s" for both
directives and records exc as a cause of the returned FormattedError.
Every other directive is handled by the str % operator unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping


_DIRECTIVE = re.compile(
    r"%"
    r"(?:\((?P<key>[^)]*)\))?"
    r"[#0\- +]*"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d+))?"
    r"[hlL]?"
    r"(?P<conv>.)?",
    re.DOTALL,
)

_MISSING = object()


class FormattedError(Exception):
    """Plain error built by format_error().

    Attributes:
        message: Formatted message.
        wrapped: Exceptions passed through %w, leftmost first.
    """

    def __init__(self, message: str, wrapped: tuple[BaseException, ...] = ()) -> None:
        """Initialize with message and wrapped causes."""
        super().__init__(message)
        self.message = message
        self.wrapped = wrapped
        if wrapped:
            self.__cause__ = wrapped[0]

    def unwrap(self) -> tuple[BaseException, ...] | None:
        """Wrapped causes; None when nothing was wrapped."""
        return self.wrapped or None

    def __str__(self) -> str:
        """Formatted message."""
        return self.message


def format_error(fmt: str, *args: object) -> FormattedError:
    """Format a message and wrap every %w argument.

    Supports positional args, a single mapping with %(key)w, * width
    and precision, and %%. A %w argument that is not an exception is
    not wrapped: it renders as a %!w(type=value) marker instead.

    Args:
        fmt: printf-style format string.
        *args: Values for the directives.

    Returns:
        FormattedError with the formatted message.

    Raises:
        TypeError, ValueError, KeyError: Raised by the % operator for a bad
            format string or argument list.
    """
    directives = [m for m in _DIRECTIVE.finditer(fmt) if m.group("conv") != "%"]
    mapping_form = any(m.group("key") is not None for m in directives)
    values = list(args)
    index = 0
    wrapped: list[BaseException] = []
    pieces: list[str] = []
    last = 0

    for match in directives:
        key = match.group("key")
        if key is None and not mapping_form:
            index += (match.group("width") == "*") + (match.group("precision") == "*")

        if match.group("conv") == "w":
            value = _lookup(args, key, index, mapping_form)
            if isinstance(value, BaseException):
                wrapped.append(value)
            elif value is not _MISSING:
                marker = _marker(value)
                if mapping_form:
                    # No positional slot to substitute into: inline the marker
                    pieces.append(fmt[last : match.start()] + marker.replace("%", "%%"))
                    last = match.end()
                    continue
                values[index] = marker
            pieces.append(fmt[last : match.end() - 1] + "s")
            last = match.end()

        if key is None:
            index += 1

    template = "".join(pieces) + fmt[last:]
    operand = values[0] if mapping_form and len(values) == 1 else tuple(values)
    message = template % operand
    return FormattedError(message, tuple(wrapped))


def _lookup(args: tuple[object, ...], key: str | None, index: int, mapping_form: bool) -> object:
    """Argument consumed by a directive, _MISSING if absent (% reports the error)."""
    if mapping_form:
        operand = args[0] if len(args) == 1 else args
        if key is None:
            # % hands a positional directive the whole operand
            return operand
        if isinstance(operand, Mapping) and key in operand:
            return operand[key]
        return _MISSING
    if index < len(args):
        return args[index]
    return _MISSING


def _marker(value: object) -> str:
    """Rendering of a %w argument that is not an exception."""
    return f"%!w({type(value).__name__}={value})"
