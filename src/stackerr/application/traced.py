"""TracedError: an exception decorated with the stack where it was created.

One capture per logical chain:
  - wrap() returns its argument unchanged if the chain already holds a TracedError
  - errorf() points the new TracedError at the original capture (earlier)
    instead of capturing again

Rendering is deferred: frames are resolved only when the trace is asked for.

Usage:
    err = stackerr.new("config missing")
    err = stackerr.errorf("loading %s: %w", path, err)
    print(f"{err:+v}")  # message + stack of the original new() call
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from stackerr.domain.exceptions import TemplateRenderError
from stackerr.domain.template import STANDARD_LINE_FORMAT
from stackerr.domain.verb import RenderVerb
from stackerr.infrastructure import chain
from stackerr.infrastructure.capture import capture, iter_frames
from stackerr.infrastructure.errorfmt import format_error

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stackerr.domain.frame import Frame
    from stackerr.domain.template import LineTemplate
    from stackerr.infrastructure.capture import ProgramCounter


class TracedError(Exception):
    """Exception wrapper carrying (or pointing to) a captured stack.

    Invisible in str(): renders exactly as the inner exception.
    f"{err:+v}" appends the stack trace.

    Exactly one TracedError per chain owns frames. Others either unwrap
    to it or reference it through earlier.

    Construct through wrap(), new() or errorf().
    """

    def __init__(
        self,
        inner: Exception,
        *,
        frames: tuple[ProgramCounter, ...] = (),
        earlier: TracedError | None = None,
    ) -> None:
        """Initialize decorator.

        Args:
            inner: Wrapped exception.
            frames: Captured stack, empty when earlier is set.
            earlier: Decorator owning the original capture.

        Raises:
            TypeError: inner is not an Exception.
            ValueError: Not exactly one of frames and earlier is given.
        """
        # FAIL-FIRST
        if not isinstance(inner, Exception):
            raise TypeError(f"inner must be an exception, got {type(inner).__name__}")
        if bool(frames) == (earlier is not None):
            raise ValueError("exactly one of frames and earlier must be given")

        super().__init__(inner)
        self._inner = inner
        self._frames = frames
        self._earlier = earlier
        self.__cause__ = inner
        self.__suppress_context__ = True

    @property
    def inner(self) -> Exception:
        """Wrapped exception."""
        return self._inner

    @property
    def frames(self) -> tuple[ProgramCounter, ...]:
        """Own captured stack. Empty when the capture lives in earlier."""
        return self._frames

    @property
    def earlier(self) -> TracedError | None:
        """Decorator holding the original capture, if not this one."""
        return self._earlier

    def resolve_frames(self) -> Iterator[Frame]:
        """Frames of the original capture, innermost first.

        New iterator on every call.
        """
        if self._earlier is not None:
            return self._earlier.resolve_frames()
        return iter_frames(self._frames)

    def unwrap(self) -> BaseException:
        """Next link in the chain."""
        return self._inner

    def matches(self, other: BaseException) -> bool:
        """Chain-match hook: equal to another TracedError with a matching inner.

        Frames and earlier never take part in the comparison.
        """
        if not isinstance(other, TracedError):
            return False
        return chain.matches(self._inner, other._inner)

    def __str__(self) -> str:
        """Message of the inner exception."""
        return str(self._inner)

    def __repr__(self) -> str:
        """Debug representation."""
        return f"{type(self).__name__}({self._inner!r})"

    def __format__(self, format_spec: str) -> str:
        """Render for format() and f-strings.

        "", "v", "s": message only
        "+v", "+":   detailed inner rendering, newline, stack trace lines
        "q":         repr() of the message
        other:       empty string
        """
        match RenderVerb.parse(format_spec):
            case RenderVerb.GENERIC:
                return str(self)
            case RenderVerb.DETAILED:
                result = trace(self, STANDARD_LINE_FORMAT)
                return f"{_detailed(self._inner)}\n" + "\n".join(result.lines)
            case RenderVerb.QUOTED:
                return repr(str(self))
            case RenderVerb.OTHER:
                return ""


@dataclass(frozen=True, slots=True)
class TraceResult:
    """Result of trace(): rendered lines + captured rendering error.

    Invariant: error set -> lines empty. No partial results.

    Attributes:
        lines: One rendered line per frame, innermost first.
        error: Rendering failure wrapped in a TracedError, None on success.
    """

    lines: tuple[str, ...]
    error: BaseException | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.error is not None and self.lines:
            raise ValueError("lines must be empty when error is set")

    def check_error(self) -> tuple[str, ...]:
        """Raise the captured error, if any, else return lines.

        Raises:
            TracedError: Wrapping TemplateRenderError.
        """
        if self.error is not None:
            raise self.error
        return self.lines


@overload
def wrap(err: None) -> None: ...


@overload
def wrap(err: BaseException) -> BaseException: ...


def wrap(err: BaseException | None) -> BaseException | None:
    """Attach the current stack to err, once per chain.

    Args:
        err: Exception to decorate, or None.

    Returns:
        None for None; err itself if it is not an Exception (KeyboardInterrupt,
        SystemExit, ...) or its chain already holds a TracedError;
        otherwise a new TracedError wrapping err, stack captured at the caller.
    """
    if err is None:
        return None
    # except clauses for BaseException-only types must keep matching
    if not isinstance(err, Exception):
        return err
    if chain.find(err, TracedError) is not None:
        return err
    return TracedError(err, frames=capture())


def new(message: str) -> TracedError:
    """Create Exception(message) with the caller's stack attached."""
    return TracedError(Exception(message), frames=capture())


def errorf(fmt: str, *args: object) -> TracedError:
    """Format an error, wrapping %w arguments, with a stack attached.

    If a %w argument already carries a trace, the result reuses that
    original capture instead of taking a new one. With several traced
    arguments, the leftmost one wins. A %w argument that is not an
    exception renders as a %!w(type=value) marker and is not wrapped.

    Args:
        fmt: printf-style format string; %w marks a wrapped exception.
        *args: Values for the directives.

    Returns:
        TracedError wrapping the formatted error.
    """
    formatted = format_error(fmt, *args)
    existing = chain.find(formatted, TracedError)
    if existing is not None:
        return TracedError(formatted, earlier=existing.earlier or existing)
    return TracedError(formatted, frames=capture())


def trace(err: BaseException | None, template: LineTemplate = STANDARD_LINE_FORMAT) -> TraceResult:
    """Render the stack trace found in err's chain, one line per frame.

    Args:
        err: Exception to inspect.
        template: Line template with fields function, file, line.

    Returns:
        TraceResult. Empty lines without error when no trace is present.
        On template failure: empty lines, error = TracedError wrapping
        TemplateRenderError (stack captured here).
    """
    traced = chain.find(err, TracedError)
    if traced is None:
        return TraceResult(lines=())

    lines: list[str] = []
    for frame in traced.resolve_frames():
        try:
            lines.append(template.render(frame))
        except TemplateRenderError as exc:
            return TraceResult(lines=(), error=wrap(exc))
    return TraceResult(lines=tuple(lines))


def stack_frames(err: BaseException | None) -> tuple[Frame, ...]:
    """Resolved frames of the trace in err's chain, empty when none."""
    traced = chain.find(err, TracedError)
    if traced is None:
        return ()
    return tuple(traced.resolve_frames())


def has_trace(err: BaseException | None) -> bool:
    """True if err's chain holds a TracedError."""
    return chain.find(err, TracedError) is not None


def _detailed(err: BaseException) -> str:
    """Detailed rendering of a chain link."""
    if isinstance(err, TracedError):
        return format(err, "+v")
    return str(err)
