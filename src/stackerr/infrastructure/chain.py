"""Exception chain walking: the links between causally related errors.

A link's causes are, in order of preference:
  1. the result of its unwrap() method (UnwrapProtocol): an exception, or a
     tuple or list of exceptions; None or any other result falls through to
     the links below
  2. members of an exception group, then its __cause__
  3. __cause__ (raise ... from ...)

Implicit __context__ ("during handling of the above exception") is not
followed: only explicit wrapping makes an exception part of a chain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from stackerr.domain.ports import MatchProtocol, UnwrapProtocol

if TYPE_CHECKING:
    from collections.abc import Iterator

E = TypeVar("E", bound=BaseException)


def causes(err: BaseException) -> tuple[BaseException, ...]:
    """Immediate causes of err, leftmost first."""
    if isinstance(err, UnwrapProtocol) and callable(err.unwrap):
        result = err.unwrap()
        if isinstance(result, BaseException):
            return (result,)
        if isinstance(result, tuple | list) and all(isinstance(e, BaseException) for e in result):
            return tuple(result)

    if isinstance(err, BaseExceptionGroup):
        cause = (err.__cause__,) if err.__cause__ is not None else ()
        return tuple(err.exceptions) + cause
    if err.__cause__ is not None:
        return (err.__cause__,)
    return ()


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """Walk the chain starting at err: pre-order, depth-first, leftmost first.

    Each exception is yielded once even if the chain has cycles.
    None yields nothing.
    """
    if err is None:
        return
    seen: set[int] = set()
    stack: list[BaseException] = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(causes(current)))


def find(err: BaseException | None, cls: type[E]) -> E | None:
    """First exception in err's chain that is an instance of cls."""
    for link in walk(err):
        if isinstance(link, cls):
            return link
    return None


def matches(err: BaseException | None, target: BaseException | None) -> bool:
    """Chain-match: True if any link is target or declares itself equal to it.

    A link declares equality through MatchProtocol.matches(target) returning True.
    """
    if err is None or target is None:
        return err is target
    for link in walk(err):
        if link is target:
            return True
        if isinstance(link, MatchProtocol) and callable(link.matches) and link.matches(target) is True:
            return True
    return False
