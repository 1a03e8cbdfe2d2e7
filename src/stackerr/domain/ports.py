"""Chain protocols: how third-party exceptions take part in chain walking.

Users opt in by implementing these methods on their exception classes.
Structural (duck-typed): no base class needed.
A method with one of these names but another contract is tolerated:
results outside the declared types are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class UnwrapProtocol(Protocol):
    """Contract for exceptions that wrap other exceptions.

    Example:
        class QueryError(Exception):
            def __init__(self, query: str, cause: Exception) -> None:
                super().__init__(f"query {query!r} failed")
                self.cause = cause

            def unwrap(self) -> Exception:
                return self.cause
    """

    def unwrap(self) -> BaseException | Sequence[BaseException] | None:
        """Next links of the chain.

        Returns:
            One exception, a tuple or list of exceptions (leftmost first),
            or None to fall back to __cause__.
        """
        ...


@runtime_checkable
class MatchProtocol(Protocol):
    """Contract for exceptions that declare equality with a chain target."""

    def matches(self, target: BaseException) -> bool:
        """True if this exception stands for target.

        Only a result that is True counts as a match.
        """
        ...
