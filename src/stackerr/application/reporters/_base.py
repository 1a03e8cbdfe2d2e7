"""Helpers shared by reporters."""

from __future__ import annotations

from stackerr.application.traced import TracedError
from stackerr.infrastructure import chain


def display_type(error: BaseException) -> str:
    """Type name of the first chain link that is not a TracedError.

    TracedError is invisible in output: new("x") reports as Exception.
    """
    for link in chain.walk(error):
        if not isinstance(link, TracedError):
            return type(link).__name__
    return type(error).__name__
