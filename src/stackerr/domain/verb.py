"""Render verbs for TracedError.__format__."""

from __future__ import annotations

from enum import Enum


class RenderVerb(Enum):
    """How a traced error renders inside format()/f-strings.

    Explicit dispatch table, independent of Python's format-spec mini-language.
    """

    GENERIC = "generic"  # f"{err}", f"{err:v}", f"{err:s}"
    DETAILED = "detailed"  # f"{err:+v}": message + stack trace
    QUOTED = "quoted"  # f"{err:q}": repr() of the message
    OTHER = "other"  # anything else renders as ""

    @classmethod
    def parse(cls, format_spec: str) -> RenderVerb:
        """Map a format spec to a verb. Unknown specs map to OTHER."""
        match format_spec:
            case "" | "v" | "s":
                return cls.GENERIC
            case "+v" | "+":
                return cls.DETAILED
            case "q":
                return cls.QUOTED
            case _:
                return cls.OTHER
