"""Stack frame value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Frame:
    """One resolved entry of a captured stack.

    Invariants validated at resolution time in infrastructure layer.

    Attributes:
        function: Qualified function name (e.g., "app.services.Loader.load")
        file: Source file path as recorded by the interpreter
        line: Line number executing when the stack was captured
    """

    function: str
    file: str
    line: int

    def as_mapping(self) -> dict[str, object]:
        """Fields available to line templates."""
        return {"function": self.function, "file": self.file, "line": self.line}

    def __str__(self) -> str:
        """Format as function (file:line)."""
        return f"{self.function} ({self.file}:{self.line})"
