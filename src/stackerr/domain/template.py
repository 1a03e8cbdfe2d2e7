"""Line templates: Frame -> str.

A template is a str.format source over the frame fields
``function``, ``file`` and ``line``. Syntax is checked at construction,
field lookup at render time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from string import Formatter
from typing import TYPE_CHECKING

from stackerr.domain.exceptions import TemplateRenderError, TemplateSyntaxError

if TYPE_CHECKING:
    from stackerr.domain.frame import Frame

_FORMATTER = Formatter()

# "function.attr" / "line[0]" -> "function" / "line"
_TOP_LEVEL_FIELD = re.compile(r"^[^.\[]*")


@dataclass(frozen=True, slots=True)
class LineTemplate:
    """Template rendering one stack frame as one line.

    Immutable value object with FAIL-FIRST syntax validation.

    Attributes:
        source: str.format source (e.g., "{function} ({file}:{line})")
        name: Template name used in error messages
    """

    source: str
    name: str = "line"

    def __post_init__(self) -> None:
        """Validate syntax. FAIL-FIRST."""
        if not isinstance(self.source, str):
            raise TypeError(f"source must be str, got {type(self.source).__name__}")
        try:
            list(_FORMATTER.parse(self.source))
        except ValueError as exc:
            raise TemplateSyntaxError(self.name, str(exc)) from exc

    @property
    def fields(self) -> tuple[str, ...]:
        """Top-level field names referenced by the template, in order."""
        names: list[str] = []
        for _, field_name, _, _ in _FORMATTER.parse(self.source):
            if field_name is None:
                continue
            match = _TOP_LEVEL_FIELD.match(field_name)
            names.append(match.group(0) if match else field_name)
        return tuple(names)

    def render(self, frame: Frame) -> str:
        """Render frame through the template.

        Args:
            frame: Frame to render.

        Returns:
            Rendered line.

        Raises:
            TemplateRenderError: Field missing on Frame or not formattable.
        """
        try:
            return self.source.format_map(frame.as_mapping())
        except KeyError as exc:
            field = str(exc.args[0]) if exc.args else None
            raise TemplateRenderError(
                self.name,
                f"cannot evaluate field {field!r} in Frame",
                field=field,
            ) from exc
        except (LookupError, AttributeError, TypeError, ValueError) as exc:
            raise TemplateRenderError(self.name, f"{type(exc).__name__}: {exc}") from exc


STANDARD_LINE_FORMAT = LineTemplate("{function} ({file}:{line})", name="standard")
"""Default template: ``FUNCTION (FILE:LINE)``."""
