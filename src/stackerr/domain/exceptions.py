"""Domain exceptions: all public errors of stackerr.

Library failures only. Errors wrapped by the library keep their own types.
"""

from __future__ import annotations


class StackErrError(Exception):
    """Base for all stackerr error exceptions.

    Allows: except StackErrError to catch all library errors.
    """


class TemplateSyntaxError(StackErrError, ValueError):
    """Line template source is not a valid format string.

    Raised at LineTemplate construction (FAIL-FIRST).
    Inherits ValueError for semantic correctness.

    Attributes:
        template_name: Name of the template.
        reason: Parser message.
    """

    def __init__(self, template_name: str, reason: str) -> None:
        """Initialize with template name and parser reason."""
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"template {template_name!r}: {reason}")


class TemplateRenderError(StackErrError, ValueError):
    """Line template could not be rendered against a frame.

    Captured by trace() into TraceResult.error, never raised through __format__.

    Attributes:
        template_name: Name of the template.
        field: Offending field name, None when not attributable to one field.
        reason: Why rendering failed.
    """

    def __init__(self, template_name: str, reason: str, field: str | None = None) -> None:
        """Initialize with template name, reason and optional field."""
        self.template_name = template_name
        self.field = field
        self.reason = reason
        super().__init__(f"template {template_name!r}: {reason}")


class InvalidDepthError(StackErrError, ValueError):
    """Capture depth must be >= 1.

    Attributes:
        depth: Invalid depth value.
    """

    def __init__(self, depth: int) -> None:
        """Initialize with invalid depth."""
        self.depth = depth
        super().__init__(f"depth must be >= 1, got {depth}")
