"""stackerr domain layer.

Pure value objects and library exceptions.
Only imports: typing, collections.abc, dataclasses, enum, string, re
"""

from stackerr.domain.exceptions import (
    InvalidDepthError,
    StackErrError,
    TemplateRenderError,
    TemplateSyntaxError,
)
from stackerr.domain.frame import Frame
from stackerr.domain.ports import MatchProtocol, UnwrapProtocol
from stackerr.domain.template import STANDARD_LINE_FORMAT, LineTemplate
from stackerr.domain.verb import RenderVerb

__all__ = [
    "STANDARD_LINE_FORMAT",
    "Frame",
    "InvalidDepthError",
    "LineTemplate",
    "MatchProtocol",
    "RenderVerb",
    "StackErrError",
    "TemplateRenderError",
    "TemplateSyntaxError",
    "UnwrapProtocol",
]
