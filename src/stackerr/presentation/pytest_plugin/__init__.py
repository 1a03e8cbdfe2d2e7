"""pytest plugin for stackerr.

Adds a "stack trace at creation" section to failed test reports when
the raised exception carries a captured stack.

Configuration (pytest.ini or pyproject.toml):
    stackerr_trace_section: Add the section (default: true)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stackerr.application.traced import has_trace, trace
from stackerr.domain.template import STANDARD_LINE_FORMAT

if TYPE_CHECKING:
    from collections.abc import Generator

    from pluggy import Result

SECTION_TITLE = "stack trace at creation"
INI_OPTION = "stackerr_trace_section"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        INI_OPTION,
        type="bool",
        default=True,
        help="Add the creation stack of traced errors to failure reports",
    )


def trace_section(exc: BaseException) -> tuple[str, str] | None:
    """Build report section for exc.

    Args:
        exc: Exception raised by the test.

    Returns:
        (title, body) or None when exc has no trace or it cannot be rendered.
    """
    if not has_trace(exc):
        return None
    result = trace(exc, STANDARD_LINE_FORMAT)
    if result.error is not None or not result.lines:
        return None
    return SECTION_TITLE, "\n".join(result.lines)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item,
    call: pytest.CallInfo[None],
) -> Generator[None, Result[pytest.TestReport], None]:
    """Attach the creation stack to the report of a failed call phase."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed or call.excinfo is None:
        return
    if not item.config.getini(INI_OPTION):
        return

    section = trace_section(call.excinfo.value)
    if section is not None:
        report.sections.append(section)
