"""Plain-text rendering of query results."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hourly_weather.schemas import QueryResult


def render_lines(result: QueryResult) -> str:
    """Join result lines with newlines; failures render as ``Error: ...``."""
    if not result.success:
        return f"Error: {result.error}"
    return "\n".join(result.lines)
