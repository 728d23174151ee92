"""HTML report combining the three range queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hourly_weather.analysis.rounding import format_two_places
from hourly_weather.renderers import render_template

if TYPE_CHECKING:
    from hourly_weather.schemas import QueryResult


def _section(result: QueryResult) -> dict[str, Any]:
    return {
        "ok": result.success,
        "error": result.error,
        "records": result.records,
    }


def build_report_html(
    average: QueryResult,
    missing: QueryResult,
    approved: QueryResult,
) -> str:
    """Render average, missing and approval results as one HTML fragment.

    Args:
        average: Result of ``QueryEngine.average_per_day``.
        missing: Result of ``QueryEngine.missing_per_day``.
        approved: Result of ``QueryEngine.approved_percentage``.

    Returns:
        HTML fragment (no <html>/<body> tags). Failed queries show their
        error message in place of a table.
    """
    summary = approved.records[0] if approved.success and approved.records else None
    return render_template(
        "report.html.j2",
        date_from=average.date_from.isoformat(),
        date_to=average.date_to.isoformat(),
        average=_section(average),
        missing=_section(missing),
        approved=_section(approved),
        summary=summary,
        fmt=format_two_places,
    )
