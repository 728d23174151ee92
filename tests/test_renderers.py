"""Tests for text and HTML rendering of query results."""

from __future__ import annotations

from datetime import date

import pytest

from hourly_weather.analysis.queries import QueryEngine
from hourly_weather.renderers.report import build_report_html
from hourly_weather.renderers.text import render_lines
from hourly_weather.schemas import FailureKind, QueryKind, QueryResult

D1 = date(2000, 1, 1)
D3 = date(2000, 1, 3)


@pytest.fixture
def engine(sample_store) -> QueryEngine:
    return QueryEngine(sample_store)


class TestRenderLines:
    """Test plain-text rendering."""

    def test_joins_lines(self, engine: QueryEngine) -> None:
        text = render_lines(engine.missing_per_day(D1, D3))
        assert text.splitlines() == [
            "2000-01-02 missing 1 values",
            "2000-01-03 missing 1 values",
            "2000-01-01 missing 0 values",
        ]

    def test_failure(self) -> None:
        result = QueryResult(
            success=False,
            query=QueryKind.AVERAGE,
            date_from=D1,
            date_to=D3,
            error="No observations found for 2000-01-01",
            failure=FailureKind.NOT_FOUND,
        )
        assert render_lines(result) == "Error: No observations found for 2000-01-01"


class TestBuildReportHtml:
    """Test the combined HTML report."""

    def test_contains_all_sections(self, engine: QueryEngine) -> None:
        html = build_report_html(
            engine.average_per_day(D1, D3),
            engine.missing_per_day(D1, D3),
            engine.approved_percentage(D1, D3),
        )
        assert "Observations 2000-01-01 to 2000-01-03" in html
        assert "<td>0.42</td>" in html
        assert "<td>2.78</td>" in html
        assert "32.86 % (23 of 70)" in html
        assert "<html" not in html

    def test_missing_rows_in_result_order(self, engine: QueryEngine) -> None:
        html = build_report_html(
            engine.average_per_day(D1, D3),
            engine.missing_per_day(D1, D3),
            engine.approved_percentage(D1, D3),
        )
        missing_section = html.split('class="missing"')[1]
        assert missing_section.index("2000-01-02") < missing_section.index("2000-01-01")

    def test_failed_queries_show_errors(self, engine: QueryEngine) -> None:
        bad_from = date(1999, 1, 1)
        html = build_report_html(
            engine.average_per_day(bad_from, D3),
            engine.missing_per_day(bad_from, D3),
            engine.approved_percentage(bad_from, D3),
        )
        assert html.count('class="error"') == 3
        assert "No observations found for 1999-01-01" in html
