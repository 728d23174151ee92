"""
Result models for range queries.

Pydantic models returned by ``QueryEngine``. Each record knows how to
format its own result line; ``QueryResult`` wraps the records together with
a success flag so callers can tell an empty answer from a failed one.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field

from hourly_weather.analysis.rounding import format_two_places


class QueryKind(StrEnum):
    """Which aggregation produced a result."""

    AVERAGE = "average"
    MISSING = "missing"
    APPROVED = "approved"


class FailureKind(StrEnum):
    """Why a query returned no data."""

    NOT_FOUND = "not_found"
    INVALID_RANGE = "invalid_range"
    DEGENERATE = "degenerate"


# =============================================================================
# Records
# =============================================================================


class DailyAverage(BaseModel):
    """Mean temperature for one calendar date."""

    model_config = {"frozen": True}

    date: date
    average: float = Field(..., description="Degrees Celsius, rounded half-up to 2 places")
    readings: int = Field(..., ge=1)

    @property
    def line(self) -> str:
        value = format_two_places(self.average)
        return f"{self.date.isoformat()} average temperature: {value} degrees Celsius"


class DailyMissing(BaseModel):
    """Count of absent hourly readings for one calendar date."""

    model_config = {"frozen": True}

    date: date
    missing: int = Field(..., ge=0)
    readings: int = Field(..., ge=1)

    @property
    def line(self) -> str:
        return f"{self.date.isoformat()} missing {self.missing} values"


class ApprovalSummary(BaseModel):
    """Share of approved readings over a whole range."""

    model_config = {"frozen": True}

    date_from: date
    date_to: date
    approved: int = Field(..., ge=0)
    total: int = Field(..., ge=1)
    percentage: float = Field(..., ge=0, le=100)

    @property
    def line(self) -> str:
        return (
            f"Approved values between {self.date_from.isoformat()} and "
            f"{self.date_to.isoformat()}: {format_two_places(self.percentage)} %"
        )


# =============================================================================
# Query result wrapper
# =============================================================================


class QueryResult(BaseModel):
    """Outcome of a single range query."""

    success: bool
    query: QueryKind
    date_from: date
    date_to: date
    records: list[DailyAverage | DailyMissing | ApprovalSummary] = Field(default_factory=list)
    error: str | None = None
    failure: FailureKind | None = None

    @property
    def lines(self) -> list[str]:
        """Formatted result lines, in record order. Empty on failure."""
        return [record.line for record in self.records]
