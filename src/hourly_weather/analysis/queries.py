"""Range queries over an observation store.

Every query follows the same path:

    (date_from, date_to)
        -> first_index_of_date(date_from), last_index_of_date(date_to)
        -> group_by_date(start, end)     (or a plain scan of the slice)
        -> reduce to records

Failures in the query error taxonomy (date not found, inverted or
out-of-range bounds, empty denominator or non-finite average) are caught
here and returned as a failed ``QueryResult``; they are logged, never raised
to the caller.
"""

from __future__ import annotations

import logging
import math
import statistics
from typing import TYPE_CHECKING

from hourly_weather.analysis.grouping import group_by_date
from hourly_weather.analysis.locator import NOT_FOUND, first_index_of_date, last_index_of_date
from hourly_weather.analysis.rounding import round_half_up
from hourly_weather.exceptions import (
    DateNotFoundError,
    DegenerateRangeError,
    InvalidRangeError,
    QueryError,
)
from hourly_weather.schemas import (
    ApprovalSummary,
    DailyAverage,
    DailyMissing,
    QueryKind,
    QueryResult,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import date

    from hourly_weather.store import ObservationStore

logger = logging.getLogger(__name__)

#: One reading per hour.
HOURS_PER_DAY = 24

Record = DailyAverage | DailyMissing | ApprovalSummary


class QueryEngine:
    """Aggregations over a read-only ``ObservationStore``."""

    def __init__(self, store: ObservationStore, readings_per_day: int = HOURS_PER_DAY) -> None:
        if readings_per_day < 1:
            msg = f"readings_per_day must be positive, got {readings_per_day}"
            raise ValueError(msg)
        self.store = store
        self.readings_per_day = readings_per_day

    # -------------------------------------------------------------------------
    # Public queries
    # -------------------------------------------------------------------------

    def average_per_day(self, date_from: date, date_to: date) -> QueryResult:
        """Mean temperature per date, ascending by date.

        Means are rounded half-up to two decimals.
        """
        return self._run(QueryKind.AVERAGE, date_from, date_to, self._averages)

    def missing_per_day(self, date_from: date, date_to: date) -> QueryResult:
        """Missing hourly readings per date, most missing first.

        Dates with equal counts keep ascending date order.
        """
        return self._run(QueryKind.MISSING, date_from, date_to, self._missing)

    def approved_percentage(self, date_from: date, date_to: date) -> QueryResult:
        """Share of approved readings over the whole range, as a single record."""
        return self._run(QueryKind.APPROVED, date_from, date_to, self._approved)

    def resolve_bounds(self, date_from: date, date_to: date) -> tuple[int, int]:
        """Map an inclusive date range to inclusive store positions.

        Raises:
            DateNotFoundError: If either boundary date has no observations.
            InvalidRangeError: If the resolved start lies after the end.
        """
        start = first_index_of_date(self.store, date_from)
        if start == NOT_FOUND:
            raise DateNotFoundError(date_from)
        end = last_index_of_date(self.store, date_to)
        if end == NOT_FOUND:
            raise DateNotFoundError(date_to)
        if start > end:
            msg = f"Range {date_from}..{date_to} is inverted (indices {start}..{end})"
            raise InvalidRangeError(msg)
        return start, end

    # -------------------------------------------------------------------------
    # Reductions
    # -------------------------------------------------------------------------

    def _averages(self, date_from: date, date_to: date) -> list[Record]:
        start, end = self.resolve_bounds(date_from, date_to)
        records: list[Record] = []
        for day, temps in group_by_date(self.store, start, end).items():
            mean = statistics.mean(temps)
            if not math.isfinite(mean):
                msg = f"Average temperature for {day} is not a finite number"
                raise DegenerateRangeError(msg)
            records.append(
                DailyAverage(date=day, average=round_half_up(mean), readings=len(temps))
            )
        return records

    def _missing(self, date_from: date, date_to: date) -> list[Record]:
        start, end = self.resolve_bounds(date_from, date_to)
        records: list[DailyMissing] = []
        for day, temps in group_by_date(self.store, start, end).items():
            missing = self.readings_per_day - len(temps)
            if missing < 0:
                logger.warning(
                    "%s has %d readings, more than the expected %d",
                    day,
                    len(temps),
                    self.readings_per_day,
                )
                missing = 0
            records.append(DailyMissing(date=day, missing=missing, readings=len(temps)))

        # sorted() is stable: equal counts stay in ascending date order
        return sorted(records, key=lambda r: r.missing, reverse=True)

    def _approved(self, date_from: date, date_to: date) -> list[Record]:
        start, end = self.resolve_bounds(date_from, date_to)
        observations = self.store.slice(start, end)
        total = len(observations)
        if total == 0:
            msg = f"No observations between {date_from} and {date_to}"
            raise DegenerateRangeError(msg)

        approved = sum(1 for obs in observations if obs.approved)
        return [
            ApprovalSummary(
                date_from=date_from,
                date_to=date_to,
                approved=approved,
                total=total,
                percentage=round_half_up(approved / total * 100),
            )
        ]

    def _run(
        self,
        kind: QueryKind,
        date_from: date,
        date_to: date,
        compute: Callable[[date, date], Sequence[Record]],
    ) -> QueryResult:
        try:
            records = list(compute(date_from, date_to))
        except QueryError as exc:
            logger.warning("%s query %s..%s failed: %s", kind, date_from, date_to, exc)
            return QueryResult(
                success=False,
                query=kind,
                date_from=date_from,
                date_to=date_to,
                error=str(exc),
                failure=exc.failure,
            )

        logger.debug("%s query %s..%s -> %d records", kind, date_from, date_to, len(records))
        return QueryResult(
            success=True,
            query=kind,
            date_from=date_from,
            date_to=date_to,
            records=records,
        )
