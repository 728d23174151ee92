"""Error taxonomy for loading and querying observations.

Loader errors (parse, ordering) propagate to the caller of the loader.
Query errors are raised by the analysis internals and converted into failed
``QueryResult`` objects by ``QueryEngine``; they never escape a query.
"""

from __future__ import annotations

from hourly_weather.schemas import FailureKind


class HourlyWeatherError(Exception):
    """Base class for all package errors."""


# =============================================================================
# Loading
# =============================================================================


class ObservationParseError(HourlyWeatherError, ValueError):
    """A line could not be decoded into an Observation."""

    def __init__(self, message: str, line: str, line_number: int | None = None) -> None:
        self.reason = message
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"{where}: {message} ({line!r})")


class UnsortedObservationsError(HourlyWeatherError, ValueError):
    """Observations are not in non-decreasing date order."""

    def __init__(self, index: int, previous: object, current: object) -> None:
        self.index = index
        super().__init__(
            f"Observation {index} dated {current} comes after an observation dated {previous}"
        )


class IndexOutOfRangeError(HourlyWeatherError, IndexError):
    """A store position outside ``[0, N-1]`` was requested."""


# =============================================================================
# Querying
# =============================================================================


class QueryError(HourlyWeatherError):
    """A query could not produce data for the requested range."""

    failure: FailureKind


class DateNotFoundError(QueryError):
    """A boundary date has no observations in the store."""

    failure = FailureKind.NOT_FOUND

    def __init__(self, missing: object) -> None:
        self.missing = missing
        super().__init__(f"No observations found for {missing}")


class InvalidRangeError(QueryError, IndexError):
    """Resolved index bounds are inverted or fall outside the store."""

    failure = FailureKind.INVALID_RANGE


class DegenerateRangeError(QueryError, ZeroDivisionError):
    """An aggregate has no observations to divide by, or no finite value."""

    failure = FailureKind.DEGENERATE
