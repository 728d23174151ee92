"""Decode station lines into observations and load them into a store."""

from __future__ import annotations

import logging
import math
from datetime import date, time
from typing import TYPE_CHECKING

from hourly_weather.datasources.smhi.models import FIELD_DELIMITER, Observation, Quality
from hourly_weather.exceptions import ObservationParseError
from hourly_weather.store import ObservationStoreBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from hourly_weather.store import ObservationStore

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


def parse_line(line: str, line_number: int | None = None) -> Observation:
    """Decode one ``date;time;temperature;quality`` line.

    Args:
        line: Raw line, with or without trailing newline.
        line_number: 1-based position in the source, used in error messages.

    Returns:
        The decoded Observation.

    Raises:
        ObservationParseError: If the line has the wrong number of fields or
            any field fails to decode.
    """
    raw = line.rstrip("\r\n")
    fields = [f.strip() for f in raw.split(FIELD_DELIMITER)]
    if len(fields) != FIELD_COUNT:
        msg = f"expected {FIELD_COUNT} fields, got {len(fields)}"
        raise ObservationParseError(msg, raw, line_number)

    date_text, time_text, temp_text, code = fields

    try:
        obs_date = date.fromisoformat(date_text)
    except ValueError:
        raise ObservationParseError(f"invalid date {date_text!r}", raw, line_number) from None

    try:
        obs_time = time.fromisoformat(time_text)
    except ValueError:
        raise ObservationParseError(f"invalid time {time_text!r}", raw, line_number) from None
    if obs_time.tzinfo is not None:
        msg = f"time must not carry a UTC offset {time_text!r}"
        raise ObservationParseError(msg, raw, line_number)

    try:
        temperature = float(temp_text)
    except ValueError:
        msg = f"invalid temperature {temp_text!r}"
        raise ObservationParseError(msg, raw, line_number) from None
    if not math.isfinite(temperature):
        msg = f"non-finite temperature {temp_text!r}"
        raise ObservationParseError(msg, raw, line_number)

    if not code:
        raise ObservationParseError("missing quality code", raw, line_number)

    return Observation(
        date=obs_date,
        time=obs_time,
        temperature=temperature,
        approved=Quality.from_code(code) is Quality.APPROVED,
    )


def parse_lines(lines: Iterable[str], *, skip_invalid: bool = False) -> Iterator[Observation]:
    """Decode an iterable of lines, skipping blank ones.

    Args:
        lines: Raw lines in file order.
        skip_invalid: Log and skip malformed lines instead of raising.

    Yields:
        Observations in input order.

    Raises:
        ObservationParseError: On the first malformed line, unless
            ``skip_invalid`` is set.
    """
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield parse_line(line, number)
        except ObservationParseError as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping malformed observation: %s", exc)


def load_observations(
    path: Path,
    *,
    skip_invalid: bool = False,
    encoding: str = "utf-8",
) -> ObservationStore:
    """Read a station file and build a date-checked store.

    Args:
        path: File with one observation per line, sorted by date.
        skip_invalid: Log and skip malformed lines instead of raising.
        encoding: Text encoding of the file.

    Returns:
        Immutable ObservationStore in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ObservationParseError: On a malformed line (unless skipped).
        UnsortedObservationsError: If dates go backwards.
    """
    builder = ObservationStoreBuilder()
    with path.open(encoding=encoding) as f:
        builder.extend(parse_lines(f, skip_invalid=skip_invalid))

    store = builder.build()
    logger.info(
        "Loaded %d observations from %s (%s..%s)",
        store.size(),
        path,
        store.first_date,
        store.last_date,
    )
    return store
