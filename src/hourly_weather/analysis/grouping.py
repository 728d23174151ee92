"""Bucket a slice of the store by calendar date."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hourly_weather.exceptions import InvalidRangeError

if TYPE_CHECKING:
    from datetime import date

    from hourly_weather.store import ObservationStore


def group_by_date(
    store: ObservationStore,
    start_index: int,
    end_index: int,
) -> dict[date, list[float]]:
    """Collect temperatures per date for observations ``start..end`` inclusive.

    Bounds are validated before any observation is read, so an invalid
    range never yields a partial result.

    Args:
        store: Date-sorted observations.
        start_index: First position to include.
        end_index: Last position to include.

    Returns:
        Dict mapping date -> temperatures in store order, keys ascending.

    Raises:
        InvalidRangeError: If either bound is outside ``[0, N-1]`` or
            ``start_index > end_index``.
    """
    size = store.size()
    if not (0 <= start_index < size and 0 <= end_index < size):
        msg = f"Index range {start_index}..{end_index} outside store of size {size}"
        raise InvalidRangeError(msg)
    if start_index > end_index:
        msg = f"Start index {start_index} is after end index {end_index}"
        raise InvalidRangeError(msg)

    buckets: dict[date, list[float]] = {}
    for observation in store.slice(start_index, end_index):
        buckets.setdefault(observation.date, []).append(observation.temperature)

    return {day: buckets[day] for day in sorted(buckets)}
