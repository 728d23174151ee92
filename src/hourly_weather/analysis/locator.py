"""Boundary search for runs of equal dates.

The store is sorted by date but holds a variable number of observations per
day (usually 24, sometimes fewer). These searches find where a day's run
starts and ends without scanning the store:

    index   0    1    2    3    4    5    6
    date   d1   d1   d2   d2   d2   d3   d3
                     ^first(d2)     ^last(d2)

Each search is a recursive binary search over ``[start, end]``. When the
probe lands inside the run, the probe itself becomes the best answer so far
and the search continues in the half that leads towards the run's edge,
so the whole search stays ``O(log N)`` however long the run is. Neighbour
reads at the store edges are bounds-checked.

"First" and "last" mean lowest and highest store position; time of day is
not consulted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from hourly_weather.store import ObservationStore

#: Returned when the target date has no observations.
NOT_FOUND = -1


def first_index_of_date(store: ObservationStore, target: date) -> int:
    """Return the smallest index whose date equals ``target``.

    Args:
        store: Date-sorted observations.
        target: Calendar date to locate.

    Returns:
        Index of the first observation on ``target``, or ``NOT_FOUND`` when
        the date is absent (including before the first or after the last
        stored date, and for an empty store).
    """
    if store.is_empty:
        return NOT_FOUND
    return _search_first(store, target, 0, store.size() - 1, NOT_FOUND)


def last_index_of_date(store: ObservationStore, target: date) -> int:
    """Return the largest index whose date equals ``target``.

    Mirror image of ``first_index_of_date``; ``NOT_FOUND`` when absent.
    """
    if store.is_empty:
        return NOT_FOUND
    return _search_last(store, target, 0, store.size() - 1, NOT_FOUND)


def _search_first(
    store: ObservationStore, target: date, start: int, end: int, best: int
) -> int:
    if start > end:
        return best

    probe = (start + end) // 2
    probe_date = store.at(probe).date

    if probe_date == target:
        if probe == 0 or store.at(probe - 1).date != target:
            return probe
        # Still inside the run: keep this hit, look further left.
        return _search_first(store, target, start, probe - 1, probe)
    if probe_date > target:
        return _search_first(store, target, start, probe - 1, best)
    return _search_first(store, target, probe + 1, end, best)


def _search_last(
    store: ObservationStore, target: date, start: int, end: int, best: int
) -> int:
    if start > end:
        return best

    probe = (start + end) // 2
    probe_date = store.at(probe).date

    if probe_date == target:
        if probe == store.size() - 1 or store.at(probe + 1).date != target:
            return probe
        return _search_last(store, target, probe + 1, end, probe)
    if probe_date > target:
        return _search_last(store, target, start, probe - 1, best)
    return _search_last(store, target, probe + 1, end, best)
