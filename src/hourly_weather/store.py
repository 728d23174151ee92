"""Immutable, date-sorted snapshot of observations.

The store is built once from a fully materialized sequence and never
mutated afterwards. It trusts input order: it does not re-sort. Ordering is
checked by ``ObservationStoreBuilder.build()`` on the loading side, so the
query code can rely on the invariant

    store.at(i).date <= store.at(i + 1).date   for all 0 <= i < N-1

Reloading means building a new snapshot; readers holding the old one are
unaffected, which makes a store safe to share between threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hourly_weather.exceptions import IndexOutOfRangeError, UnsortedObservationsError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import date

    from hourly_weather.datasources.smhi.models import Observation


class ObservationStore:
    """Ordered, read-only sequence of observations addressable by position."""

    __slots__ = ("_items",)

    def __init__(self, observations: Iterable[Observation] = ()) -> None:
        self._items: tuple[Observation, ...] = tuple(observations)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ObservationStore(size={len(self._items)}, {self.first_date}..{self.last_date})"

    def size(self) -> int:
        return len(self._items)

    def at(self, index: int) -> Observation:
        """Return the observation at ``index``.

        Negative indices are rejected rather than counted from the end.
        """
        if not 0 <= index < len(self._items):
            msg = f"Index {index} outside store of size {len(self._items)}"
            raise IndexOutOfRangeError(msg)
        return self._items[index]

    def slice(self, start: int, end: int) -> tuple[Observation, ...]:
        """Return observations ``start..end`` inclusive."""
        self.at(start)
        self.at(end)
        return self._items[start : end + 1]

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def first_date(self) -> date | None:
        return self._items[0].date if self._items else None

    @property
    def last_date(self) -> date | None:
        return self._items[-1].date if self._items else None


class ObservationStoreBuilder:
    """Accumulates observations during loading and hands out snapshots."""

    def __init__(self) -> None:
        self._pending: list[Observation] = []

    def __len__(self) -> int:
        return len(self._pending)

    def add(self, observation: Observation) -> None:
        self._pending.append(observation)

    def extend(self, observations: Iterable[Observation]) -> None:
        self._pending.extend(observations)

    def build(self) -> ObservationStore:
        """Check date order and return an independent snapshot.

        Raises:
            UnsortedObservationsError: If any observation is dated before its
                predecessor.
        """
        for i in range(1, len(self._pending)):
            previous = self._pending[i - 1].date
            current = self._pending[i].date
            if current < previous:
                raise UnsortedObservationsError(i, previous, current)
        return ObservationStore(self._pending)
