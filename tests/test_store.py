"""Tests for the ObservationStore snapshot and its builder."""

from __future__ import annotations

from datetime import date, time

import pytest

from hourly_weather.datasources.smhi import Observation, Quality
from hourly_weather.exceptions import IndexOutOfRangeError, UnsortedObservationsError
from hourly_weather.store import ObservationStore, ObservationStoreBuilder

D1 = date(2000, 1, 1)
D2 = date(2000, 1, 2)


def _obs(day: date, hour: int = 0, temp: float = 0.0, approved: bool = True) -> Observation:
    return Observation(date=day, time=time(hour), temperature=temp, approved=approved)


class TestObservation:
    """Test the Observation value type."""

    def test_quality_from_flag(self) -> None:
        assert _obs(D1, approved=True).quality is Quality.APPROVED
        assert _obs(D1, approved=False).quality is Quality.SUSPECT

    def test_to_line(self) -> None:
        obs = Observation(date=D1, time=time(6), temperature=-1.5, approved=True)
        assert obs.to_line() == "2000-01-01;06:00:00;-1.5;G"

    def test_to_line_not_approved(self) -> None:
        obs = Observation(date=D1, time=time(23), temperature=2.0, approved=False)
        assert obs.to_line() == "2000-01-01;23:00:00;2.0;Y"

    def test_is_immutable(self) -> None:
        obs = _obs(D1)
        with pytest.raises(AttributeError):
            obs.temperature = 5.0  # type: ignore[misc]

    def test_quality_from_code(self) -> None:
        assert Quality.from_code("G") is Quality.APPROVED
        assert Quality.from_code(" G ") is Quality.APPROVED
        assert Quality.from_code("Y") is Quality.SUSPECT
        assert Quality.from_code("g") is Quality.SUSPECT


class TestObservationStore:
    """Test positional access on a built store."""

    def test_size_and_len(self) -> None:
        store = ObservationStore([_obs(D1, 0), _obs(D1, 1), _obs(D2, 0)])
        assert store.size() == 3
        assert len(store) == 3

    def test_at_returns_in_input_order(self) -> None:
        first, second = _obs(D1, 5), _obs(D1, 2)
        store = ObservationStore([first, second])
        assert store.at(0) is first
        assert store.at(1) is second

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_at_out_of_range(self, index: int) -> None:
        store = ObservationStore([_obs(D1), _obs(D2)])
        with pytest.raises(IndexOutOfRangeError):
            store.at(index)

    def test_at_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            ObservationStore().at(0)

    def test_slice_is_inclusive(self) -> None:
        items = [_obs(D1, h) for h in range(5)]
        store = ObservationStore(items)
        assert store.slice(1, 3) == tuple(items[1:4])
        assert store.slice(4, 4) == (items[4],)

    def test_slice_rejects_out_of_range(self) -> None:
        store = ObservationStore([_obs(D1)])
        with pytest.raises(IndexOutOfRangeError):
            store.slice(0, 1)

    def test_first_and_last_date(self) -> None:
        store = ObservationStore([_obs(D1), _obs(D2)])
        assert store.first_date == D1
        assert store.last_date == D2

    def test_empty_store(self) -> None:
        store = ObservationStore()
        assert store.is_empty
        assert store.size() == 0
        assert store.first_date is None
        assert store.last_date is None

    def test_input_list_changes_do_not_leak(self) -> None:
        items = [_obs(D1)]
        store = ObservationStore(items)
        items.append(_obs(D2))
        assert store.size() == 1

    def test_iterates_in_order(self) -> None:
        items = [_obs(D1, 0), _obs(D1, 1), _obs(D2, 0)]
        assert list(ObservationStore(items)) == items


class TestObservationStoreBuilder:
    """Test accumulation and the date-order check."""

    def test_build_returns_store(self) -> None:
        builder = ObservationStoreBuilder()
        builder.add(_obs(D1))
        builder.extend([_obs(D1, 1), _obs(D2)])
        store = builder.build()
        assert isinstance(store, ObservationStore)
        assert store.size() == 3

    def test_equal_dates_with_unordered_times_allowed(self) -> None:
        builder = ObservationStoreBuilder()
        builder.extend([_obs(D1, 10), _obs(D1, 2), _obs(D2, 0)])
        store = builder.build()
        assert [o.time.hour for o in store] == [10, 2, 0]

    def test_date_regression_raises(self) -> None:
        builder = ObservationStoreBuilder()
        builder.extend([_obs(D1), _obs(D2), _obs(D1)])
        with pytest.raises(UnsortedObservationsError) as exc_info:
            builder.build()
        assert exc_info.value.index == 2

    def test_snapshots_are_independent(self) -> None:
        builder = ObservationStoreBuilder()
        builder.add(_obs(D1))
        first = builder.build()
        builder.add(_obs(D2))
        second = builder.build()
        assert first.size() == 1
        assert second.size() == 2

    def test_empty_build(self) -> None:
        assert ObservationStoreBuilder().build().is_empty
