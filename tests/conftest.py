"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, time
from pathlib import Path

import pytest

from hourly_weather.datasources.smhi import Observation, load_observations
from hourly_weather.store import ObservationStore

DATA_DIR = Path(__file__).parent / "data"

StoreFactory = Callable[[Sequence[tuple[date, int]]], ObservationStore]


def make_observation(
    day: date,
    hour: int = 0,
    temperature: float = 0.0,
    approved: bool = True,
) -> Observation:
    return Observation(date=day, time=time(hour), temperature=temperature, approved=approved)


@pytest.fixture
def sample_path() -> Path:
    """Three days, 2000-01-01..03: 24, 23 and 23 readings, 23 approved."""
    return DATA_DIR / "observations.csv"


@pytest.fixture
def sample_store(sample_path: Path) -> ObservationStore:
    return load_observations(sample_path)


@pytest.fixture
def store_factory() -> StoreFactory:
    """Build a store from ``(date, reading_count)`` runs, in the given order."""

    def _build(runs: Sequence[tuple[date, int]]) -> ObservationStore:
        observations = [
            make_observation(day, hour=i % 24, temperature=float(i))
            for day, count in runs
            for i in range(count)
        ]
        return ObservationStore(observations)

    return _build


@pytest.fixture
def observation_factory() -> Callable[..., Observation]:
    return make_observation
