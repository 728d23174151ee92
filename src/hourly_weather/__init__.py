"""Hourly Weather - date-range statistics over hourly station observations.

Architecture::

    datasources/   Input formats (semicolon-delimited station files) -> store
    store.py       Immutable, date-sorted observation snapshot + builder
    analysis/      Boundary search, per-day grouping, range queries
    renderers/     Query results -> text lines / HTML report
    cli.py         argparse entry point (hourly-weather)

Data flow: datasources -> store -> analysis -> renderers

Extension points (see each package's docstring for step-by-step guides):
  - New input format:  datasources/__init__.py
  - New query:         analysis/__init__.py
  - New output:        renderers/__init__.py
"""

__version__ = "0.1.0"

from hourly_weather.analysis.queries import QueryEngine
from hourly_weather.config import Settings
from hourly_weather.datasources.smhi import Observation, load_observations
from hourly_weather.schemas import QueryResult
from hourly_weather.store import ObservationStore, ObservationStoreBuilder

__all__ = [
    "Observation",
    "ObservationStore",
    "ObservationStoreBuilder",
    "QueryEngine",
    "QueryResult",
    "Settings",
    "__version__",
    "load_observations",
]
