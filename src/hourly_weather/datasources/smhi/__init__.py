"""Semicolon-delimited hourly station observations.

One reading per line: ``date;time;temperature;quality`` where quality is
``G`` for approved and any other letter for not approved, e.g.::

    2000-01-01;06:00:00;-0.3;G
    2000-01-01;07:00:00;-0.2;Y

Public API:
  - models: Observation, Quality
  - parser: parse_line, parse_lines, load_observations
"""

from hourly_weather.datasources.smhi.models import FIELD_DELIMITER, Observation, Quality
from hourly_weather.datasources.smhi.parser import load_observations, parse_line, parse_lines

__all__ = [
    "FIELD_DELIMITER",
    "Observation",
    "Quality",
    "load_observations",
    "parse_line",
    "parse_lines",
]
