"""Observation model for the semicolon-delimited station format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, time

FIELD_DELIMITER = ";"


class Quality(StrEnum):
    """Quality code attached to each reading."""

    APPROVED = "G"
    SUSPECT = "Y"

    @classmethod
    def from_code(cls, code: str) -> Quality:
        """Decode a single-letter code. Only ``G`` counts as approved."""
        return cls.APPROVED if code.strip() == cls.APPROVED.value else cls.SUSPECT


@dataclass(frozen=True)
class Observation:
    """One hourly reading: date, time of day, temperature and approval flag."""

    date: date
    time: time
    temperature: float
    approved: bool

    @property
    def quality(self) -> Quality:
        return Quality.APPROVED if self.approved else Quality.SUSPECT

    def to_line(self) -> str:
        """Serialize back to ``date;time;temperature;code``."""
        return FIELD_DELIMITER.join(
            [
                self.date.isoformat(),
                self.time.isoformat(),
                repr(self.temperature),
                self.quality.value,
            ]
        )
