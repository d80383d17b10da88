"""Domain models for lake_level."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


def date_key(day: date) -> str:
    """Calendar-day key used for the measurement mapping (YYYY-MM-DD)."""
    return day.isoformat()


@dataclass(frozen=True)
class Measurement:
    date: date
    minimum: float
    maximum: float

    @property
    def key(self) -> str:
        return date_key(self.date)


@dataclass
class LakeRecord:
    """One lake: display name, nominal maximum level and dated measurements."""

    name: str
    capacity_level: float
    measurements: dict[str, Measurement] = field(default_factory=dict)

    def put(self, measurement: Measurement) -> None:
        # same day: last write wins
        self.measurements[measurement.key] = measurement

    def sorted_measurements(self) -> list[Measurement]:
        return [self.measurements[k] for k in sorted(self.measurements)]

    def latest(self) -> Measurement | None:
        if not self.measurements:
            return None
        return self.measurements[max(self.measurements)]


class LakeCollection(dict):
    """Lake name -> LakeRecord, built fresh by every fetch."""

    def add(self, record: LakeRecord) -> None:
        self[record.name] = record

    def names(self) -> list[str]:
        return sorted(self)
