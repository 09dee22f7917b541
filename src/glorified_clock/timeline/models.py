"""Timeline domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from glorified_clock.zones.tzmath import DayRelationship

HOURS: tuple[int, ...] = tuple(range(24))


@dataclass(frozen=True, slots=True)
class TrackedCity:
    city_id: str
    name: str
    timezone_id: str

    @staticmethod
    def new(name: str, timezone_id: str) -> TrackedCity:
        return TrackedCity(city_id=str(uuid4()), name=name, timezone_id=timezone_id)


@dataclass(frozen=True, slots=True)
class City:
    """Read-only projection of a tracked city; ``is_home`` follows list position."""

    city_id: str
    name: str
    timezone_id: str
    is_home: bool


@dataclass(frozen=True, slots=True)
class HourCell:
    hour: int
    instant: datetime
    label: str
    is_current: bool
    relationship: DayRelationship


@dataclass(frozen=True, slots=True)
class CityHeader:
    city_id: str
    name: str
    is_home: bool
    abbreviation: str
    date_text: str
    time_text: str
    relationship: DayRelationship
