"""Event domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from glorified_clock.timeline.models import City

DEFAULT_EVENT_TITLE = "New Event"


@dataclass(slots=True)
class Event:
    event_id: str
    title: str
    start: datetime
    end: datetime
    location: str
    notes: str
    timezone_id: str

    def validate(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("event instants must be timezone-aware")
        if self.end <= self.start:
            raise ValueError("event end must be after start")

    @staticmethod
    def new(
        start: datetime,
        end: datetime,
        timezone_id: str,
        title: str = DEFAULT_EVENT_TITLE,
        location: str = "",
        notes: str = "",
    ) -> Event:
        event = Event(
            event_id=str(uuid4()),
            title=title,
            start=start,
            end=end,
            location=location,
            notes=notes,
            timezone_id=timezone_id,
        )
        event.validate()
        return event


@dataclass(slots=True)
class CreationSession:
    active: bool = False
    city: City | None = None
    start_hour: int | None = None
    end_hour: int | None = None

    def selected_range(self) -> tuple[int, int] | None:
        if self.start_hour is None or self.end_hour is None:
            return None
        return min(self.start_hour, self.end_hour), max(self.start_hour, self.end_hour)
