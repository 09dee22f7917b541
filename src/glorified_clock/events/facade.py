"""Event store public facade."""

from __future__ import annotations

from pathlib import Path

from glorified_clock.events.models import CreationSession, Event
from glorified_clock.events.service import EventService
from glorified_clock.timeline.clock import Clock
from glorified_clock.timeline.models import City
from glorified_clock.timeline.service import TimelineService


class EventStore:
    def __init__(self, service: EventService) -> None:
        self._service = service

    @staticmethod
    def for_timeline(timeline: TimelineService, clock: Clock | None = None) -> EventStore:
        """Event store whose slots are anchored to the timeline's viewed day."""
        return EventStore(EventService(anchor_provider=timeline.grid_anchor, clock=clock))

    @property
    def service(self) -> EventService:
        return self._service

    def start_creation(self, city: City, hour: int) -> CreationSession:
        return self._service.start_creation(city=city, hour=hour)

    def extend_creation(self, hour: int) -> CreationSession:
        return self._service.extend_creation(hour=hour)

    def is_hour_selected(self, hour: int, city: City | None = None) -> bool:
        return self._service.is_hour_selected(hour=hour, city=city)

    def cancel_creation(self) -> None:
        self._service.cancel_creation()

    def finalize_creation(self) -> Event | None:
        return self._service.finalize_creation()

    def save(self, event: Event) -> Event:
        return self._service.save(event)

    def delete(self, event: Event | str) -> bool:
        return self._service.delete(event)

    def events_for_slot(self, hour: int, city: City) -> list[Event]:
        return self._service.events_for_slot(hour=hour, city=city)

    def export_to_ics(self, events: list[Event] | None = None) -> str:
        return self._service.export_to_ics(events)

    def export_to_file(self, directory: str | Path) -> Path | None:
        return self._service.export_to_file(directory)
