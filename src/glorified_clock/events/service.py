"""Event service: creation session, edit, slot lookup and calendar export."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable

from glorified_clock.events.ics import events_to_ics
from glorified_clock.events.models import DEFAULT_EVENT_TITLE, CreationSession, Event
from glorified_clock.timeline.clock import Clock, SystemClock
from glorified_clock.timeline.models import City
from glorified_clock.zones.tzmath import hour_slot_instant

log = logging.getLogger(__name__)

EXPORT_FILENAME = "GlorifiedClock_Events.ics"

AnchorProvider = Callable[[], datetime]


class EventService:
    def __init__(
        self,
        anchor_provider: AnchorProvider | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._anchor_provider = anchor_provider
        self._clock = clock or SystemClock()
        self._events: list[Event] = []
        self.session = CreationSession()
        self.editing: Event | None = None

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def get_event(self, event_id: str) -> Event | None:
        for event in self._events:
            if event.event_id == event_id:
                return event
        return None

    # -- creation session -----------------------------------------------------

    def start_creation(self, city: City, hour: int) -> CreationSession:
        self.session = CreationSession(active=True, city=city, start_hour=hour, end_hour=hour)
        return self.session

    def extend_creation(self, hour: int) -> CreationSession:
        if not self.session.active or self.session.start_hour is None:
            return self.session
        self.session.end_hour = max(self.session.start_hour, hour)
        return self.session

    def is_hour_selected(self, hour: int, city: City | None = None) -> bool:
        if not self.session.active:
            return False
        if city is not None and (self.session.city is None or self.session.city.city_id != city.city_id):
            return False
        selected = self.session.selected_range()
        if selected is None:
            return False
        low, high = selected
        return low <= hour <= high

    def cancel_creation(self) -> None:
        self.session = CreationSession()

    def finalize_creation(self, anchor: datetime | None = None) -> Event | None:
        session = self.session
        self.session = CreationSession()
        resolved_anchor = anchor or self._current_anchor()
        city, start_hour, end_hour = session.city, session.start_hour, session.end_hour
        if not session.active or city is None or start_hour is None or end_hour is None or resolved_anchor is None:
            log.debug("discarding incomplete creation session")
            return None

        timezone_id = city.timezone_id
        end_hour = max(end_hour, start_hour)
        start = hour_slot_instant(resolved_anchor, start_hour, timezone_id)
        end = hour_slot_instant(resolved_anchor, end_hour + 1, timezone_id)
        if end <= start:
            # Both wall hours fell inside one spring-forward gap.
            end = start + timedelta(hours=1)

        event = Event.new(start=start, end=end, timezone_id=timezone_id, title=DEFAULT_EVENT_TITLE)
        self._events.append(event)
        self.editing = event
        return event

    def _current_anchor(self) -> datetime | None:
        if self._anchor_provider is None:
            return None
        return self._anchor_provider()

    # -- edit -----------------------------------------------------------------

    def save(self, event: Event) -> Event:
        event.validate()
        for idx, existing in enumerate(self._events):
            if existing.event_id == event.event_id:
                self._events[idx] = event
                break
        else:
            self._events.append(event)
        if self.editing is not None and self.editing.event_id == event.event_id:
            self.editing = None
        return event

    def update(
        self,
        event_id: str,
        title: str | None = None,
        location: str | None = None,
        notes: str | None = None,
    ) -> Event | None:
        existing = self.get_event(event_id)
        if existing is None:
            return None
        updated = Event(
            event_id=existing.event_id,
            title=existing.title if title is None else title,
            start=existing.start,
            end=existing.end,
            location=existing.location if location is None else location,
            notes=existing.notes if notes is None else notes,
            timezone_id=existing.timezone_id,
        )
        return self.save(updated)

    def delete(self, event: Event | str) -> bool:
        event_id = event if isinstance(event, str) else event.event_id
        before = len(self._events)
        self._events = [item for item in self._events if item.event_id != event_id]
        if self.editing is not None and self.editing.event_id == event_id:
            self.editing = None
        return len(self._events) != before

    # -- lookup -----------------------------------------------------------------

    def events_for_slot(self, hour: int, city: City, anchor: datetime | None = None) -> list[Event]:
        resolved_anchor = anchor or self._current_anchor()
        if resolved_anchor is None:
            raise ValueError("a grid anchor is required to resolve hour slots")
        slot_start = hour_slot_instant(resolved_anchor, hour, city.timezone_id)
        slot_end = hour_slot_instant(resolved_anchor, hour + 1, city.timezone_id)
        return [
            event
            for event in self._events
            if event.timezone_id == city.timezone_id and event.start < slot_end and event.end > slot_start
        ]

    # -- export -----------------------------------------------------------------

    def export_to_ics(self, events: Iterable[Event] | None = None, zone_qualified: bool = False) -> str:
        items = self._events if events is None else list(events)
        return events_to_ics(items, stamp=self._clock.now(), zone_qualified=zone_qualified)

    def export_to_file(
        self,
        directory: str | Path,
        events: Iterable[Event] | None = None,
        zone_qualified: bool = False,
    ) -> Path | None:
        text = self.export_to_ics(events, zone_qualified=zone_qualified)
        out = Path(directory) / EXPORT_FILENAME
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(text, encoding="utf-8")
        except OSError:
            log.exception("failed to write calendar export to %s", out)
            return None
        return out
