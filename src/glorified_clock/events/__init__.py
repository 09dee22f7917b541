"""Event domain exports."""

from glorified_clock.events.facade import EventStore
from glorified_clock.events.ics import events_to_ics, parse_ics, parse_ics_datetime
from glorified_clock.events.models import DEFAULT_EVENT_TITLE, CreationSession, Event
from glorified_clock.events.service import EXPORT_FILENAME, EventService

__all__ = [
    "CreationSession",
    "DEFAULT_EVENT_TITLE",
    "EXPORT_FILENAME",
    "Event",
    "EventService",
    "EventStore",
    "events_to_ics",
    "parse_ics",
    "parse_ics_datetime",
]
