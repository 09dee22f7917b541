"""iCalendar (.ics) serialization for events.

Timestamps are floating local times in each event's own zone unless
``zone_qualified`` is set, in which case ``DTSTART``/``DTEND`` carry a
``TZID`` parameter.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Iterable

from glorified_clock.events.models import Event
from glorified_clock.zones.tzmath import resolve_timezone

ICS_DATETIME_FORMAT = "%Y%m%dT%H%M%S"
PRODID = "-//Glorified Clock//EN"


def format_ics_datetime(instant: datetime, timezone_id: str) -> str:
    return instant.astimezone(resolve_timezone(timezone_id)).strftime(ICS_DATETIME_FORMAT)


def parse_ics_datetime(value: str, timezone_id: str) -> datetime:
    naive = datetime.strptime(value.strip(), ICS_DATETIME_FORMAT)
    return naive.replace(tzinfo=resolve_timezone(timezone_id), fold=0).astimezone(UTC)


def escape_text(text: str) -> str:
    return text.replace("\n", "\\n")


def unescape_text(text: str) -> str:
    """Reverse of ``escape_text``.

    Only newlines are escaped on export, so text that already held a literal
    backslash followed by ``n`` reads back as a newline.
    """
    return text.replace("\\n", "\n")


def event_to_ics(event: Event, stamp: datetime, zone_qualified: bool = False) -> str:
    tz = event.timezone_id
    start_key = f"DTSTART;TZID={tz}" if zone_qualified else "DTSTART"
    end_key = f"DTEND;TZID={tz}" if zone_qualified else "DTEND"
    lines = [
        "BEGIN:VEVENT",
        f"UID:{event.event_id}",
        f"DTSTAMP:{format_ics_datetime(stamp, tz)}",
        f"{start_key}:{format_ics_datetime(event.start, tz)}",
        f"{end_key}:{format_ics_datetime(event.end, tz)}",
        f"SUMMARY:{escape_text(event.title)}",
        f"LOCATION:{escape_text(event.location)}",
        f"DESCRIPTION:{escape_text(event.notes)}",
        "END:VEVENT",
    ]
    return "\n".join(lines)


def events_to_ics(events: Iterable[Event], stamp: datetime, zone_qualified: bool = False) -> str:
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
    ]
    lines.extend(event_to_ics(event, stamp, zone_qualified=zone_qualified) for event in events)
    lines.append("END:VCALENDAR")
    return "\n".join(lines)


def parse_ics(text: str) -> list[dict[str, str]]:
    """Read VEVENT blocks into property dicts.

    Property parameters are kept in the key (``DTSTART;TZID=Asia/Tokyo``) and
    text values are unescaped.
    """
    output: list[dict[str, str]] = []
    current: dict[str, str] | None = None
    for raw_line in text.splitlines():
        line = raw_line.rstrip("\r")
        if line == "BEGIN:VEVENT":
            current = {}
            continue
        if line == "END:VEVENT":
            if current is not None:
                output.append(current)
            current = None
            continue
        if current is None:
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        current[key] = unescape_text(value)
    return output
