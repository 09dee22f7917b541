"""Timezone-aware day and hour arithmetic.

Instants are timezone-aware ``datetime`` values normalized to UTC. Civil
values (days, hours) are always read in an explicit IANA zone.

Hour stepping uses wall-clock semantics: the anchor is converted to local
wall time, hours are added to the wall clock, and the wall time is resolved
back to an instant. A wall time inside a spring-forward gap resolves with the
pre-transition offset (so 02:00 in a 02:00->03:00 gap lands on 03:00), and an
ambiguous fall-back wall time resolves to its earlier occurrence.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone_name

log = logging.getLogger(__name__)


class DayRelationship(str, Enum):
    PREVIOUS = "previous"
    SAME = "same"
    NEXT = "next"


def _load_zone(timezone_id: str) -> ZoneInfo | None:
    # Directory names such as "America" surface as IsADirectoryError.
    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def device_timezone_id() -> str:
    """IANA key of the host's configured zone, or ``"UTC"`` when it has none."""
    try:
        name = get_localzone_name()
    except (ZoneInfoNotFoundError, ValueError, OSError):
        name = None
    if name and _load_zone(name) is not None:
        return name
    return "UTC"


def resolve_timezone_id(timezone_id: str | None) -> str:
    """Return ``timezone_id`` when it names an IANA zone, else the device zone key."""
    if timezone_id and _load_zone(timezone_id) is not None:
        return timezone_id
    if timezone_id:
        log.warning("unknown timezone %r, falling back to device timezone", timezone_id)
    return device_timezone_id()


def resolve_timezone(timezone_id: str | None) -> ZoneInfo:
    zone = _load_zone(timezone_id) if timezone_id else None
    if zone is not None:
        return zone
    return ZoneInfo(resolve_timezone_id(timezone_id))


def _resolve_wall(wall: datetime, zone: tzinfo) -> datetime:
    # fold=0 picks the pre-transition offset in gaps and the first occurrence in overlaps.
    return wall.replace(tzinfo=zone, fold=0).astimezone(UTC)


def start_of_day(day: date, timezone_id: str) -> datetime:
    zone = resolve_timezone(timezone_id)
    return _resolve_wall(datetime.combine(day, time(0)), zone)


def hour_slot_instant(anchor: datetime, hour_offset: int, timezone_id: str) -> datetime:
    zone = resolve_timezone(timezone_id)
    wall = anchor.astimezone(zone).replace(tzinfo=None) + timedelta(hours=hour_offset)
    return _resolve_wall(wall, zone)


def civil_day(instant: datetime, timezone_id: str) -> date:
    return instant.astimezone(resolve_timezone(timezone_id)).date()


def civil_hour_of(instant: datetime, timezone_id: str) -> int:
    return instant.astimezone(resolve_timezone(timezone_id)).hour


def day_relationship(
    instant_a: datetime,
    timezone_a: str,
    instant_b: datetime,
    timezone_b: str,
) -> DayRelationship:
    """Relationship of B's civil day to A's civil day."""
    delta = (civil_day(instant_b, timezone_b) - civil_day(instant_a, timezone_a)).days
    if delta > 0:
        return DayRelationship.NEXT
    if delta < 0:
        return DayRelationship.PREVIOUS
    return DayRelationship.SAME


def add_civil_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def today_in(timezone_id: str, now: datetime) -> date:
    return civil_day(now, timezone_id)
