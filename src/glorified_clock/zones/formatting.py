"""Display strings derived from instants, zones and the 12/24h preference."""

from __future__ import annotations

from datetime import datetime

from glorified_clock.zones.tzmath import resolve_timezone

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _clock_text(local: datetime, use_24_hour: bool) -> str:
    if use_24_hour:
        return f"{local.hour:02d}:{local.minute:02d}"
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def format_time(instant: datetime, timezone_id: str, use_24_hour: bool) -> str:
    return _clock_text(instant.astimezone(resolve_timezone(timezone_id)), use_24_hour)


def format_date(instant: datetime, timezone_id: str) -> str:
    local = instant.astimezone(resolve_timezone(timezone_id))
    return f"{_WEEKDAYS[local.weekday()]}, {_MONTHS[local.month - 1]} {local.day}"


def format_event_datetime(instant: datetime, timezone_id: str, use_24_hour: bool) -> str:
    local = instant.astimezone(resolve_timezone(timezone_id))
    return f"{_MONTHS[local.month - 1]} {local.day}, {_clock_text(local, use_24_hour)}"


def timezone_abbreviation(timezone_id: str, instant: datetime) -> str:
    return instant.astimezone(resolve_timezone(timezone_id)).tzname() or ""


def duration_text(start: datetime, end: datetime) -> str:
    seconds = int((end - start).total_seconds())
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours} hour{'' if hours == 1 else 's'}"
    return f"{minutes} minute{'' if minutes == 1 else 's'}"
