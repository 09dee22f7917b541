"""Timezone math, formatting and registry exports."""

from glorified_clock.zones.formatting import (
    duration_text,
    format_date,
    format_event_datetime,
    format_time,
    timezone_abbreviation,
)
from glorified_clock.zones.registry import (
    FEATURED_CITIES,
    CitySuggestion,
    is_known_timezone,
    search_featured,
    search_timezones,
)
from glorified_clock.zones.tzmath import (
    DayRelationship,
    add_civil_days,
    civil_day,
    civil_hour_of,
    day_relationship,
    device_timezone_id,
    hour_slot_instant,
    resolve_timezone,
    resolve_timezone_id,
    start_of_day,
)

__all__ = [
    "CitySuggestion",
    "DayRelationship",
    "FEATURED_CITIES",
    "add_civil_days",
    "civil_day",
    "civil_hour_of",
    "day_relationship",
    "device_timezone_id",
    "duration_text",
    "format_date",
    "format_event_datetime",
    "format_time",
    "hour_slot_instant",
    "is_known_timezone",
    "resolve_timezone",
    "resolve_timezone_id",
    "search_featured",
    "search_timezones",
    "start_of_day",
    "timezone_abbreviation",
]
