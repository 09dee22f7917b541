"""Known IANA zones and featured cities for the add-city flow."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import available_timezones


@dataclass(frozen=True, slots=True)
class CitySuggestion:
    name: str
    timezone_id: str


FEATURED_CITIES: tuple[CitySuggestion, ...] = (
    CitySuggestion("Tamil Nadu (Chennai)", "Asia/Kolkata"),
    CitySuggestion("Bangalore", "Asia/Kolkata"),
    CitySuggestion("Dubai", "Asia/Dubai"),
    CitySuggestion("Cupertino", "America/Los_Angeles"),
    CitySuggestion("New York", "America/New_York"),
    CitySuggestion("Paris", "Europe/Paris"),
    CitySuggestion("Singapore", "Asia/Singapore"),
    CitySuggestion("Sydney", "Australia/Sydney"),
)


@lru_cache(maxsize=1)
def known_timezones() -> tuple[str, ...]:
    return tuple(sorted(available_timezones()))


def is_known_timezone(timezone_id: str) -> bool:
    return timezone_id in known_timezones()


def search_timezones(text: str = "") -> list[str]:
    needle = text.strip().casefold()
    if not needle:
        return list(known_timezones())
    return [item for item in known_timezones() if needle in item.casefold()]


def search_featured(text: str = "") -> list[CitySuggestion]:
    needle = text.strip().casefold()
    if not needle:
        return list(FEATURED_CITIES)
    return [item for item in FEATURED_CITIES if needle in item.name.casefold()]
