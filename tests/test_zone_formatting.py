from datetime import UTC, datetime, timedelta

from glorified_clock.zones.formatting import (
    duration_text,
    format_date,
    format_event_datetime,
    format_time,
    timezone_abbreviation,
)
from glorified_clock.zones.registry import FEATURED_CITIES, is_known_timezone, search_featured, search_timezones

INSTANT = datetime(2024, 6, 15, 17, 5, tzinfo=UTC)


def test_format_time_12_and_24_hour() -> None:
    assert format_time(INSTANT, "America/Vancouver", use_24_hour=False) == "10:05 AM"
    assert format_time(INSTANT, "America/Vancouver", use_24_hour=True) == "10:05"
    assert format_time(INSTANT, "Asia/Tokyo", use_24_hour=False) == "2:05 AM"
    assert format_time(INSTANT, "Europe/London", use_24_hour=False) == "6:05 PM"


def test_format_time_midnight_and_noon_in_12_hour() -> None:
    midnight = datetime(2024, 6, 15, 0, 0, tzinfo=UTC)
    noon = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)
    assert format_time(midnight, "UTC", use_24_hour=False) == "12:00 AM"
    assert format_time(noon, "UTC", use_24_hour=False) == "12:00 PM"
    assert format_time(midnight, "UTC", use_24_hour=True) == "00:00"


def test_format_date_and_event_datetime() -> None:
    assert format_date(INSTANT, "America/Vancouver") == "Sat, Jun 15"
    assert format_date(INSTANT, "Asia/Tokyo") == "Sun, Jun 16"
    assert format_event_datetime(INSTANT, "Asia/Tokyo", use_24_hour=True) == "Jun 16, 02:05"
    assert format_event_datetime(INSTANT, "Asia/Tokyo", use_24_hour=False) == "Jun 16, 2:05 AM"


def test_timezone_abbreviation_tracks_dst() -> None:
    winter = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    assert timezone_abbreviation("America/Vancouver", INSTANT) == "PDT"
    assert timezone_abbreviation("America/Vancouver", winter) == "PST"
    assert timezone_abbreviation("Asia/Tokyo", INSTANT) == "JST"
    assert timezone_abbreviation("Europe/London", INSTANT) == "BST"


def test_duration_text_variants() -> None:
    start = INSTANT
    assert duration_text(start, start + timedelta(hours=2, minutes=30)) == "2h 30m"
    assert duration_text(start, start + timedelta(hours=1)) == "1 hour"
    assert duration_text(start, start + timedelta(hours=3)) == "3 hours"
    assert duration_text(start, start + timedelta(minutes=45)) == "45 minutes"
    assert duration_text(start, start + timedelta(minutes=1)) == "1 minute"


def test_featured_cities_search_is_case_insensitive() -> None:
    assert len(search_featured()) == len(FEATURED_CITIES)
    names = [item.name for item in search_featured("new")]
    assert names == ["New York"]
    assert [item.timezone_id for item in search_featured("CHENNAI")] == ["Asia/Kolkata"]


def test_timezone_search_and_validation() -> None:
    assert is_known_timezone("Asia/Tokyo")
    assert not is_known_timezone("Mars/Olympus_Mons")
    matches = search_timezones("tokyo")
    assert "Asia/Tokyo" in matches
    assert all("tokyo" in item.lower() for item in matches)
    assert len(search_timezones("")) > len(matches)
