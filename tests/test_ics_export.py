from datetime import UTC, datetime, timedelta

from glorified_clock.events.ics import events_to_ics, parse_ics, parse_ics_datetime
from glorified_clock.events.models import Event
from glorified_clock.events.service import EventService
from glorified_clock.timeline.clock import FixedClock

STAMP = datetime(2024, 6, 15, 0, 0, tzinfo=UTC)


def _event(**overrides) -> Event:
    values = {
        "event_id": "evt-1",
        "title": "Planning",
        "start": datetime(2024, 6, 15, 1, 0, tzinfo=UTC),
        "end": datetime(2024, 6, 15, 3, 0, tzinfo=UTC),
        "location": "Shibuya",
        "notes": "agenda\nfollowups",
        "timezone_id": "Asia/Tokyo",
    }
    values.update(overrides)
    return Event(**values)


def test_single_event_calendar_layout() -> None:
    text = events_to_ics([_event()], stamp=STAMP)

    assert text == "\n".join(
        [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//Glorified Clock//EN",
            "CALSCALE:GREGORIAN",
            "BEGIN:VEVENT",
            "UID:evt-1",
            "DTSTAMP:20240615T090000",
            "DTSTART:20240615T100000",
            "DTEND:20240615T120000",
            "SUMMARY:Planning",
            "LOCATION:Shibuya",
            "DESCRIPTION:agenda\\nfollowups",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
    )


def test_each_event_uses_its_own_timezone() -> None:
    london = _event(event_id="evt-2", timezone_id="Europe/London")
    text = events_to_ics([_event(), london], stamp=STAMP)

    assert text.count("BEGIN:VEVENT") == 2
    assert "DTSTART:20240615T100000" in text
    assert "DTSTART:20240615T020000" in text
    assert "DTSTAMP:20240615T010000" in text


def test_zone_qualified_timestamps_carry_tzid() -> None:
    text = events_to_ics([_event()], stamp=STAMP, zone_qualified=True)
    assert "DTSTART;TZID=Asia/Tokyo:20240615T100000" in text
    assert "DTEND;TZID=Asia/Tokyo:20240615T120000" in text
    assert "DTSTAMP:20240615T090000" in text


def test_empty_calendar_has_no_events() -> None:
    text = events_to_ics([], stamp=STAMP)
    assert text.splitlines() == [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Glorified Clock//EN",
        "CALSCALE:GREGORIAN",
        "END:VCALENDAR",
    ]


def test_exported_start_and_end_read_back_in_event_zone() -> None:
    service = EventService(clock=FixedClock(STAMP))
    event = Event.new(
        start=datetime(2024, 11, 3, 8, 0, tzinfo=UTC),
        end=datetime(2024, 11, 3, 8, 0, tzinfo=UTC) + timedelta(hours=2, minutes=30),
        timezone_id="America/Vancouver",
        title="Two\nlines",
    )
    service.save(event)

    parsed = parse_ics(service.export_to_ics())

    assert len(parsed) == 1
    block = parsed[0]
    assert block["UID"] == event.event_id
    assert block["SUMMARY"] == "Two\nlines"
    assert parse_ics_datetime(block["DTSTART"], event.timezone_id) == event.start
    assert parse_ics_datetime(block["DTEND"], event.timezone_id) == event.end


def test_literal_backslash_n_is_exported_verbatim_and_reads_back_as_newline() -> None:
    text = events_to_ics([_event(title="C:\\new", notes="")], stamp=STAMP)

    assert "SUMMARY:C:\\new" in text.split("\n")
    assert parse_ics(text)[0]["SUMMARY"] == "C:\new"
