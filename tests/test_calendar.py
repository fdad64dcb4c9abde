"""Tests for the VCALENDAR object and its output as a whole."""

from datetime import datetime, timedelta, timezone

import pytest

from icalkit import Alarm, Calendar, Event, TimeZone, TimeZoneProperty, Todo, unfold_lines
from icalkit.constants import CRLF, MAX_LINE_OCTETS
from icalkit.errors import ICalendarValidationError
from icalkit.properties import (
    Attendee,
    CalendarScale,
    CustomProperty,
    Method,
    Owner,
)
from icalkit.values import UtcOffset

UTC = timezone.utc


@pytest.fixture
def event(stamp):
    return (
        Event.builder()
        .with_date_time_stamp(stamp)
        .with_unique_identifier("evt-1@example.com")
        .with_date_time_start(datetime(2024, 2, 1, 9, 0, tzinfo=UTC))
        .with_date_time_end(datetime(2024, 2, 1, 10, 0, tzinfo=UTC))
        .with_summary("Planning, round two")
        .with_description("Agenda: budget; hiring; roadmap. " * 5)
        .with_categories("WORK", "PLANNING")
        .with_attendees(
            Attendee.builder()
            .with_common_name("Doe, Jane")
            .with_participation_role("REQ-PARTICIPANT")
            .build("mailto:jane@example.com")
        )
        .with_alarms(Alarm.builder().with_trigger(timedelta(minutes=-10)).with_description("Soon").build_display())
        .build()
    )


def test_calendar_header_and_trailing_crlf(event):
    calendar = (
        Calendar.builder()
        .with_product_identifier("-//Example Corp//Planner 1.0//EN")
        .with_method(Method.PUBLISH)
        .with_calendar_scale(CalendarScale.GREGORIAN)
        .with_components(event)
        .build()
    )
    text = calendar.formatted()

    assert text.startswith(
        "BEGIN:VCALENDAR\r\n"
        "PRODID:-//Example Corp//Planner 1.0//EN\r\n"
        "VERSION:2.0\r\n"
        "CALSCALE:GREGORIAN\r\n"
        "METHOD:PUBLISH\r\n"
        "BEGIN:VEVENT\r\n"
    )
    assert text.endswith("END:VEVENT\r\nEND:VCALENDAR\r\n")
    assert "\n" not in text.replace(CRLF, "")


def test_every_physical_line_fits(event):
    text = Calendar.builder().with_components(event).build().formatted()
    for physical in text.split(CRLF):
        assert len(physical.encode("utf-8")) <= MAX_LINE_OCTETS


def test_default_prodid():
    text = Calendar.builder().build().formatted()
    assert text == "BEGIN:VCALENDAR\r\nPRODID:-//icalkit//icalkit 0.1.0//EN\r\nVERSION:2.0\r\nEND:VCALENDAR\r\n"


def test_prodid_from_environment(monkeypatch):
    monkeypatch.setenv("ICALKIT_PRODID", "-//Acme//Calendar Export//EN")
    assert "PRODID:-//Acme//Calendar Export//EN" in Calendar.builder().build().formatted().split(CRLF)


def test_extension_properties():
    calendar = (
        Calendar.builder()
        .with_calendar_name("Team, Berlin")
        .with_calendar_description("Shared team calendar")
        .with_calendar_time_zone("Europe/Berlin")
        .with_owner(Owner.builder().with_common_name("Jane").build("mailto:jane@example.com"))
        .with_primary_calendar(True)
        .with_published_ttl(timedelta(hours=1))
        .with_custom_properties(CustomProperty("X-APPLE-CALENDAR-COLOR", "#FF2968"))
        .build()
    )
    lines = calendar.formatted().split(CRLF)

    assert lines[3:10] == [
        "X-WR-CALNAME:Team\\, Berlin",
        "X-WR-CALDESC:Shared team calendar",
        "X-WR-TIMEZONE:Europe/Berlin",
        "X-OWNER;CN=Jane:mailto:jane@example.com",
        "X-PRIMARY-CALENDAR:TRUE",
        "X-PUBLISHED-TTL:PT1H",
        "X-APPLE-CALENDAR-COLOR:#FF2968",
    ]


def test_unknown_calendar_time_zone():
    with pytest.raises(ICalendarValidationError):
        Calendar.builder().with_calendar_time_zone("Nowhere/Special").build()


def test_alarm_is_not_a_top_level_component():
    alarm = Alarm.builder().with_trigger(timedelta(0)).build_audio()
    with pytest.raises(ICalendarValidationError):
        Calendar.builder().with_components(alarm).build()


def test_components_keep_their_order(event, stamp):
    todo = Todo.builder().with_date_time_stamp(stamp).with_unique_identifier("todo-1").build()
    lines = Calendar.builder().with_components(todo, event).build().formatted().split(CRLF)
    assert lines.index("BEGIN:VTODO") < lines.index("BEGIN:VEVENT")


def test_output_parses_with_icalendar(event):
    icalendar = pytest.importorskip("icalendar")
    zone = (
        TimeZone.builder()
        .with_time_zone_identifier("UTC+05:30")
        .with_standard(
            TimeZoneProperty.builder()
            .with_date_time_start(datetime(1970, 1, 1, 0, 0))
            .with_time_zone_offset_from(UtcOffset.of_positive(5, 30))
            .with_time_zone_offset_to(UtcOffset.of_positive(5, 30))
            .with_time_zone_names("IST")
            .build_as_standard()
        )
        .build()
    )
    text = Calendar.builder().with_method("publish").with_components(zone, event).build().formatted()

    parsed = icalendar.Calendar.from_ical(text)
    events = list(parsed.walk("VEVENT"))

    assert len(events) == 1
    assert str(events[0]["SUMMARY"]) == "Planning, round two"
    assert str(events[0]["DESCRIPTION"]) == "Agenda: budget; hiring; roadmap. " * 5
    assert events[0].decoded("DTSTART") == datetime(2024, 2, 1, 9, 0, tzinfo=UTC)
    assert len(list(parsed.walk("VALARM"))) == 1
    assert len(list(parsed.walk("VTIMEZONE"))) == 1


def test_unfolded_output_round_trips_through_folding(event):
    text = Calendar.builder().with_components(event).build().formatted()
    logical = unfold_lines(text).split(CRLF)
    assert "SUMMARY:Planning\\, round two" in logical
    assert 'ATTENDEE;ROLE=REQ-PARTICIPANT;CN="Doe, Jane":mailto:jane@example.com' in logical
