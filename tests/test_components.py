"""Tests for component blocks and their construction rules."""

from datetime import datetime, timedelta, timezone

import pytest

from icalkit import (
    Alarm,
    Daylight,
    Event,
    FreeBusy,
    Journal,
    Standard,
    TimeZone,
    TimeZoneProperty,
    Todo,
    unfold_lines,
)
from icalkit.constants import CRLF, MAX_LINE_OCTETS
from icalkit.errors import ICalendarValidationError
from icalkit.formatters import escape_text
from icalkit.properties import (
    Attendee,
    DateTimeStamp,
    DateTimeStart,
    FreeBusyTime,
    RecurrenceDateTimes,
    RecurrenceRule,
    RequestStatus,
    Status,
    UniqueIdentifier,
)
from icalkit.values import FreeBusyTimeValue, Frequency, PeriodOfTime, Recur, UtcOffset, Weekday, WeekdayNum

UTC = timezone.utc


@pytest.fixture
def minimal_event(stamp):
    return (
        Event.builder()
        .with_date_time_stamp(DateTimeStamp.builder().build(stamp))
        .with_unique_identifier(UniqueIdentifier.builder().build("x"))
        .build()
    )


@pytest.fixture
def display_alarm():
    return Alarm.builder().with_trigger(timedelta(minutes=-15)).with_description("Reminder").build_display()


@pytest.fixture
def standard():
    rule = Recur.builder().with_frequency(Frequency.YEARLY).with_by_month(10).with_by_day(WeekdayNum(Weekday.SUNDAY, -1))
    return (
        TimeZoneProperty.builder()
        .with_date_time_start(datetime(1970, 10, 25, 3, 0))
        .with_time_zone_offset_from(UtcOffset.of_positive(2, 0))
        .with_time_zone_offset_to(UtcOffset.of_positive(1, 0))
        .with_recurrence_rule(RecurrenceRule.builder().build(rule.build()))
        .with_time_zone_names("CET")
        .build_as_standard()
    )


@pytest.fixture
def daylight():
    rule = Recur.builder().with_frequency(Frequency.YEARLY).with_by_month(3).with_by_day(WeekdayNum(Weekday.SUNDAY, -1))
    return (
        TimeZoneProperty.builder()
        .with_date_time_start(datetime(1970, 3, 29, 2, 0))
        .with_time_zone_offset_from(UtcOffset.of_positive(1, 0))
        .with_time_zone_offset_to(UtcOffset.of_positive(2, 0))
        .with_recurrence_rule(rule.build())
        .with_time_zone_names("CEST")
        .build_as_daylight()
    )


class TestEvent:
    def test_minimal_event(self, minimal_event):
        assert minimal_event.formatted() == "BEGIN:VEVENT\r\nDTSTAMP:20240115T120000Z\r\nUID:x\r\nEND:VEVENT"

    def test_formatting_is_repeatable(self, minimal_event):
        assert minimal_event.formatted() == minimal_event.formatted()

    def test_requires_stamp(self):
        with pytest.raises(ICalendarValidationError, match="The `dtstamp` property is required and must not be null."):
            Event.builder().with_unique_identifier("x").build()

    def test_requires_uid(self, stamp):
        with pytest.raises(ICalendarValidationError, match="`uid`"):
            Event.builder().with_date_time_stamp(stamp).build()

    def test_end_and_duration_are_exclusive(self, stamp):
        builder = (
            Event.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("x")
            .with_date_time_start(stamp)
            .with_date_time_end(stamp + timedelta(hours=1))
            .with_duration(timedelta(hours=1))
        )
        with pytest.raises(ICalendarValidationError, match="must not both be set"):
            builder.build()

    def test_neither_end_nor_duration_is_fine(self, stamp):
        event = Event.builder().with_date_time_stamp(stamp).with_unique_identifier("x").with_date_time_start(stamp)
        assert "DTSTART:20240115T120000Z" in event.build().formatted()

    def test_todo_status_rejected(self, stamp):
        builder = Event.builder().with_date_time_stamp(stamp).with_unique_identifier("x").with_status(Status.COMPLETED)
        with pytest.raises(ICalendarValidationError, match="STATUS:COMPLETED"):
            builder.build()

    def test_property_order(self, stamp, berlin):
        event = (
            Event.builder()
            .with_summary("Team sync")
            .with_categories("WORK")
            .with_attendees("mailto:a@example.com")
            .with_duration(timedelta(hours=1))
            .with_status(Status.CONFIRMED)
            .with_date_time_start(
                DateTimeStart.builder()
                .with_time_zone_identifier("Europe/Berlin")
                .build(datetime(2024, 1, 15, 10, 0, tzinfo=berlin))
            )
            .with_unique_identifier("evt-1")
            .with_date_time_stamp(stamp)
            .build()
        )
        assert event.formatted().split(CRLF) == [
            "BEGIN:VEVENT",
            "DTSTAMP:20240115T120000Z",
            "UID:evt-1",
            "DTSTART;TZID=Europe/Berlin:20240115T100000",
            "STATUS:CONFIRMED",
            "SUMMARY:Team sync",
            "DURATION:PT1H",
            "ATTENDEE:mailto:a@example.com",
            "CATEGORIES:WORK",
            "END:VEVENT",
        ]

    def test_list_properties_accumulate(self, stamp):
        event = (
            Event.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("x")
            .with_comments("first")
            .with_comments("second", "third")
            .build()
        )
        assert [prop.value for prop in event.comments] == ["first", "second", "third"]

    def test_long_description_is_folded(self, stamp):
        text = "Quarterly planning, budget review; agenda attached. " * 6 + "Grüße aus Köln"
        event = Event.builder().with_date_time_stamp(stamp).with_unique_identifier("x").with_description(text).build()
        formatted = event.formatted()

        for physical in formatted.split(CRLF):
            assert len(physical.encode("utf-8")) <= MAX_LINE_OCTETS
        assert f"DESCRIPTION:{escape_text(text)}" in unfold_lines(formatted).split(CRLF)

    def test_alarm_is_nested_last(self, stamp, display_alarm):
        event = (
            Event.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("x")
            .with_summary("Standup")
            .with_alarms(display_alarm)
            .build()
        )
        assert event.formatted().split(CRLF)[-7:] == [
            "SUMMARY:Standup",
            "BEGIN:VALARM",
            "ACTION:DISPLAY",
            "TRIGGER;VALUE=DURATION:-PT15M",
            "DESCRIPTION:Reminder",
            "END:VALARM",
            "END:VEVENT",
        ]

    def test_geographic_position_shortcut(self, stamp):
        event = (
            Event.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("x")
            .with_geographic_position(48.137154, 11.576124)
            .build()
        )
        assert "GEO:48.137154;11.576124" in event.formatted().split(CRLF)

    def test_geographic_position_from_a_pair(self, stamp):
        event = (
            Event.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("x")
            .with_geographic_position((1e-7, 2.5))
            .build()
        )
        assert "GEO:0.0000001;2.5" in event.formatted().split(CRLF)

    def test_non_text_uid_rejected(self, stamp):
        with pytest.raises(ICalendarValidationError, match="UID must not be blank"):
            Event.builder().with_date_time_stamp(stamp).with_unique_identifier(5).build()

    def test_todo_only_partstat_rejected(self, stamp):
        attendee = Attendee.builder().with_participation_status("COMPLETED").build("mailto:jane@example.com")
        builder = Event.builder().with_date_time_stamp(stamp).with_unique_identifier("x").with_attendees(attendee)
        with pytest.raises(ICalendarValidationError, match="PARTSTAT=COMPLETED is not allowed in VEVENT"):
            builder.build()

    def test_request_statuses_written_as_lines(self, stamp):
        event = (
            Event.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("x")
            .with_request_statuses(RequestStatus(2, 0, "Success"), RequestStatus(3, 1, "Invalid property value"))
            .build()
        )
        lines = event.formatted().split(CRLF)
        assert "REQUEST-STATUS:2.0;Success" in lines
        assert "REQUEST-STATUS:3.1;Invalid property value" in lines


class TestTodo:
    def test_full_block(self, stamp):
        todo = (
            Todo.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("todo-1")
            .with_summary("File taxes")
            .with_status("in-process")
            .with_percent_complete(40)
            .with_date_time_due(datetime(2024, 4, 15, 23, 0, tzinfo=UTC))
            .build()
        )
        assert todo.formatted().split(CRLF) == [
            "BEGIN:VTODO",
            "DTSTAMP:20240115T120000Z",
            "UID:todo-1",
            "PERCENT-COMPLETE:40",
            "STATUS:IN-PROCESS",
            "SUMMARY:File taxes",
            "DUE:20240415T230000Z",
            "END:VTODO",
        ]

    def test_due_and_duration_are_exclusive(self, stamp):
        builder = (
            Todo.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("todo-1")
            .with_date_time_due(stamp)
            .with_duration(timedelta(hours=2))
        )
        with pytest.raises(ICalendarValidationError, match="`due` and `duration`"):
            builder.build()

    def test_event_only_status_rejected(self, stamp):
        with pytest.raises(ICalendarValidationError):
            Todo.builder().with_date_time_stamp(stamp).with_unique_identifier("t").with_status(Status.TENTATIVE).build()

    def test_percent_complete_range(self, stamp):
        with pytest.raises(ICalendarValidationError):
            Todo.builder().with_date_time_stamp(stamp).with_unique_identifier("t").with_percent_complete(101).build()

    def test_in_process_partstat(self, stamp):
        attendee = Attendee.builder().with_participation_status("IN-PROCESS").build("mailto:jane@example.com")
        todo = Todo.builder().with_date_time_stamp(stamp).with_unique_identifier("t").with_attendees(attendee).build()
        assert "ATTENDEE;PARTSTAT=IN-PROCESS:mailto:jane@example.com" in todo.formatted().split(CRLF)


class TestJournal:
    def test_several_descriptions(self, stamp):
        journal = (
            Journal.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("j-1")
            .with_status(Status.DRAFT)
            .with_descriptions("Morning notes", "Evening notes")
            .build()
        )
        assert journal.formatted().split(CRLF) == [
            "BEGIN:VJOURNAL",
            "DTSTAMP:20240115T120000Z",
            "UID:j-1",
            "STATUS:DRAFT",
            "DESCRIPTION:Morning notes",
            "DESCRIPTION:Evening notes",
            "END:VJOURNAL",
        ]

    def test_event_status_rejected(self, stamp):
        with pytest.raises(ICalendarValidationError):
            Journal.builder().with_date_time_stamp(stamp).with_unique_identifier("j").with_status("CONFIRMED").build()

    def test_tentative_partstat_rejected(self, stamp):
        attendee = Attendee.builder().with_participation_status("TENTATIVE").build("mailto:jane@example.com")
        builder = Journal.builder().with_date_time_stamp(stamp).with_unique_identifier("j").with_attendees(attendee)
        with pytest.raises(ICalendarValidationError, match="PARTSTAT=TENTATIVE is not allowed in VJOURNAL"):
            builder.build()


class TestFreeBusy:
    def test_block(self, stamp):
        start = datetime(2024, 1, 1, 9, tzinfo=UTC)
        free_busy = (
            FreeBusy.builder()
            .with_date_time_stamp(stamp)
            .with_unique_identifier("fb-1")
            .with_contact("Front desk")
            .with_organiser("mailto:desk@example.com")
            .with_free_busy_times(
                FreeBusyTime.builder()
                .with_free_busy_time_type("BUSY")
                .build(FreeBusyTimeValue.of(start, start + timedelta(hours=1)))
            )
            .build()
        )
        lines = free_busy.formatted().split(CRLF)
        assert lines == [
            "BEGIN:VFREEBUSY",
            "DTSTAMP:20240115T120000Z",
            "UID:fb-1",
            "CONTACT:Front desk",
            "ORGANIZER:mailto:desk@example.com",
            "FREEBUSY;FBTYPE=BUSY:20240101T090000Z/20240101T100000Z",
            "END:VFREEBUSY",
        ]
        assert sum(line.startswith("CONTACT") for line in lines) == 1


class TestAlarm:
    def test_display(self, display_alarm):
        assert display_alarm.formatted() == (
            "BEGIN:VALARM\r\nACTION:DISPLAY\r\nTRIGGER;VALUE=DURATION:-PT15M\r\nDESCRIPTION:Reminder\r\nEND:VALARM"
        )

    def test_display_needs_description(self):
        with pytest.raises(ICalendarValidationError, match="`description`"):
            Alarm.builder().with_trigger(timedelta(minutes=-5)).build_display()

    def test_trigger_required(self):
        with pytest.raises(ICalendarValidationError, match="`trigger`"):
            Alarm.builder().with_description("x").build_display()

    def test_email(self):
        alarm = (
            Alarm.builder()
            .with_trigger(timedelta(hours=-1))
            .with_description("Starts in an hour")
            .with_summary("Reminder")
            .with_attendees(Attendee.builder().build("mailto:jane@example.com"))
            .build_email()
        )
        assert alarm.formatted().split(CRLF)[1:-1] == [
            "ACTION:EMAIL",
            "TRIGGER;VALUE=DURATION:-PT1H",
            "DESCRIPTION:Starts in an hour",
            "SUMMARY:Reminder",
            "ATTENDEE:mailto:jane@example.com",
        ]

    def test_email_needs_attendees(self):
        builder = Alarm.builder().with_trigger(timedelta(hours=-1)).with_description("x").with_summary("y")
        with pytest.raises(ICalendarValidationError):
            builder.build_email()

    def test_audio_takes_one_attachment(self):
        builder = Alarm.builder().with_trigger(timedelta(0)).with_attachments(
            "ftp://example.com/pub/sounds/bell-01.aud", "ftp://example.com/pub/sounds/bell-02.aud"
        )
        with pytest.raises(ICalendarValidationError):
            builder.build_audio()

    def test_duration_and_repeat_come_together(self):
        builder = Alarm.builder().with_trigger(timedelta(0)).with_duration(timedelta(minutes=5))
        with pytest.raises(ICalendarValidationError):
            builder.build_audio()

    def test_audio_with_repeat(self):
        alarm = (
            Alarm.builder()
            .with_trigger(datetime(2024, 3, 1, 8, 0, tzinfo=UTC))
            .with_duration(timedelta(minutes=15))
            .with_repeat_count(4)
            .with_attachments("ftp://example.com/pub/sounds/bell-01.aud")
            .build_audio()
        )
        assert alarm.formatted().split(CRLF)[1:-1] == [
            "ACTION:AUDIO",
            "TRIGGER;VALUE=DATE-TIME:20240301T080000Z",
            "DURATION:PT15M",
            "ATTACH:ftp://example.com/pub/sounds/bell-01.aud",
            "REPEAT:4",
        ]


class TestTimeZone:
    def test_observance_block(self, standard):
        assert isinstance(standard, Standard)
        assert standard.formatted().split(CRLF) == [
            "BEGIN:STANDARD",
            "DTSTART:19701025T030000",
            "TZOFFSETTO:+0100",
            "TZOFFSETFROM:+0200",
            "RRULE:FREQ=YEARLY;BYDAY=-1SU;BYMONTH=10",
            "TZNAME:CET",
            "END:STANDARD",
        ]

    def test_observance_rdates_are_local(self):
        observance = (
            TimeZoneProperty.builder()
            .with_date_time_start(datetime(1970, 10, 25, 3, 0))
            .with_time_zone_offset_from(timedelta(hours=2))
            .with_time_zone_offset_to(timedelta(hours=1))
            .with_recurrence_date_times(RecurrenceDateTimes.builder().build(datetime(1971, 10, 31, 3, 0)))
            .build_as_standard()
        )
        assert "RDATE:19711031T030000" in observance.formatted().split(CRLF)

    def test_observance_rejects_period_rdates(self):
        period = PeriodOfTime.of_start(datetime(1971, 3, 28, 2, 0, tzinfo=UTC), timedelta(hours=1))
        builder = (
            TimeZoneProperty.builder()
            .with_date_time_start(datetime(1970, 3, 29, 2, 0))
            .with_time_zone_offset_from(timedelta(hours=1))
            .with_time_zone_offset_to(timedelta(hours=2))
            .with_recurrence_date_times(RecurrenceDateTimes.builder().build(period))
        )
        with pytest.raises(ICalendarValidationError, match="local DATE-TIME values, not PERIOD"):
            builder.build_as_daylight()

    def test_vtimezone(self, standard, daylight):
        zone = (
            TimeZone.builder()
            .with_time_zone_identifier("Europe/Berlin")
            .with_daylight(daylight)
            .with_standard(standard)
            .build()
        )
        lines = zone.formatted().split(CRLF)
        assert lines[:3] == ["BEGIN:VTIMEZONE", "TZID:Europe/Berlin", "BEGIN:DAYLIGHT"]
        assert lines.index("BEGIN:STANDARD") > lines.index("END:DAYLIGHT")
        assert lines[-1] == "END:VTIMEZONE"
        assert isinstance(zone.observances[0], Daylight)

    def test_needs_an_observance(self):
        with pytest.raises(ICalendarValidationError, match="at least one STANDARD or DAYLIGHT"):
            TimeZone.builder().with_time_zone_identifier("Europe/Berlin").build()

    def test_needs_tzid(self, standard):
        with pytest.raises(ICalendarValidationError, match="`tzid`"):
            TimeZone.builder().with_standard(standard).build()

    def test_observance_needs_offsets(self):
        builder = (
            TimeZoneProperty.builder()
            .with_date_time_start(datetime(1970, 10, 25, 3, 0))
            .with_time_zone_offset_from(UtcOffset.of_positive(2, 0))
        )
        with pytest.raises(ICalendarValidationError, match="`tzoffsetto`"):
            builder.build_as_standard()

    def test_observance_kind_must_be_chosen(self):
        builder = (
            TimeZoneProperty.builder()
            .with_date_time_start(datetime(1970, 10, 25, 3, 0))
            .with_time_zone_offset_from(UtcOffset.of_positive(2, 0))
            .with_time_zone_offset_to(UtcOffset.of_positive(1, 0))
        )
        with pytest.raises(ICalendarValidationError):
            builder.build()

    def test_observance_start_cannot_carry_tzid(self):
        start = DateTimeStart.builder().with_time_zone_identifier("Europe/Berlin").build(datetime(1970, 10, 25, 3, 0))
        builder = (
            TimeZoneProperty.builder()
            .with_date_time_start(start)
            .with_time_zone_offset_from(UtcOffset.of_positive(2, 0))
            .with_time_zone_offset_to(UtcOffset.of_positive(1, 0))
        )
        with pytest.raises(ICalendarValidationError):
            builder.build_as_daylight()
