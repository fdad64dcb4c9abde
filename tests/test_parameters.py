"""Tests for property parameters."""

from datetime import timedelta, timezone

import pytest

from icalkit.errors import ICalendarTimeZoneError, ICalendarValidationError
from icalkit.parameters import (
    CalendarUserType,
    CommonName,
    CustomParameter,
    Delegatees,
    FormatType,
    InlineEncoding,
    Language,
    ParticipationStatus,
    RecurrenceIdentifierRange,
    RsvpExpectation,
    SentBy,
    TimeZoneIdentifier,
    ValueDataType,
    as_parameter,
)


def test_common_name_quotes_only_when_needed():
    assert CommonName("Jane Doe").formatted() == ";CN=Jane Doe"
    assert CommonName("Smith, John").formatted() == ';CN="Smith, John"'


def test_common_name_caret_encodes_double_quotes():
    assert CommonName('The "Boss"').formatted() == ";CN=The ^'Boss^'"


def test_common_name_must_not_be_blank():
    with pytest.raises(ICalendarValidationError):
        CommonName("  ")


def test_language_tag():
    assert Language("en-US").formatted() == ";LANGUAGE=en-US"
    with pytest.raises(ICalendarValidationError):
        Language("not a tag")


def test_address_lists_are_quoted_and_comma_separated():
    delegatees = Delegatees(("mailto:a@example.com", "mailto:b@example.com"))
    assert delegatees.formatted() == ';DELEGATED-TO="mailto:a@example.com","mailto:b@example.com"'


def test_address_list_needs_an_address():
    with pytest.raises(ICalendarValidationError):
        Delegatees(())


def test_uri_parameters_are_always_quoted():
    assert SentBy("mailto:assistant@example.com").formatted() == ';SENT-BY="mailto:assistant@example.com"'


def test_rsvp():
    assert RsvpExpectation(True).formatted() == ";RSVP=TRUE"
    assert RsvpExpectation(False).formatted() == ";RSVP=FALSE"
    with pytest.raises(ICalendarValidationError):
        RsvpExpectation("yes")


def test_format_type():
    assert FormatType("application/pdf").formatted() == ";FMTTYPE=application/pdf"
    with pytest.raises(ICalendarValidationError):
        FormatType("not a type")


class TestTimeZoneIdentifier:
    def test_iana_name(self):
        tzid = TimeZoneIdentifier("Europe/Berlin")
        assert tzid.formatted() == ";TZID=Europe/Berlin"
        assert tzid.zone.key == "Europe/Berlin"

    def test_tzinfo_is_reduced_to_its_key(self, berlin):
        assert TimeZoneIdentifier(berlin).tzid == "Europe/Berlin"

    def test_utc_offset_identifier(self):
        tzid = TimeZoneIdentifier("UTC+05:30")
        assert tzid.tzid == "UTC+05:30"
        assert tzid.zone.utcoffset(None) == timedelta(hours=5, minutes=30)

    def test_fixed_offset_tzinfo(self):
        zone = timezone(timedelta(hours=-3), "BRT")
        assert TimeZoneIdentifier(zone).tzid == "BRT"

    def test_unknown_zone(self):
        with pytest.raises(ICalendarTimeZoneError):
            TimeZoneIdentifier("Mars/Olympus_Mons")


def test_enum_tokens():
    assert CalendarUserType.INDIVIDUAL.formatted() == ";CUTYPE=INDIVIDUAL"
    assert ParticipationStatus.IN_PROCESS.formatted() == ";PARTSTAT=IN-PROCESS"
    assert ValueDataType.DATE_TIME.formatted() == ";VALUE=DATE-TIME"
    assert InlineEncoding.EIGHT_BIT.formatted() == ";ENCODING=8BIT"
    assert RecurrenceIdentifierRange.THIS_AND_FUTURE.formatted() == ";RANGE=THISANDFUTURE"


def test_participation_status_by_component():
    assert ParticipationStatus.IN_PROCESS.is_todo_status()
    assert not ParticipationStatus.IN_PROCESS.is_event_status()
    assert ParticipationStatus.TENTATIVE.is_event_status()
    assert not ParticipationStatus.TENTATIVE.is_journal_status()
    assert ParticipationStatus.ACCEPTED.is_journal_status()


def test_as_parameter_coerces_raw_tokens():
    assert as_parameter("date", ValueDataType) is ValueDataType.DATE
    assert as_parameter(None, ValueDataType) is None
    with pytest.raises(ICalendarValidationError, match="Unknown ValueDataType"):
        as_parameter("CALENDAR", ValueDataType)


def test_custom_parameter():
    assert CustomParameter("x-foo", "bar").formatted() == ";X-FOO=bar"
    assert CustomParameter("X-NOTE", "a;b").formatted() == ';X-NOTE="a;b"'
    with pytest.raises(ICalendarValidationError):
        CustomParameter("bad name", "x")
