"""Tests for configuration and error reporting."""

from datetime import timedelta

import pytest

from icalkit.config import default_prod_id, load_config, resolve_timezone
from icalkit.errors import (
    ICalendarError,
    ICalendarTimeZoneError,
    ICalendarValidationError,
    format_error_for_user,
)
from icalkit.values import UtcOffset


def test_load_config_defaults():
    assert load_config().prod_id == default_prod_id() == "-//icalkit//icalkit 0.1.0//EN"


def test_load_config_from_environment(monkeypatch):
    monkeypatch.setenv("ICALKIT_PRODID", "  -//Acme//Export//EN  ")
    assert load_config().prod_id == "-//Acme//Export//EN"


def test_blank_environment_value_falls_back(monkeypatch):
    monkeypatch.setenv("ICALKIT_PRODID", "   ")
    assert load_config().prod_id == default_prod_id()


def test_resolve_iana_zone():
    zone, tzid = resolve_timezone("America/New_York")
    assert tzid == "America/New_York"
    assert zone.key == "America/New_York"


def test_resolve_offset_zone():
    zone, tzid = resolve_timezone("UTC-03:00")
    assert tzid == "UTC-03:00"
    assert zone.utcoffset(None) == timedelta(hours=-3)


@pytest.mark.parametrize("tzid", ["", "Nowhere/Special", "UTC+5"])
def test_resolve_rejects_unknown(tzid):
    with pytest.raises(ICalendarTimeZoneError):
        resolve_timezone(tzid)


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError) as exc_info:
        UtcOffset.of_negative(0, 0)

    error = exc_info.value
    assert isinstance(error, ICalendarValidationError)
    assert error.code == "VALIDATION_ERROR"
    assert error.field == "sign"
    assert error.details == {"field": "sign", "value": "-"}


def test_format_error_for_user():
    assert format_error_for_user(ICalendarValidationError("bad value")) == "Validation Error: bad value"
    assert format_error_for_user(ICalendarTimeZoneError("no zone", tzid="X")) == "Time Zone Error: no zone"
    assert format_error_for_user(ICalendarError("boom")) == "Error: boom"
    assert format_error_for_user(RuntimeError("other")) == "Error: other"


def test_time_zone_error_code():
    error = ICalendarTimeZoneError("no zone", tzid="Mars/Base")
    assert error.code == "TIMEZONE_ERROR"
    assert error.tzid == "Mars/Base"
    assert str(error) == "no zone"
