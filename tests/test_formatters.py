"""Tests for value formatters and line folding."""

from datetime import date, datetime, timezone

import pytest

from icalkit.constants import CRLF, MAX_LINE_OCTETS
from icalkit.formatters import (
    escape_text,
    fold_line,
    format_duration_token,
    format_parameter_value,
    format_timestamp,
    unfold_lines,
)


def _physical_lines(folded):
    return folded.split(CRLF)


@pytest.mark.parametrize("length", [1, 74, 75, 76, 150, 151, 500])
def test_fold_round_trip_ascii(length):
    line = "X" * length
    folded = fold_line(line)

    assert unfold_lines(folded) == line
    for physical in _physical_lines(folded):
        assert len(physical.encode("utf-8")) <= MAX_LINE_OCTETS


def test_fold_leaves_short_lines_alone():
    line = "S" * 75
    assert fold_line(line) == line


def test_fold_splits_at_75_octets():
    line = "A" * 76
    assert fold_line(line) == "A" * 75 + "\r\n " + "A"


def test_continuation_lines_start_with_single_space():
    folded = fold_line("B" * 200)
    first, *rest = _physical_lines(folded)

    assert len(first) == 75
    assert rest
    for physical in rest:
        assert physical.startswith(" ")
        assert not physical.startswith("  ")


@pytest.mark.parametrize("char", ["é", "€", "😀", "日"])
def test_fold_never_splits_multibyte_characters(char):
    line = "SUMMARY:" + char * 60
    folded = fold_line(line)

    assert unfold_lines(folded) == line
    for physical in _physical_lines(folded):
        encoded = physical.encode("utf-8")
        assert len(encoded) <= MAX_LINE_OCTETS
        encoded.decode("utf-8")


def test_fold_counts_octets_not_characters():
    # 40 two-octet characters are 80 octets even though the text is 48 characters long
    line = "SUMMARY:" + "é" * 40
    assert len(line) < MAX_LINE_OCTETS
    assert CRLF in fold_line(line)


def test_escape_text():
    assert escape_text("a;b,c\\d\ne") == "a\\;b\\,c\\\\d\\ne"
    assert escape_text("line\r\nbreak") == "line\\nbreak"
    assert escape_text("plain text") == "plain text"


def test_parameter_value_quoting():
    assert format_parameter_value("Jane Doe") == "Jane Doe"
    assert format_parameter_value("Doe, Jane") == '"Doe, Jane"'
    assert format_parameter_value("mailto:a@example.com") == '"mailto:a@example.com"'
    assert format_parameter_value("x", always_quote=True) == '"x"'


def test_parameter_value_caret_encoding():
    assert format_parameter_value('The "Boss"') == "The ^'Boss^'"
    assert format_parameter_value("line\nbreak") == "line^nbreak"
    assert format_parameter_value("a^b") == "a^^b"


def test_timestamp_forms(berlin):
    instant = datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc)

    assert format_timestamp(instant) == "20240115T083000Z"
    assert format_timestamp(instant, "DATE-TIME", berlin) == "20240115T093000"
    assert format_timestamp(instant, "DATE") == "20240115"
    assert format_timestamp(date(2024, 1, 15)) == "20240115"


def test_naive_datetime_is_utc_without_zone():
    assert format_timestamp(datetime(2024, 6, 1, 7, 5, 9)) == "20240601T070509Z"


@pytest.mark.parametrize(
    "parts, expected",
    [
        ({"hours": 1, "minutes": 30}, "PT1H30M"),
        ({"weeks": 2}, "P2W"),
        ({"days": 1, "hours": 2}, "P1DT2H"),
        ({"days": 3}, "P3D"),
        ({"minutes": 15, "negative": True}, "-PT15M"),
        ({"hours": 1, "seconds": 5}, "PT1H0M5S"),
        ({}, "PT0S"),
    ],
)
def test_duration_token(parts, expected):
    assert format_duration_token(**parts) == expected
