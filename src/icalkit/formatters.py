"""Value formatters producing RFC 5545 text tokens."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal
from typing import Optional

from .constants import CRLF, FOLD_PREFIX, MAX_LINE_OCTETS

logger = logging.getLogger(__name__)

_PARAMETER_SPECIALS = (":", ";", ",")


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_zone(value: datetime, zone: tzinfo) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def _date_token(value: date) -> str:
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def _time_token(value: datetime) -> str:
    return f"{value.hour:02d}{value.minute:02d}{value.second:02d}"


def format_date(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return _date_token(value)


def format_utc_timestamp(value: date) -> str:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    value = to_utc(value)
    return f"{_date_token(value)}T{_time_token(value)}Z"


def format_local_timestamp(value: date, zone: tzinfo) -> str:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    value = to_zone(value, zone)
    return f"{_date_token(value)}T{_time_token(value)}"


def format_floating_timestamp(value: date) -> str:
    """Wall-clock time with neither a UTC designator nor a zone conversion."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return f"{_date_token(value)}T{_time_token(value)}"


def format_timestamp(value: date, value_type: Optional[str] = None, zone: Optional[tzinfo] = None) -> str:
    """Render a DATE or DATE-TIME value.

    ``value_type`` is the VALUE parameter token (``"DATE"``/``"DATE-TIME"``) or
    ``None``. A DATE request emits only the date portion (taken in ``zone``
    when one is given); otherwise a zone selects the local form interpreted
    through TZID, and no zone selects the UTC form.
    """
    is_date = value_type == "DATE" or (value_type is None and not isinstance(value, datetime))
    if is_date:
        if isinstance(value, datetime) and zone is not None and value.tzinfo is not None:
            value = value.astimezone(zone)
        return format_date(value)
    if zone is not None:
        return format_local_timestamp(value, zone)
    return format_utc_timestamp(value)


def format_duration_token(
    weeks: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    negative: bool = False,
) -> str:
    sign = "-" if negative else ""
    if weeks:
        return f"{sign}P{weeks}W"
    date_part = f"{days}D" if days else ""
    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes or (hours and seconds):
        time_part += f"{minutes}M"
    if seconds:
        time_part += f"{seconds}S"
    if not date_part and not time_part:
        return f"{sign}PT0S"
    if time_part:
        return f"{sign}P{date_part}T{time_part}"
    return f"{sign}P{date_part}"


def escape_text(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\r", "\\n")
        .replace("\n", "\\n")
    )


def format_parameter_value(value: str, always_quote: bool = False) -> str:
    # RFC 6868 caret encoding for characters a param-value cannot carry.
    encoded = (
        value.replace("^", "^^")
        .replace('"', "^'")
        .replace("\r\n", "^n")
        .replace("\r", "^n")
        .replace("\n", "^n")
    )
    if always_quote or any(ch in encoded for ch in _PARAMETER_SPECIALS):
        return f'"{encoded}"'
    return encoded


def format_float(value: float) -> str:
    # Exponent notation is not a valid FLOAT token.
    return format(Decimal(repr(float(value))), "f")


def fold_line(line: str, limit: int = MAX_LINE_OCTETS) -> str:
    """Fold a content line at ``limit`` octets without splitting a character."""
    if len(line.encode("utf-8")) <= limit:
        return line

    segments: list[str] = []
    current: list[str] = []
    size = 0
    capacity = limit
    for ch in line:
        width = len(ch.encode("utf-8"))
        if size + width > capacity and current:
            segments.append("".join(current))
            current = []
            size = 0
            capacity = limit - len(FOLD_PREFIX)
        current.append(ch)
        size += width
    if current:
        segments.append("".join(current))

    logger.debug("Folded %d-octet line into %d segments", len(line.encode("utf-8")), len(segments))
    return (CRLF + FOLD_PREFIX).join(segments)


def unfold_lines(text: str) -> str:
    return text.replace(CRLF + FOLD_PREFIX, "")
