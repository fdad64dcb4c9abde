"""Validation helpers shared by iCalendar builders."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any, Optional
from urllib.parse import urlparse

from .errors import ICalendarValidationError

logger = logging.getLogger(__name__)

_IANA_TOKEN_RE = re.compile(r"^[A-Za-z0-9-]+$")
_LANGUAGE_TAG_RE = re.compile(r"^[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*$")
_MEDIA_TYPE_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]*/[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]*(;.*)?$")


def fail(message: str, field: str | None = None, value: Any | None = None) -> ICalendarValidationError:
    logger.debug("Rejected %s: %s", field or "value", message)
    return ICalendarValidationError(message, field=field, value=value)


def validate_not_blank(value: Optional[str], message: str, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise fail(message, field=field, value=value)
    return value


def validate_range(value: int, low: int, high: int, message: str, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise fail(message, field=field, value=value)
    if value < low or value > high:
        raise fail(message, field=field, value=value)
    return value


def validate_non_negative(value: int, message: str, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise fail(message, field=field, value=value)
    return value


def validate_uri(value: Optional[str], field: str) -> str:
    if value is None:
        raise fail("URI is required", field=field)
    value = str(value).strip()
    if not value:
        raise fail("URI must not be blank", field=field, value=value)
    if any(ch.isspace() for ch in value):
        raise fail("URI must not contain whitespace", field=field, value=value)
    parsed = urlparse(value)
    if not parsed.scheme:
        raise fail("URI must have a scheme", field=field, value=value)
    return value


def validate_uri_scheme(value: str, scheme: str, message: str, field: str) -> str:
    value = str(value).strip()
    if any(ch.isspace() for ch in value):
        raise fail("URI must not contain whitespace", field=field, value=value)
    parsed = urlparse(value)
    if parsed.scheme and parsed.scheme.lower() != scheme:
        raise fail(message, field=field, value=value)
    return value


def validate_language_tag(value: str) -> str:
    value = (value or "").strip()
    if not _LANGUAGE_TAG_RE.match(value):
        raise fail("Language must be a language tag such as en or en-US", field="language", value=value)
    return value


def validate_media_type(value: Optional[str]) -> str:
    if not value:
        raise fail("Media type cannot be empty", field="fmttype", value=value)
    if not _MEDIA_TYPE_RE.match(value):
        raise fail("Media type must look like type/subtype", field="fmttype", value=value)
    return value


def validate_property_name(value: Optional[str]) -> str:
    if not value or not _IANA_TOKEN_RE.match(value):
        raise fail("Property name must be an X- or IANA token", field="name", value=value)
    return value.upper()


def validate_value_data_type(value_data_type: Any, allowed: Iterable[Any], property_name: str) -> None:
    if value_data_type is None:
        return
    allowed = tuple(allowed)
    if value_data_type not in allowed:
        names = ", ".join(item.value for item in allowed)
        raise fail(
            f"Value Type accepts {names} in property `{property_name}`",
            field="value",
            value=value_data_type,
        )


def validate_timestamp(value: Any, field: str) -> date | datetime:
    if not isinstance(value, date):
        raise fail("Value must be a date or datetime", field=field, value=value)
    return value


def validate_datetime(value: Any, field: str) -> datetime:
    if not isinstance(value, datetime):
        raise fail("Value must be a datetime", field=field, value=value)
    return value


def collect(items: tuple[Any, ...]) -> tuple[Any, ...]:
    """Flatten builder varargs, so ``with_x(a, b)`` and ``with_x([a, b])`` agree."""
    if len(items) == 1 and isinstance(items[0], (list, tuple)):
        items = tuple(items[0])
    return tuple(item for item in items if item is not None)
