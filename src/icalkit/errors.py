"""Error types for iCalendar object construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ICalendarError(Exception):
    message: str
    code: str = "ICALENDAR_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ICalendarValidationError(ICalendarError, ValueError):
    def __init__(self, message: str, field: str | None = None, value: Any | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details={"field": field, "value": value})
        self.field = field
        self.value = value


class ICalendarTimeZoneError(ICalendarValidationError):
    def __init__(self, message: str, tzid: str | None = None) -> None:
        super().__init__(message, field="tzid", value=tzid)
        self.code = "TIMEZONE_ERROR"
        self.tzid = tzid


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, ICalendarTimeZoneError):
        return f"Time Zone Error: {error.message}"
    if isinstance(error, ICalendarValidationError):
        return f"Validation Error: {error.message}"
    if isinstance(error, ICalendarError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
