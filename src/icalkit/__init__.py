"""Typed iCalendar (RFC 5545) objects that format themselves as text."""

__version__ = "0.1.0"

from .calendar import Calendar
from .components import Alarm, Daylight, Event, FreeBusy, Journal, Standard, TimeZone, TimeZoneProperty, Todo
from .config import ICalConfig, load_config
from .errors import ICalendarError, ICalendarTimeZoneError, ICalendarValidationError, format_error_for_user
from .formatters import fold_line, unfold_lines
from .values import (
    Duration,
    FreeBusyTimeValue,
    Frequency,
    PeriodOfTime,
    Recur,
    UtcOffset,
    Weekday,
    WeekdayNum,
)

__all__ = [
    "__version__",
    "Calendar",
    "Alarm",
    "Event",
    "FreeBusy",
    "Journal",
    "TimeZone",
    "TimeZoneProperty",
    "Standard",
    "Daylight",
    "Todo",
    "ICalConfig",
    "load_config",
    "ICalendarError",
    "ICalendarTimeZoneError",
    "ICalendarValidationError",
    "format_error_for_user",
    "fold_line",
    "unfold_lines",
    "Duration",
    "FreeBusyTimeValue",
    "Frequency",
    "PeriodOfTime",
    "Recur",
    "UtcOffset",
    "Weekday",
    "WeekdayNum",
]
