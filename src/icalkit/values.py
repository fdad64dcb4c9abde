"""Primitive iCalendar value types and their RFC 5545 encodings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from .constants import (
    RECUR_LIMITS,
    SIGNED_RECUR_PARTS,
    UTC_OFFSET_LIMITS,
    WEEKDAY_CODES,
    WEEKDAY_ORDINAL_MAX,
)
from .formatters import format_date, format_duration_token, format_utc_timestamp, to_utc
from .validators import collect, fail, validate_datetime


@dataclass(frozen=True)
class UtcOffset:
    """A ``(+|-)HHMM[SS]`` offset from UTC.

    ``-0000`` and ``-000000`` are rejected: RFC 5545 reserves the negative zero
    offset, so the zero offset is always written ``+0000``.
    """

    sign: str
    hour: int
    minute: int
    second: Optional[int] = None

    def __post_init__(self) -> None:
        if self.sign not in ("+", "-"):
            raise fail("Sign must be '+' or '-'", field="sign", value=self.sign)
        for name, value in (("hour", self.hour), ("minute", self.minute), ("second", self.second)):
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise fail(f"{name.capitalize()} must be an integer", field=name, value=value)
        if self.sign == "-" and self.hour == 0 and self.minute == 0 and not self.second:
            raise fail('The value of "-0000" and "-000000" are not allowed', field="sign", value=self.sign)
        if not 0 <= self.hour <= UTC_OFFSET_LIMITS["HOUR_MAX"]:
            raise fail("Hour MUST be between 0 and 12", field="hour", value=self.hour)
        if not 0 <= self.minute <= UTC_OFFSET_LIMITS["MINUTE_MAX"]:
            raise fail("Minute MUST be between 0 and 59", field="minute", value=self.minute)
        if self.second is not None and not 0 <= self.second <= UTC_OFFSET_LIMITS["SECOND_MAX"]:
            raise fail("Second MUST be between 0 and 59", field="second", value=self.second)

    @classmethod
    def of_positive(cls, hour: int, minute: int, second: Optional[int] = None) -> UtcOffset:
        return cls("+", hour, minute, second)

    @classmethod
    def of_negative(cls, hour: int, minute: int, second: Optional[int] = None) -> UtcOffset:
        return cls("-", hour, minute, second)

    @classmethod
    def from_timedelta(cls, offset: timedelta) -> UtcOffset:
        total = int(offset.total_seconds())
        sign = "-" if total < 0 else "+"
        hours, remainder = divmod(abs(total), 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(sign, hours, minutes, seconds or None)

    def to_timedelta(self) -> timedelta:
        value = timedelta(hours=self.hour, minutes=self.minute, seconds=self.second or 0)
        return -value if self.sign == "-" else value

    def formatted(self) -> str:
        text = f"{self.sign}{self.hour:02d}{self.minute:02d}"
        if self.second is not None:
            text += f"{self.second:02d}"
        return text


@dataclass(frozen=True)
class Duration:
    """A nominal/exact duration: either weeks alone, or days and a time part."""

    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        parts = {
            "weeks": self.weeks,
            "days": self.days,
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
        }
        for name, value in parts.items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise fail("Duration parts must be non-negative integers", field=name, value=value)
        if self.weeks and (self.days or self.hours or self.minutes or self.seconds):
            raise fail("A week duration cannot be combined with other parts", field="weeks", value=self.weeks)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        negative = value < timedelta(0)
        if negative:
            value = -value
        hours, remainder = divmod(value.seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(days=value.days, hours=hours, minutes=minutes, seconds=seconds, negative=negative)

    def to_timedelta(self) -> timedelta:
        value = timedelta(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )
        return -value if self.negative else value

    def formatted(self) -> str:
        return format_duration_token(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            negative=self.negative,
        )


DurationLike = Union[Duration, timedelta]


def as_duration(value: DurationLike, field_name: str = "duration") -> Duration:
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    raise fail("Duration must be a Duration or timedelta", field=field_name, value=value)


@dataclass(frozen=True)
class PeriodOfTime:
    """A PERIOD value: ``start/end`` or ``start/duration``, both in UTC form."""

    start: datetime
    end: Optional[datetime] = None
    duration: Optional[Duration] = None

    def __post_init__(self) -> None:
        validate_datetime(self.start, "start")
        if (self.end is None) == (self.duration is None):
            raise fail("A period needs exactly one of end or duration", field="end")
        if self.end is not None:
            validate_datetime(self.end, "end")
            if to_utc(self.end) <= to_utc(self.start):
                raise fail("Period end must be after its start", field="end", value=self.end)
        if self.duration is not None:
            duration = as_duration(self.duration)
            if duration.negative:
                raise fail("Period duration must be positive", field="duration", value=duration)
            object.__setattr__(self, "duration", duration)

    @classmethod
    def of_explicit(cls, start: datetime, end: datetime) -> PeriodOfTime:
        return cls(start=start, end=end)

    @classmethod
    def of_start(cls, start: datetime, duration: DurationLike) -> PeriodOfTime:
        return cls(start=start, duration=as_duration(duration))

    def formatted(self) -> str:
        if self.end is not None:
            return f"{format_utc_timestamp(self.start)}/{format_utc_timestamp(self.end)}"
        return f"{format_utc_timestamp(self.start)}/{self.duration.formatted()}"


@dataclass(frozen=True)
class FreeBusyTimeValue(PeriodOfTime):
    """One busy or free interval carried by a FREEBUSY property."""

    @classmethod
    def of(cls, start: datetime, end_or_duration: Union[datetime, DurationLike]) -> FreeBusyTimeValue:
        if isinstance(end_or_duration, datetime):
            return cls(start=start, end=end_or_duration)
        return cls(start=start, duration=as_duration(end_or_duration))


class Weekday(Enum):
    MONDAY = "MO"
    TUESDAY = "TU"
    WEDNESDAY = "WE"
    THURSDAY = "TH"
    FRIDAY = "FR"
    SATURDAY = "SA"
    SUNDAY = "SU"

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        """Map ``date.weekday()`` numbering (Monday is 0) to a weekday."""
        return cls(WEEKDAY_CODES[index])

    @classmethod
    def of(cls, value: date) -> Weekday:
        return cls.from_index(value.weekday())

    def formatted(self) -> str:
        return self.value


@dataclass(frozen=True)
class WeekdayNum:
    """A BYDAY entry such as ``MO``, ``+2TU`` or ``-1FR``."""

    weekday: Weekday
    ordinal: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.weekday, Weekday):
            raise fail("Weekday must be a Weekday", field="weekday", value=self.weekday)
        if self.ordinal is not None:
            if isinstance(self.ordinal, bool) or not isinstance(self.ordinal, int):
                raise fail("Weekday ordinal must be an integer", field="ordinal", value=self.ordinal)
            if self.ordinal == 0 or abs(self.ordinal) > WEEKDAY_ORDINAL_MAX:
                raise fail(
                    "Weekday ordinal must be between -53 and 53 (excluding 0)",
                    field="ordinal",
                    value=self.ordinal,
                )

    @classmethod
    def of(cls, weekday: Weekday, ordinal: Optional[int] = None) -> WeekdayNum:
        return cls(weekday, ordinal)

    def formatted(self) -> str:
        if self.ordinal is None:
            return self.weekday.value
        return f"{self.ordinal:+d}{self.weekday.value}"


class Frequency(Enum):
    SECONDLY = "SECONDLY"
    MINUTELY = "MINUTELY"
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    def formatted(self) -> str:
        return self.value


def _check_rule_part(part: str, values: tuple[int, ...]) -> tuple[int, ...]:
    low, high = RECUR_LIMITS[part]
    signed = part in SIGNED_RECUR_PARTS
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise fail(f"{part} values must be integers", field=part.lower(), value=value)
        magnitude = abs(value) if signed else value
        if magnitude < low or magnitude > high or (not signed and value < 0):
            bounds = f"{low} and {high}" if not signed else f"-{high} and {high} (excluding 0)"
            raise fail(f"{part} values must be between {bounds}", field=part.lower(), value=value)
    return values


@dataclass(frozen=True)
class Recur:
    """A RECUR value as carried by RRULE.

    Only the structural shape is checked: a frequency is present, UNTIL and
    COUNT are not both given, and every BYxxx entry is inside its RFC range.
    """

    frequency: Frequency
    until: Optional[date] = None
    count: Optional[int] = None
    interval: Optional[int] = None
    by_second: tuple[int, ...] = field(default_factory=tuple)
    by_minute: tuple[int, ...] = field(default_factory=tuple)
    by_hour: tuple[int, ...] = field(default_factory=tuple)
    by_day: tuple[WeekdayNum, ...] = field(default_factory=tuple)
    by_month_day: tuple[int, ...] = field(default_factory=tuple)
    by_year_day: tuple[int, ...] = field(default_factory=tuple)
    by_week_no: tuple[int, ...] = field(default_factory=tuple)
    by_month: tuple[int, ...] = field(default_factory=tuple)
    by_set_pos: tuple[int, ...] = field(default_factory=tuple)
    week_start: Optional[Weekday] = None

    def __post_init__(self) -> None:
        if not isinstance(self.frequency, Frequency):
            raise fail("Recurrence frequency is required", field="freq", value=self.frequency)
        if self.until is not None and self.count is not None:
            raise fail("UNTIL and COUNT must not both be set", field="until")
        if self.until is not None and not isinstance(self.until, date):
            raise fail("UNTIL must be a date or datetime", field="until", value=self.until)
        for name, value in (("count", self.count), ("interval", self.interval)):
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
                raise fail(f"{name.upper()} must be a positive integer", field=name, value=value)
        parts = {
            "by_second": "BYSECOND",
            "by_minute": "BYMINUTE",
            "by_hour": "BYHOUR",
            "by_month_day": "BYMONTHDAY",
            "by_year_day": "BYYEARDAY",
            "by_week_no": "BYWEEKNO",
            "by_month": "BYMONTH",
            "by_set_pos": "BYSETPOS",
        }
        for attr, part in parts.items():
            object.__setattr__(self, attr, _check_rule_part(part, collect(tuple(getattr(self, attr)))))
        by_day = collect(tuple(self.by_day))
        for entry in by_day:
            if not isinstance(entry, WeekdayNum):
                raise fail("BYDAY values must be WeekdayNum entries", field="by_day", value=entry)
        object.__setattr__(self, "by_day", by_day)
        if self.week_start is not None and not isinstance(self.week_start, Weekday):
            raise fail("WKST must be a Weekday", field="week_start", value=self.week_start)

    @classmethod
    def builder(cls) -> RecurBuilder:
        return RecurBuilder()

    def formatted(self) -> str:
        parts = [f"FREQ={self.frequency.value}"]
        if self.until is not None:
            until = format_utc_timestamp(self.until) if isinstance(self.until, datetime) else format_date(self.until)
            parts.append(f"UNTIL={until}")
        if self.count is not None:
            parts.append(f"COUNT={self.count}")
        if self.interval is not None:
            parts.append(f"INTERVAL={self.interval}")
        for name, values in (
            ("BYSECOND", self.by_second),
            ("BYMINUTE", self.by_minute),
            ("BYHOUR", self.by_hour),
        ):
            if values:
                parts.append(f"{name}={','.join(str(value) for value in values)}")
        if self.by_day:
            parts.append(f"BYDAY={','.join(entry.formatted() for entry in self.by_day)}")
        for name, values in (
            ("BYMONTHDAY", self.by_month_day),
            ("BYYEARDAY", self.by_year_day),
            ("BYWEEKNO", self.by_week_no),
            ("BYMONTH", self.by_month),
            ("BYSETPOS", self.by_set_pos),
        ):
            if values:
                parts.append(f"{name}={','.join(str(value) for value in values)}")
        if self.week_start is not None:
            parts.append(f"WKST={self.week_start.value}")
        return ";".join(parts)


class RecurBuilder:
    def __init__(self) -> None:
        self._fields: dict[str, object] = {}

    def _set(self, name: str, value: object) -> RecurBuilder:
        self._fields[name] = value
        return self

    def with_frequency(self, frequency: Frequency) -> RecurBuilder:
        return self._set("frequency", frequency)

    def with_until(self, until: date) -> RecurBuilder:
        return self._set("until", until)

    def with_count(self, count: int) -> RecurBuilder:
        return self._set("count", count)

    def with_interval(self, interval: int) -> RecurBuilder:
        return self._set("interval", interval)

    def with_by_second(self, *seconds: int) -> RecurBuilder:
        return self._set("by_second", collect(seconds))

    def with_by_minute(self, *minutes: int) -> RecurBuilder:
        return self._set("by_minute", collect(minutes))

    def with_by_hour(self, *hours: int) -> RecurBuilder:
        return self._set("by_hour", collect(hours))

    def with_by_day(self, *days: WeekdayNum) -> RecurBuilder:
        return self._set("by_day", collect(days))

    def with_by_month_day(self, *month_days: int) -> RecurBuilder:
        return self._set("by_month_day", collect(month_days))

    def with_by_year_day(self, *year_days: int) -> RecurBuilder:
        return self._set("by_year_day", collect(year_days))

    def with_by_week_no(self, *weeks: int) -> RecurBuilder:
        return self._set("by_week_no", collect(weeks))

    def with_by_month(self, *months: int) -> RecurBuilder:
        return self._set("by_month", collect(months))

    def with_by_set_pos(self, *positions: int) -> RecurBuilder:
        return self._set("by_set_pos", collect(positions))

    def with_week_start(self, week_start: Weekday) -> RecurBuilder:
        return self._set("week_start", week_start)

    def build(self) -> Recur:
        if self._fields.get("frequency") is None:
            raise fail("Recurrence frequency is required", field="freq")
        return Recur(**self._fields)
