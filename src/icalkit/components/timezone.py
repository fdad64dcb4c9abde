"""VTIMEZONE component and its STANDARD/DAYLIGHT observances (RFC 5545 section 3.6.5)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Optional

from ..composer import ComponentComposer
from ..parameters import ValueDataType
from ..properties import (
    Comment,
    DateTimeStart,
    LastModified,
    RecurrenceDateTimes,
    RecurrenceRule,
    TimeZoneIdentifier,
    TimeZoneName,
    TimeZoneOffsetFrom,
    TimeZoneOffsetTo,
    TimeZoneUrl,
)
from ..validators import fail
from .base import CalendarComponent, ComponentBuilder, require_property


class TimeZonePropertyBuilder(ComponentBuilder["TimeZoneProperty"]):
    def with_date_time_start(self, value: Any) -> TimeZonePropertyBuilder:
        return self._set("date_time_start", value)

    def with_time_zone_offset_to(self, value: Any) -> TimeZonePropertyBuilder:
        return self._set("offset_to", value)

    def with_time_zone_offset_from(self, value: Any) -> TimeZonePropertyBuilder:
        return self._set("offset_from", value)

    def with_recurrence_rule(self, value: Any) -> TimeZonePropertyBuilder:
        return self._set("recurrence_rule", value)

    def with_comments(self, *values: Any) -> TimeZonePropertyBuilder:
        return self._extend("comments", values)

    def with_recurrence_date_times(self, *values: Any) -> TimeZonePropertyBuilder:
        return self._extend("recurrence_dates", values)

    def with_time_zone_names(self, *values: Any) -> TimeZonePropertyBuilder:
        return self._extend("tz_names", values)

    def build(self) -> TimeZoneProperty:
        raise fail("An observance is built with build_as_standard() or build_as_daylight()", field="observance")

    def build_as_standard(self) -> Standard:
        self._target = Standard
        return super().build()

    def build_as_daylight(self) -> Daylight:
        self._target = Daylight
        return super().build()


def _local_time(prop: Any, name: str) -> Any:
    if prop.time_zone is not None:
        raise fail(f"{name} in an observance is local time and cannot carry a TZID", field=name.lower())
    return replace(prop, floating=True)


@dataclass(frozen=True)
class TimeZoneProperty(CalendarComponent):
    """One STANDARD or DAYLIGHT block.

    DTSTART and RDATE are always written as local time of the onset, the way
    RFC 5545 requires inside VTIMEZONE.
    """

    Builder: ClassVar[type] = TimeZonePropertyBuilder

    date_time_start: Optional[DateTimeStart] = None
    offset_to: Optional[TimeZoneOffsetTo] = None
    offset_from: Optional[TimeZoneOffsetFrom] = None
    recurrence_rule: Optional[RecurrenceRule] = None
    comments: tuple[Comment, ...] = ()
    recurrence_dates: tuple[RecurrenceDateTimes, ...] = ()
    tz_names: tuple[TimeZoneName, ...] = ()

    def __post_init__(self) -> None:
        self._coerce("date_time_start", DateTimeStart)
        self._coerce("offset_to", TimeZoneOffsetTo)
        self._coerce("offset_from", TimeZoneOffsetFrom)
        self._coerce("recurrence_rule", RecurrenceRule)
        self._coerce_all("comments", Comment)
        self._coerce_all("recurrence_dates", RecurrenceDateTimes)
        self._coerce_all("tz_names", TimeZoneName)

        require_property(self.date_time_start, "dtstart")
        require_property(self.offset_to, "tzoffsetto")
        require_property(self.offset_from, "tzoffsetfrom")
        if self.date_time_start.is_date:
            raise fail("DTSTART in an observance must be a date-time", field="dtstart")
        for rdate in self.recurrence_dates:
            if rdate.value_data_type not in (None, ValueDataType.DATE_TIME):
                raise fail(
                    f"RDATE in an observance takes local DATE-TIME values, not {rdate.value_data_type.value}",
                    field="rdate",
                    value=rdate.value_data_type.value,
                )
        object.__setattr__(self, "date_time_start", _local_time(self.date_time_start, "DTSTART"))
        object.__setattr__(
            self, "recurrence_dates", tuple(_local_time(rdate, "RDATE") for rdate in self.recurrence_dates)
        )

    def formatted(self) -> str:
        return (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.date_time_start)
            .append(self.offset_to)
            .append(self.offset_from)
            .append(self.recurrence_rule)
            .extend(self.comments)
            .extend(self.recurrence_dates)
            .extend(self.tz_names)
            .end()
        )


@dataclass(frozen=True)
class Standard(TimeZoneProperty):
    component_name: ClassVar[str] = "STANDARD"


@dataclass(frozen=True)
class Daylight(TimeZoneProperty):
    component_name: ClassVar[str] = "DAYLIGHT"


class TimeZoneBuilder(ComponentBuilder["TimeZone"]):
    def with_time_zone_identifier(self, value: Any) -> TimeZoneBuilder:
        return self._set("tz_id", value)

    def with_last_modified(self, value: Any) -> TimeZoneBuilder:
        return self._set("last_modified", value)

    def with_time_zone_url(self, value: Any) -> TimeZoneBuilder:
        return self._set("tz_url", value)

    def with_observances(self, *observances: TimeZoneProperty) -> TimeZoneBuilder:
        return self._extend("observances", observances)

    def with_standard(self, *observances: Standard) -> TimeZoneBuilder:
        return self.with_observances(*observances)

    def with_daylight(self, *observances: Daylight) -> TimeZoneBuilder:
        return self.with_observances(*observances)


@dataclass(frozen=True)
class TimeZone(CalendarComponent):
    """A VTIMEZONE with its TZID and at least one observance, kept in the given order."""

    component_name: ClassVar[str] = "VTIMEZONE"
    Builder: ClassVar[type] = TimeZoneBuilder

    tz_id: Optional[TimeZoneIdentifier] = None
    last_modified: Optional[LastModified] = None
    tz_url: Optional[TimeZoneUrl] = None
    observances: tuple[TimeZoneProperty, ...] = ()

    def __post_init__(self) -> None:
        self._coerce("tz_id", TimeZoneIdentifier)
        self._coerce("last_modified", LastModified)
        self._coerce("tz_url", TimeZoneUrl)
        object.__setattr__(self, "observances", tuple(self.observances or ()))

        require_property(self.tz_id, "tzid")
        if not self.observances:
            raise fail("A VTIMEZONE needs at least one STANDARD or DAYLIGHT observance.", field="observances")
        for observance in self.observances:
            if not isinstance(observance, (Standard, Daylight)):
                raise fail("VTIMEZONE observances must be STANDARD or DAYLIGHT blocks", field="observances")

    def formatted(self) -> str:
        return (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.tz_id)
            .append(self.last_modified)
            .append(self.tz_url)
            .nest(self.observances)
            .end()
        )
