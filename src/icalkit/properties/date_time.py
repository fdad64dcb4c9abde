"""Date and time component properties (RFC 5545 section 3.8.2)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..parameters import FreeBusyTimeType
from ..validators import collect, fail
from ..values import Duration, FreeBusyTimeValue, PeriodOfTime, as_duration
from .base import ComponentProperty, DateTimeProperty, EnumProperty, PropertyBuilder, UtcTimestampProperty


@dataclass(frozen=True)
class DateTimeCompleted(UtcTimestampProperty):
    property_name: ClassVar[str] = "COMPLETED"


@dataclass(frozen=True)
class DateTimeEnd(DateTimeProperty):
    property_name: ClassVar[str] = "DTEND"


@dataclass(frozen=True)
class DateTimeDue(DateTimeProperty):
    property_name: ClassVar[str] = "DUE"


@dataclass(frozen=True)
class DateTimeStart(DateTimeProperty):
    property_name: ClassVar[str] = "DTSTART"


@dataclass(frozen=True)
class DurationProperty(ComponentProperty):
    """DURATION. Negative lengths are rejected here; TRIGGER carries those."""

    property_name: ClassVar[str] = "DURATION"

    value: Duration

    def __post_init__(self) -> None:
        value = as_duration(self.value)
        if value.negative:
            raise fail("DURATION must not be negative", field="duration", value=value)
        object.__setattr__(self, "value", value)

    def to_timedelta(self) -> timedelta:
        return self.value.to_timedelta()

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value.formatted())


class FreeBusyTimeBuilder(PropertyBuilder["FreeBusyTime"]):
    def with_free_busy_time_type(self, time_type: Union[FreeBusyTimeType, str]) -> FreeBusyTimeBuilder:
        return self._set("time_type", time_type)

    def build(self, *periods: PeriodOfTime) -> FreeBusyTime:
        return FreeBusyTime(collect(periods), **self._parameters)


@dataclass(frozen=True)
class FreeBusyTime(ComponentProperty):
    """FREEBUSY with an optional FBTYPE and one or more UTC periods."""

    property_name: ClassVar[str] = "FREEBUSY"
    Builder: ClassVar[type] = FreeBusyTimeBuilder

    values: tuple[FreeBusyTimeValue, ...]
    time_type: Optional[FreeBusyTimeType] = None

    def __post_init__(self) -> None:
        values = collect((self.values,) if isinstance(self.values, PeriodOfTime) else tuple(self.values))
        if not values:
            raise fail("FREEBUSY needs at least one period", field="freebusy")
        for value in values:
            if not isinstance(value, PeriodOfTime):
                raise fail("FREEBUSY values must be periods of time", field="freebusy", value=value)
        object.__setattr__(self, "values", values)
        self._coerce("time_type", FreeBusyTimeType)

    def formatted(self) -> str:
        return (
            PropertyComposer.of(self.property_name)
            .append(self.time_type)
            .end(",".join(value.formatted() for value in self.values))
        )


class TimeTransparency(EnumProperty, ComponentProperty, Enum):
    OPAQUE = "OPAQUE"
    TRANSPARENT = "TRANSPARENT"

    @property
    def property_name(self) -> str:
        return "TRANSP"
