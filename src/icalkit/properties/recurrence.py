"""Recurrence component properties (RFC 5545 section 3.8.5)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..formatters import format_floating_timestamp, format_timestamp
from ..parameters import TimeZoneIdentifier, ValueDataType
from ..validators import collect, fail, validate_value_data_type
from ..values import PeriodOfTime, Recur
from .base import ComponentProperty, DateTimeBuilder, coerce_value_data_type


class DateTimeListBuilder(DateTimeBuilder):
    def build(self, *values: Any):
        return self._target(collect(values), **self._parameters)


def _value_kind(value: Any) -> Optional[ValueDataType]:
    if isinstance(value, PeriodOfTime):
        return ValueDataType.PERIOD
    if isinstance(value, datetime):
        return ValueDataType.DATE_TIME
    if isinstance(value, date):
        return ValueDataType.DATE
    return None


@dataclass(frozen=True)
class DateTimeListProperty(ComponentProperty):
    """A comma-separated list of DATE, DATE-TIME or PERIOD values of one kind.

    The VALUE parameter is written when it differs from DATE-TIME, so a list of
    ``date`` objects gets ``VALUE=DATE`` without being asked.
    """

    Builder: ClassVar[type] = DateTimeListBuilder
    allowed_value_types: ClassVar[tuple[ValueDataType, ...]] = (ValueDataType.DATE, ValueDataType.DATE_TIME)

    values: tuple[Union[date, datetime, PeriodOfTime], ...]
    value_data_type: Optional[ValueDataType] = None
    time_zone: Optional[TimeZoneIdentifier] = None
    floating: bool = False

    def __post_init__(self) -> None:
        field_name = self.property_name.lower()
        values = collect((self.values,) if not isinstance(self.values, (list, tuple)) else tuple(self.values))
        if not values:
            raise fail(f"{self.property_name} needs at least one value", field=field_name)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "value_data_type", coerce_value_data_type(self.value_data_type))
        validate_value_data_type(self.value_data_type, self.allowed_value_types, self.property_name)

        kinds = {_value_kind(value) for value in values}
        if None in kinds:
            raise fail(f"{self.property_name} values must be dates, datetimes or periods", field=field_name)
        if len(kinds) > 1:
            raise fail(f"{self.property_name} values must all share one value type", field=field_name)
        kind = kinds.pop()
        if kind not in self.allowed_value_types:
            raise fail(
                f"{kind.value} values are not allowed in property `{self.property_name}`",
                field=field_name,
            )
        if kind is ValueDataType.PERIOD and self.value_data_type not in (None, ValueDataType.PERIOD):
            raise fail(f"Period values need VALUE=PERIOD in property `{self.property_name}`", field=field_name)
        if self.value_data_type is ValueDataType.PERIOD and kind is not ValueDataType.PERIOD:
            raise fail(f"VALUE=PERIOD needs period values in property `{self.property_name}`", field=field_name)
        if self.value_data_type is None and kind is not ValueDataType.DATE_TIME:
            object.__setattr__(self, "value_data_type", kind)

        self._coerce("time_zone", TimeZoneIdentifier)
        if self.time_zone is not None and self.value_data_type is ValueDataType.PERIOD:
            raise fail("Period values are written in UTC and cannot carry a TZID", field="tzid")
        if self.floating and self.time_zone is not None:
            raise fail("Floating time cannot carry a TZID", field="tzid", value=self.time_zone.tzid)

    def _formatted_value(self, value: Union[date, datetime, PeriodOfTime]) -> str:
        if isinstance(value, PeriodOfTime):
            return value.formatted()
        if self.floating and self.value_data_type is not ValueDataType.DATE:
            return format_floating_timestamp(value)
        zone = self.time_zone.zone if self.time_zone is not None else None
        value_type = "DATE" if self.value_data_type is ValueDataType.DATE else "DATE-TIME"
        return format_timestamp(value, value_type, zone)

    def formatted(self) -> str:
        composer = PropertyComposer.of(self.property_name).append(self.value_data_type)
        if self.value_data_type is not ValueDataType.DATE:
            composer.append(self.time_zone)
        return composer.end(",".join(self._formatted_value(value) for value in self.values))


@dataclass(frozen=True)
class ExceptionDateTimes(DateTimeListProperty):
    property_name: ClassVar[str] = "EXDATE"


@dataclass(frozen=True)
class RecurrenceDateTimes(DateTimeListProperty):
    property_name: ClassVar[str] = "RDATE"
    allowed_value_types: ClassVar[tuple[ValueDataType, ...]] = (
        ValueDataType.DATE,
        ValueDataType.DATE_TIME,
        ValueDataType.PERIOD,
    )


@dataclass(frozen=True)
class RecurrenceRule(ComponentProperty):
    property_name: ClassVar[str] = "RRULE"

    value: Recur

    def __post_init__(self) -> None:
        if not isinstance(self.value, Recur):
            raise fail("RRULE needs a Recur value", field="rrule", value=self.value)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value.formatted())
