"""Property base types and the shared builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from datetime import date, datetime
from typing import Any, ClassVar, Generic, Optional, TypeVar, Union

from ..composer import PropertyComposer
from ..formatters import escape_text, format_floating_timestamp, format_timestamp
from ..parameters import (
    AlternateTextRepresentation,
    Language,
    TimeZoneIdentifier,
    ValueDataType,
    as_parameter,
)
from ..validators import fail, validate_timestamp, validate_value_data_type

T = TypeVar("T")
B = TypeVar("B", bound="PropertyBuilder")


class PropertyBuilder(Generic[T]):
    """Collects optional parameters, then hands them to the property with its value."""

    def __init__(self, target: type[T]) -> None:
        self._target = target
        self._parameters: dict[str, Any] = {}

    def _set(self: B, key: str, value: Any) -> B:
        self._parameters[key] = value
        return self

    def build(self, *values: Any) -> T:
        return self._target(*values, **self._parameters)


class LanguageBuilder(PropertyBuilder[T]):
    def with_language(self, language: Union[Language, str]) -> LanguageBuilder[T]:
        return self._set("language", language)


class TextBuilder(LanguageBuilder[T]):
    def with_alternate_text_representation(
        self, uri: Union[AlternateTextRepresentation, str]
    ) -> TextBuilder[T]:
        return self._set("alternate_text", uri)


class DateTimeBuilder(PropertyBuilder[T]):
    def with_value_data_type(self, value_data_type: Union[ValueDataType, str]) -> DateTimeBuilder[T]:
        return self._set("value_data_type", value_data_type)

    def with_time_zone_identifier(self, time_zone: Any) -> DateTimeBuilder[T]:
        return self._set("time_zone", time_zone)

    def with_floating_time(self) -> DateTimeBuilder[T]:
        return self._set("floating", True)


class Property:
    property_name: ClassVar[str]
    Builder: ClassVar[type] = PropertyBuilder

    @classmethod
    def builder(cls):
        return cls.Builder(cls)

    def formatted(self) -> str:
        raise NotImplementedError

    def content_line(self) -> str:
        """The unfolded line a component writes for this property."""
        return self.formatted()

    def _coerce(self, name: str, parameter_type: type) -> None:
        object.__setattr__(self, name, as_parameter(getattr(self, name), parameter_type))


class ComponentProperty(Property):
    """Marker for properties that live inside a component."""


class CalendarProperty(Property):
    """Marker for properties that live directly inside VCALENDAR."""


class EnumProperty(Property):
    """Mixin for properties whose value is one enumerated RFC token."""

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value)


def as_property(value: Any, property_type: type[T]) -> Optional[T]:
    """Accept either a ready property or the raw value it wraps."""
    if value is None or isinstance(value, property_type):
        return value
    if isinstance(value, Property):
        raise fail(
            f"Expected {property_type.__name__}, got {type(value).__name__}",
            field=property_type.__name__,
            value=value,
        )
    if issubclass(property_type, Enum):
        try:
            return property_type(str(value).upper())
        except ValueError as exc:
            raise fail(
                f"Unknown {property_type.__name__} value '{value}'", field=property_type.__name__, value=value
            ) from exc
    try:
        return property_type(value)
    except TypeError as exc:
        raise fail(
            f"Cannot build {property_type.__name__} from {value!r}", field=property_type.__name__, value=value
        ) from exc


@dataclass(frozen=True)
class TextProperty(ComponentProperty):
    """A TEXT value with optional ALTREP and LANGUAGE, in that order."""

    Builder: ClassVar[type] = TextBuilder

    value: str
    alternate_text: Optional[AlternateTextRepresentation] = None
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise fail(f"{self.property_name} must be text", field=self.property_name.lower(), value=self.value)
        self._coerce("alternate_text", AlternateTextRepresentation)
        self._coerce("language", Language)

    def formatted(self) -> str:
        return (
            PropertyComposer.of(self.property_name)
            .append(self.alternate_text)
            .append(self.language)
            .end(escape_text(self.value))
        )


def coerce_value_data_type(value: Any) -> Optional[ValueDataType]:
    return as_parameter(value, ValueDataType)


@dataclass(frozen=True)
class DateTimeProperty(ComponentProperty):
    """A DATE or DATE-TIME value with optional VALUE and TZID, in that order.

    A ``date`` implies ``VALUE=DATE``. With a TZID the local wall time in that
    zone is written; otherwise the instant is written in UTC form. TZID is not
    written for DATE values, and floating values carry wall-clock time with no
    zone at all.
    """

    Builder: ClassVar[type] = DateTimeBuilder
    allowed_value_types: ClassVar[tuple[ValueDataType, ...]] = (ValueDataType.DATE, ValueDataType.DATE_TIME)

    value: Union[date, datetime]
    value_data_type: Optional[ValueDataType] = None
    time_zone: Optional[TimeZoneIdentifier] = None
    floating: bool = False

    def __post_init__(self) -> None:
        validate_timestamp(self.value, self.property_name.lower())
        object.__setattr__(self, "value_data_type", coerce_value_data_type(self.value_data_type))
        validate_value_data_type(self.value_data_type, self.allowed_value_types, self.property_name)
        self._coerce("time_zone", TimeZoneIdentifier)
        if self.floating and self.time_zone is not None:
            raise fail("Floating time cannot carry a TZID", field="tzid", value=self.time_zone.tzid)

    @property
    def is_date(self) -> bool:
        if self.value_data_type is not None:
            return self.value_data_type is ValueDataType.DATE
        return not isinstance(self.value, datetime)

    def _composer(self) -> PropertyComposer:
        composer = PropertyComposer.of(self.property_name)
        if self.is_date:
            return composer.append(ValueDataType.DATE)
        return composer.append(self.value_data_type).append(self.time_zone)

    def _formatted_value(self) -> str:
        if self.floating and not self.is_date:
            return format_floating_timestamp(self.value)
        zone = self.time_zone.zone if self.time_zone is not None else None
        value_type = "DATE" if self.is_date else "DATE-TIME"
        return format_timestamp(self.value, value_type, zone)

    def formatted(self) -> str:
        return self._composer().end(self._formatted_value())


@dataclass(frozen=True)
class UtcTimestampProperty(ComponentProperty):
    """A DATE-TIME that RFC 5545 requires in UTC form (DTSTAMP, CREATED, ...)."""

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise fail(
                f"{self.property_name} must be a datetime",
                field=self.property_name.lower(),
                value=self.value,
            )

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(format_timestamp(self.value, "DATE-TIME"))
