"""Calendar-level properties (RFC 5545 section 3.7) and common X-WR extensions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta, tzinfo
from enum import Enum
from typing import ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..config import resolve_timezone, tzid_for_tzinfo
from ..constants import ICALENDAR_VERSION
from ..formatters import escape_text
from ..parameters import CommonName, Language
from ..validators import fail, validate_not_blank, validate_uri
from ..values import Duration, as_duration
from .base import CalendarProperty, EnumProperty, LanguageBuilder, PropertyBuilder


class CalendarScale(EnumProperty, CalendarProperty, Enum):
    GREGORIAN = "GREGORIAN"

    @property
    def property_name(self) -> str:
        return "CALSCALE"


class Method(EnumProperty, CalendarProperty, Enum):
    PUBLISH = "PUBLISH"
    REQUEST = "REQUEST"
    REPLY = "REPLY"
    ADD = "ADD"
    CANCEL = "CANCEL"
    REFRESH = "REFRESH"
    COUNTER = "COUNTER"
    DECLINE_COUNTER = "DECLINE-COUNTER"

    @property
    def property_name(self) -> str:
        return "METHOD"


class Version(EnumProperty, CalendarProperty, Enum):
    V2_0 = ICALENDAR_VERSION

    @property
    def property_name(self) -> str:
        return "VERSION"


@dataclass(frozen=True)
class ProductIdentifier(CalendarProperty):
    property_name: ClassVar[str] = "PRODID"

    value: str

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "PRODID must not be blank", field="prodid")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(escape_text(self.value))


@dataclass(frozen=True)
class _CalendarText(CalendarProperty):
    Builder: ClassVar[type] = LanguageBuilder

    value: str
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        validate_not_blank(self.value, f"{self.property_name} must not be blank", field=self.property_name.lower())
        self._coerce("language", Language)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).append(self.language).end(escape_text(self.value))


@dataclass(frozen=True)
class CalendarName(_CalendarText):
    property_name: ClassVar[str] = "X-WR-CALNAME"


@dataclass(frozen=True)
class CalendarDescription(_CalendarText):
    property_name: ClassVar[str] = "X-WR-CALDESC"


@dataclass(frozen=True)
class CalendarId(CalendarProperty):
    property_name: ClassVar[str] = "X-WR-RELCALID"

    value: str

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "X-WR-RELCALID must not be blank", field="x-wr-relcalid")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(escape_text(self.value))


@dataclass(frozen=True)
class CalendarTimeZone(CalendarProperty):
    """X-WR-TIMEZONE, the zone clients should display the calendar in."""

    property_name: ClassVar[str] = "X-WR-TIMEZONE"

    value: Union[str, tzinfo]

    def __post_init__(self) -> None:
        if isinstance(self.value, tzinfo):
            tzid = tzid_for_tzinfo(self.value)
        else:
            validate_not_blank(self.value, "X-WR-TIMEZONE must not be blank", field="x-wr-timezone")
            _, tzid = resolve_timezone(self.value)
        object.__setattr__(self, "value", tzid)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(escape_text(self.value))


class OwnerBuilder(PropertyBuilder["Owner"]):
    def with_common_name(self, name: Union[CommonName, str]) -> OwnerBuilder:
        return self._set("common_name", name)


@dataclass(frozen=True)
class Owner(CalendarProperty):
    property_name: ClassVar[str] = "X-OWNER"
    Builder: ClassVar[type] = OwnerBuilder

    value: str
    common_name: Optional[CommonName] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_uri(self.value, "x-owner"))
        self._coerce("common_name", CommonName)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).append(self.common_name).end(self.value)


@dataclass(frozen=True)
class PrimaryCalendar(CalendarProperty):
    property_name: ClassVar[str] = "X-PRIMARY-CALENDAR"

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise fail("X-PRIMARY-CALENDAR must be a boolean", field="x-primary-calendar", value=self.value)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end("TRUE" if self.value else "FALSE")


@dataclass(frozen=True)
class PublishedTtl(CalendarProperty):
    """X-PUBLISHED-TTL, the suggested refresh interval for subscribers."""

    property_name: ClassVar[str] = "X-PUBLISHED-TTL"

    value: Union[Duration, timedelta]

    def __post_init__(self) -> None:
        value = as_duration(self.value, "x-published-ttl")
        if value.negative or value.to_timedelta() == timedelta(0):
            raise fail("X-PUBLISHED-TTL must be a positive duration", field="x-published-ttl", value=value)
        object.__setattr__(self, "value", value)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value.formatted())
