"""Time zone component properties (RFC 5545 section 3.8.3)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta, tzinfo
from typing import ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..config import tzid_for_tzinfo
from ..formatters import escape_text
from ..parameters import Language
from ..validators import fail, validate_not_blank, validate_uri
from ..values import UtcOffset
from .base import ComponentProperty, LanguageBuilder


@dataclass(frozen=True)
class TimeZoneIdentifier(ComponentProperty):
    """TZID inside VTIMEZONE. A ``tzinfo`` is reduced to its key."""

    property_name: ClassVar[str] = "TZID"

    value: Union[str, tzinfo]

    def __post_init__(self) -> None:
        if isinstance(self.value, tzinfo):
            object.__setattr__(self, "value", tzid_for_tzinfo(self.value))
        validate_not_blank(self.value, "TZID must not be blank", field="tzid")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(escape_text(self.value))


@dataclass(frozen=True)
class TimeZoneName(ComponentProperty):
    property_name: ClassVar[str] = "TZNAME"
    Builder: ClassVar[type] = LanguageBuilder

    value: str
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "TZNAME must not be blank", field="tzname")
        self._coerce("language", Language)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).append(self.language).end(escape_text(self.value))


@dataclass(frozen=True)
class _OffsetProperty(ComponentProperty):
    value: UtcOffset

    def __post_init__(self) -> None:
        if isinstance(self.value, timedelta):
            object.__setattr__(self, "value", UtcOffset.from_timedelta(self.value))
        if not isinstance(self.value, UtcOffset):
            raise fail(
                f"{self.property_name} must be a UTC offset",
                field=self.property_name.lower(),
                value=self.value,
            )

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value.formatted())


@dataclass(frozen=True)
class TimeZoneOffsetFrom(_OffsetProperty):
    property_name: ClassVar[str] = "TZOFFSETFROM"


@dataclass(frozen=True)
class TimeZoneOffsetTo(_OffsetProperty):
    property_name: ClassVar[str] = "TZOFFSETTO"


@dataclass(frozen=True)
class TimeZoneUrl(ComponentProperty):
    property_name: ClassVar[str] = "TZURL"

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_uri(self.value, "tzurl"))

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value)
