"""Descriptive component properties (RFC 5545 section 3.8.1)."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..constants import GEO_LIMITS, PERCENT_COMPLETE_RANGE, PRIORITY_RANGE
from ..formatters import escape_text, format_float
from ..parameters import (
    AlternateTextRepresentation,
    FormatType,
    InlineEncoding,
    Language,
    ValueDataType,
)
from ..validators import collect, fail, validate_range, validate_uri
from .base import ComponentProperty, EnumProperty, LanguageBuilder, PropertyBuilder, TextBuilder, TextProperty


class AttachmentBuilder(PropertyBuilder["Attachment"]):
    def with_format_type(self, media_type: Union[FormatType, str]) -> AttachmentBuilder:
        return self._set("format_type", media_type)


@dataclass(frozen=True)
class Attachment(ComponentProperty):
    """ATTACH, either a URI reference or inline binary content.

    Binary content is written as ``ENCODING=BASE64;VALUE=BINARY`` followed by
    the optional FMTTYPE.
    """

    property_name: ClassVar[str] = "ATTACH"
    Builder: ClassVar[type] = AttachmentBuilder

    value: Union[str, bytes]
    format_type: Optional[FormatType] = None

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytes, bytearray)):
            if not self.value:
                raise fail("Binary attachment must not be empty", field="attach")
            object.__setattr__(self, "value", bytes(self.value))
        else:
            object.__setattr__(self, "value", validate_uri(self.value, "attach"))
        self._coerce("format_type", FormatType)

    @property
    def is_binary(self) -> bool:
        return isinstance(self.value, bytes)

    def formatted(self) -> str:
        composer = PropertyComposer.of(self.property_name)
        if self.is_binary:
            composer.append(InlineEncoding.BASE64).append(ValueDataType.BINARY).append(self.format_type)
            return composer.end(base64.b64encode(self.value).decode("ascii"))
        return composer.append(self.format_type).end(self.value)


class CategoriesBuilder(LanguageBuilder["Categories"]):
    def build(self, *categories: str) -> Categories:
        return Categories(collect(categories), **self._parameters)


@dataclass(frozen=True)
class Categories(ComponentProperty):
    property_name: ClassVar[str] = "CATEGORIES"
    Builder: ClassVar[type] = CategoriesBuilder

    values: tuple[str, ...]
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        values = collect((self.values,) if isinstance(self.values, str) else tuple(self.values))
        if not values:
            raise fail("CATEGORIES needs at least one category", field="categories")
        for value in values:
            if not isinstance(value, str) or not value.strip():
                raise fail("Categories must be non-blank text", field="categories", value=value)
        object.__setattr__(self, "values", values)
        self._coerce("language", Language)

    def formatted(self) -> str:
        return (
            PropertyComposer.of(self.property_name)
            .append(self.language)
            .end(",".join(escape_text(value) for value in self.values))
        )


class Classification(EnumProperty, ComponentProperty, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    CONFIDENTIAL = "CONFIDENTIAL"

    @property
    def property_name(self) -> str:
        return "CLASS"


@dataclass(frozen=True)
class Comment(TextProperty):
    property_name: ClassVar[str] = "COMMENT"


@dataclass(frozen=True)
class Description(TextProperty):
    property_name: ClassVar[str] = "DESCRIPTION"


@dataclass(frozen=True)
class Location(TextProperty):
    property_name: ClassVar[str] = "LOCATION"


@dataclass(frozen=True)
class Summary(TextProperty):
    property_name: ClassVar[str] = "SUMMARY"


@dataclass(frozen=True)
class GeographicPosition(ComponentProperty):
    property_name: ClassVar[str] = "GEO"

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        for name, value in (("latitude", self.latitude), ("longitude", self.longitude)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise fail(f"GEO {name} must be a number", field=name, value=value)
            limit = GEO_LIMITS[name.upper()]
            if not -limit <= value <= limit:
                raise fail(f"GEO {name} must be between -{limit:g} and {limit:g}", field=name, value=value)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(
            f"{format_float(self.latitude)};{format_float(self.longitude)}"
        )


@dataclass(frozen=True)
class PercentComplete(ComponentProperty):
    property_name: ClassVar[str] = "PERCENT-COMPLETE"

    value: int

    def __post_init__(self) -> None:
        low, high = PERCENT_COMPLETE_RANGE
        validate_range(
            self.value, low, high, "PERCENT-COMPLETE must be between 0 and 100", field="percent_complete"
        )

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(str(self.value))


@dataclass(frozen=True)
class Priority(ComponentProperty):
    """PRIORITY, 0 (undefined) then 1 (highest) to 9 (lowest)."""

    property_name: ClassVar[str] = "PRIORITY"

    value: int

    def __post_init__(self) -> None:
        low, high = PRIORITY_RANGE
        validate_range(self.value, low, high, "PRIORITY must be between 0 and 9", field="priority")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(str(self.value))


class ResourcesBuilder(TextBuilder["Resources"]):
    def build(self, *resources: str) -> Resources:
        return Resources(collect(resources), **self._parameters)


@dataclass(frozen=True)
class Resources(ComponentProperty):
    property_name: ClassVar[str] = "RESOURCES"
    Builder: ClassVar[type] = ResourcesBuilder

    values: tuple[str, ...]
    alternate_text: Optional[AlternateTextRepresentation] = None
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        values = collect((self.values,) if isinstance(self.values, str) else tuple(self.values))
        if not values:
            raise fail("RESOURCES needs at least one resource", field="resources")
        for value in values:
            if not isinstance(value, str) or not value.strip():
                raise fail("Resources must be non-blank text", field="resources", value=value)
        object.__setattr__(self, "values", values)
        self._coerce("alternate_text", AlternateTextRepresentation)
        self._coerce("language", Language)

    def formatted(self) -> str:
        return (
            PropertyComposer.of(self.property_name)
            .append(self.alternate_text)
            .append(self.language)
            .end(",".join(escape_text(value) for value in self.values))
        )


class Status(EnumProperty, ComponentProperty, Enum):
    TENTATIVE = "TENTATIVE"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    NEEDS_ACTION = "NEEDS-ACTION"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"
    DRAFT = "DRAFT"
    FINAL = "FINAL"

    @property
    def property_name(self) -> str:
        return "STATUS"

    def is_event_status(self) -> bool:
        return self in (Status.TENTATIVE, Status.CONFIRMED, Status.CANCELLED)

    def is_todo_status(self) -> bool:
        return self in (Status.NEEDS_ACTION, Status.COMPLETED, Status.IN_PROCESS, Status.CANCELLED)

    def is_journal_status(self) -> bool:
        return self in (Status.DRAFT, Status.FINAL, Status.CANCELLED)
