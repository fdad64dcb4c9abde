"""Change management component properties (RFC 5545 section 3.8.7)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..composer import PropertyComposer
from ..validators import validate_non_negative
from .base import ComponentProperty, UtcTimestampProperty


@dataclass(frozen=True)
class DateTimeCreated(UtcTimestampProperty):
    property_name: ClassVar[str] = "CREATED"


@dataclass(frozen=True)
class DateTimeStamp(UtcTimestampProperty):
    property_name: ClassVar[str] = "DTSTAMP"


@dataclass(frozen=True)
class LastModified(UtcTimestampProperty):
    property_name: ClassVar[str] = "LAST-MODIFIED"


@dataclass(frozen=True)
class SequenceNumber(ComponentProperty):
    property_name: ClassVar[str] = "SEQUENCE"

    value: int

    def __post_init__(self) -> None:
        validate_non_negative(self.value, "Sequence Number is a non-negative integer", field="sequence")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(str(self.value))
