"""Alarm component properties (RFC 5545 section 3.8.6)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..formatters import format_utc_timestamp
from ..parameters import AlarmTriggerRelationship, ValueDataType
from ..validators import fail, validate_non_negative
from ..values import Duration, as_duration
from .base import ComponentProperty, EnumProperty, PropertyBuilder


class Action(EnumProperty, ComponentProperty, Enum):
    AUDIO = "AUDIO"
    DISPLAY = "DISPLAY"
    EMAIL = "EMAIL"

    @property
    def property_name(self) -> str:
        return "ACTION"


@dataclass(frozen=True)
class RepeatCount(ComponentProperty):
    property_name: ClassVar[str] = "REPEAT"

    value: int

    def __post_init__(self) -> None:
        validate_non_negative(self.value, "Repeat Count is a non-negative integer", field="repeat")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(str(self.value))


class TriggerBuilder(PropertyBuilder["Trigger"]):
    def with_relationship(self, related: Union[AlarmTriggerRelationship, str]) -> TriggerBuilder:
        return self._set("related", related)


@dataclass(frozen=True)
class Trigger(ComponentProperty):
    """TRIGGER, relative (a possibly negative duration) or absolute (a UTC date-time).

    Relative triggers are written ``VALUE=DURATION`` then the optional RELATED;
    absolute triggers are written ``VALUE=DATE-TIME`` and cannot carry RELATED.
    """

    property_name: ClassVar[str] = "TRIGGER"
    Builder: ClassVar[type] = TriggerBuilder

    value: Union[Duration, timedelta, datetime]
    related: Optional[AlarmTriggerRelationship] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            object.__setattr__(self, "value", as_duration(self.value, "trigger"))
        self._coerce("related", AlarmTriggerRelationship)
        if self.is_absolute and self.related is not None:
            raise fail("RELATED applies only to a duration TRIGGER", field="related", value=self.related)

    @property
    def is_absolute(self) -> bool:
        return isinstance(self.value, datetime)

    def formatted(self) -> str:
        composer = PropertyComposer.of(self.property_name)
        if self.is_absolute:
            return composer.append(ValueDataType.DATE_TIME).end(format_utc_timestamp(self.value))
        return composer.append(ValueDataType.DURATION).append(self.related).end(self.value.formatted())
