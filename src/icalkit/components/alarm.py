"""VALARM component (RFC 5545 section 3.6.6)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from ..composer import ComponentComposer
from ..properties import (
    Action,
    Attachment,
    Attendee,
    Description,
    DurationProperty,
    RepeatCount,
    Summary,
    Trigger,
)
from ..validators import fail
from .base import CalendarComponent, ComponentBuilder, require_property


class AlarmBuilder(ComponentBuilder["Alarm"]):
    def with_action(self, action: Any) -> AlarmBuilder:
        return self._set("action", action)

    def with_trigger(self, trigger: Any) -> AlarmBuilder:
        return self._set("trigger", trigger)

    def with_duration(self, duration: Any) -> AlarmBuilder:
        return self._set("duration", duration)

    def with_attachments(self, *attachments: Any) -> AlarmBuilder:
        return self._extend("attachments", attachments)

    def with_description(self, description: Any) -> AlarmBuilder:
        return self._set("description", description)

    def with_repeat_count(self, repeat: Any) -> AlarmBuilder:
        return self._set("repeat", repeat)

    def with_summary(self, summary: Any) -> AlarmBuilder:
        return self._set("summary", summary)

    def with_attendees(self, *attendees: Any) -> AlarmBuilder:
        return self._extend("attendees", attendees)

    def build_audio(self) -> Alarm:
        return self.with_action(Action.AUDIO).build()

    def build_display(self) -> Alarm:
        return self.with_action(Action.DISPLAY).build()

    def build_email(self) -> Alarm:
        return self.with_action(Action.EMAIL).build()


@dataclass(frozen=True)
class Alarm(CalendarComponent):
    """A reminder nested in a VEVENT or VTODO.

    The ACTION decides which properties are required: DISPLAY needs a
    DESCRIPTION, EMAIL needs a DESCRIPTION, a SUMMARY and at least one ATTENDEE,
    and AUDIO takes at most one ATTACH.
    """

    component_name: ClassVar[str] = "VALARM"
    Builder: ClassVar[type] = AlarmBuilder

    action: Optional[Action] = None
    trigger: Optional[Trigger] = None
    duration: Optional[DurationProperty] = None
    attachments: tuple[Attachment, ...] = ()
    description: Optional[Description] = None
    repeat: Optional[RepeatCount] = None
    summary: Optional[Summary] = None
    attendees: tuple[Attendee, ...] = ()

    def __post_init__(self) -> None:
        self._coerce("action", Action)
        self._coerce("trigger", Trigger)
        self._coerce("duration", DurationProperty)
        self._coerce_all("attachments", Attachment)
        self._coerce("description", Description)
        self._coerce("repeat", RepeatCount)
        self._coerce("summary", Summary)
        self._coerce_all("attendees", Attendee)

        require_property(self.action, "action")
        require_property(self.trigger, "trigger")
        if (self.duration is None) != (self.repeat is None):
            raise fail("The `duration` and `repeat` properties must both be set or both be absent.", field="duration")

        if self.action is Action.AUDIO:
            if len(self.attachments) > 1:
                raise fail("An AUDIO alarm takes at most one attachment.", field="attach")
            if self.attendees:
                raise fail("An AUDIO alarm cannot have attendees.", field="attendee")
        elif self.action is Action.DISPLAY:
            require_property(self.description, "description")
            if self.attachments:
                raise fail("A DISPLAY alarm cannot have attachments.", field="attach")
            if self.attendees:
                raise fail("A DISPLAY alarm cannot have attendees.", field="attendee")
        elif self.action is Action.EMAIL:
            require_property(self.description, "description")
            require_property(self.summary, "summary")
            if not self.attendees:
                raise fail("An EMAIL alarm needs at least one attendee.", field="attendee")

    def formatted(self) -> str:
        return (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.action)
            .append(self.trigger)
            .append(self.duration)
            .extend(self.attachments)
            .append(self.description)
            .append(self.repeat)
            .append(self.summary)
            .extend(self.attendees)
            .end()
        )
