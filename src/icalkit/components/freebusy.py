"""VFREEBUSY component (RFC 5545 section 3.6.4)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from ..composer import ComponentComposer
from ..properties import (
    Attendee,
    Comment,
    Contact,
    DateTimeEnd,
    DateTimeStamp,
    DateTimeStart,
    FreeBusyTime,
    Organiser,
    RequestStatus,
    UniformResourceLocator,
    UniqueIdentifier,
)
from .base import CalendarComponent, ComponentBuilder, require_property


class FreeBusyBuilder(ComponentBuilder["FreeBusy"]):
    def with_date_time_stamp(self, value: Any) -> FreeBusyBuilder:
        return self._set("date_time_stamp", value)

    def with_unique_identifier(self, value: Any) -> FreeBusyBuilder:
        return self._set("unique_identifier", value)

    def with_contact(self, value: Any) -> FreeBusyBuilder:
        return self._set("contact", value)

    def with_date_time_start(self, value: Any) -> FreeBusyBuilder:
        return self._set("date_time_start", value)

    def with_date_time_end(self, value: Any) -> FreeBusyBuilder:
        return self._set("date_time_end", value)

    def with_organiser(self, value: Any) -> FreeBusyBuilder:
        return self._set("organiser", value)

    def with_uniform_resource_locator(self, value: Any) -> FreeBusyBuilder:
        return self._set("url", value)

    def with_attendees(self, *values: Any) -> FreeBusyBuilder:
        return self._extend("attendees", values)

    def with_comments(self, *values: Any) -> FreeBusyBuilder:
        return self._extend("comments", values)

    def with_free_busy_times(self, *values: FreeBusyTime) -> FreeBusyBuilder:
        return self._extend("free_busy_times", values)

    def with_request_statuses(self, *values: RequestStatus) -> FreeBusyBuilder:
        return self._extend("request_statuses", values)


@dataclass(frozen=True)
class FreeBusy(CalendarComponent):
    component_name: ClassVar[str] = "VFREEBUSY"
    Builder: ClassVar[type] = FreeBusyBuilder

    date_time_stamp: Optional[DateTimeStamp] = None
    unique_identifier: Optional[UniqueIdentifier] = None
    contact: Optional[Contact] = None
    date_time_start: Optional[DateTimeStart] = None
    date_time_end: Optional[DateTimeEnd] = None
    organiser: Optional[Organiser] = None
    url: Optional[UniformResourceLocator] = None
    attendees: tuple[Attendee, ...] = ()
    comments: tuple[Comment, ...] = ()
    free_busy_times: tuple[FreeBusyTime, ...] = ()
    request_statuses: tuple[RequestStatus, ...] = ()

    def __post_init__(self) -> None:
        self._coerce("date_time_stamp", DateTimeStamp)
        self._coerce("unique_identifier", UniqueIdentifier)
        self._coerce("contact", Contact)
        self._coerce("date_time_start", DateTimeStart)
        self._coerce("date_time_end", DateTimeEnd)
        self._coerce("organiser", Organiser)
        self._coerce("url", UniformResourceLocator)
        self._coerce_all("attendees", Attendee)
        self._coerce_all("comments", Comment)
        self._coerce_all("free_busy_times", FreeBusyTime)
        self._coerce_all("request_statuses", RequestStatus)

        require_property(self.date_time_stamp, "dtstamp")
        require_property(self.unique_identifier, "uid")

    def formatted(self) -> str:
        return (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.date_time_stamp)
            .append(self.unique_identifier)
            .append(self.contact)
            .append(self.date_time_start)
            .append(self.date_time_end)
            .append(self.organiser)
            .append(self.url)
            .extend(self.attendees)
            .extend(self.comments)
            .extend(self.free_busy_times)
            .extend(self.request_statuses)
            .end()
        )
