"""VTODO component (RFC 5545 section 3.6.2)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from ..composer import ComponentComposer
from ..parameters import ParticipationStatus
from ..properties import (
    Attachment,
    Attendee,
    Categories,
    Classification,
    Comment,
    Contact,
    DateTimeCompleted,
    DateTimeCreated,
    DateTimeDue,
    DateTimeStamp,
    DateTimeStart,
    Description,
    DurationProperty,
    ExceptionDateTimes,
    GeographicPosition,
    LastModified,
    Location,
    Organiser,
    PercentComplete,
    Priority,
    RecurrenceDateTimes,
    RecurrenceId,
    RecurrenceRule,
    RelatedTo,
    RequestStatus,
    Resources,
    SequenceNumber,
    Status,
    Summary,
    UniformResourceLocator,
    UniqueIdentifier,
)
from ..validators import fail
from .alarm import Alarm
from .base import (
    CalendarComponent,
    ComponentBuilder,
    require_exclusive,
    require_participation_status,
    require_property,
    require_status,
)


class TodoBuilder(ComponentBuilder["Todo"]):
    def with_date_time_stamp(self, value: Any) -> TodoBuilder:
        return self._set("date_time_stamp", value)

    def with_unique_identifier(self, value: Any) -> TodoBuilder:
        return self._set("unique_identifier", value)

    def with_classification(self, value: Any) -> TodoBuilder:
        return self._set("classification", value)

    def with_date_time_completed(self, value: Any) -> TodoBuilder:
        return self._set("date_time_completed", value)

    def with_date_time_created(self, value: Any) -> TodoBuilder:
        return self._set("date_time_created", value)

    def with_description(self, value: Any) -> TodoBuilder:
        return self._set("description", value)

    def with_date_time_start(self, value: Any) -> TodoBuilder:
        return self._set("date_time_start", value)

    def with_geographic_position(self, latitude: Any, longitude: Optional[float] = None) -> TodoBuilder:
        if longitude is None and isinstance(latitude, tuple) and len(latitude) == 2:
            latitude, longitude = latitude
        if longitude is not None:
            latitude = GeographicPosition(latitude, longitude)
        return self._set("geographic_position", latitude)

    def with_last_modified(self, value: Any) -> TodoBuilder:
        return self._set("last_modified", value)

    def with_location(self, value: Any) -> TodoBuilder:
        return self._set("location", value)

    def with_organiser(self, value: Any) -> TodoBuilder:
        return self._set("organiser", value)

    def with_percent_complete(self, value: Any) -> TodoBuilder:
        return self._set("percent_complete", value)

    def with_priority(self, value: Any) -> TodoBuilder:
        return self._set("priority", value)

    def with_recurrence_id(self, value: Any) -> TodoBuilder:
        return self._set("recurrence_id", value)

    def with_sequence_number(self, value: Any) -> TodoBuilder:
        return self._set("sequence_number", value)

    def with_status(self, value: Any) -> TodoBuilder:
        return self._set("status", value)

    def with_summary(self, value: Any) -> TodoBuilder:
        return self._set("summary", value)

    def with_uniform_resource_locator(self, value: Any) -> TodoBuilder:
        return self._set("url", value)

    def with_recurrence_rule(self, value: Any) -> TodoBuilder:
        return self._set("recurrence_rule", value)

    def with_date_time_due(self, value: Any) -> TodoBuilder:
        return self._set("date_time_due", value)

    def with_duration(self, value: Any) -> TodoBuilder:
        return self._set("duration", value)

    def with_attachments(self, *values: Any) -> TodoBuilder:
        return self._extend("attachments", values)

    def with_attendees(self, *values: Any) -> TodoBuilder:
        return self._extend("attendees", values)

    def with_categories(self, *values: Any) -> TodoBuilder:
        return self._extend("categories", values)

    def with_comments(self, *values: Any) -> TodoBuilder:
        return self._extend("comments", values)

    def with_contacts(self, *values: Any) -> TodoBuilder:
        return self._extend("contacts", values)

    def with_exception_date_times(self, *values: Any) -> TodoBuilder:
        return self._extend("exception_dates", values)

    def with_request_statuses(self, *values: RequestStatus) -> TodoBuilder:
        return self._extend("request_statuses", values)

    def with_related_to(self, *values: Any) -> TodoBuilder:
        return self._extend("related_to", values)

    def with_resources(self, *values: Any) -> TodoBuilder:
        return self._extend("resources", values)

    def with_recurrence_date_times(self, *values: Any) -> TodoBuilder:
        return self._extend("recurrence_dates", values)

    def with_alarms(self, *alarms: Alarm) -> TodoBuilder:
        return self._extend("alarms", alarms)


@dataclass(frozen=True)
class Todo(CalendarComponent):
    """A VTODO. DTSTAMP and UID are required; DUE and DURATION exclude each other."""

    component_name: ClassVar[str] = "VTODO"
    Builder: ClassVar[type] = TodoBuilder

    date_time_stamp: Optional[DateTimeStamp] = None
    unique_identifier: Optional[UniqueIdentifier] = None
    classification: Optional[Classification] = None
    date_time_completed: Optional[DateTimeCompleted] = None
    date_time_created: Optional[DateTimeCreated] = None
    description: Optional[Description] = None
    date_time_start: Optional[DateTimeStart] = None
    geographic_position: Optional[GeographicPosition] = None
    last_modified: Optional[LastModified] = None
    location: Optional[Location] = None
    organiser: Optional[Organiser] = None
    percent_complete: Optional[PercentComplete] = None
    priority: Optional[Priority] = None
    recurrence_id: Optional[RecurrenceId] = None
    sequence_number: Optional[SequenceNumber] = None
    status: Optional[Status] = None
    summary: Optional[Summary] = None
    url: Optional[UniformResourceLocator] = None
    recurrence_rule: Optional[RecurrenceRule] = None
    date_time_due: Optional[DateTimeDue] = None
    duration: Optional[DurationProperty] = None
    attachments: tuple[Attachment, ...] = ()
    attendees: tuple[Attendee, ...] = ()
    categories: tuple[Categories, ...] = ()
    comments: tuple[Comment, ...] = ()
    contacts: tuple[Contact, ...] = ()
    exception_dates: tuple[ExceptionDateTimes, ...] = ()
    request_statuses: tuple[RequestStatus, ...] = ()
    related_to: tuple[RelatedTo, ...] = ()
    resources: tuple[Resources, ...] = ()
    recurrence_dates: tuple[RecurrenceDateTimes, ...] = ()
    alarms: tuple[Alarm, ...] = ()

    def __post_init__(self) -> None:
        self._coerce("date_time_stamp", DateTimeStamp)
        self._coerce("unique_identifier", UniqueIdentifier)
        self._coerce("classification", Classification)
        self._coerce("date_time_completed", DateTimeCompleted)
        self._coerce("date_time_created", DateTimeCreated)
        self._coerce("description", Description)
        self._coerce("date_time_start", DateTimeStart)
        self._coerce("geographic_position", GeographicPosition)
        self._coerce("last_modified", LastModified)
        self._coerce("location", Location)
        self._coerce("organiser", Organiser)
        self._coerce("percent_complete", PercentComplete)
        self._coerce("priority", Priority)
        self._coerce("recurrence_id", RecurrenceId)
        self._coerce("sequence_number", SequenceNumber)
        self._coerce("status", Status)
        self._coerce("summary", Summary)
        self._coerce("url", UniformResourceLocator)
        self._coerce("recurrence_rule", RecurrenceRule)
        self._coerce("date_time_due", DateTimeDue)
        self._coerce("duration", DurationProperty)
        self._coerce_all("attachments", Attachment)
        self._coerce_all("attendees", Attendee)
        self._coerce_all("categories", Categories)
        self._coerce_all("comments", Comment)
        self._coerce_all("contacts", Contact)
        self._coerce_all("exception_dates", ExceptionDateTimes)
        self._coerce_all("request_statuses", RequestStatus)
        self._coerce_all("related_to", RelatedTo)
        self._coerce_all("resources", Resources)
        self._coerce_all("recurrence_dates", RecurrenceDateTimes)
        object.__setattr__(self, "alarms", tuple(self.alarms or ()))

        require_property(self.date_time_stamp, "dtstamp")
        require_property(self.unique_identifier, "uid")
        require_exclusive(self.date_time_due, self.duration, "due", "duration")
        require_status(self.status, Status.is_todo_status, self.component_name)
        require_participation_status(self.attendees, ParticipationStatus.is_todo_status, self.component_name)
        for alarm in self.alarms:
            if not isinstance(alarm, Alarm):
                raise fail("Todo alarms must be Alarm components", field="alarms", value=alarm)

    def formatted(self) -> str:
        return (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.date_time_stamp)
            .append(self.unique_identifier)
            .append(self.classification)
            .append(self.date_time_completed)
            .append(self.date_time_created)
            .append(self.description)
            .append(self.date_time_start)
            .append(self.geographic_position)
            .append(self.last_modified)
            .append(self.location)
            .append(self.organiser)
            .append(self.percent_complete)
            .append(self.priority)
            .append(self.recurrence_id)
            .append(self.sequence_number)
            .append(self.status)
            .append(self.summary)
            .append(self.url)
            .append(self.recurrence_rule)
            .append(self.date_time_due)
            .append(self.duration)
            .extend(self.attachments)
            .extend(self.attendees)
            .extend(self.categories)
            .extend(self.comments)
            .extend(self.contacts)
            .extend(self.exception_dates)
            .extend(self.request_statuses)
            .extend(self.related_to)
            .extend(self.resources)
            .extend(self.recurrence_dates)
            .nest(self.alarms)
            .end()
        )
