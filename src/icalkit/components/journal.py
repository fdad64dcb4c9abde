"""VJOURNAL component (RFC 5545 section 3.6.3)."""

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
    DateTimeCreated,
    DateTimeStamp,
    DateTimeStart,
    Description,
    ExceptionDateTimes,
    LastModified,
    Organiser,
    RecurrenceDateTimes,
    RecurrenceId,
    RecurrenceRule,
    RelatedTo,
    RequestStatus,
    SequenceNumber,
    Status,
    Summary,
    UniformResourceLocator,
    UniqueIdentifier,
)
from .base import (
    CalendarComponent,
    ComponentBuilder,
    require_participation_status,
    require_property,
    require_status,
)


class JournalBuilder(ComponentBuilder["Journal"]):
    def with_date_time_stamp(self, value: Any) -> JournalBuilder:
        return self._set("date_time_stamp", value)

    def with_unique_identifier(self, value: Any) -> JournalBuilder:
        return self._set("unique_identifier", value)

    def with_classification(self, value: Any) -> JournalBuilder:
        return self._set("classification", value)

    def with_date_time_created(self, value: Any) -> JournalBuilder:
        return self._set("date_time_created", value)

    def with_date_time_start(self, value: Any) -> JournalBuilder:
        return self._set("date_time_start", value)

    def with_last_modified(self, value: Any) -> JournalBuilder:
        return self._set("last_modified", value)

    def with_organiser(self, value: Any) -> JournalBuilder:
        return self._set("organiser", value)

    def with_recurrence_id(self, value: Any) -> JournalBuilder:
        return self._set("recurrence_id", value)

    def with_sequence_number(self, value: Any) -> JournalBuilder:
        return self._set("sequence_number", value)

    def with_status(self, value: Any) -> JournalBuilder:
        return self._set("status", value)

    def with_summary(self, value: Any) -> JournalBuilder:
        return self._set("summary", value)

    def with_uniform_resource_locator(self, value: Any) -> JournalBuilder:
        return self._set("url", value)

    def with_recurrence_rule(self, value: Any) -> JournalBuilder:
        return self._set("recurrence_rule", value)

    def with_attachments(self, *values: Any) -> JournalBuilder:
        return self._extend("attachments", values)

    def with_attendees(self, *values: Any) -> JournalBuilder:
        return self._extend("attendees", values)

    def with_categories(self, *values: Any) -> JournalBuilder:
        return self._extend("categories", values)

    def with_comments(self, *values: Any) -> JournalBuilder:
        return self._extend("comments", values)

    def with_contacts(self, *values: Any) -> JournalBuilder:
        return self._extend("contacts", values)

    def with_descriptions(self, *values: Any) -> JournalBuilder:
        return self._extend("descriptions", values)

    def with_exception_date_times(self, *values: Any) -> JournalBuilder:
        return self._extend("exception_dates", values)

    def with_related_to(self, *values: Any) -> JournalBuilder:
        return self._extend("related_to", values)

    def with_recurrence_date_times(self, *values: Any) -> JournalBuilder:
        return self._extend("recurrence_dates", values)

    def with_request_statuses(self, *values: RequestStatus) -> JournalBuilder:
        return self._extend("request_statuses", values)


@dataclass(frozen=True)
class Journal(CalendarComponent):
    """A VJOURNAL. Unlike events, a journal entry may carry several DESCRIPTIONs."""

    component_name: ClassVar[str] = "VJOURNAL"
    Builder: ClassVar[type] = JournalBuilder

    date_time_stamp: Optional[DateTimeStamp] = None
    unique_identifier: Optional[UniqueIdentifier] = None
    classification: Optional[Classification] = None
    date_time_created: Optional[DateTimeCreated] = None
    date_time_start: Optional[DateTimeStart] = None
    last_modified: Optional[LastModified] = None
    organiser: Optional[Organiser] = None
    recurrence_id: Optional[RecurrenceId] = None
    sequence_number: Optional[SequenceNumber] = None
    status: Optional[Status] = None
    summary: Optional[Summary] = None
    url: Optional[UniformResourceLocator] = None
    recurrence_rule: Optional[RecurrenceRule] = None
    attachments: tuple[Attachment, ...] = ()
    attendees: tuple[Attendee, ...] = ()
    categories: tuple[Categories, ...] = ()
    comments: tuple[Comment, ...] = ()
    contacts: tuple[Contact, ...] = ()
    descriptions: tuple[Description, ...] = ()
    exception_dates: tuple[ExceptionDateTimes, ...] = ()
    related_to: tuple[RelatedTo, ...] = ()
    recurrence_dates: tuple[RecurrenceDateTimes, ...] = ()
    request_statuses: tuple[RequestStatus, ...] = ()

    def __post_init__(self) -> None:
        self._coerce("date_time_stamp", DateTimeStamp)
        self._coerce("unique_identifier", UniqueIdentifier)
        self._coerce("classification", Classification)
        self._coerce("date_time_created", DateTimeCreated)
        self._coerce("date_time_start", DateTimeStart)
        self._coerce("last_modified", LastModified)
        self._coerce("organiser", Organiser)
        self._coerce("recurrence_id", RecurrenceId)
        self._coerce("sequence_number", SequenceNumber)
        self._coerce("status", Status)
        self._coerce("summary", Summary)
        self._coerce("url", UniformResourceLocator)
        self._coerce("recurrence_rule", RecurrenceRule)
        self._coerce_all("attachments", Attachment)
        self._coerce_all("attendees", Attendee)
        self._coerce_all("categories", Categories)
        self._coerce_all("comments", Comment)
        self._coerce_all("contacts", Contact)
        self._coerce_all("descriptions", Description)
        self._coerce_all("exception_dates", ExceptionDateTimes)
        self._coerce_all("related_to", RelatedTo)
        self._coerce_all("recurrence_dates", RecurrenceDateTimes)
        self._coerce_all("request_statuses", RequestStatus)

        require_property(self.date_time_stamp, "dtstamp")
        require_property(self.unique_identifier, "uid")
        require_status(self.status, Status.is_journal_status, self.component_name)
        require_participation_status(self.attendees, ParticipationStatus.is_journal_status, self.component_name)

    def formatted(self) -> str:
        return (
            ComponentComposer.of(self.component_name)
            .start()
            .append(self.date_time_stamp)
            .append(self.unique_identifier)
            .append(self.classification)
            .append(self.date_time_created)
            .append(self.date_time_start)
            .append(self.last_modified)
            .append(self.organiser)
            .append(self.recurrence_id)
            .append(self.sequence_number)
            .append(self.status)
            .append(self.summary)
            .append(self.url)
            .append(self.recurrence_rule)
            .extend(self.attachments)
            .extend(self.attendees)
            .extend(self.categories)
            .extend(self.comments)
            .extend(self.contacts)
            .extend(self.descriptions)
            .extend(self.exception_dates)
            .extend(self.related_to)
            .extend(self.recurrence_dates)
            .extend(self.request_statuses)
            .end()
        )
