"""Relationship component properties (RFC 5545 section 3.8.4)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..composer import PropertyComposer
from ..constants import ORGANISER_URI_SCHEME
from ..formatters import escape_text
from ..parameters import (
    CalendarUserType,
    CommonName,
    Delegatees,
    Delegators,
    DirectoryEntryReference,
    Language,
    Membership,
    ParticipationRole,
    ParticipationStatus,
    RecurrenceIdentifierRange,
    RelationshipType,
    RsvpExpectation,
    SentBy,
)
from ..validators import collect, validate_not_blank, validate_uri, validate_uri_scheme
from .base import ComponentProperty, DateTimeBuilder, DateTimeProperty, LanguageBuilder, PropertyBuilder, TextProperty


class AttendeeBuilder(LanguageBuilder["Attendee"]):
    def with_calendar_user_type(self, user_type: Union[CalendarUserType, str]) -> AttendeeBuilder:
        return self._set("user_type", user_type)

    def with_membership(self, *groups: str) -> AttendeeBuilder:
        return self._set("membership", collect(groups))

    def with_participation_role(self, role: Union[ParticipationRole, str]) -> AttendeeBuilder:
        return self._set("role", role)

    def with_participation_status(self, status: Union[ParticipationStatus, str]) -> AttendeeBuilder:
        return self._set("status", status)

    def with_rsvp_expectation(self, expected: Union[RsvpExpectation, bool]) -> AttendeeBuilder:
        return self._set("rsvp", expected)

    def with_delegatees(self, *uris: str) -> AttendeeBuilder:
        return self._set("delegatees", collect(uris))

    def with_delegators(self, *uris: str) -> AttendeeBuilder:
        return self._set("delegators", collect(uris))

    def with_sent_by(self, uri: Union[SentBy, str]) -> AttendeeBuilder:
        return self._set("sent_by", uri)

    def with_common_name(self, name: Union[CommonName, str]) -> AttendeeBuilder:
        return self._set("common_name", name)

    def with_directory_entry_reference(self, uri: Union[DirectoryEntryReference, str]) -> AttendeeBuilder:
        return self._set("directory_entry", uri)


@dataclass(frozen=True)
class Attendee(ComponentProperty):
    """ATTENDEE with its parameters written as CUTYPE, MEMBER, ROLE, PARTSTAT,
    RSVP, DELEGATED-TO, DELEGATED-FROM, SENT-BY, CN, DIR, LANGUAGE."""

    property_name: ClassVar[str] = "ATTENDEE"
    Builder: ClassVar[type] = AttendeeBuilder

    value: str
    user_type: Optional[CalendarUserType] = None
    membership: Optional[Membership] = None
    role: Optional[ParticipationRole] = None
    status: Optional[ParticipationStatus] = None
    rsvp: Optional[RsvpExpectation] = None
    delegatees: Optional[Delegatees] = None
    delegators: Optional[Delegators] = None
    sent_by: Optional[SentBy] = None
    common_name: Optional[CommonName] = None
    directory_entry: Optional[DirectoryEntryReference] = None
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_uri(self.value, "attendee"))
        self._coerce("user_type", CalendarUserType)
        self._coerce("membership", Membership)
        self._coerce("role", ParticipationRole)
        self._coerce("status", ParticipationStatus)
        self._coerce("rsvp", RsvpExpectation)
        self._coerce("delegatees", Delegatees)
        self._coerce("delegators", Delegators)
        self._coerce("sent_by", SentBy)
        self._coerce("common_name", CommonName)
        self._coerce("directory_entry", DirectoryEntryReference)
        self._coerce("language", Language)

    def formatted(self) -> str:
        return (
            PropertyComposer.of(self.property_name)
            .extend(
                (
                    self.user_type,
                    self.membership,
                    self.role,
                    self.status,
                    self.rsvp,
                    self.delegatees,
                    self.delegators,
                    self.sent_by,
                    self.common_name,
                    self.directory_entry,
                    self.language,
                )
            )
            .end(self.value)
        )


@dataclass(frozen=True)
class Contact(TextProperty):
    property_name: ClassVar[str] = "CONTACT"


class OrganiserBuilder(LanguageBuilder["Organiser"]):
    def with_common_name(self, name: Union[CommonName, str]) -> OrganiserBuilder:
        return self._set("common_name", name)

    def with_directory_entry_reference(self, uri: Union[DirectoryEntryReference, str]) -> OrganiserBuilder:
        return self._set("directory_entry", uri)

    def with_sent_by(self, uri: Union[SentBy, str]) -> OrganiserBuilder:
        return self._set("sent_by", uri)


@dataclass(frozen=True)
class Organiser(ComponentProperty):
    """ORGANIZER. The calendar address must use the ``mailto`` scheme."""

    property_name: ClassVar[str] = "ORGANIZER"
    Builder: ClassVar[type] = OrganiserBuilder

    value: str
    common_name: Optional[CommonName] = None
    directory_entry: Optional[DirectoryEntryReference] = None
    sent_by: Optional[SentBy] = None
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "Organiser value must be a mailto URI", field="organizer")
        object.__setattr__(
            self,
            "value",
            validate_uri_scheme(
                self.value, ORGANISER_URI_SCHEME, "Organiser value must be a mailto URI", field="organizer"
            ),
        )
        self._coerce("common_name", CommonName)
        self._coerce("directory_entry", DirectoryEntryReference)
        self._coerce("sent_by", SentBy)
        self._coerce("language", Language)

    def formatted(self) -> str:
        return (
            PropertyComposer.of(self.property_name)
            .append(self.common_name)
            .append(self.directory_entry)
            .append(self.sent_by)
            .append(self.language)
            .end(self.value)
        )


class RecurrenceIdBuilder(DateTimeBuilder["RecurrenceId"]):
    def with_range(self, value: Union[RecurrenceIdentifierRange, str]) -> RecurrenceIdBuilder:
        return self._set("range", value)


@dataclass(frozen=True)
class RecurrenceId(DateTimeProperty):
    """RECURRENCE-ID, written with VALUE, TZID then RANGE."""

    property_name: ClassVar[str] = "RECURRENCE-ID"
    Builder: ClassVar[type] = RecurrenceIdBuilder

    range: Optional[RecurrenceIdentifierRange] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self._coerce("range", RecurrenceIdentifierRange)

    def formatted(self) -> str:
        return self._composer().append(self.range).end(self._formatted_value())


class RelatedToBuilder(PropertyBuilder["RelatedTo"]):
    def with_relationship_type(self, relationship: Union[RelationshipType, str]) -> RelatedToBuilder:
        return self._set("relationship", relationship)


@dataclass(frozen=True)
class RelatedTo(ComponentProperty):
    property_name: ClassVar[str] = "RELATED-TO"
    Builder: ClassVar[type] = RelatedToBuilder

    value: str
    relationship: Optional[RelationshipType] = None

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "RELATED-TO must name a UID", field="related_to")
        self._coerce("relationship", RelationshipType)

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).append(self.relationship).end(escape_text(self.value))


@dataclass(frozen=True)
class UniformResourceLocator(ComponentProperty):
    property_name: ClassVar[str] = "URL"

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_uri(self.value, "url"))

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(self.value)


@dataclass(frozen=True)
class UniqueIdentifier(ComponentProperty):
    property_name: ClassVar[str] = "UID"

    value: str

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "UID must not be blank", field="uid")

    def formatted(self) -> str:
        return PropertyComposer.of(self.property_name).end(escape_text(self.value))
