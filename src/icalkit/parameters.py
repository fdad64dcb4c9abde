"""Property parameters (RFC 5545 section 3.2).

Every parameter renders as a ``;NAME=value`` fragment through ``formatted()``.
Enumerated parameters are ``Enum`` members whose value is the RFC token;
the rest are small frozen dataclasses that validate on construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import tzinfo
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from .config import resolve_timezone, tzid_for_tzinfo
from .formatters import format_parameter_value
from .validators import (
    collect,
    fail,
    validate_language_tag,
    validate_media_type,
    validate_not_blank,
    validate_property_name,
    validate_uri,
)

P = TypeVar("P")


class Parameter:
    parameter_name: ClassVar[str]

    def formatted_value(self) -> str:
        raise NotImplementedError

    def formatted(self) -> str:
        return f";{self.parameter_name}={self.formatted_value()}"


class EnumParameter(Parameter):
    """Mixin for parameters whose value is one enumerated RFC token."""

    def formatted_value(self) -> str:
        return self.value


def as_parameter(value: Any, parameter_type: type[P]) -> P:
    """Accept either a ready parameter or the raw value it wraps."""
    if value is None or isinstance(value, parameter_type):
        return value
    if issubclass(parameter_type, Enum):
        try:
            return parameter_type(str(value).upper())
        except ValueError as exc:
            raise fail(
                f"Unknown {parameter_type.__name__} value '{value}'", field=parameter_type.__name__, value=value
            ) from exc
    try:
        return parameter_type(value)
    except TypeError as exc:
        raise fail(
            f"Cannot build {parameter_type.__name__} from {value!r}", field=parameter_type.__name__, value=value
        ) from exc


def _quoted_list(uris: tuple[str, ...]) -> str:
    return ",".join(format_parameter_value(uri, always_quote=True) for uri in uris)


@dataclass(frozen=True)
class CommonName(Parameter):
    parameter_name: ClassVar[str] = "CN"

    value: str

    def __post_init__(self) -> None:
        validate_not_blank(self.value, "Common name must not be blank", field="cn")

    def formatted_value(self) -> str:
        return format_parameter_value(self.value)


@dataclass(frozen=True)
class Language(Parameter):
    parameter_name: ClassVar[str] = "LANGUAGE"

    tag: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", validate_language_tag(self.tag))

    def formatted_value(self) -> str:
        return self.tag


@dataclass(frozen=True)
class TimeZoneIdentifier(Parameter):
    """TZID parameter, resolved to a ``tzinfo`` so local times can be rendered.

    Accepts an IANA name, a ``UTC+HH:MM`` identifier or a ``tzinfo`` instance.
    """

    parameter_name: ClassVar[str] = "TZID"

    value: Union[str, tzinfo]
    tzid: str = field(init=False)
    zone: tzinfo = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, tzinfo):
            zone, tzid = self.value, tzid_for_tzinfo(self.value)
        elif isinstance(self.value, str):
            zone, tzid = resolve_timezone(self.value)
        else:
            raise fail("Time zone must be an identifier or tzinfo", field="tzid", value=self.value)
        object.__setattr__(self, "tzid", tzid)
        object.__setattr__(self, "zone", zone)

    def formatted_value(self) -> str:
        return format_parameter_value(self.tzid)


@dataclass(frozen=True)
class RsvpExpectation(Parameter):
    parameter_name: ClassVar[str] = "RSVP"

    expected: bool

    def __post_init__(self) -> None:
        if not isinstance(self.expected, bool):
            raise fail("RSVP must be a boolean", field="rsvp", value=self.expected)

    def formatted_value(self) -> str:
        return "TRUE" if self.expected else "FALSE"


@dataclass(frozen=True)
class _AddressList(Parameter):
    uris: tuple[str, ...]

    def __post_init__(self) -> None:
        uris = collect((self.uris,) if isinstance(self.uris, str) else tuple(self.uris))
        if not uris:
            raise fail(f"{self.parameter_name} needs at least one address", field=self.parameter_name.lower())
        object.__setattr__(self, "uris", tuple(validate_uri(uri, self.parameter_name.lower()) for uri in uris))

    def formatted_value(self) -> str:
        return _quoted_list(self.uris)


@dataclass(frozen=True)
class Delegatees(_AddressList):
    parameter_name: ClassVar[str] = "DELEGATED-TO"


@dataclass(frozen=True)
class Delegators(_AddressList):
    parameter_name: ClassVar[str] = "DELEGATED-FROM"


@dataclass(frozen=True)
class Membership(_AddressList):
    parameter_name: ClassVar[str] = "MEMBER"


@dataclass(frozen=True)
class _UriParameter(Parameter):
    uri: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "uri", validate_uri(self.uri, self.parameter_name.lower()))

    def formatted_value(self) -> str:
        return format_parameter_value(self.uri, always_quote=True)


@dataclass(frozen=True)
class SentBy(_UriParameter):
    parameter_name: ClassVar[str] = "SENT-BY"


@dataclass(frozen=True)
class DirectoryEntryReference(_UriParameter):
    parameter_name: ClassVar[str] = "DIR"


@dataclass(frozen=True)
class AlternateTextRepresentation(_UriParameter):
    parameter_name: ClassVar[str] = "ALTREP"


@dataclass(frozen=True)
class FormatType(Parameter):
    parameter_name: ClassVar[str] = "FMTTYPE"

    media_type: str

    def __post_init__(self) -> None:
        validate_media_type(self.media_type)

    def formatted_value(self) -> str:
        return format_parameter_value(self.media_type)


@dataclass(frozen=True)
class CustomParameter(Parameter):
    """An ``X-`` or IANA parameter carried verbatim on a custom property."""

    name: str
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", validate_property_name(self.name))
        if self.value is None:
            raise fail("Parameter value is required", field=self.name)

    @property
    def parameter_name(self) -> str:
        return self.name

    def formatted_value(self) -> str:
        return format_parameter_value(str(self.value))


class CalendarUserType(EnumParameter, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    GROUP = "GROUP"
    RESOURCE = "RESOURCE"
    ROOM = "ROOM"
    UNKNOWN = "UNKNOWN"

    @property
    def parameter_name(self) -> str:
        return "CUTYPE"


class ParticipationRole(EnumParameter, Enum):
    CHAIR = "CHAIR"
    REQ_PARTICIPANT = "REQ-PARTICIPANT"
    OPT_PARTICIPANT = "OPT-PARTICIPANT"
    NON_PARTICIPANT = "NON-PARTICIPANT"

    @property
    def parameter_name(self) -> str:
        return "ROLE"


class ParticipationStatus(EnumParameter, Enum):
    NEEDS_ACTION = "NEEDS-ACTION"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    TENTATIVE = "TENTATIVE"
    DELEGATED = "DELEGATED"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"

    @property
    def parameter_name(self) -> str:
        return "PARTSTAT"

    def is_event_status(self) -> bool:
        return self in _EVENT_PARTSTATS

    def is_todo_status(self) -> bool:
        return self in _TODO_PARTSTATS

    def is_journal_status(self) -> bool:
        return self in _JOURNAL_PARTSTATS


_JOURNAL_PARTSTATS = frozenset(
    {ParticipationStatus.NEEDS_ACTION, ParticipationStatus.ACCEPTED, ParticipationStatus.DECLINED}
)
_EVENT_PARTSTATS = _JOURNAL_PARTSTATS | {ParticipationStatus.TENTATIVE, ParticipationStatus.DELEGATED}
_TODO_PARTSTATS = _EVENT_PARTSTATS | {ParticipationStatus.COMPLETED, ParticipationStatus.IN_PROCESS}


class FreeBusyTimeType(EnumParameter, Enum):
    FREE = "FREE"
    BUSY = "BUSY"
    BUSY_UNAVAILABLE = "BUSY-UNAVAILABLE"
    BUSY_TENTATIVE = "BUSY-TENTATIVE"

    @property
    def parameter_name(self) -> str:
        return "FBTYPE"


class InlineEncoding(EnumParameter, Enum):
    EIGHT_BIT = "8BIT"
    BASE64 = "BASE64"

    @property
    def parameter_name(self) -> str:
        return "ENCODING"


class ValueDataType(EnumParameter, Enum):
    BINARY = "BINARY"
    BOOLEAN = "BOOLEAN"
    CAL_ADDRESS = "CAL-ADDRESS"
    DATE = "DATE"
    DATE_TIME = "DATE-TIME"
    DURATION = "DURATION"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    PERIOD = "PERIOD"
    RECUR = "RECUR"
    TEXT = "TEXT"
    TIME = "TIME"
    URI = "URI"
    UTC_OFFSET = "UTC-OFFSET"
    UNKNOWN = "UNKNOWN"
    UID = "UID"
    XML_REFERENCE = "XML-REFERENCE"

    @property
    def parameter_name(self) -> str:
        return "VALUE"


class RecurrenceIdentifierRange(EnumParameter, Enum):
    THIS_AND_FUTURE = "THISANDFUTURE"

    @property
    def parameter_name(self) -> str:
        return "RANGE"


class AlarmTriggerRelationship(EnumParameter, Enum):
    START = "START"
    END = "END"

    @property
    def parameter_name(self) -> str:
        return "RELATED"


class RelationshipType(EnumParameter, Enum):
    PARENT = "PARENT"
    CHILD = "CHILD"
    SIBLING = "SIBLING"
    # RFC 9253 additions
    SNOOZE = "SNOOZE"
    CONCEPT = "CONCEPT"
    DEPENDS_ON = "DEPENDS-ON"
    FINISH_TO_FINISH = "FINISHTOFINISH"
    FINISH_TO_START = "FINISHTOSTART"
    FIRST = "FIRST"
    NEXT = "NEXT"
    REFID = "REFID"
    START_TO_FINISH = "STARTTOFINISH"
    START_TO_START = "STARTTOSTART"

    @property
    def parameter_name(self) -> str:
        return "RELTYPE"
