"""iCalendar properties, grouped as in RFC 5545 section 3.8."""

from .alarm import Action, RepeatCount, Trigger
from .base import (
    CalendarProperty,
    ComponentProperty,
    DateTimeProperty,
    Property,
    PropertyBuilder,
    TextProperty,
    as_property,
)
from .calendar import (
    CalendarDescription,
    CalendarId,
    CalendarName,
    CalendarScale,
    CalendarTimeZone,
    Method,
    Owner,
    PrimaryCalendar,
    ProductIdentifier,
    PublishedTtl,
    Version,
)
from .change import DateTimeCreated, DateTimeStamp, LastModified, SequenceNumber
from .date_time import (
    DateTimeCompleted,
    DateTimeDue,
    DateTimeEnd,
    DateTimeStart,
    DurationProperty,
    FreeBusyTime,
    TimeTransparency,
)
from .descriptive import (
    Attachment,
    Categories,
    Classification,
    Comment,
    Description,
    GeographicPosition,
    Location,
    PercentComplete,
    Priority,
    Resources,
    Status,
    Summary,
)
from .misc import CustomProperty, RequestStatus
from .recurrence import ExceptionDateTimes, RecurrenceDateTimes, RecurrenceRule
from .relationship import (
    Attendee,
    Contact,
    Organiser,
    RecurrenceId,
    RelatedTo,
    UniformResourceLocator,
    UniqueIdentifier,
)
from .time_zone import TimeZoneIdentifier, TimeZoneName, TimeZoneOffsetFrom, TimeZoneOffsetTo, TimeZoneUrl

__all__ = [
    "Property",
    "PropertyBuilder",
    "ComponentProperty",
    "CalendarProperty",
    "DateTimeProperty",
    "TextProperty",
    "as_property",
    "Action",
    "RepeatCount",
    "Trigger",
    "CalendarDescription",
    "CalendarId",
    "CalendarName",
    "CalendarScale",
    "CalendarTimeZone",
    "Method",
    "Owner",
    "PrimaryCalendar",
    "ProductIdentifier",
    "PublishedTtl",
    "Version",
    "DateTimeCreated",
    "DateTimeStamp",
    "LastModified",
    "SequenceNumber",
    "DateTimeCompleted",
    "DateTimeDue",
    "DateTimeEnd",
    "DateTimeStart",
    "DurationProperty",
    "FreeBusyTime",
    "TimeTransparency",
    "Attachment",
    "Categories",
    "Classification",
    "Comment",
    "Description",
    "GeographicPosition",
    "Location",
    "PercentComplete",
    "Priority",
    "Resources",
    "Status",
    "Summary",
    "CustomProperty",
    "RequestStatus",
    "ExceptionDateTimes",
    "RecurrenceDateTimes",
    "RecurrenceRule",
    "Attendee",
    "Contact",
    "Organiser",
    "RecurrenceId",
    "RelatedTo",
    "UniformResourceLocator",
    "UniqueIdentifier",
    "TimeZoneIdentifier",
    "TimeZoneName",
    "TimeZoneOffsetFrom",
    "TimeZoneOffsetTo",
    "TimeZoneUrl",
]
