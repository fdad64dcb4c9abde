"""iCalendar components (RFC 5545 section 3.6)."""

from .alarm import Alarm
from .base import CalendarComponent, ComponentBuilder
from .event import Event
from .freebusy import FreeBusy
from .journal import Journal
from .timezone import Daylight, Standard, TimeZone, TimeZoneProperty
from .todo import Todo

__all__ = [
    "CalendarComponent",
    "ComponentBuilder",
    "Alarm",
    "Event",
    "FreeBusy",
    "Journal",
    "TimeZone",
    "TimeZoneProperty",
    "Standard",
    "Daylight",
    "Todo",
]
