"""Configuration helpers for iCalendar formatting."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import __version__
from .constants import DEFAULT_PROD_ID_TEMPLATE
from .errors import ICalendarTimeZoneError


@dataclass(frozen=True)
class ICalConfig:
    prod_id: str


def default_prod_id() -> str:
    return DEFAULT_PROD_ID_TEMPLATE.format(version=__version__)


def load_config() -> ICalConfig:
    prod_id = os.getenv("ICALKIT_PRODID", "").strip() or default_prod_id()
    return ICalConfig(prod_id=prod_id)


_UTC_OFFSET_RE = re.compile(r"^UTC([+-])(\d{2}):?(\d{2})$")


@lru_cache(maxsize=128)
def tzinfo_for_tzid(tzid: Optional[str]) -> Optional[tzinfo]:
    if not tzid:
        return None
    try:
        return ZoneInfo(tzid)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def resolve_timezone(tzid: str) -> tuple[tzinfo, str]:
    tzid = tzid.strip()
    if not tzid:
        raise ICalendarTimeZoneError("Time zone identifier must not be blank", tzid=tzid)
    tzinfo_value = tzinfo_for_tzid(tzid)
    if tzinfo_value is not None:
        return tzinfo_value, tzid
    match = _UTC_OFFSET_RE.match(tzid)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        if sign == "-":
            offset = -offset
        return timezone(offset, name=tzid), tzid
    raise ICalendarTimeZoneError(f"Unknown time zone '{tzid}'", tzid=tzid)


def tzid_for_tzinfo(value: tzinfo) -> str:
    key = getattr(value, "key", None)
    if key:
        return key
    name = value.tzname(None)
    if name:
        return name
    raise ICalendarTimeZoneError("Time zone has no usable identifier", tzid=repr(value))
