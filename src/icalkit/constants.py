"""Constants for iCalendar (RFC 5545) formatting."""

from __future__ import annotations

CRLF = "\r\n"
FOLD_PREFIX = " "

# Content lines SHOULD NOT exceed 75 octets, excluding the line break.
MAX_LINE_OCTETS = 75

ICALENDAR_VERSION = "2.0"

DEFAULT_PROD_ID_TEMPLATE = "-//icalkit//icalkit {version}//EN"

WEEKDAY_CODES = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")

UTC_OFFSET_LIMITS = {
    "HOUR_MAX": 12,
    "MINUTE_MAX": 59,
    "SECOND_MAX": 59,
}

RECUR_LIMITS = {
    "BYSECOND": (0, 60),
    "BYMINUTE": (0, 59),
    "BYHOUR": (0, 23),
    "BYMONTHDAY": (1, 31),
    "BYYEARDAY": (1, 366),
    "BYWEEKNO": (1, 53),
    "BYMONTH": (1, 12),
    "BYSETPOS": (1, 366),
}

# Rule parts whose values may be negative (counted from the end of the period).
SIGNED_RECUR_PARTS = {"BYMONTHDAY", "BYYEARDAY", "BYWEEKNO", "BYSETPOS"}

WEEKDAY_ORDINAL_MAX = 53

REQUEST_STATUS_LIMITS = {
    "CLASS_MIN": 1,
    "CLASS_MAX": 5,
    "DETAIL_MIN": 0,
    "DETAIL_MAX": 99,
}

PRIORITY_RANGE = (0, 9)
PERCENT_COMPLETE_RANGE = (0, 100)

GEO_LIMITS = {
    "LATITUDE": 90.0,
    "LONGITUDE": 180.0,
}

ORGANISER_URI_SCHEME = "mailto"
