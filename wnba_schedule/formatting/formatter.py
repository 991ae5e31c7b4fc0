"""Date and time strings for menu display.

Both formatters are total: input that does not parse yields a placeholder
rather than an exception.
"""

import re
from datetime import datetime, timedelta
from typing import Any

TIME_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})", re.ASCII)
DATE_PATTERN = re.compile(r"(\d{4})(\d{2})(\d{2})", re.ASCII)

# Feed times are UTC; Eastern is taken as a fixed UTC-4 (EDT all year)
ET_OFFSET = timedelta(hours=4)

TIME_TBA = "Time TBA"
DATE_UNKNOWN = "Date Unknown"

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def format_time(raw: Any) -> str:
    """'2024-06-03T19:00Z' -> '03:00 PM ET'. Anything after the minutes is ignored."""
    if not isinstance(raw, str):
        return TIME_TBA
    match = TIME_PATTERN.match(raw)
    if not match:
        return TIME_TBA
    try:
        moment = datetime(*(int(part) for part in match.groups()))
    except ValueError:
        return TIME_TBA
    return (moment - ET_OFFSET).strftime("%I:%M %p ET")


def get_day_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return "th"
    return _SUFFIXES.get(day % 10, "th")


def format_date(raw: Any) -> str:
    """'20240603' -> 'Mon Jun 3rd'.

    The key must also be a real calendar date in years 0001-9999; month 13,
    Feb 30 or year 0000 give DATE_UNKNOWN.
    """
    if not isinstance(raw, str):
        return DATE_UNKNOWN
    match = DATE_PATTERN.fullmatch(raw)
    if not match:
        return DATE_UNKNOWN
    try:
        day = datetime(*(int(part) for part in match.groups()))
    except ValueError:
        return DATE_UNKNOWN
    return f"{day:%a} {day:%b} {day.day}{get_day_suffix(day.day)}"
