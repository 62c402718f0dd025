from __future__ import annotations

import logging
import math
import numbers
from datetime import tzinfo
from typing import Any, Optional, Union

from datecalc._exceptions import InvalidDateError
from datecalc.instant import DateLike, as_calendar_date, sunday_weekday

logger = logging.getLogger(__name__)

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def date_to_timestamp(text: Any) -> Union[int, float]:
    """
    Epoch milliseconds of a date string.

    Unparseable input yields ``nan`` instead of raising, so callers can
    propagate the invalid-date marker the way they would a missing value.
    """
    try:
        return as_calendar_date(text).timestamp
    except InvalidDateError:
        logger.warning("Invalid date %r; returning NaN.", text)
        return math.nan


def get_time(date: DateLike, tz: Optional[tzinfo] = None) -> str:
    """Local time of day as ``hh:mm:ss``."""
    local = as_calendar_date(date, tz).local(tz)
    return f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"


def get_day_name(date: DateLike) -> str:
    """English name of the UTC weekday."""
    idx = sunday_weekday(as_calendar_date(date).utc())
    if 0 <= idx < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[idx]
    return ""


def get_quarter(date: DateLike, tz: Optional[tzinfo] = None) -> int:
    month = as_calendar_date(date, tz).local(tz).month
    return (month - 1) // 3 + 1


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_leap_year(date: DateLike, tz: Optional[tzinfo] = None) -> bool:
    """
    Whether the local year of ``date`` is a Gregorian leap year.

    A plain integer is taken as the year itself; pass a CalendarDate to
    test an epoch-millisecond value.
    """
    if isinstance(date, numbers.Integral) and not isinstance(date, bool):
        return _is_leap(int(date))
    return _is_leap(as_calendar_date(date, tz).local(tz).year)


def format_date(date: DateLike, tz: Optional[tzinfo] = None) -> str:
    """
    Format as ``M/D/YYYY, h:mm:ss AM|PM``.

    Month and year are local; day, hour, minute and second are UTC.
    Midnight prints as ``0:mm:ss AM``.
    """
    cd = as_calendar_date(date, tz)
    local, utc = cd.local(tz), cd.utc()

    if utc.hour < 12:
        hour, suffix = utc.hour, "AM"
    elif utc.hour == 12:
        hour, suffix = 12, "PM"
    else:
        hour, suffix = utc.hour - 12, "PM"

    return (
        f"{local.month}/{utc.day}/{local.year}, "
        f"{hour}:{utc.minute:02d}:{utc.second:02d} {suffix}"
    )
