# src/datecalc/instant/__init__.py
"""
datecalc.instant
~~~~~~~~~~~~~~~~

Explicit instant representation shared by every calculation.  A CalendarDate
is an integer count of milliseconds since the epoch; calendar fields are read
through ``utc()`` or ``local(tz)``, never implicitly.

Basic usage::

    from datecalc.instant import CalendarDate, as_calendar_date

    d = CalendarDate.parse("04 Dec 1995 00:12:00 UTC")
    d.timestamp                                   # → 818035920000
    d.utc().day                                   # → 4
    as_calendar_date("2024-02-01").isoformat()    # → '2024-02-01T00:00:00.000Z'

"Local" means, in order: an explicit ``tz=`` argument, the zone passed to
``set_local_timezone``, the ``DATECALC_TIMEZONE`` environment variable, the
system zone.

Public API
----------
CalendarDate        Immutable instant with UTC/local accessors.
DatePeriod          (start, end) pair of date-likes.
as_calendar_date    Coerce str / date / datetime / epoch-ms to CalendarDate.
set_local_timezone  Override the local zone.
get_local_timezone  Current local zone (None = system).
"""

from __future__ import annotations

from datecalc.instant.instant import (
    MS_PER_DAY,
    TIMEZONE_ENV,
    CalendarDate,
    DateLike,
    DatePeriod,
    as_calendar_date,
    attach_local,
    get_local_timezone,
    set_local_timezone,
    sunday_weekday,
)

__all__ = [
    "MS_PER_DAY",
    "TIMEZONE_ENV",
    "CalendarDate",
    "DateLike",
    "DatePeriod",
    "as_calendar_date",
    "attach_local",
    "get_local_timezone",
    "set_local_timezone",
    "sunday_weekday",
]
