# src/datecalc/__init__.py
"""
datecalc
~~~~~~~~

Pure date-calculation helpers: timestamp conversion, weekday lookup,
Friday searches, weekend and period counts, week numbering, leap years and
work/off-day schedules.

Every function accepts any date-like (CalendarDate, datetime, date, date
string or epoch milliseconds) and reads calendar fields explicitly in UTC or
in the local zone; see ``datecalc.instant``.

Basic usage::

    import datecalc

    datecalc.get_count_days_in_month(2, 2024)                  # → 29
    datecalc.format_date("2024-02-01T15:00:00.000Z")           # → '2/1/2024, 3:00:00 PM'
    datecalc.get_work_schedule(("01-01-2024", "10-01-2024"), 1, 1)
"""

from __future__ import annotations

from datecalc._exceptions import (
    DateCalcError,
    InvalidArgumentError,
    InvalidDateError,
    SearchLimitError,
)
from datecalc.counting import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_week_number_by_date,
    is_date_in_period,
)
from datecalc.fields import (
    date_to_timestamp,
    format_date,
    get_day_name,
    get_quarter,
    get_time,
    is_leap_year,
)
from datecalc.instant import (
    CalendarDate,
    DatePeriod,
    as_calendar_date,
    get_local_timezone,
    set_local_timezone,
)
from datecalc.schedule import WorkPattern, get_work_schedule
from datecalc.search import get_next_friday, get_next_friday_the_13th

__all__ = [
    "CalendarDate",
    "DateCalcError",
    "DatePeriod",
    "InvalidArgumentError",
    "InvalidDateError",
    "SearchLimitError",
    "WorkPattern",
    "as_calendar_date",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_local_timezone",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
    "set_local_timezone",
]
