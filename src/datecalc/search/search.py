from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Optional

from dateutil.relativedelta import relativedelta

from datecalc._exceptions import SearchLimitError
from datecalc.instant import CalendarDate, DateLike, as_calendar_date, sunday_weekday

logger = logging.getLogger(__name__)

FRIDAY: int = 5

# Sunday-based weekday -> days until the following Friday (never 0).
_DAYS_TO_NEXT_FRIDAY: tuple[int, ...] = (5, 4, 3, 2, 1, 7, 6)

# Longest possible run of months without a Friday the 13th is 14.
MAX_MONTHS_TO_FRIDAY_13TH: int = 14


def get_next_friday(date: DateLike, tz: Optional[tzinfo] = None) -> CalendarDate:
    """
    The Friday strictly after ``date``.

    The weekday is read in UTC; the offset is then added as whole local
    calendar days, so the local wall clock is kept.
    """
    cd = as_calendar_date(date, tz)
    offset = _DAYS_TO_NEXT_FRIDAY[sunday_weekday(cd.utc())]
    return cd.add_days(offset, tz)


def get_next_friday_the_13th(date: DateLike, tz: Optional[tzinfo] = None) -> CalendarDate:
    """
    First Friday the 13th at or after the 13th of the local month of ``date``.

    Returns local midnight of that day.
    """
    local = as_calendar_date(date, tz).local(tz)
    first = datetime(local.year, local.month, 13)

    for months in range(MAX_MONTHS_TO_FRIDAY_13TH + 1):
        candidate = first + relativedelta(months=months)
        if sunday_weekday(candidate) == FRIDAY:
            logger.debug(
                "Friday the 13th found %d month(s) after %s.", months, first.date()
            )
            return CalendarDate.from_datetime(candidate, tz)

    raise SearchLimitError(
        f"No Friday the 13th within {MAX_MONTHS_TO_FRIDAY_13TH} months of {first.date()}."
    )
