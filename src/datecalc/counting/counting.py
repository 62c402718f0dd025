from __future__ import annotations

import math
from datetime import timedelta, tzinfo
from typing import Any, Optional, Union

import numpy as np

from datecalc._exceptions import InvalidArgumentError
from datecalc.instant import (
    MS_PER_DAY,
    DateLike,
    DatePeriod,
    as_calendar_date,
    sunday_weekday,
)

ArrayLike = Union[int, "np.ndarray"]

# busday weekmask runs Monday..Sunday; only Saturday and Sunday are "on".
_WEEKEND_MASK: str = "0000011"


# ── month helpers (shared by the array-aware counters) ───────────────────────

def _month_bounds(month: ArrayLike, year: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    m = np.atleast_1d(np.asarray(month, dtype=np.int64))
    y = np.atleast_1d(np.asarray(year, dtype=np.int64))
    m, y = np.broadcast_arrays(m, y)

    if np.any((m < 1) | (m > 12)):
        bad = m[(m < 1) | (m > 12)]
        raise InvalidArgumentError(f"Month must be in 1..12; got {bad.tolist()}.")

    # datetime64[M] counts months since 1970-01
    first = ((y - 1970) * 12 + (m - 1)).astype("datetime64[M]")
    return first.astype("datetime64[D]"), (first + 1).astype("datetime64[D]")


def _scalar_or_array(result: np.ndarray, scalar: bool) -> ArrayLike:
    return int(result.flat[0]) if scalar else result


# ── public counters ──────────────────────────────────────────────────────────

def get_count_days_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """
    Number of days in ``month`` (1-12) of ``year``.

    NumPy arrays are accepted for either argument and broadcast together.
    """
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    first, following = _month_bounds(month, year)
    days = (following - first).astype(np.int64)
    return _scalar_or_array(days.reshape(np.broadcast(month, year).shape), scalar)


def get_count_weekends_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """Count of Saturdays and Sundays in ``month`` (1-12) of ``year``."""
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    first, following = _month_bounds(month, year)
    weekends = np.busday_count(first, following, weekmask=_WEEKEND_MASK)
    return _scalar_or_array(
        np.asarray(weekends, dtype=np.int64).reshape(np.broadcast(month, year).shape),
        scalar,
    )


def get_count_days_on_period(start: DateLike, end: DateLike) -> int:
    """
    Whole days between two instants, counting both ends.

    The distance is absolute and rounded half up, so argument order does
    not matter.
    """
    a, b = as_calendar_date(start), as_calendar_date(end)
    days = abs(b.timestamp - a.timestamp) / MS_PER_DAY
    return math.floor(days + 0.5) + 1


def is_date_in_period(date: DateLike, period: Any) -> bool:
    """
    Whether ``period.start <= date <= period.end``.

    ``period`` may be a DatePeriod, a ``{"start": ..., "end": ...}``
    mapping or a pair.  Instants are compared as-is, time of day included.
    """
    start, end = DatePeriod.coerce(period).bounds()
    return start <= as_calendar_date(date) <= end


def get_week_number_by_date(date: DateLike, tz: Optional[tzinfo] = None) -> int:
    """
    Week of the year for the local calendar day of ``date``.

    Weeks start on Monday and week 1 is the one holding January 1, so
    any days before the first Monday belong to week 1.
    """
    day = as_calendar_date(date, tz).local(tz).date()
    jan1 = day.replace(month=1, day=1)

    # Monday -> 0, Sunday -> 1, Tuesday -> 6, ... Saturday -> 2
    to_monday = (8 - sunday_weekday(jan1)) % 7
    first_monday = jan1 + timedelta(days=to_monday)

    if day < first_monday:
        return 1
    weeks = (day - first_monday).days // 7
    # The partial week before the first Monday is week 1.
    return weeks + 1 if to_monday == 0 else weeks + 2
