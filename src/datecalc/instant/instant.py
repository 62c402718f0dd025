from __future__ import annotations

import math
import numbers
import os
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Mapping, Optional, Sequence, Union
from zoneinfo import ZoneInfo

import numpy as np
from dateutil import parser as _dateparser

from datecalc._exceptions import InvalidArgumentError, InvalidDateError

MS_PER_DAY: int = 86_400_000
TIMEZONE_ENV: str = "DATECALC_TIMEZONE"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
_ISO_DATE_ONLY = re.compile(r"^\s*(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?\s*$")

# Two defaults differing in every date field; a field dateutil fills from
# the default shows up as a difference between the two parses.
_PARSE_DEFAULTS = (datetime(1970, 1, 1), datetime(1971, 2, 2))

_local_tz: Optional[tzinfo] = None


# ── local timezone configuration ─────────────────────────────────────────────

def set_local_timezone(tz: Union[tzinfo, str, None]) -> None:
    """
    Set the zone used for "local" reads and constructions.

    Accepts a tzinfo or an IANA name.  ``None`` resets to the
    ``DATECALC_TIMEZONE`` environment variable, or the system zone.
    """
    global _local_tz
    _local_tz = ZoneInfo(tz) if isinstance(tz, str) else tz


def get_local_timezone() -> Optional[tzinfo]:
    """Configured local zone; ``None`` means the system local zone."""
    if _local_tz is not None:
        return _local_tz
    name = os.environ.get(TIMEZONE_ENV)
    if name:
        return ZoneInfo(name)
    return None


def _resolve_tz(tz: Optional[tzinfo]) -> Optional[tzinfo]:
    return tz if tz is not None else get_local_timezone()


def attach_local(naive: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Interpret a naive wall-clock datetime in the local zone."""
    zone = _resolve_tz(tz)
    if zone is None:
        # naive.astimezone() assumes system local time
        return naive.astimezone()
    return naive.replace(tzinfo=zone)


# ── CalendarDate ─────────────────────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A point in time stored as whole milliseconds since 1970-01-01T00:00Z.

    Calendar fields are never read implicitly: use ``utc()`` or
    ``local(tz)`` to get an aware datetime in the wanted interpretation.
    """

    timestamp: int

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, numbers.Real) and not math.isfinite(self.timestamp):
            raise InvalidDateError(f"Non-finite timestamp: {self.timestamp}.")
        object.__setattr__(self, "timestamp", int(self.timestamp))

    # ── constructors ─────────────────────────────────────────────────────

    @classmethod
    def from_datetime(cls, dt: datetime, tz: Optional[tzinfo] = None) -> CalendarDate:
        if dt.tzinfo is None or dt.utcoffset() is None:
            dt = attach_local(dt, tz)
        return cls((dt - _EPOCH) // _ONE_MS)

    @classmethod
    def from_date(cls, d: date, tz: Optional[tzinfo] = None) -> CalendarDate:
        return cls.from_datetime(datetime(d.year, d.month, d.day), tz)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        tz: Optional[tzinfo] = None,
    ) -> CalendarDate:
        """Build from local wall-clock fields (month is 1-based)."""
        try:
            naive = datetime(year, month, day, hour, minute, second, millisecond * 1000)
        except ValueError as exc:
            raise InvalidDateError(str(exc)) from exc
        return cls.from_datetime(naive, tz)

    @classmethod
    def from_utc_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> CalendarDate:
        try:
            dt = datetime(
                year, month, day, hour, minute, second, millisecond * 1000,
                tzinfo=timezone.utc,
            )
        except ValueError as exc:
            raise InvalidDateError(str(exc)) from exc
        return cls.from_datetime(dt)

    @classmethod
    def parse(cls, text: str, tz: Optional[tzinfo] = None) -> CalendarDate:
        """
        Parse a date string.

        A bare ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` is UTC midnight of
        the first day it names.  Anything else goes through dateutil and
        must name a year, month and day; results without zone information
        are local wall clock.
        """
        m = _ISO_DATE_ONLY.match(text)
        if m:
            year, month, day = (int(g) if g else 1 for g in m.groups())
            return cls.from_utc_fields(year, month, day)
        try:
            first, second = (_dateparser.parse(text, default=d) for d in _PARSE_DEFAULTS)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(f"Unparseable date string: {text!r}") from exc
        if first != second:
            raise InvalidDateError(f"Date string lacks a year, month or day: {text!r}")
        return cls.from_datetime(first, tz)

    # ── accessors ────────────────────────────────────────────────────────

    def utc(self) -> datetime:
        return _EPOCH + timedelta(milliseconds=self.timestamp)

    def local(self, tz: Optional[tzinfo] = None) -> datetime:
        return self.utc().astimezone(_resolve_tz(tz))

    def add_days(self, days: int, tz: Optional[tzinfo] = None) -> CalendarDate:
        """Shift by whole local calendar days, keeping the local wall clock."""
        wall = self.local(tz).replace(tzinfo=None)
        return CalendarDate.from_datetime(wall + timedelta(days=days), tz)

    def isoformat(self) -> str:
        return self.utc().isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def __str__(self) -> str:
        return self.isoformat()


DateLike = Union[CalendarDate, datetime, date, str, int, float, np.datetime64]


def as_calendar_date(value: Any, tz: Optional[tzinfo] = None) -> CalendarDate:
    """
    Coerce a date-like value.

    Naive datetimes and plain dates are local; numbers are epoch
    milliseconds.
    """
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, datetime):
        return CalendarDate.from_datetime(value, tz)
    if isinstance(value, date):
        return CalendarDate.from_date(value, tz)
    if isinstance(value, str):
        return CalendarDate.parse(value, tz)
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidDateError("NaT is not a date.")
        return CalendarDate(int(value.astype("datetime64[ms]").astype(np.int64)))
    if isinstance(value, bool):
        raise InvalidDateError("bool is not a date.")
    if isinstance(value, numbers.Real):
        return CalendarDate(value)
    raise InvalidDateError(f"Unsupported date-like type: {type(value).__name__}.")


# ── DatePeriod ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DatePeriod:
    """Pair of date-likes.  ``start <= end`` is expected, never enforced."""

    start: Any
    end: Any

    @classmethod
    def coerce(cls, value: Any) -> DatePeriod:
        if isinstance(value, DatePeriod):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(value["start"], value["end"])
            except KeyError as exc:
                raise InvalidArgumentError(
                    f"Period mapping needs 'start' and 'end'; missing {exc}."
                ) from exc
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(value[0], value[1])
        raise InvalidArgumentError(f"Cannot interpret {value!r} as a period.")

    def bounds(self, tz: Optional[tzinfo] = None) -> tuple[CalendarDate, CalendarDate]:
        return as_calendar_date(self.start, tz), as_calendar_date(self.end, tz)


def sunday_weekday(d: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7
