# src/datecalc/fields/__init__.py
"""
datecalc.fields
~~~~~~~~~~~~~~~

Direct reads of calendar fields, plus human-readable formatting.

Basic usage::

    from datecalc.fields import format_date, get_day_name

    get_day_name("2024-01-30T00:00:00.000Z")      # → 'Tuesday'
    format_date("2024-02-01T15:00:00.000Z")       # → '2/1/2024, 3:00:00 PM'

Functions that read local fields take an optional ``tz=``; the others read
UTC fields.
"""

from __future__ import annotations

from datecalc.fields.fields import (
    WEEKDAY_NAMES,
    date_to_timestamp,
    format_date,
    get_day_name,
    get_quarter,
    get_time,
    is_leap_year,
)

__all__ = [
    "WEEKDAY_NAMES",
    "date_to_timestamp",
    "format_date",
    "get_day_name",
    "get_quarter",
    "get_time",
    "is_leap_year",
]
