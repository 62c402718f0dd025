# src/datecalc/search/__init__.py
"""
datecalc.search
~~~~~~~~~~~~~~~

Forward searches over calendar days and months.

Basic usage::

    from datecalc.search import get_next_friday, get_next_friday_the_13th

    get_next_friday("2024-02-16T00:00:00Z").isoformat()
    # → '2024-02-23T00:00:00.000Z'  (a Friday maps to the following one)

    from datetime import date
    get_next_friday_the_13th(date(2024, 1, 13)).local().date()
    # → datetime.date(2024, 9, 13)
"""

from __future__ import annotations

from datecalc.search.search import (
    MAX_MONTHS_TO_FRIDAY_13TH,
    get_next_friday,
    get_next_friday_the_13th,
)

__all__ = [
    "MAX_MONTHS_TO_FRIDAY_13TH",
    "get_next_friday",
    "get_next_friday_the_13th",
]
