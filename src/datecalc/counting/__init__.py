# src/datecalc/counting/__init__.py
"""
datecalc.counting
~~~~~~~~~~~~~~~~~

Day counts over months and periods, period inclusion and week numbering.

Basic usage::

    from datecalc.counting import get_count_days_in_month, get_week_number_by_date

    get_count_days_in_month(2, 2024)              # → 29
    get_week_number_by_date("2024-02-23")         # → 8

The month counters accept NumPy arrays::

    import numpy as np
    get_count_weekends_in_month(np.arange(1, 13), 2024)
"""

from __future__ import annotations

from datecalc.counting.counting import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_week_number_by_date,
    is_date_in_period,
)

__all__ = [
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "is_date_in_period",
]
