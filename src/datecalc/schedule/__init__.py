# src/datecalc/schedule/__init__.py
"""
datecalc.schedule
~~~~~~~~~~~~~~~~~

Shift schedules from a repeating work/off cycle.  A WorkPattern maps day
offsets to "work" or "off" via a cyclic boolean pattern.

Basic usage::

    from datecalc.schedule import WorkPattern, get_work_schedule

    get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

    WorkPattern(2, 1).mask(6)      # → array([ True,  True, False,  True,  True, False])

Public API
----------
WorkPattern        (work_days, off_days) cycle.
get_work_schedule  Work days of a period as DD-MM-YYYY strings.
"""

from __future__ import annotations

from datecalc.schedule.schedule import DATE_FMT, WorkPattern, get_work_schedule

__all__ = [
    "DATE_FMT",
    "WorkPattern",
    "get_work_schedule",
]
