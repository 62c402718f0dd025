from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

import numpy as np

from datecalc._exceptions import InvalidArgumentError, InvalidDateError
from datecalc.instant import DatePeriod

logger = logging.getLogger(__name__)

DATE_FMT: str = "%d-%m-%Y"


@dataclass(frozen=True, slots=True)
class WorkPattern:
    """
    Repeating cycle of ``work_days`` on followed by ``off_days`` off.

    Day offsets are counted from the first day of the schedule; offset
    ``k`` is a work day iff ``k % cycle_length < work_days``.
    """

    work_days: int
    off_days: int

    def __post_init__(self) -> None:
        if self.work_days < 1:
            raise InvalidArgumentError(
                f"work_days must be at least 1; got {self.work_days}."
            )
        if self.off_days < 0:
            raise InvalidArgumentError(
                f"off_days must be non-negative; got {self.off_days}."
            )

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    @property
    def pattern(self) -> np.ndarray:
        """One cycle as a boolean array, work days first."""
        return np.array([True] * self.work_days + [False] * self.off_days, dtype=bool)

    def is_work_day(self, offset: int) -> bool:
        return offset % self.cycle_length < self.work_days

    def mask(self, n_days: int) -> np.ndarray:
        """Work-day mask for offsets ``0 .. n_days - 1``."""
        if n_days <= 0:
            return np.zeros(0, dtype=bool)
        return self.pattern[np.arange(n_days, dtype=np.int64) % self.cycle_length]


def _to_day(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FMT).date()
        except ValueError as exc:
            raise InvalidDateError(f"Expected a DD-MM-YYYY date; got {value!r}.") from exc
    raise InvalidDateError(f"Unsupported schedule date type: {type(value).__name__}.")


def get_work_schedule(period: Any, work_days: int, off_days: int) -> list[str]:
    """
    Work days of a repeating on/off cycle within an inclusive period.

    ``period`` holds ``DD-MM-YYYY`` strings (or dates) as a DatePeriod,
    mapping or pair.  The cycle starts on ``period.start``; the result
    lists every work day up to and including ``period.end`` as
    ``DD-MM-YYYY``, in order.
    """
    bounds = DatePeriod.coerce(period)
    start, end = _to_day(bounds.start), _to_day(bounds.end)
    pattern = WorkPattern(work_days, off_days)

    n_days = (end - start).days + 1
    offsets = np.flatnonzero(pattern.mask(n_days))
    schedule = [(start + timedelta(days=int(k))).strftime(DATE_FMT) for k in offsets]

    logger.debug(
        "Schedule %s..%s with %d on / %d off: %d work day(s).",
        start, end, work_days, off_days, len(schedule),
    )
    return schedule
