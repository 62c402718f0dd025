"""
tests/schedule/test_schedule.py

Covers:
  - WorkPattern validation, cycle mask and is_work_day
  - get_work_schedule examples
  - End date on a work day / off day / first day of a new cycle
  - Month, year and leap-day rollover
  - Period input forms (mapping, pair, DatePeriod, date objects)
  - Invalid inputs
  - Invariants over many patterns
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta

import numpy as np
import pytest

from datecalc import InvalidArgumentError, InvalidDateError
from datecalc.instant import DatePeriod
from datecalc.schedule import DATE_FMT, WorkPattern, get_work_schedule


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def two_on_one_off():
    return WorkPattern(2, 1)


@pytest.fixture
def january():
    return {"start": "01-01-2024", "end": "31-01-2024"}


# ── Helpers ───────────────────────────────────────────────────────────────────

def parse(text):
    return datetime.strptime(text, DATE_FMT).date()


# ── WorkPattern ───────────────────────────────────────────────────────────────

class TestWorkPattern:

    def test_cycle_length(self, two_on_one_off):
        assert two_on_one_off.cycle_length == 3

    def test_pattern(self, two_on_one_off):
        np.testing.assert_array_equal(two_on_one_off.pattern, [True, True, False])

    def test_mask(self, two_on_one_off):
        np.testing.assert_array_equal(
            two_on_one_off.mask(7), [True, True, False, True, True, False, True]
        )

    def test_empty_mask(self, two_on_one_off):
        assert two_on_one_off.mask(0).size == 0
        assert two_on_one_off.mask(-3).size == 0

    def test_is_work_day_agrees_with_mask(self):
        pattern = WorkPattern(3, 4)
        mask = pattern.mask(50)
        assert [pattern.is_work_day(k) for k in range(50)] == mask.tolist()

    def test_no_off_days(self):
        assert WorkPattern(1, 0).mask(5).all()

    @pytest.mark.parametrize("work, off", [(0, 1), (-1, 2), (1, -1)])
    def test_invalid_counts(self, work, off):
        with pytest.raises(InvalidArgumentError):
            WorkPattern(work, off)

    def test_frozen(self, two_on_one_off):
        with pytest.raises(FrozenInstanceError):
            two_on_one_off.work_days = 5


# ── Examples ──────────────────────────────────────────────────────────────────

class TestExamples:

    def test_one_on_three_off(self):
        result = get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        assert result == ["01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024"]

    def test_alternating(self):
        result = get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
        assert result == ["01-01-2024", "03-01-2024", "05-01-2024", "07-01-2024", "09-01-2024"]

    def test_two_on_two_off(self):
        result = get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 2, 2)
        assert result == [
            "01-01-2024", "02-01-2024", "05-01-2024", "06-01-2024", "09-01-2024", "10-01-2024",
        ]


# ── End-of-period handling ────────────────────────────────────────────────────

class TestPeriodEnd:

    def test_end_inside_work_run(self):
        result = get_work_schedule(("01-01-2024", "05-01-2024"), 3, 2)
        assert result == ["01-01-2024", "02-01-2024", "03-01-2024"]
        result = get_work_schedule(("01-01-2024", "02-01-2024"), 3, 2)
        assert result == ["01-01-2024", "02-01-2024"]

    def test_end_inside_off_run_is_excluded(self):
        result = get_work_schedule(("01-01-2024", "04-01-2024"), 2, 3)
        assert result == ["01-01-2024", "02-01-2024"]

    def test_end_on_first_day_of_next_cycle(self):
        result = get_work_schedule(("01-01-2024", "04-01-2024"), 2, 1)
        assert result == ["01-01-2024", "02-01-2024", "04-01-2024"]

    def test_single_day(self):
        assert get_work_schedule(("07-03-2024", "07-03-2024"), 1, 6) == ["07-03-2024"]

    def test_start_after_end_is_empty(self):
        assert get_work_schedule(("10-01-2024", "01-01-2024"), 1, 1) == []

    def test_no_off_days_lists_every_day(self):
        result = get_work_schedule(("28-02-2024", "01-03-2024"), 1, 0)
        assert result == ["28-02-2024", "29-02-2024", "01-03-2024"]


# ── Rollover ──────────────────────────────────────────────────────────────────

class TestRollover:

    def test_year_end(self):
        result = get_work_schedule(("30-12-2023", "02-01-2024"), 1, 1)
        assert result == ["30-12-2023", "01-01-2024"]

    def test_non_leap_february(self):
        result = get_work_schedule(("27-02-2023", "02-03-2023"), 1, 1)
        assert result == ["27-02-2023", "01-03-2023"]

    def test_leap_february(self):
        result = get_work_schedule(("27-02-2024", "02-03-2024"), 1, 1)
        assert result == ["27-02-2024", "29-02-2024", "02-03-2024"]


# ── Input forms ───────────────────────────────────────────────────────────────

class TestInputForms:

    def test_forms_agree(self, january):
        expected = get_work_schedule(january, 4, 3)
        assert get_work_schedule(DatePeriod("01-01-2024", "31-01-2024"), 4, 3) == expected
        assert get_work_schedule(("01-01-2024", "31-01-2024"), 4, 3) == expected
        assert get_work_schedule((date(2024, 1, 1), date(2024, 1, 31)), 4, 3) == expected
        assert get_work_schedule(
            (datetime(2024, 1, 1, 9), datetime(2024, 1, 31, 17)), 4, 3
        ) == expected

    def test_surrounding_whitespace(self):
        assert get_work_schedule((" 01-01-2024", "01-01-2024 "), 1, 1) == ["01-01-2024"]

    @pytest.mark.parametrize("bad", ["2024-01-01", "31-02-2024", "01/01/2024", ""])
    def test_malformed_date(self, bad):
        with pytest.raises(InvalidDateError):
            get_work_schedule((bad, "31-12-2024"), 1, 1)

    def test_unsupported_type(self):
        with pytest.raises(InvalidDateError):
            get_work_schedule((20240101, "31-12-2024"), 1, 1)

    def test_invalid_pattern(self, january):
        with pytest.raises(InvalidArgumentError):
            get_work_schedule(january, 0, 3)
        with pytest.raises(InvalidArgumentError):
            get_work_schedule(january, 2, -1)

    def test_invalid_period(self):
        with pytest.raises(InvalidArgumentError):
            get_work_schedule({"start": "01-01-2024"}, 1, 1)


# ── Invariants ────────────────────────────────────────────────────────────────

class TestInvariants:

    @pytest.mark.parametrize("work, off", [(1, 1), (1, 3), (2, 2), (3, 4), (5, 2), (4, 0)])
    def test_dates_follow_cycle(self, work, off):
        start, end = date(2023, 11, 15), date(2024, 3, 20)
        result = [parse(s) for s in get_work_schedule((start, end), work, off)]
        cycle = work + off

        assert result == sorted(result)
        assert all(start <= d <= end for d in result)
        assert all((d - start).days % cycle < work for d in result)

    def test_count_matches_mask(self, january):
        pattern = WorkPattern(3, 2)
        assert len(get_work_schedule(january, 3, 2)) == int(pattern.mask(31).sum())

    def test_no_work_day_missed(self):
        start, end = date(2024, 1, 1), date(2024, 2, 29)
        listed = set(get_work_schedule((start, end), 2, 5))
        d = start
        while d <= end:
            if (d - start).days % 7 < 2:
                assert d.strftime(DATE_FMT) in listed
            d += timedelta(days=1)
