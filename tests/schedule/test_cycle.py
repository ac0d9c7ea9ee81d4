"""
tests/schedule/test_cycle.py

Covers:
  - Cycle masks for common shift patterns
  - Working days within a period (inclusive bounds, month/year crossings)
  - get_work_schedule output format
  - Edge cases (single-day period, reversed period, no off days)
  - Invalid cycles and dates
"""

from datetime import date

import numpy as np
import pytest

from caltools.calendar import CalendarError, DatePeriod, InvalidDateError
from caltools.schedule import WorkCycle, get_work_schedule


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def one_on_three_off():
    return WorkCycle(1, 3)


@pytest.fixture
def two_on_one_off():
    return WorkCycle(2, 1)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_properties(self, two_on_one_off):
        assert two_on_one_off.work_days == 2
        assert two_on_one_off.off_days == 1
        assert two_on_one_off.cycle_length == 3

    def test_zero_work_days_raises(self):
        with pytest.raises(CalendarError):
            WorkCycle(0, 3)

    def test_negative_off_days_raises(self):
        with pytest.raises(CalendarError):
            WorkCycle(1, -1)

    def test_repr(self, two_on_one_off):
        assert repr(two_on_one_off) == "WorkCycle(work_days=2, off_days=1, cycle_length=3)"


# ── Masks ─────────────────────────────────────────────────────────────────────

class TestMask:

    def test_two_on_one_off(self, two_on_one_off):
        np.testing.assert_array_equal(
            two_on_one_off.mask(7), [True, True, False, True, True, False, True]
        )

    def test_no_off_days_is_all_work(self):
        assert WorkCycle(3, 0).mask(10).all()

    def test_empty(self, two_on_one_off):
        assert two_on_one_off.mask(0).shape == (0,)
        assert two_on_one_off.mask(-5).shape == (0,)

    def test_work_fraction_per_cycle(self):
        cycle = WorkCycle(4, 3)
        assert int(cycle.mask(70).sum()) == 40


# ── Working days ──────────────────────────────────────────────────────────────

class TestWorkingDays:

    def test_dtype_and_values(self, one_on_three_off):
        days = one_on_three_off.working_days("01-01-2024", "15-01-2024")
        assert days.dtype == np.dtype("datetime64[D]")
        np.testing.assert_array_equal(
            days,
            np.array(["2024-01-01", "2024-01-05", "2024-01-09", "2024-01-13"],
                     dtype="datetime64[D]"),
        )

    def test_accepts_dates_and_datetime64(self, one_on_three_off):
        a = one_on_three_off.working_days(date(2024, 1, 1), np.datetime64("2024-01-15"))
        b = one_on_three_off.working_days("01-01-2024", "15-01-2024")
        np.testing.assert_array_equal(a, b)

    def test_count(self):
        assert WorkCycle(4, 3).count_working_days("01-01-2024", "31-01-2024") == 19

    def test_reversed_period_is_empty(self, one_on_three_off):
        assert one_on_three_off.count_working_days("15-01-2024", "01-01-2024") == 0


# ── get_work_schedule ─────────────────────────────────────────────────────────

class TestGetWorkSchedule:

    def test_one_on_three_off(self):
        assert get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3) == [
            "01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024",
        ]

    def test_alternate_days(self):
        assert get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1) == [
            "01-01-2024", "03-01-2024", "05-01-2024", "07-01-2024", "09-01-2024",
        ]

    def test_crosses_month(self):
        assert get_work_schedule({"start": "30-01-2024", "end": "05-02-2024"}, 2, 1) == [
            "30-01-2024", "31-01-2024", "02-02-2024", "03-02-2024", "05-02-2024",
        ]

    def test_crosses_leap_day_and_year(self):
        assert get_work_schedule({"start": "28-02-2024", "end": "01-03-2024"}, 1, 0) == [
            "28-02-2024", "29-02-2024", "01-03-2024",
        ]
        assert get_work_schedule({"start": "31-12-2023", "end": "02-01-2024"}, 1, 1) == [
            "31-12-2023", "02-01-2024",
        ]

    def test_work_block_cut_by_end(self):
        assert get_work_schedule({"start": "01-01-2024", "end": "02-01-2024"}, 5, 2) == [
            "01-01-2024", "02-01-2024",
        ]

    def test_single_day_period(self):
        assert get_work_schedule({"start": "07-03-2024", "end": "07-03-2024"}, 1, 6) == [
            "07-03-2024",
        ]

    def test_reversed_period_is_empty(self):
        assert get_work_schedule({"start": "10-01-2024", "end": "01-01-2024"}, 1, 1) == []

    def test_accepts_date_period(self):
        period = DatePeriod("01-01-2024", "04-01-2024")
        assert get_work_schedule(period, 1, 1) == ["01-01-2024", "03-01-2024"]

    def test_invalid_date_raises(self):
        with pytest.raises(InvalidDateError):
            get_work_schedule({"start": "2024-01-01", "end": "10-01-2024"}, 1, 1)

    def test_invalid_cycle_raises(self):
        with pytest.raises(CalendarError):
            get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 0, 1)

    def test_results_are_within_period_and_sorted(self):
        result = get_work_schedule({"start": "01-01-2024", "end": "31-12-2024"}, 3, 4)
        days = [date(int(s[6:]), int(s[3:5]), int(s[:2])) for s in result]
        assert days == sorted(days)
        assert days[0] == date(2024, 1, 1)
        assert all(date(2024, 1, 1) <= d <= date(2024, 12, 31) for d in days)
        assert len(days) == 52 * 3 + 2
