"""Tests for TimeMap."""

from __future__ import annotations

import numpy as np
import pytest

from timemap.core.dates import date_values, make_date, make_instant
from timemap.core.timemap import TimeMap
from timemap.utils.exceptions import IndexOutOfRangeError, NonMonotonicTimeError

DAY = 86_400


class TestConstruction:
    def test_seeded_with_start(self) -> None:
        tm = TimeMap(make_date(2020, 1, 1))
        assert tm.length() == 1
        assert len(tm) == 1
        assert tm.num_steps() == 0
        assert tm.instant_at(0) == make_date(2020, 1, 1)
        assert tm.first_timestep_months == ()
        assert tm.first_timestep_years == ()

    def test_total_duration_single_instant(self) -> None:
        assert TimeMap(0).total_duration() == 0.0


class TestAppend:
    def test_leap_year_scenario(self, leap_year_map: TimeMap) -> None:
        tm = leap_year_map
        assert tm.num_steps() == 3
        dates = [date_values(tm.instant_at(i)) for i in range(tm.length())]
        assert dates == [(1, 1, 2020), (1, 2, 2020), (29, 2, 2020), (31, 3, 2020)]
        assert tm.first_timestep_months == (1, 3)
        assert tm.first_timestep_years == ()

    def test_strictly_increasing(self, leap_year_map: TimeMap) -> None:
        times = leap_year_map.instants()
        assert np.all(np.diff(times) > 0)
        np.testing.assert_array_equal(np.diff(times), [31 * DAY, 28 * DAY, 31 * DAY])

    def test_rejects_equal_instant(self) -> None:
        tm = TimeMap(make_date(2020, 1, 1))
        tm.append(make_date(2020, 2, 1))
        with pytest.raises(NonMonotonicTimeError):
            tm.append(make_date(2020, 2, 1))
        assert tm.length() == 2
        assert tm.first_timestep_months == (1,)

    def test_rejects_earlier_instant(self) -> None:
        tm = TimeMap(make_date(2020, 6, 1))
        with pytest.raises(NonMonotonicTimeError):
            tm.append(make_date(2019, 1, 1))
        assert tm.length() == 1
        assert tm.first_timestep_years == ()

    def test_add_step_zero_rejected(self) -> None:
        tm = TimeMap(0)
        with pytest.raises(NonMonotonicTimeError):
            tm.add_step(0)

    def test_year_boundary(self) -> None:
        tm = TimeMap(make_date(2020, 12, 1))
        tm.append(make_date(2020, 12, 31))
        tm.append(make_date(2021, 1, 1))
        assert tm.first_timestep_months == (2,)
        assert tm.first_timestep_years == (2,)

    def test_same_month_next_year_is_only_year_boundary(self) -> None:
        tm = TimeMap(make_date(2020, 1, 15))
        tm.append(make_date(2021, 1, 15))
        assert tm.first_timestep_months == ()
        assert tm.first_timestep_years == (1,)

    def test_boundaries_are_subsequence_of_steps(self) -> None:
        tm = TimeMap(make_date(2019, 11, 20))
        for _ in range(40):
            tm.add_step(10 * DAY)
        for steps in (tm.first_timestep_months, tm.first_timestep_years):
            assert list(steps) == sorted(set(steps))
            assert all(1 <= s <= tm.num_steps() for s in steps)
        assert tm.first_timestep_years == (5,)  # 2020-01-09


class TestQueries:
    def test_instant_at_out_of_range(self, leap_year_map: TimeMap) -> None:
        with pytest.raises(IndexOutOfRangeError):
            leap_year_map.instant_at(4)
        with pytest.raises(IndexError):
            leap_year_map[4]
        with pytest.raises(IndexOutOfRangeError):
            leap_year_map.instant_at(-1)

    def test_getitem(self, leap_year_map: TimeMap) -> None:
        assert leap_year_map[1] == make_date(2020, 2, 1)

    def test_elapsed_since_start(self, leap_year_map: TimeMap) -> None:
        assert leap_year_map.elapsed_since_start(0) == 0.0
        assert leap_year_map.elapsed_since_start(2) == 59.0 * DAY
        with pytest.raises(IndexOutOfRangeError):
            leap_year_map.elapsed_since_start(10)

    def test_step_duration(self, leap_year_map: TimeMap) -> None:
        assert leap_year_map.step_duration(0) == 31.0 * DAY
        assert leap_year_map.step_duration(2) == 31.0 * DAY
        with pytest.raises(IndexOutOfRangeError):
            leap_year_map.step_duration(3)

    def test_total_duration(self, leap_year_map: TimeMap) -> None:
        assert leap_year_map.total_duration() == 90.0 * DAY

    def test_start_and_end_time(self, leap_year_map: TimeMap) -> None:
        assert leap_year_map.start_time(1) == make_date(2020, 2, 1)
        assert leap_year_map.end_time() == make_date(2020, 3, 31)
        assert leap_year_map.last() == 3

    def test_elapsed_days(self, leap_year_map: TimeMap) -> None:
        np.testing.assert_allclose(leap_year_map.elapsed_days(), [0.0, 31.0, 59.0, 90.0])

    def test_append_far_future(self) -> None:
        tm = TimeMap(make_date(2020, 1, 1))
        tm.add_step(3_000_000 * DAY)
        assert tm.num_steps() == 1
        assert date_values(tm.instant_at(1))[2] > 9999
        assert tm.first_timestep_years == (1,)

    def test_append_far_past_start(self) -> None:
        tm = TimeMap(-1_000_000 * DAY)
        tm.append(make_date(2020, 1, 1))
        assert tm.first_timestep_years == (1,)

    def test_sub_day_steps(self) -> None:
        tm = TimeMap(make_date(2020, 1, 31))
        tm.add_step(DAY // 2)
        tm.add_step(DAY // 2)
        assert tm.instant_at(1) == make_instant(2020, 1, 31, 12, 0, 0)
        assert tm.first_timestep_months == (2,)


class TestPeriodicBoundary:
    @pytest.fixture
    def monthly(self) -> TimeMap:
        """Start 2020-01-01, one step per month for two years."""
        tm = TimeMap(make_date(2020, 1, 1))
        for year in (2020, 2021):
            for month in range(1, 13):
                if (year, month) != (2020, 1):
                    tm.append(make_date(year, month, 1))
        tm.append(make_date(2022, 1, 1))
        return tm

    def test_all_steps_are_month_boundaries(self, monthly: TimeMap) -> None:
        assert monthly.first_timestep_months == tuple(range(1, 25))
        assert monthly.first_timestep_years == (12, 24)

    def test_quarterly(self, monthly: TimeMap) -> None:
        assert monthly.periodic_boundaries("month", anchor_step=1, frequency=3) == [
            3, 6, 9, 12, 15, 18, 21, 24,
        ]

    def test_single_query(self, monthly: TimeMap) -> None:
        assert monthly.is_periodic_boundary(6, "month", 1, 3)
        assert not monthly.is_periodic_boundary(7, "month", 1, 3)

    def test_yearly_every_other(self, monthly: TimeMap) -> None:
        assert monthly.is_periodic_boundary(24, "year", 0, 2)
        assert not monthly.is_periodic_boundary(12, "year", 0, 2)

    def test_non_boundary_step(self) -> None:
        tm = TimeMap(make_date(2020, 1, 1))
        tm.append(make_date(2020, 1, 15))
        tm.append(make_date(2020, 2, 1))
        assert tm.first_timestep_months == (2,)
        for freq in (0, 1, 2):
            assert not tm.is_periodic_boundary(1, "month", 0, freq)

    def test_unknown_granularity(self, monthly: TimeMap) -> None:
        with pytest.raises(ValueError):
            monthly.is_periodic_boundary(1, "week", 0, 1)  # type: ignore[arg-type]
