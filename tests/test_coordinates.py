"""
Tests for pixel <-> time/date mapping.
"""

from datetime import date, datetime

import pytest

from core.errors import OutOfRangeConfigError
from models.timeline import DayRange, TimeOfDay
from services.coordinates import (
    date_from_horizontal_offset,
    day_index_from_horizontal_offset,
    hour_decimal,
    page_dates,
    time_from_vertical_offset,
    vertical_offset_from_time,
)

WEEK = page_dates(date(2025, 11, 3), 7)


def test_vertical_offset_from_time():
    assert vertical_offset_from_time(9, 30, 100) == 950
    assert vertical_offset_from_time(0, 0, 100) == 0
    assert vertical_offset_from_time(24, 0, 60) == 1440


def test_vertical_offset_is_relative_to_day_start():
    assert vertical_offset_from_time(9, 30, 100, day_start=8) == 150


def test_time_from_vertical_offset():
    assert time_from_vertical_offset(950, 100) == TimeOfDay(hour=9, minutes=30)


@pytest.mark.parametrize("hour_block_height", [100, 60, 48.5])
def test_round_trip_for_every_minute(hour_block_height):
    for hour in range(24):
        for minutes in range(60):
            y = vertical_offset_from_time(hour, minutes, hour_block_height)
            assert time_from_vertical_offset(y, hour_block_height) == TimeOfDay(hour, minutes)

    y = vertical_offset_from_time(24, 0, hour_block_height)
    assert time_from_vertical_offset(y, hour_block_height) == TimeOfDay(24, 0)


def test_round_trip_with_day_start():
    day_range = DayRange(6, 22)
    y = vertical_offset_from_time(13, 45, 80, day_start=6)

    assert time_from_vertical_offset(y, 80, day_range) == TimeOfDay(13, 45)


def test_minutes_round_to_nearest():
    # 9:29.6 rounds up, 9:29.4 rounds down
    assert time_from_vertical_offset(949.4, 100) == TimeOfDay(9, 30)
    assert time_from_vertical_offset(949.0, 100) == TimeOfDay(9, 29)


def test_rounding_carries_into_next_hour():
    assert time_from_vertical_offset(999.9, 100) == TimeOfDay(10, 0)


@pytest.mark.parametrize(
    "y, granularity, expected",
    [
        (907, 15, TimeOfDay(9, 0)),
        (913, 15, TimeOfDay(9, 15)),
        (958, 5, TimeOfDay(9, 35)),
        (990, 30, TimeOfDay(10, 0)),
    ],
)
def test_granularity_snapping(y, granularity, expected):
    assert time_from_vertical_offset(y, 100, granularity=granularity) == expected


def test_time_is_clamped_to_day_range():
    day_range = DayRange(8, 18)

    assert time_from_vertical_offset(-50, 100, day_range) == TimeOfDay(8, 0)
    assert time_from_vertical_offset(5000, 100, day_range) == TimeOfDay(18, 0)
    assert time_from_vertical_offset(5000, 100) == TimeOfDay(24, 0)


@pytest.mark.parametrize("granularity", [0, -5, 7])
def test_invalid_granularity(granularity):
    with pytest.raises(OutOfRangeConfigError):
        time_from_vertical_offset(100, 100, granularity=granularity)


@pytest.mark.parametrize("hour_block_height", [0, -1, float("inf")])
def test_invalid_hour_block_height(hour_block_height):
    with pytest.raises(OutOfRangeConfigError):
        vertical_offset_from_time(9, 0, hour_block_height)
    with pytest.raises(OutOfRangeConfigError):
        time_from_vertical_offset(900, hour_block_height)


def test_invalid_day_range():
    with pytest.raises(OutOfRangeConfigError):
        time_from_vertical_offset(900, 100, DayRange(12, 12))


class TestHorizontalMapping:
    def test_day_index(self):
        # 400px screen, 50px inset, 7 days of 50px each
        assert day_index_from_horizontal_offset(60, 50, 7, 400) == 0
        assert day_index_from_horizontal_offset(100, 50, 7, 400) == 1
        assert day_index_from_horizontal_offset(399, 50, 7, 400) == 6

    def test_day_index_is_clamped(self):
        assert day_index_from_horizontal_offset(10, 50, 7, 400) == 0
        assert day_index_from_horizontal_offset(1000, 50, 7, 400) == 6

    def test_date_from_horizontal_offset(self):
        assert date_from_horizontal_offset(175, 50, 7, WEEK, 400) == date(2025, 11, 5)

    def test_single_day_always_maps_to_base_date(self):
        assert date_from_horizontal_offset(300, 0, 1, WEEK[:1], 390) == date(2025, 11, 3)

    def test_short_base_dates_use_last_date(self):
        assert date_from_horizontal_offset(399, 50, 7, WEEK[:2], 400) == date(2025, 11, 4)

    def test_empty_base_dates(self):
        with pytest.raises(OutOfRangeConfigError):
            date_from_horizontal_offset(100, 0, 1, [], 390)

    @pytest.mark.parametrize(
        "left_inset, number_of_days, screen_width",
        [(0, 0, 390), (0, -2, 390), (400, 1, 390), (-1, 1, 390)],
    )
    def test_invalid_geometry(self, left_inset, number_of_days, screen_width):
        with pytest.raises(OutOfRangeConfigError):
            day_index_from_horizontal_offset(100, left_inset, number_of_days, screen_width)


def test_page_dates():
    assert page_dates(date(2025, 12, 30), 3) == [date(2025, 12, 30), date(2025, 12, 31), date(2026, 1, 1)]


def test_hour_decimal():
    assert hour_decimal(datetime(2025, 11, 3, 9, 30)) == 9.5
    assert hour_decimal(datetime(2025, 11, 3, 0, 0, 36)) == pytest.approx(0.01)
