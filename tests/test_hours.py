"""
Tests for hour grid labels.
"""

import pytest

from models.timeline import DayRange
from services.hours import build_hour_lines, day_separators, format_hour_label


@pytest.mark.parametrize(
    "hour, format24h, expected",
    [
        (0, True, ""),
        (9, True, "9:00"),
        (9, False, "9 AM"),
        (12, True, "12:00"),
        (12, False, "12 PM"),
        (15, True, "15:00"),
        (15, False, "3 PM"),
        (24, True, "23:59"),
        (24, False, "12 AM"),
    ],
)
def test_format_hour_label(hour, format24h, expected):
    assert format_hour_label(hour, 0, format24h) == expected


def test_first_visible_hour_has_no_label():
    assert format_hour_label(8, 8) == ""


def test_build_hour_lines():
    lines = build_hour_lines(DayRange(8, 12), 100)

    assert [line.time for line in lines] == [8, 9, 10, 11, 12]
    assert [line.text for line in lines] == ["", "9:00", "10:00", "11:00", "12:00"]
    assert [line.top for line in lines] == [0, 100, 200, 300, 400]
    assert [line.half_top for line in lines] == [50, 150, 250, 350, 450]
    assert [line.show_line for line in lines] == [False, True, True, True, True]


def test_full_day_has_25_lines():
    lines = build_hour_lines(DayRange(), 60, format24h=False)

    assert len(lines) == 25
    assert lines[-1].text == "12 AM"
    assert lines[-1].top == 1440


def test_day_separators():
    assert day_separators(300, 3) == [100, 200, 300]
    assert day_separators(390, 1) == [390]
