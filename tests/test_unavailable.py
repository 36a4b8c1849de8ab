"""
Tests for unavailable hour blocks.
"""

import logging

import pytest

from core.errors import OutOfRangeConfigError
from models.timeline import DayRange, UnavailableBlock
from services.unavailable import build_unavailable_blocks


def test_blocks_for_full_day():
    blocks = build_unavailable_blocks(
        [{"start": 0, "end": 6}, {"start": 22, "end": 24}], DayRange(0, 24), 100
    )

    assert blocks == [UnavailableBlock(top=0, height=600), UnavailableBlock(top=2200, height=200)]


def test_range_partially_outside_is_clipped_to_boundary():
    blocks = build_unavailable_blocks(
        [{"start": 0, "end": 9}, {"start": 17, "end": 24}], DayRange(8, 18), 100
    )

    assert blocks == [UnavailableBlock(top=0, height=100), UnavailableBlock(top=900, height=100)]


def test_range_fully_outside_is_omitted():
    blocks = build_unavailable_blocks(
        [{"start": 0, "end": 6}, {"start": 19, "end": 24}], DayRange(8, 18), 100
    )

    assert blocks == []


def test_range_touching_boundary_is_omitted():
    assert build_unavailable_blocks([{"start": 0, "end": 8}], DayRange(8, 18), 100) == []


def test_overlapping_ranges_are_not_merged():
    blocks = build_unavailable_blocks(
        [{"start": 12, "end": 14}, {"start": 10, "end": 13}], DayRange(0, 24), 50
    )

    assert blocks == [UnavailableBlock(top=600, height=100), UnavailableBlock(top=500, height=150)]


def test_fractional_hours():
    blocks = build_unavailable_blocks([{"start": 12.5, "end": 13.25}], DayRange(0, 24), 100)

    assert blocks == [UnavailableBlock(top=1250, height=75)]


@pytest.mark.parametrize(
    "hours",
    [{"start": -1, "end": 5}, {"start": 20, "end": 25}, {"start": 14, "end": 12}, {"start": 9, "end": 9}],
)
def test_malformed_ranges_are_skipped_with_warning(hours, caplog):
    with caplog.at_level(logging.WARNING, logger="services.unavailable"):
        blocks = build_unavailable_blocks([hours, {"start": 0, "end": 1}], DayRange(0, 24), 100)

    assert blocks == [UnavailableBlock(top=0, height=100)]
    assert "Skipping unavailable hours" in caplog.text


def test_no_ranges():
    assert build_unavailable_blocks(None, DayRange(0, 24), 100) == []
    assert build_unavailable_blocks([], DayRange(0, 24), 100) == []


def test_invalid_config():
    with pytest.raises(OutOfRangeConfigError):
        build_unavailable_blocks([{"start": 0, "end": 6}], DayRange(0, 24), 0)
    with pytest.raises(OutOfRangeConfigError):
        build_unavailable_blocks([{"start": 0, "end": 6}], DayRange(18, 8), 100)
