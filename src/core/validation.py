"""
Event interval validation and layout configuration checks.
"""

import math
from datetime import datetime

from core.errors import InvalidIntervalError, OutOfRangeConfigError


def validate_hour_block_height(hour_block_height: float) -> None:
    """Hour blocks must have a positive, finite pixel height."""
    if not math.isfinite(hour_block_height) or hour_block_height <= 0:
        raise OutOfRangeConfigError(
            f"hour_block_height must be positive, got {hour_block_height}"
        )


def validate_day_range(day_start: float, day_end: float) -> None:
    """Day bounds must lie within [0, 24] with start before end."""
    if not (0 <= day_start <= 24 and 0 <= day_end <= 24):
        raise OutOfRangeConfigError(
            f"Day range must be within 0-24, got {day_start}-{day_end}"
        )
    if day_start >= day_end:
        raise OutOfRangeConfigError(
            f"Day start must be before day end, got {day_start}-{day_end}"
        )


def validate_number_of_days(number_of_days: int) -> None:
    if number_of_days <= 0:
        raise OutOfRangeConfigError(
            f"number_of_days must be at least 1, got {number_of_days}"
        )


def validate_horizontal_geometry(screen_width: float, left_inset: float) -> None:
    """The timeline needs some width to the right of the inset."""
    if left_inset < 0:
        raise OutOfRangeConfigError(f"left_inset cannot be negative, got {left_inset}")
    if screen_width <= left_inset:
        raise OutOfRangeConfigError(
            f"screen_width ({screen_width}) must be larger than left_inset ({left_inset})"
        )


def validate_granularity(granularity: int) -> None:
    if granularity <= 0 or 60 % granularity != 0:
        raise OutOfRangeConfigError(
            f"Minute granularity must divide 60, got {granularity}"
        )


def validate_layout_config(config) -> None:
    """
    Check a LayoutConfig before packing.

    Raises:
        OutOfRangeConfigError: on the first invalid field
    """
    validate_hour_block_height(config.hour_block_height)
    validate_day_range(config.day_start, config.day_end)
    if config.screen_width <= 0:
        raise OutOfRangeConfigError(f"screen_width must be positive, got {config.screen_width}")
    if config.overlap_events_spacing < 0 or config.right_edge_spacing < 0:
        raise OutOfRangeConfigError("Event spacing cannot be negative")
    if config.right_edge_spacing >= config.screen_width:
        raise OutOfRangeConfigError(
            f"right_edge_spacing ({config.right_edge_spacing}) leaves no room for events"
        )
    if config.min_event_height < 0:
        raise OutOfRangeConfigError("min_event_height cannot be negative")


def validate_intervals(events: list[dict]) -> tuple[list[dict], list[InvalidIntervalError]]:
    """
    Split events into valid ones and interval errors.

    Checks:
    1. Start and end are present datetimes
    2. End is after start
    """
    valid = []
    rejected = []

    for index, event in enumerate(events):
        start = event.get("start")
        end = event.get("end")

        if not isinstance(start, datetime) or not isinstance(end, datetime):
            rejected.append(InvalidIntervalError(event, index, "start and end must be datetimes"))
            continue

        try:
            if end <= start:
                rejected.append(InvalidIntervalError(event, index))
                continue
        except TypeError:
            # Mixing naive and aware datetimes
            rejected.append(
                InvalidIntervalError(event, index, "start and end use different timezone awareness")
            )
            continue

        valid.append(event)

    return valid, rejected
