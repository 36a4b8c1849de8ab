"""
Conversions between pixel positions on the timeline and wall-clock time/date.

Vertical offsets are measured from the top of the grid, which sits at the
first visible hour (day start). With the default day start of 0 the offset of
a time is simply (hour + minutes / 60) * hour_block_height.
"""

import math
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from core.config import MINUTE_GRANULARITY
from core.errors import OutOfRangeConfigError
from core.validation import (
    validate_day_range,
    validate_granularity,
    validate_horizontal_geometry,
    validate_hour_block_height,
    validate_number_of_days,
)
from models.timeline import DayRange, TimeOfDay


def hour_decimal(moment: datetime) -> float:
    """Time of day as fractional hours, e.g. 09:30 -> 9.5."""
    return moment.hour + moment.minute / 60 + moment.second / 3600


def vertical_offset_from_time(
    hour: float, minutes: float, hour_block_height: float, day_start: float = 0
) -> float:
    """Pixel offset of a time from the top of the grid."""
    validate_hour_block_height(hour_block_height)
    return (hour + minutes / 60 - day_start) * hour_block_height


def time_from_vertical_offset(
    y: float,
    hour_block_height: float,
    day_range: DayRange | None = None,
    granularity: int = MINUTE_GRANULARITY,
) -> TimeOfDay:
    """
    Time of day at a vertical pixel offset.

    Minutes are rounded to the nearest multiple of granularity and the result
    is clamped to the visible day range, so 24:00 is the latest possible value.
    """
    day_range = day_range or DayRange()
    validate_hour_block_height(hour_block_height)
    validate_day_range(day_range.start, day_range.end)
    validate_granularity(granularity)

    # Round half up rather than Python's round-half-even
    slots = math.floor(y / hour_block_height * 60 / granularity + 0.5)
    total_minutes = day_range.start * 60 + slots * granularity
    total_minutes = max(day_range.start * 60, min(total_minutes, day_range.end * 60))

    return TimeOfDay(hour=int(total_minutes // 60), minutes=int(total_minutes % 60))


def day_index_from_horizontal_offset(
    x: float, left_inset: float, number_of_days: int, screen_width: float
) -> int:
    """Index of the day column under a horizontal pixel offset."""
    validate_number_of_days(number_of_days)
    validate_horizontal_geometry(screen_width, left_inset)

    day_width = (screen_width - left_inset) / number_of_days
    day_index = math.floor((x - left_inset) / day_width)
    return max(0, min(day_index, number_of_days - 1))


def date_from_horizontal_offset(
    x: float,
    left_inset: float,
    number_of_days: int,
    base_dates: Sequence[date],
    screen_width: float,
) -> date:
    """Date of the day column under a horizontal pixel offset."""
    if not base_dates:
        raise OutOfRangeConfigError("base_dates cannot be empty")
    day_index = day_index_from_horizontal_offset(x, left_inset, number_of_days, screen_width)
    return base_dates[min(day_index, len(base_dates) - 1)]


def page_dates(first_date: date, number_of_days: int) -> list[date]:
    """Consecutive dates shown on one timeline page."""
    validate_number_of_days(number_of_days)
    return [first_date + timedelta(days=offset) for offset in range(number_of_days)]
