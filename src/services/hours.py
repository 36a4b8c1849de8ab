"""
Hour grid labels and lines.
"""

from dataclasses import dataclass

from core.validation import (
    validate_day_range,
    validate_hour_block_height,
    validate_number_of_days,
)
from models.timeline import DayRange


@dataclass(frozen=True)
class HourLine:
    """One hour row of the grid: label text plus full- and half-hour line offsets."""

    time: int
    text: str
    top: float
    half_top: float
    show_line: bool


def format_hour_label(hour: int, day_start: int, format24h: bool = True) -> str:
    """
    Label shown next to an hour line.

    The first visible hour has no label; 24 reads '23:59' (24h) or '12 AM'.
    """
    if hour == day_start:
        return ""
    if hour < 12:
        return f"{hour}:00" if format24h else f"{hour} AM"
    if hour == 12:
        return f"{hour}:00" if format24h else f"{hour} PM"
    if hour == 24:
        return "23:59" if format24h else "12 AM"
    return f"{hour}:00" if format24h else f"{hour - 12} PM"


def build_hour_lines(
    day_range: DayRange, hour_block_height: float, format24h: bool = True
) -> list[HourLine]:
    """Hour rows from day start to day end inclusive."""
    validate_hour_block_height(hour_block_height)
    validate_day_range(day_range.start, day_range.end)

    return [
        HourLine(
            time=hour,
            text=format_hour_label(hour, day_range.start, format24h),
            top=index * hour_block_height,
            half_top=(index + 0.5) * hour_block_height,
            show_line=hour != day_range.start,
        )
        for index, hour in enumerate(range(day_range.start, day_range.end + 1))
    ]


def day_separators(width: float, number_of_days: int) -> list[float]:
    """Right offsets of the vertical lines between day columns."""
    validate_number_of_days(number_of_days)
    return [(index + 1) * width / number_of_days for index in range(number_of_days)]
