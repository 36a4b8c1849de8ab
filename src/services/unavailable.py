"""
Unavailable hour shading blocks.
"""

import logging

from core.validation import validate_day_range, validate_hour_block_height
from models.events import UnavailableHours
from models.timeline import DayRange, UnavailableBlock
from services.coordinates import vertical_offset_from_time

logger = logging.getLogger(__name__)


def build_unavailable_blocks(
    ranges: list[UnavailableHours] | None,
    day_range: DayRange,
    hour_block_height: float,
) -> list[UnavailableBlock]:
    """
    Convert unavailable hour ranges into blocks clipped to the visible day.

    Ranges are neither sorted nor merged; overlapping ranges produce
    overlapping blocks. Malformed ranges are logged and skipped.
    """
    validate_hour_block_height(hour_block_height)
    validate_day_range(day_range.start, day_range.end)

    blocks = []
    for hours in ranges or []:
        start, end = hours["start"], hours["end"]

        if not (0 <= start <= 24 and 0 <= end <= 24):
            logger.warning("Skipping unavailable hours %s-%s: hours must be between 0 and 24", start, end)
            continue
        if start >= end:
            logger.warning("Skipping unavailable hours %s-%s: start must be before end", start, end)
            continue

        clipped_start = max(start, day_range.start)
        clipped_end = min(end, day_range.end)
        if clipped_start >= clipped_end:
            # Entirely outside the visible range
            continue

        top = vertical_offset_from_time(clipped_start, 0, hour_block_height, day_range.start)
        bottom = vertical_offset_from_time(clipped_end, 0, hour_block_height, day_range.start)
        blocks.append(UnavailableBlock(top=top, height=bottom - top))

    return blocks
