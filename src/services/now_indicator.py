"""
Current-time indicator position.
"""

from datetime import datetime

from services.coordinates import vertical_offset_from_time


def now_offset(
    hour_block_height: float,
    hour: int | None = None,
    minutes: int | None = None,
    now: datetime | None = None,
    day_start: float = 0,
) -> float:
    """
    Vertical offset of the now indicator (or of an explicit time).

    hour and minutes override the clock reading. When either is missing it is
    taken from now, which defaults to the local wall clock sampled once per
    call. Pass now explicitly to keep a whole layout pass consistent.
    """
    if hour is None or minutes is None:
        now = now or datetime.now()
        hour = now.hour if hour is None else hour
        minutes = now.minute if minutes is None else minutes

    return vertical_offset_from_time(hour, minutes, hour_block_height, day_start)
