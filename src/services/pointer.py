"""
Background long-press handling: pointer position to time, and draft events.

Whatever state a UI keeps between press and release (for example the last
long-press time) stays with the caller; these functions only map values.
"""

from datetime import date, datetime, time, timedelta

from core.config import (
    APPROVED_EVENT_COLOR,
    DRAFT_EVENT_COLOR,
    DRAFT_EVENT_DURATION_HOURS,
    DRAFT_EVENT_ID,
    DRAFT_EVENT_TITLE,
)
from core.errors import TimelineError
from models.events import Event, NewEventTime
from models.timeline import TimelineGeometry
from services.coordinates import date_from_horizontal_offset, time_from_vertical_offset


def resolve_long_press(x: float, y: float, geometry: TimelineGeometry) -> NewEventTime:
    """
    Time and date under a pointer position.

    y is relative to the grid top and x to the left edge of the screen. The
    date is None when the geometry has no page dates.
    """
    picked = time_from_vertical_offset(
        y, geometry.hour_block_height, geometry.day_range, geometry.granularity
    )

    picked_date = None
    if geometry.page_dates:
        picked_date = date_from_horizontal_offset(
            x,
            geometry.left_inset,
            geometry.number_of_days,
            geometry.page_dates,
            geometry.screen_width,
        )

    return {"hour": picked.hour, "minutes": picked.minutes, "date": picked_date}


def format_time_label(hour: int, minutes: int) -> str:
    """'HH:mm' label for a picked time."""
    return f"{hour:02d}:{minutes:02d}"


def build_time_string(hour: int = 0, minutes: int = 0, day: date | None = None) -> str:
    """'YYYY-MM-DD HH:mm:00', or just the time when there is no date."""
    date_part = day.isoformat() if day else ""
    return f"{date_part} {format_time_label(hour, minutes)}:00".strip()


def build_draft_event(
    new_event_time: NewEventTime, duration_hours: float = DRAFT_EVENT_DURATION_HOURS
) -> Event:
    """
    Placeholder event starting at a long-pressed time.

    The draft never runs past midnight; a press at 24:00 starts the draft
    duration_hours before the end of the day instead.
    """
    day = new_event_time.get("date")
    if day is None:
        raise TimelineError("A date is required to create a draft event")

    midnight = datetime.combine(day, time())
    day_end = midnight + timedelta(days=1)
    duration = timedelta(hours=duration_hours)

    start = midnight + timedelta(hours=new_event_time["hour"], minutes=new_event_time["minutes"])
    end = min(start + duration, day_end)
    if end <= start:
        start = day_end - duration

    return {
        "id": DRAFT_EVENT_ID,
        "start": start,
        "end": end,
        "title": DRAFT_EVENT_TITLE,
        "color": DRAFT_EVENT_COLOR,
    }


def approve_draft_event(event: Event, title: str | None = None) -> Event:
    """Turn a draft into a real event with the entered title."""
    approved: Event = {**event, "title": title or DRAFT_EVENT_TITLE, "color": APPROVED_EVENT_COLOR}
    approved.pop("id", None)
    return approved
