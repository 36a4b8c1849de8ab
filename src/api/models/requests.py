"""Pydantic request models for API endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from core.config import (
    DEFAULT_DAY_END,
    DEFAULT_DAY_START,
    DEFAULT_SCREEN_WIDTH,
    HOUR_BLOCK_HEIGHT,
    MIN_EVENT_HEIGHT,
    MINUTE_GRANULARITY,
)


class EventIn(BaseModel):
    """Event as sent by the client; interval problems are reported, not rejected here."""

    id: str | None = None
    start: datetime
    end: datetime
    title: str = ""
    summary: str | None = None
    color: str | None = None


class UnavailableHoursIn(BaseModel):
    start: float
    end: float


class TimeOfDayIn(BaseModel):
    hour: int = Field(ge=0, le=24)
    minutes: int = Field(ge=0, le=59)


class GridRequest(BaseModel):
    """Grid geometry shared by layout and pointer requests."""

    start_date: date | None = None  # first page date, defaults to today
    number_of_days: int = 1
    day_start: int = DEFAULT_DAY_START
    day_end: int = DEFAULT_DAY_END
    hour_block_height: float = HOUR_BLOCK_HEIGHT
    screen_width: float = DEFAULT_SCREEN_WIDTH
    left_inset: float = 0


class LayoutRequest(GridRequest):
    events: list[EventIn] = []
    overlap_events_spacing: float = 0
    right_edge_spacing: float = 0
    min_event_height: float = MIN_EVENT_HEIGHT
    unavailable_hours: list[UnavailableHoursIn] = []
    format24h: bool = True
    show_now_indicator: bool = False
    scroll_to_now: bool = False
    scroll_to_first: bool = False
    initial_time: TimeOfDayIn | None = None
    now: datetime | None = None


class PointerRequest(GridRequest):
    x: float
    y: float
    granularity: int = MINUTE_GRANULARITY
    create_draft: bool = True
