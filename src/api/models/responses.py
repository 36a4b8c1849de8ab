"""Pydantic response models for API endpoints."""

import datetime as dt

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy", or "degraded" without an API key
    version: str
    hour_block_height: float
    max_events_per_request: int
    api_key_configured: bool
    timestamp: str  # ISO 8601 UTC


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOO_MANY_EVENTS = "TOO_MANY_EVENTS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EventOut(BaseModel):
    id: str | None = None
    start: dt.datetime
    end: dt.datetime
    title: str
    summary: str | None = None
    color: str | None = None


class PackedEventOut(EventOut):
    index: int
    left: float
    top: float
    width: float
    height: float


class RejectedEventOut(BaseModel):
    """Event excluded from the layout and why."""

    index: int
    id: str | None = None
    title: str | None = None
    reason: str


class DayLayoutOut(BaseModel):
    date: dt.date
    events: list[PackedEventOut]


class UnavailableBlockOut(BaseModel):
    top: float
    height: float


class HourLineOut(BaseModel):
    time: int
    text: str
    top: float
    half_top: float
    show_line: bool


class NowIndicatorOut(BaseModel):
    top: float
    left: float
    width: float
    day_index: int


class LayoutResponse(BaseModel):
    """Geometry for one timeline page."""

    width: float
    calendar_height: float
    days: list[DayLayoutOut]
    rejected: list[RejectedEventOut] = []
    unavailable_blocks: list[UnavailableBlockOut] = []
    hour_lines: list[HourLineOut] = []
    day_separators: list[float] = []
    now_indicator: NowIndicatorOut | None = None
    initial_scroll_offset: float = 0


class PointerResponse(BaseModel):
    """Time and date picked by a background long-press."""

    hour: int
    minutes: int
    date: dt.date | None = None
    time_string: str
    label: str
    draft_event: EventOut | None = None


class NowOffsetResponse(BaseModel):
    hour: int
    minutes: int
    offset: float
