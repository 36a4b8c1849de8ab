"""
Configuration and geometry records for the timeline grid.
"""

from dataclasses import dataclass, field
from datetime import date

from core.config import (
    DEFAULT_DAY_END,
    DEFAULT_DAY_START,
    DEFAULT_SCREEN_WIDTH,
    HOUR_BLOCK_HEIGHT,
    MIN_EVENT_HEIGHT,
    MINUTE_GRANULARITY,
)
from core.errors import InvalidIntervalError
from models.events import PackedEvent, UnavailableHours


@dataclass(frozen=True)
class DayRange:
    """Visible start/end hours of the grid (integers in [0, 24], start < end)."""

    start: int = DEFAULT_DAY_START
    end: int = DEFAULT_DAY_END

    @property
    def hours(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minutes: int


@dataclass(frozen=True)
class UnavailableBlock:
    """Shaded block, in pixels from the grid top."""

    top: float
    height: float


@dataclass(frozen=True)
class LayoutConfig:
    """
    Options for packing one day's events.

    screen_width: horizontal pixels available to the day column.
    day_start / day_end: visible hour bounds; events are clipped to them.
    overlap_events_spacing: gap in pixels between side-by-side columns.
    right_edge_spacing: pixels kept free at the right edge (room for
        background long-press).
    hour_block_height: pixels per hour.
    min_event_height: height floor for very short events.
    """

    screen_width: float = DEFAULT_SCREEN_WIDTH
    day_start: int = DEFAULT_DAY_START
    day_end: int = DEFAULT_DAY_END
    overlap_events_spacing: float = 0
    right_edge_spacing: float = 0
    hour_block_height: float = HOUR_BLOCK_HEIGHT
    min_event_height: float = MIN_EVENT_HEIGHT


@dataclass
class LayoutResult:
    """Packed events for one day plus the events that were rejected."""

    events: list[PackedEvent] = field(default_factory=list)
    rejected: list[InvalidIntervalError] = field(default_factory=list)


@dataclass
class MultiDayLayout:
    """One LayoutResult per page date; rejected events carry their input index."""

    days: list[LayoutResult] = field(default_factory=list)
    rejected: list[InvalidIntervalError] = field(default_factory=list)


@dataclass(frozen=True)
class TimelineGeometry:
    """Pixel geometry needed to map a pointer position back to a time and date."""

    screen_width: float = DEFAULT_SCREEN_WIDTH
    left_inset: float = 0
    number_of_days: int = 1
    hour_block_height: float = HOUR_BLOCK_HEIGHT
    day_range: DayRange = field(default_factory=DayRange)
    page_dates: tuple[date, ...] = ()
    granularity: int = MINUTE_GRANULARITY


@dataclass
class TimelineOptions:
    """
    Options for a full (possibly multi-day) timeline page.

    unavailable_hours are shaded ranges; scroll_to_now, scroll_to_first and
    initial_time pick the initial scroll position, in that order of priority.
    """

    day_range: DayRange = field(default_factory=DayRange)
    hour_block_height: float = HOUR_BLOCK_HEIGHT
    screen_width: float = DEFAULT_SCREEN_WIDTH
    left_inset: float = 0
    number_of_days: int = 1
    overlap_events_spacing: float = 0
    right_edge_spacing: float = 0
    min_event_height: float = MIN_EVENT_HEIGHT
    unavailable_hours: list[UnavailableHours] = field(default_factory=list)
    format24h: bool = True
    show_now_indicator: bool = False
    scroll_to_now: bool = False
    scroll_to_first: bool = False
    initial_time: TimeOfDay | None = None
