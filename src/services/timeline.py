"""
Full timeline page composition.

Combines event packing, unavailable hour shading, the hour grid, the now
indicator and the initial scroll position for one (possibly multi-day) page.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime

from core.errors import InvalidIntervalError
from core.validation import (
    validate_day_range,
    validate_horizontal_geometry,
    validate_hour_block_height,
    validate_number_of_days,
)
from models.events import Event
from models.timeline import LayoutConfig, LayoutResult, TimelineOptions, UnavailableBlock
from services.coordinates import hour_decimal
from services.hours import HourLine, build_hour_lines, day_separators
from services.layout import pack_days
from services.now_indicator import now_offset
from services.unavailable import build_unavailable_blocks


@dataclass(frozen=True)
class NowIndicator:
    top: float
    left: float
    width: float
    day_index: int


@dataclass
class TimelineLayout:
    dates: list[date]
    width: float
    calendar_height: float
    days: list[LayoutResult] = field(default_factory=list)
    rejected: list[InvalidIntervalError] = field(default_factory=list)
    unavailable_blocks: list[UnavailableBlock] = field(default_factory=list)
    hour_lines: list[HourLine] = field(default_factory=list)
    day_separators: list[float] = field(default_factory=list)
    now_indicator: NowIndicator | None = None
    initial_scroll_offset: float = 0


def _now_indicator(
    dates: Sequence[date], options: TimelineOptions, width: float, now: datetime
) -> NowIndicator | None:
    if not options.show_now_indicator or now.date() not in dates:
        return None
    if not options.day_range.start <= hour_decimal(now) <= options.day_range.end:
        return None

    day_index = list(dates).index(now.date())
    day_width = width / options.number_of_days
    return NowIndicator(
        top=now_offset(options.hour_block_height, now=now, day_start=options.day_range.start),
        left=options.left_inset + day_index * day_width,
        width=day_width,
        day_index=day_index,
    )


def initial_scroll_offset(
    days: list[LayoutResult], options: TimelineOptions, now: datetime
) -> float:
    """
    Where the page starts scrolled to.

    Priority: now, then the first event of the first day, then initial_time.
    The target is shown one hour below the top edge.
    """
    height = options.hour_block_height
    day_start = options.day_range.start
    position = 0.0

    if options.scroll_to_now:
        position = now_offset(height, now=now, day_start=day_start)
    elif options.scroll_to_first and days and days[0].events:
        position = min(event["top"] for event in days[0].events)
    elif options.initial_time:
        position = now_offset(
            height, options.initial_time.hour, options.initial_time.minutes, day_start=day_start
        )

    if not position:
        return 0.0
    return max(0.0, position - height)


def build_timeline(
    events: list[Event],
    dates: Sequence[date],
    options: TimelineOptions | None = None,
    now: datetime | None = None,
) -> TimelineLayout:
    """
    Lay out a timeline page for the given dates.

    now is sampled once when not supplied so the indicator and the scroll
    position agree.

    Raises:
        OutOfRangeConfigError: if the options cannot produce a layout
    """
    options = options or TimelineOptions()
    validate_hour_block_height(options.hour_block_height)
    validate_day_range(options.day_range.start, options.day_range.end)
    validate_number_of_days(options.number_of_days)
    validate_horizontal_geometry(options.screen_width, options.left_inset)
    now = now or datetime.now()
    dates = list(dates)

    width = options.screen_width - options.left_inset
    layout = pack_days(
        events,
        dates,
        LayoutConfig(
            screen_width=width,
            day_start=options.day_range.start,
            day_end=options.day_range.end,
            overlap_events_spacing=options.overlap_events_spacing,
            right_edge_spacing=options.right_edge_spacing,
            hour_block_height=options.hour_block_height,
            min_event_height=options.min_event_height,
        ),
        options.number_of_days,
    )

    return TimelineLayout(
        dates=dates,
        width=width,
        calendar_height=options.day_range.hours * options.hour_block_height,
        days=layout.days,
        rejected=layout.rejected,
        unavailable_blocks=build_unavailable_blocks(
            options.unavailable_hours, options.day_range, options.hour_block_height
        ),
        hour_lines=build_hour_lines(options.day_range, options.hour_block_height, options.format24h),
        day_separators=day_separators(width, options.number_of_days),
        now_indicator=_now_indicator(dates, options, width, now),
        initial_scroll_offset=initial_scroll_offset(layout.days, options, now),
    )
