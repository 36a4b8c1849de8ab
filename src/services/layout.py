"""
Event layout: clustering overlapping events into columns and computing
pixel geometry for each event block.

Column policy is plain greedy interval colouring per overlap cluster. Every
event in a cluster shares the cluster's column count, and no event widens to
reclaim space left by a neighbour that ended earlier.
"""

import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date

from core.errors import InvalidIntervalError
from core.validation import validate_intervals, validate_layout_config, validate_number_of_days
from models.events import Event, PackedEvent
from models.timeline import LayoutConfig, LayoutResult, MultiDayLayout
from services.coordinates import hour_decimal

logger = logging.getLogger(__name__)


@dataclass
class _Slot:
    """Working record for one event while packing (hours are clipped to the grid)."""

    event: Event
    start: float
    end: float  # real visible end
    layout_end: float  # end used for clustering, at least the height floor
    column: int = 0
    columns: int = 1


def _log_rejected(rejected: list[InvalidIntervalError]) -> None:
    for error in rejected:
        logger.warning("Excluding event from layout: %s", error)


def _visible_hours(event: Event, config: LayoutConfig) -> tuple[float, float]:
    """Start/end hour of an event clipped to the visible day."""
    start = hour_decimal(event["start"])
    # Ending on a later day runs to the bottom of the grid
    end = hour_decimal(event["end"]) if event["end"].date() == event["start"].date() else 24.0

    start = min(max(start, config.day_start), config.day_end)
    end = min(max(end, config.day_start), config.day_end)
    return start, end


def _sort_key(slot: _Slot) -> tuple:
    event = slot.event
    # Real start/duration separate events clipped alike; wall clock keeps
    # naive and aware starts comparable
    return (
        slot.start,
        -(slot.layout_end - slot.start),
        event["start"].replace(tzinfo=None),
        -(event["end"] - event["start"]),
        str(event.get("id") or ""),
        event.get("title") or "",
        event.get("summary") or "",
        event.get("color") or "",
    )


def _build_slots(events: list[Event], config: LayoutConfig) -> list[_Slot]:
    min_hours = config.min_event_height / config.hour_block_height
    slots = []
    for event in events:
        start, end = _visible_hours(event, config)
        slots.append(_Slot(event=event, start=start, end=end, layout_end=max(end, start + min_hours)))
    return sorted(slots, key=_sort_key)


def _clusters(slots: list[_Slot]) -> list[list[_Slot]]:
    """Split sorted slots into maximal chains of overlapping events."""
    clusters: list[list[_Slot]] = []
    active_end = None

    for slot in slots:
        if active_end is None or slot.start >= active_end:
            clusters.append([slot])
            active_end = slot.layout_end
        else:
            clusters[-1].append(slot)
            active_end = max(active_end, slot.layout_end)

    return clusters


def _assign_columns(cluster: list[_Slot]) -> None:
    """Greedy colouring: first column whose last event ended by this start."""
    column_ends: list[float] = []

    for slot in cluster:
        for column, last_end in enumerate(column_ends):
            if last_end <= slot.start:
                slot.column = column
                column_ends[column] = slot.layout_end
                break
        else:
            slot.column = len(column_ends)
            column_ends.append(slot.layout_end)

    for slot in cluster:
        slot.columns = len(column_ends)


def _build_packed_event(slot: _Slot, index: int, config: LayoutConfig) -> PackedEvent:
    grid_height = (config.day_end - config.day_start) * config.hour_block_height

    width = (config.screen_width - config.right_edge_spacing) / slot.columns - config.overlap_events_spacing
    left = slot.column * (width + config.overlap_events_spacing)

    top = (slot.start - config.day_start) * config.hour_block_height
    height = max((slot.end - slot.start) * config.hour_block_height, config.min_event_height)
    # Keep floored blocks at the bottom edge inside the grid
    top = max(0.0, min(top, grid_height - height))

    return {
        **slot.event,
        "index": index,
        "left": left,
        "top": top,
        "width": width,
        "height": height,
    }


def pack_events(events: list[Event], config: LayoutConfig | None = None) -> LayoutResult:
    """
    Lay out one day's events.

    Invalid intervals (end <= start) are excluded and reported in
    LayoutResult.rejected; the remaining events are packed normally.

    Raises:
        OutOfRangeConfigError: if config cannot produce a layout
    """
    config = config or LayoutConfig()
    validate_layout_config(config)

    valid, rejected = validate_intervals(events)
    _log_rejected(rejected)

    slots = _build_slots(valid, config)
    for cluster in _clusters(slots):
        _assign_columns(cluster)

    packed = [_build_packed_event(slot, index, config) for index, slot in enumerate(slots)]
    return LayoutResult(events=packed, rejected=rejected)


def group_events_by_date(events: list[Event]) -> dict[date, list[Event]]:
    """Group events by the calendar date of their start."""
    grouped: dict[date, list[Event]] = defaultdict(list)
    for event in events:
        grouped[event["start"].date()].append(event)
    return dict(grouped)


def pack_days(
    events: list[Event],
    dates: Sequence[date],
    config: LayoutConfig | None = None,
    number_of_days: int | None = None,
) -> MultiDayLayout:
    """
    Lay out events for each page date.

    Width and spacing in config describe the whole timeline and are divided
    evenly between the day columns. Events on dates outside the page are
    ignored; invalid events are reported once in MultiDayLayout.rejected.
    """
    config = config or LayoutConfig()
    number_of_days = number_of_days or len(dates)
    validate_number_of_days(number_of_days)

    day_config = replace(
        config,
        screen_width=config.screen_width / number_of_days,
        overlap_events_spacing=config.overlap_events_spacing / number_of_days,
        right_edge_spacing=config.right_edge_spacing / number_of_days,
    )
    validate_layout_config(day_config)

    valid, rejected = validate_intervals(events)
    _log_rejected(rejected)

    grouped = group_events_by_date(valid)
    days = [pack_events(grouped.get(day, []), day_config) for day in dates]
    return MultiDayLayout(days=days, rejected=rejected)
