"""
Text layout for a single event block.
"""

import math
from dataclasses import dataclass

from core.config import EVENT_DEFAULT_COLOR, EVENT_DEFAULT_TITLE, TEXT_LINE_HEIGHT
from models.events import PackedEvent


@dataclass(frozen=True)
class EventBlockView:
    """What fits inside an event block of a given height."""

    title: str
    summary: str | None
    summary_lines: int
    times: str | None
    color: str
    number_of_lines: int


def format_event_time(moment, format24h: bool = True) -> str:
    """'HH:mm' or 'hh:mm AM' style time."""
    return moment.strftime("%H:%M") if format24h else moment.strftime("%I:%M %p")


def describe_event_block(event: PackedEvent, format24h: bool = True) -> EventBlockView:
    """
    Decide which lines of text an event block shows.

    The title always shows. A summary needs at least two lines of height and
    takes all but the first; the time range needs at least three.
    """
    number_of_lines = math.floor(event["height"] / TEXT_LINE_HEIGHT)

    summary = None
    summary_lines = 0
    if number_of_lines > 1:
        summary = event.get("summary") or " "
        summary_lines = number_of_lines - 1

    times = None
    if number_of_lines > 2:
        times = (
            f"{format_event_time(event['start'], format24h)}"
            f" - {format_event_time(event['end'], format24h)}"
        )

    return EventBlockView(
        title=event.get("title") or EVENT_DEFAULT_TITLE,
        summary=summary,
        summary_lines=summary_lines,
        times=times,
        color=event.get("color") or EVENT_DEFAULT_COLOR,
        number_of_lines=number_of_lines,
    )
