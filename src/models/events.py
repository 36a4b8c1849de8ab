"""
Data models for timeline events.

Events stay plain dictionaries typed with TypedDict so callers can pass their
own records straight through; derived geometry is always a fresh dictionary.
"""

from datetime import date, datetime
from typing import NotRequired, TypedDict


class Event(TypedDict):
    """Titled time interval to display."""
    id: NotRequired[str | None]
    start: datetime
    end: datetime
    title: str
    summary: NotRequired[str | None]
    color: NotRequired[str | None]


class PackedEvent(Event):
    """Event plus pixel geometry for one day's coordinate space."""
    index: int
    left: float
    top: float
    width: float
    height: float


class NewEventTime(TypedDict):
    """Time picked on the timeline background."""
    hour: int
    minutes: int
    date: date | None


class UnavailableHours(TypedDict):
    """Hour range shaded as unavailable."""
    start: float
    end: float
