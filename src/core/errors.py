"""
Timeline error types.

All errors subclass ValueError so callers (and the API layer) can treat them
as validation failures.
"""


class TimelineError(ValueError):
    """Base class for timeline layout errors."""


class InvalidIntervalError(TimelineError):
    """An event whose end is not after its start."""

    def __init__(self, event: dict, index: int, reason: str | None = None):
        self.event = event
        self.index = index
        label = event.get("id") or event.get("title") or f"#{index}"
        self.reason = reason or "end must be after start"
        super().__init__(f"Event '{label}' has an invalid interval: {self.reason}")


class OutOfRangeConfigError(TimelineError):
    """Layout configuration that has no sensible result."""
