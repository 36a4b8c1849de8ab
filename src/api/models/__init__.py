"""API Pydantic models."""

from .requests import EventIn, LayoutRequest, PointerRequest, TimeOfDayIn, UnavailableHoursIn
from .responses import (
    DayLayoutOut,
    ErrorCodes,
    ErrorResponse,
    EventOut,
    HealthResponse,
    HourLineOut,
    LayoutResponse,
    NowIndicatorOut,
    NowOffsetResponse,
    PackedEventOut,
    PointerResponse,
    RejectedEventOut,
    UnavailableBlockOut,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "EventIn",
    "UnavailableHoursIn",
    "TimeOfDayIn",
    "LayoutRequest",
    "PointerRequest",
    "EventOut",
    "PackedEventOut",
    "RejectedEventOut",
    "DayLayoutOut",
    "UnavailableBlockOut",
    "HourLineOut",
    "NowIndicatorOut",
    "LayoutResponse",
    "PointerResponse",
    "NowOffsetResponse",
]
