"""Timeline layout endpoints."""

import logging
import time
from dataclasses import asdict
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.dependencies import get_client_ip, verify_api_key
from api.models.requests import LayoutRequest, PointerRequest
from api.models.responses import (
    DayLayoutOut,
    ErrorCodes,
    EventOut,
    HourLineOut,
    LayoutResponse,
    NowIndicatorOut,
    NowOffsetResponse,
    PackedEventOut,
    PointerResponse,
    RejectedEventOut,
    UnavailableBlockOut,
)
from api.request_log import RequestLog, log_request
from core.config import HOUR_BLOCK_HEIGHT, MAX_EVENTS_PER_REQUEST
from core.errors import InvalidIntervalError, TimelineError
from models.timeline import DayRange, TimelineGeometry, TimelineOptions, TimeOfDay
from services.coordinates import page_dates
from services.now_indicator import now_offset
from services.pointer import (
    build_draft_event,
    build_time_string,
    format_time_label,
    resolve_long_press,
)
from services.timeline import TimelineLayout, build_timeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")


def _elapsed_ms(start_time: float) -> int:
    return int((time.time() - start_time) * 1000)


def _rejected_out(error: InvalidIntervalError) -> RejectedEventOut:
    return RejectedEventOut(
        index=error.index,
        id=error.event.get("id"),
        title=error.event.get("title"),
        reason=error.reason,
    )


def _layout_response(timeline: TimelineLayout) -> LayoutResponse:
    indicator = timeline.now_indicator
    return LayoutResponse(
        width=timeline.width,
        calendar_height=timeline.calendar_height,
        days=[
            DayLayoutOut(date=day, events=[PackedEventOut(**event) for event in result.events])
            for day, result in zip(timeline.dates, timeline.days)
        ],
        rejected=[_rejected_out(error) for error in timeline.rejected],
        unavailable_blocks=[UnavailableBlockOut(**asdict(block)) for block in timeline.unavailable_blocks],
        hour_lines=[HourLineOut(**asdict(line)) for line in timeline.hour_lines],
        day_separators=timeline.day_separators,
        now_indicator=NowIndicatorOut(**asdict(indicator)) if indicator else None,
        initial_scroll_offset=timeline.initial_scroll_offset,
    )


def _validation_failed(request_log: RequestLog, error: TimelineError, start_time: float) -> HTTPException:
    """Record a configuration error and build the 422 response."""
    request_log.status_code = 422
    request_log.error_code = ErrorCodes.VALIDATION_ERROR
    request_log.error_message = str(error)
    request_log.processing_time_ms = _elapsed_ms(start_time)

    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "error": "Timeline configuration is invalid",
            "code": ErrorCodes.VALIDATION_ERROR,
            "details": [str(error)],
        },
    )


def _internal_error(request_log: RequestLog, error: Exception, start_time: float) -> HTTPException:
    logger.exception("Unexpected error on %s", request_log.endpoint)
    request_log.status_code = 500
    request_log.error_code = ErrorCodes.INTERNAL_ERROR
    request_log.error_message = str(error)
    request_log.processing_time_ms = _elapsed_ms(start_time)

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error": "Internal server error",
            "code": ErrorCodes.INTERNAL_ERROR,
            "details": [],
        },
    )


@router.post("/timeline/layout", response_model=LayoutResponse)
async def layout_timeline_endpoint(
    request: Request,
    body: LayoutRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Lay out events for one timeline page.

    Events with invalid intervals are excluded and listed under 'rejected';
    invalid grid settings fail the whole request with 422.
    """
    start_time = time.time()

    request_log = RequestLog(
        endpoint="/v1/timeline/layout",
        client_ip=get_client_ip(request),
        events_received=len(body.events),
        number_of_days=body.number_of_days,
    )

    try:
        if len(body.events) > MAX_EVENTS_PER_REQUEST:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail={
                    "error": f"Too many events (maximum {MAX_EVENTS_PER_REQUEST})",
                    "code": ErrorCodes.TOO_MANY_EVENTS,
                    "details": [f"Received: {len(body.events)}"],
                },
            )

        # Sample the clock once for the whole layout pass
        now = body.now or datetime.now()
        dates = page_dates(body.start_date or now.date(), body.number_of_days)

        options = TimelineOptions(
            day_range=DayRange(body.day_start, body.day_end),
            hour_block_height=body.hour_block_height,
            screen_width=body.screen_width,
            left_inset=body.left_inset,
            number_of_days=body.number_of_days,
            overlap_events_spacing=body.overlap_events_spacing,
            right_edge_spacing=body.right_edge_spacing,
            min_event_height=body.min_event_height,
            unavailable_hours=[hours.model_dump() for hours in body.unavailable_hours],
            format24h=body.format24h,
            show_now_indicator=body.show_now_indicator,
            scroll_to_now=body.scroll_to_now,
            scroll_to_first=body.scroll_to_first,
            initial_time=(
                TimeOfDay(body.initial_time.hour, body.initial_time.minutes)
                if body.initial_time
                else None
            ),
        )

        timeline = build_timeline([event.model_dump() for event in body.events], dates, options, now=now)

        request_log.status_code = 200
        request_log.events_laid_out = sum(len(day.events) for day in timeline.days)
        request_log.rejected = [str(error) for error in timeline.rejected]
        request_log.processing_time_ms = _elapsed_ms(start_time)

        return _layout_response(timeline)

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
        else:
            request_log.error_message = str(e.detail)
        request_log.processing_time_ms = _elapsed_ms(start_time)
        raise

    except TimelineError as e:
        raise _validation_failed(request_log, e, start_time)

    except Exception as e:
        raise _internal_error(request_log, e, start_time)

    finally:
        log_request(request_log)


@router.post("/timeline/pointer", response_model=PointerResponse)
async def pointer_endpoint(
    request: Request,
    body: PointerRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Resolve a background long-press to a time, a date and a draft event.
    """
    start_time = time.time()

    request_log = RequestLog(
        endpoint="/v1/timeline/pointer",
        client_ip=get_client_ip(request),
        number_of_days=body.number_of_days,
    )

    try:
        first_date = body.start_date or datetime.now().date()
        geometry = TimelineGeometry(
            screen_width=body.screen_width,
            left_inset=body.left_inset,
            number_of_days=body.number_of_days,
            hour_block_height=body.hour_block_height,
            day_range=DayRange(body.day_start, body.day_end),
            page_dates=tuple(page_dates(first_date, body.number_of_days)),
            granularity=body.granularity,
        )

        picked = resolve_long_press(body.x, body.y, geometry)
        draft = build_draft_event(picked) if body.create_draft else None

        request_log.status_code = 200
        request_log.processing_time_ms = _elapsed_ms(start_time)

        return PointerResponse(
            hour=picked["hour"],
            minutes=picked["minutes"],
            date=picked["date"],
            time_string=build_time_string(picked["hour"], picked["minutes"], picked["date"]),
            label=format_time_label(picked["hour"], picked["minutes"]),
            draft_event=EventOut(**draft) if draft else None,
        )

    except TimelineError as e:
        raise _validation_failed(request_log, e, start_time)

    except Exception as e:
        raise _internal_error(request_log, e, start_time)

    finally:
        log_request(request_log)


@router.get("/timeline/now-offset", response_model=NowOffsetResponse)
async def now_offset_endpoint(
    hour: Annotated[int | None, Query(ge=0, le=24)] = None,
    minutes: Annotated[int | None, Query(ge=0, le=59)] = None,
    hour_block_height: Annotated[float, Query(gt=0)] = HOUR_BLOCK_HEIGHT,
    day_start: Annotated[int, Query(ge=0, le=24)] = 0,
    _api_key: str = Depends(verify_api_key),
):
    """Vertical offset of the current time, or of an explicit hour/minutes."""
    now = datetime.now()
    hour = now.hour if hour is None else hour
    minutes = now.minute if minutes is None else minutes

    return NowOffsetResponse(
        hour=hour,
        minutes=minutes,
        offset=now_offset(hour_block_height, hour, minutes, day_start=day_start),
    )
