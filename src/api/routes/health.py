"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from api.models.responses import HealthResponse
from core.config import API_VERSION, HOUR_BLOCK_HEIGHT, MAX_EVENTS_PER_REQUEST, TIMELINE_API_KEY

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Liveness check with the grid defaults the layout endpoints fall back to.

    Layout is pure computation, so the only thing that can make the service
    unusable is a missing API key.
    """
    return HealthResponse(
        status="healthy" if TIMELINE_API_KEY else "degraded",
        version=API_VERSION,
        hour_block_height=HOUR_BLOCK_HEIGHT,
        max_events_per_request=MAX_EVENTS_PER_REQUEST,
        api_key_configured=bool(TIMELINE_API_KEY),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
