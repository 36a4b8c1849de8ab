"""API route modules."""

from .health import router as health_router
from .timeline import router as timeline_router

__all__ = ["health_router", "timeline_router"]
