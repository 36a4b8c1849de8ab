"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# GRID CONFIGURATION
# =============================================================================

HOUR_BLOCK_HEIGHT = float(os.environ.get("TIMELINE_HOUR_BLOCK_HEIGHT", "100"))
DEFAULT_DAY_START = 0
DEFAULT_DAY_END = 24
DEFAULT_SCREEN_WIDTH = float(os.environ.get("TIMELINE_SCREEN_WIDTH", "390"))

# Minute snapping for pointer positions (1 = exact minute, UIs may use 5 or 15)
MINUTE_GRANULARITY = int(os.environ.get("TIMELINE_MINUTE_GRANULARITY", "1"))

# =============================================================================
# EVENT BLOCK CONFIGURATION
# =============================================================================

MIN_EVENT_HEIGHT = 25  # Keeps very short events tappable
TEXT_LINE_HEIGHT = 17
EVENT_DEFAULT_COLOR = "#add8e6"
EVENT_DEFAULT_TITLE = "Event"

# =============================================================================
# DRAFT EVENT CONFIGURATION
# =============================================================================

DRAFT_EVENT_ID = "draft"
DRAFT_EVENT_TITLE = "New Event"
DRAFT_EVENT_COLOR = "white"
APPROVED_EVENT_COLOR = "lightgreen"
DRAFT_EVENT_DURATION_HOURS = 1

# =============================================================================
# API CONFIGURATION
# =============================================================================

TIMELINE_API_KEY = os.environ.get("TIMELINE_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
MAX_EVENTS_PER_REQUEST = int(os.environ.get("MAX_EVENTS_PER_REQUEST", "5000"))
API_VERSION = "1.0.0"
