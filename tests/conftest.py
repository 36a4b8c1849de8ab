"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Configure before any project module reads core.config
os.environ.setdefault("TIMELINE_API_KEY", "test-api-key")
os.environ.setdefault("TIMELINE_HOUR_BLOCK_HEIGHT", "100")

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

DAY = date(2025, 11, 3)


def at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    """Datetime on the test day."""
    return datetime(day.year, day.month, day.day, hour, minute)


@pytest.fixture
def sample_event():
    """Sample event dictionary for testing."""
    return {
        "id": "standup",
        "start": at(9),
        "end": at(10),
        "title": "Standup",
        "summary": "Daily sync",
        "color": "#ffcc00",
    }


@pytest.fixture
def sample_events(sample_event):
    """Two overlapping events on the same day."""
    return [
        sample_event,
        {
            **sample_event,
            "id": "review",
            "start": at(9, 30),
            "end": at(10, 30),
            "title": "Review",
        },
    ]
