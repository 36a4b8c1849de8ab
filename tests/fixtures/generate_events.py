"""
Generate random timeline events for layout property tests.
"""

import random
from datetime import date, datetime, time, timedelta

from faker import Faker

# Meeting lengths in minutes, weighted toward common calendar slots
DURATIONS = [15, 30, 30, 45, 60, 60, 60, 90, 120, 180]
START_MINUTES = [0, 15, 30, 45]

COLORS = ["#add8e6", "#e6add8", "#d8e6ad", "lightgreen", None]


def generate_day_events(day: date, count: int, seed: int = 0) -> list[dict]:
    """
    Build count events on one day, none of them running past midnight.

    The same seed always yields the same events.
    """
    rng = random.Random(seed)
    fake = Faker()
    fake.seed_instance(seed)

    midnight = datetime.combine(day, time())
    day_end = midnight + timedelta(days=1)

    events = []
    for i in range(count):
        start = midnight + timedelta(hours=rng.randint(6, 21), minutes=rng.choice(START_MINUTES))
        end = min(start + timedelta(minutes=rng.choice(DURATIONS)), day_end)
        event = {
            "id": f"evt-{i}",
            "start": start,
            "end": end,
            "title": fake.catch_phrase(),
        }
        if rng.random() < 0.5:
            event["summary"] = fake.sentence(nb_words=6)
        color = rng.choice(COLORS)
        if color:
            event["color"] = color
        events.append(event)

    return events


def overlaps(a: dict, b: dict) -> bool:
    """True when two events share any time."""
    return a["start"] < b["end"] and b["start"] < a["end"]
