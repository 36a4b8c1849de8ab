#!/usr/bin/env python3
"""
Lay out events from a JSON file and print the block geometry per day.

The input file holds a list of events:
    [{"id": "1", "start": "2025-11-03T09:00:00", "end": "2025-11-03T10:00:00", "title": "Standup"}]

Usage:
    uv run python src/scripts/layout_events.py events.json --date 2025-11-03 --days 3

Example:
    uv run python src/scripts/layout_events.py data/sample_events.json --screen-width 390 --left-inset 72
"""

import argparse
import json
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DEFAULT_SCREEN_WIDTH, HOUR_BLOCK_HEIGHT
from models.timeline import DayRange, TimelineOptions
from services.coordinates import page_dates
from services.timeline import build_timeline


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing 'Z'."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def load_events(path: Path) -> list[dict]:
    """Read events from JSON, converting start/end to datetimes."""
    raw_events = json.loads(path.read_text())
    events = []
    for raw in raw_events:
        events.append(
            {
                **raw,
                "start": parse_timestamp(raw["start"]),
                "end": parse_timestamp(raw["end"]),
            }
        )
    return events


def print_layout(timeline) -> None:
    for day, result in zip(timeline.dates, timeline.days):
        print(f"\n{day.isoformat()} ({len(result.events)} events)")
        print("-" * 72)
        for event in result.events:
            print(
                f"  [{event['index']:>2}] {event['start']:%H:%M}-{event['end']:%H:%M} "
                f"{(event.get('title') or '')[:24]:<24} "
                f"left={event['left']:7.1f} top={event['top']:7.1f} "
                f"w={event['width']:6.1f} h={event['height']:6.1f}"
            )

    for block in timeline.unavailable_blocks:
        print(f"\nUnavailable: top={block.top:.1f} height={block.height:.1f}")

    if timeline.rejected:
        print(f"\nRejected {len(timeline.rejected)} event(s):")
        for error in timeline.rejected:
            print(f"  - {error}")


def main():
    parser = argparse.ArgumentParser(
        description="Lay out calendar events on a day/multi-day timeline"
    )
    parser.add_argument("input_file", type=Path, help="Path to a JSON list of events")
    parser.add_argument("--date", help="First page date (YYYY-MM-DD). Uses the first event's date if omitted.")
    parser.add_argument("--days", type=int, default=1, help="Number of days on the page")
    parser.add_argument("--day-start", type=int, default=0, help="First visible hour")
    parser.add_argument("--day-end", type=int, default=24, help="Last visible hour")
    parser.add_argument("--hour-height", type=float, default=HOUR_BLOCK_HEIGHT, help="Pixels per hour")
    parser.add_argument("--screen-width", type=float, default=DEFAULT_SCREEN_WIDTH)
    parser.add_argument("--left-inset", type=float, default=0)
    parser.add_argument("--spacing", type=float, default=0, help="Gap between overlapping events")
    parser.add_argument("--right-edge-spacing", type=float, default=0)
    parser.add_argument(
        "--unavailable",
        action="append",
        default=[],
        metavar="START-END",
        help="Unavailable hour range, e.g. 0-6 (repeatable)",
    )

    args = parser.parse_args()

    try:
        events = load_events(args.input_file)

        if args.date:
            first_date = datetime.strptime(args.date, "%Y-%m-%d").date()
        elif events:
            first_date = min(event["start"] for event in events).date()
        else:
            first_date = date.today()

        unavailable_hours = []
        for value in args.unavailable:
            start, end = value.split("-")
            unavailable_hours.append({"start": float(start), "end": float(end)})

        options = TimelineOptions(
            day_range=DayRange(args.day_start, args.day_end),
            hour_block_height=args.hour_height,
            screen_width=args.screen_width,
            left_inset=args.left_inset,
            number_of_days=args.days,
            overlap_events_spacing=args.spacing,
            right_edge_spacing=args.right_edge_spacing,
            unavailable_hours=unavailable_hours,
        )
        timeline = build_timeline(events, page_dates(first_date, args.days), options)
        print_layout(timeline)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
