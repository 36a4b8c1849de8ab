"""
Tests for event block text layout.
"""

from conftest import at

from services.event_blocks import describe_event_block, format_event_time


def packed(height, **fields):
    return {
        "start": at(9),
        "end": at(10, 30),
        "title": "Planning",
        "index": 0,
        "left": 0,
        "top": 900,
        "width": 200,
        "height": height,
        **fields,
    }


def test_single_line_block_shows_only_title():
    view = describe_event_block(packed(25))

    assert view.number_of_lines == 1
    assert view.title == "Planning"
    assert view.summary is None
    assert view.times is None


def test_two_line_block_adds_summary():
    view = describe_event_block(packed(40, summary="Roadmap"))

    assert view.summary == "Roadmap"
    assert view.summary_lines == 1
    assert view.times is None


def test_tall_block_shows_time_range():
    view = describe_event_block(packed(150))

    assert view.number_of_lines == 8
    assert view.summary == " "
    assert view.summary_lines == 7
    assert view.times == "09:00 - 10:30"


def test_twelve_hour_times():
    view = describe_event_block(packed(150, start=at(13, 5), end=at(14)), format24h=False)

    assert view.times == "01:05 PM - 02:00 PM"


def test_defaults_for_missing_title_and_color():
    view = describe_event_block(packed(25, title="", color=None))

    assert view.title == "Event"
    assert view.color == "#add8e6"


def test_custom_color():
    assert describe_event_block(packed(25, color="tomato")).color == "tomato"


def test_format_event_time():
    assert format_event_time(at(0, 7)) == "00:07"
