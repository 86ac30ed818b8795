"""
Duration math for startup timelines and the severity classification used
to color badges. Pure functions; no I/O.
"""
from datetime import timedelta
from typing import Literal

from schemas.report import Event, Timeline

Severity = Literal["danger", "warning", "success"]

DANGER_THRESHOLD = timedelta(seconds=5)
WARNING_THRESHOLD = timedelta(seconds=1)


def event_duration(event: Event) -> timedelta:
    return event.end_time - event.start_time


def timeline_duration(timeline: Timeline) -> timedelta:
    """Latest event end minus timeline start; zero for a timeline without events."""
    if not timeline.events:
        return timedelta(0)
    latest_end = max(event.end_time for event in timeline.events)
    return latest_end - timeline.start_time


def classify_duration(duration: timedelta) -> Severity:
    if duration > DANGER_THRESHOLD:
        return "danger"
    if duration > WARNING_THRESHOLD:
        return "warning"
    return "success"


def badge_class(duration: timedelta) -> str:
    return f"badge-{classify_duration(duration)}"


def format_duration(duration: timedelta) -> str:
    """
    Compact label: seconds with millisecond precision from 1s up,
    whole milliseconds below that, microseconds below 1ms.
    """
    total = duration.total_seconds()
    sign = "-" if total < 0 else ""
    seconds = abs(total)
    if seconds >= 1:
        return f"{sign}{seconds:.3f}s"
    if seconds == 0:
        return "0ms"
    if seconds >= 0.001:
        return f"{sign}{seconds * 1000:.0f}ms"
    return f"{sign}{seconds * 1_000_000:.0f}µs"


def event_offset(event: Event, timeline: Timeline) -> timedelta:
    return event.start_time - timeline.start_time


def timeline_position(event: Event, timeline: Timeline) -> tuple[float, float]:
    """
    Return (left, width) of the event's bar as percentages of the whole
    timeline, clamped so the bar stays inside [0, 100].
    """
    total = timeline_duration(timeline).total_seconds()
    if total <= 0:
        return 0.0, 0.0
    left = event_offset(event, timeline).total_seconds() / total * 100
    left = min(max(left, 0.0), 100.0)
    width = event_duration(event).total_seconds() / total * 100
    width = min(max(width, 0.0), 100.0 - left)
    return round(left, 2), round(width, 2)
