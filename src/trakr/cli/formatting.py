# src/trakr/cli/formatting.py

"""Plain-text rendering for `trakr ls`."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from ..tasks.task_models import Task


def format_time(ts: datetime) -> str:
    """Local time of day, 24-hour HH:MM."""
    return ts.astimezone().strftime("%H:%M")


def format_duration(duration: timedelta) -> str:
    """
    45 min -> "45m", 60 min -> "1h 0m", 119 min -> "2h 59m".

    Hours and leftover minutes are each rounded up on their own, so values
    just under a full hour show the next hour (119 min is "2h 59m").
    """
    mins = abs(duration.total_seconds()) / 60
    if mins < 60:
        return f"{math.ceil(mins)}m"
    hours = math.ceil(mins / 60)
    rem = math.ceil(mins % 60)
    return f"{hours}h {rem}m"


def render_active(active: list[Task]) -> str:
    if not active:
        return "No active tasks."

    lines = ["Active tasks:", "", "ID \tSTART \tINFO"]
    for t in active:
        lines.append(f"{t.id} \t{format_time(t.start)} \t{t.info}")
    return "\n".join(lines)


def render_done(done: list[Task]) -> str:
    if not done:
        return "No completed tasks today."

    # sorted() is stable: equal durations keep insertion order.
    by_duration = sorted(done, key=lambda t: t.duration(), reverse=True)

    lines = ["Completed tasks:", "", "ID \tSTART \tDURATION \tINFO"]
    for t in by_duration:
        lines.append(
            f"{t.id} \t{format_time(t.start)} \t{format_duration(t.duration())} \t{t.info}"
        )
    return "\n".join(lines)
