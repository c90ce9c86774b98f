"""Markdown output — the daily report table and the next-day plan."""

import os

from daylog.durations import duration_minutes
from daylog.models import LogRecord, Task

REPORT_COLUMNS = ("Start", "End", "Duration", "Task", "Review")


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def _row(cells) -> str:
    return "| " + " | ".join(_cell(c) for c in cells) + " |"


def render_report(records: list[LogRecord]) -> str:
    """One markdown table row per record.

    Durations are computed here: a row missing a time gets a blank duration,
    and a stored time that is not HH:MM raises ValueError.
    """
    lines = [_row(REPORT_COLUMNS), _row("---" for _ in REPORT_COLUMNS)]
    for record in records:
        if record.start and record.end:
            duration = duration_minutes(record.start, record.end)
        else:
            duration = ""
        lines.append(_row((record.start, record.end, duration, record.name, record.review)))
    return "\n".join(lines) + "\n"


def render_plan(tasks: list[Task]) -> str:
    """Header lines for the day's tasks, ready to be logged against."""
    return "".join(task.to_header_line() + "\n" for task in tasks)


def write_text(text: str, path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def append_line(line: str, path: str) -> None:
    """Append a line to a daily log, creating it if needed."""
    with open(path, "a", encoding="utf-8") as f:
        f.write("\n" + line.rstrip("\n") + "\n")
