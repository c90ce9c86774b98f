"""Elapsed minutes between two wall-clock HH:MM strings."""

from datetime import datetime

CLOCK_FORMAT = "%H:%M"


def duration_minutes(start: str, end: str) -> str:
    """Return ``end - start`` in whole minutes, as a string.

    Both values must parse as ``HH:MM``; anything else raises ValueError.
    There is no day wrap, so an end earlier than the start gives a negative
    count (``"09:00"``, ``"08:00"`` -> ``"-60"``).
    """
    start_time = datetime.strptime(start, CLOCK_FORMAT)
    end_time = datetime.strptime(end, CLOCK_FORMAT)
    delta = end_time - start_time
    return str(int(delta.total_seconds() // 60))
