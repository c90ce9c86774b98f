"""Line classification by indentation prefix."""

from enum import Enum

HEADER_PREFIX = "- "
SUBFIELD_PREFIX = "  -"


class LineKind(Enum):
    TASK_HEADER = "task_header"
    SUBFIELD = "subfield"
    IGNORED = "ignored"


def classify_line(line: str) -> LineKind:
    """Header prefix is tested first, then the one-level-deeper subfield prefix."""
    if line.startswith(HEADER_PREFIX):
        return LineKind.TASK_HEADER
    if line.startswith(SUBFIELD_PREFIX):
        return LineKind.SUBFIELD
    return LineKind.IGNORED
