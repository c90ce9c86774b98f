"""SubField disambiguation — clock time or review note, decided by length."""

from daylog.classifier import SUBFIELD_PREFIX
from daylog.models import LogRecord

# "HH:MM" is five characters. Anything that short counts as a time, valid
# or not; it is only parsed when a report computes durations.
MAX_TIME_LENGTH = 5


def subfield_value(line: str) -> str:
    return line[len(SUBFIELD_PREFIX):].strip()


def is_time_value(value: str) -> bool:
    return len(value) <= MAX_TIME_LENGTH


def apply_subfield(record: LogRecord, line: str) -> None:
    """Write a subfield line's value onto the record.

    The first time fills ``start``, every later one overwrites ``end``.
    Longer text replaces ``review``.
    """
    value = subfield_value(line)
    if is_time_value(value):
        if not record.start:
            record.start = value
        else:
            record.end = value
    else:
        record.review = value
