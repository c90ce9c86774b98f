"""Header field extraction by first-occurrence delimiter scanning.

A header line looks like::

    - 09:00 (45) [work] Write report：first draft only

Each field is cut out independently:

    project   between the first '[' and the first ']'
    estimate  between the first '(' and the first ')', parsed as an integer
    name      between the first ']' and the first full-width colon
    notes     everything after the first full-width colon

Delimiters are not balanced or nested. A missing left delimiter scans from
the start of the line, a missing right delimiter scans to the end, and a
left delimiter found after the right one yields an empty field. Only the
estimate can fail.
"""

import re
from dataclasses import dataclass

from daylog.errors import MalformedEstimate
from daylog.models import FULLWIDTH_COLON

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class HeaderFields:
    name: str
    project: str
    estimate: int
    notes: str


def text_between(line: str, left: str, right: str) -> str:
    left_at = line.find(left)
    begin = left_at + len(left) if left_at >= 0 else 0
    end = line.find(right)
    if end < 0:
        end = len(line)
    if begin > end:
        return ""
    return line[begin:end].strip()


def text_after(line: str, delimiter: str) -> str:
    _, found, rest = line.partition(delimiter)
    return rest.strip() if found else ""


def parse_estimate(text: str, task_name: str) -> int:
    if not _INTEGER_RE.match(text):
        raise MalformedEstimate(task_name, text)
    return int(text)


def extract_header(line: str) -> HeaderFields:
    """Split a task header line into its identity fields.

    Raises:
        MalformedEstimate: if the parenthesized estimate is not an integer.
    """
    name = text_between(line, "]", FULLWIDTH_COLON)
    notes = text_after(line, FULLWIDTH_COLON)
    project = text_between(line, "[", "]")
    estimate = parse_estimate(text_between(line, "(", ")"), name)
    return HeaderFields(name=name, project=project, estimate=estimate, notes=notes)
