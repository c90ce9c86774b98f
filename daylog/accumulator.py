"""Record accumulator — the single record under construction during ingestion.

States: IDLE until the first task header, OPEN while lines are applied,
DONE after the final flush. A header supersedes the open record only when
both its times are filled; otherwise the header overwrites the task fields
in place and the times and review carry over.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import Protocol, runtime_checkable

from daylog.classifier import LineKind, classify_line
from daylog.errors import IngestError, SinkFailure
from daylog.extractor import extract_header
from daylog.models import LogRecord
from daylog.subfields import apply_subfield

logger = logging.getLogger(__name__)


@runtime_checkable
class RecordSink(Protocol):
    def append(self, record: LogRecord) -> None: ...


class State(Enum):
    IDLE = "idle"
    OPEN = "open"
    DONE = "done"


class RecordAccumulator:
    def __init__(self, sink: RecordSink, date: str):
        self._sink = sink
        self._record = LogRecord(date=date)
        self._state = State.IDLE
        self._flushed = 0

    @property
    def state(self) -> State:
        return self._state

    @property
    def current(self) -> LogRecord | None:
        """The record under construction, or None before the first header."""
        return self._record if self._state is State.OPEN else None

    def feed(self, line: str) -> None:
        """Apply one raw input line (trailing newline already removed)."""
        if self._state is State.DONE:
            raise RuntimeError("accumulator already finished")

        kind = classify_line(line)
        if kind is LineKind.TASK_HEADER:
            self._apply_header(line)
        elif kind is LineKind.SUBFIELD and self._state is State.OPEN:
            apply_subfield(self._record, line)

    def finish(self) -> int:
        """Flush the open record once and return the total records flushed."""
        if self._state is State.OPEN:
            self._flush()
        self._state = State.DONE
        return self._flushed

    def _apply_header(self, line: str) -> None:
        if self._state is State.OPEN and self._record.has_times():
            self._flush()
            self._record.start = ""
            self._record.end = ""
            self._record.review = ""

        fields = extract_header(line)
        self._record.name = fields.name
        self._record.project = fields.project
        self._record.estimate = fields.estimate
        self._record.notes = fields.notes
        self._state = State.OPEN

    def _flush(self) -> None:
        # Hand the sink a snapshot; the live record keeps being mutated.
        snapshot = replace(self._record)
        try:
            self._sink.append(snapshot)
        except IngestError:
            raise
        except Exception as exc:
            raise SinkFailure(snapshot, str(exc)) from exc
        self._flushed += 1
        logger.debug("Flushed %r (%s-%s)", snapshot.name, snapshot.start, snapshot.end)
