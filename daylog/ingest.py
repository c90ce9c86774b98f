"""Daily-log ingestion — read a markdown log and push its records to a sink."""

import logging
from typing import Generator, Iterable, TextIO

from daylog.accumulator import RecordAccumulator, RecordSink
from daylog.errors import IoFailure

logger = logging.getLogger(__name__)


def open_log(path: str) -> TextIO:
    """Open a daily log for reading, raising IoFailure instead of OSError."""
    try:
        return open(path, "r", encoding="utf-8")
    except OSError as exc:
        raise IoFailure(path, exc.strerror or str(exc)) from exc


def read_lines(f: TextIO, path: str) -> Generator[str, None, None]:
    """Yield lines of an open log without their line endings."""
    try:
        for line in f:
            yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoFailure(path, str(exc)) from exc


def ingest_lines(lines: Iterable[str], date: str, sink: RecordSink) -> int:
    """Run the accumulator over *lines* and return the number of records flushed."""
    accumulator = RecordAccumulator(sink, date)
    for line in lines:
        accumulator.feed(line)
    return accumulator.finish()


def ingest_file(path: str, date: str, sink: RecordSink) -> int:
    """Ingest one daily log file, stamping every record with *date*.

    The file is opened before any parsing starts. A malformed estimate or a
    sink failure aborts the run; records already appended stay appended.
    """
    f = open_log(path)
    logger.info("Ingesting %s for %s", path, date)
    with f:
        count = ingest_lines(read_lines(f, path), date, sink)
    logger.info("Stored %d record(s) from %s", count, path)
    return count
