"""SQLite persistence for planned tasks and ingested work-log records."""

import logging
import os
import sqlite3

from daylog.errors import SinkFailure
from daylog.models import LogRecord, Task, record_to_dict

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    status TEXT, name TEXT, notes TEXT, project TEXT, start TEXT,
    estimate INTEGER, repeat TEXT, next TEXT
);
CREATE TABLE IF NOT EXISTS log (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT, notes TEXT, project TEXT, date TEXT,
    start TEXT, end TEXT, estimate INTEGER, review TEXT
);
"""


class PlannerStore:
    """Table-per-entity store. Also the record sink for ingestion."""

    def __init__(self, path: str):
        self._path = path
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self._conn = sqlite3.connect(path)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def append(self, record: LogRecord) -> None:
        """Insert one work-log record, committing immediately."""
        if self._conn is None:
            raise SinkFailure(record, "store is closed")
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO log (name, notes, project, date, start, end, estimate, review) "
                    "VALUES (:name, :notes, :project, :date, :start, :end, :estimate, :review)",
                    record_to_dict(record),
                )
        except sqlite3.Error as exc:
            raise SinkFailure(record, str(exc)) from exc

    def logs_for_date(self, date: str) -> list[LogRecord]:
        rows = self._conn.execute(
            "SELECT name, notes, project, date, start, end, estimate, review "
            "FROM log WHERE date = ? ORDER BY start, id",
            (date,),
        ).fetchall()
        return [LogRecord(**dict(row)) for row in rows]

    def add_task(self, task: Task) -> int:
        with self._conn:
            cur = self._conn.execute(
                "INSERT INTO tasks (status, name, notes, project, start, estimate, repeat, next) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (task.status, task.name, task.notes, task.project, task.start,
                 task.estimate, task.repeat, task.next),
            )
        logger.info("Added task %d: %s", cur.lastrowid, task.name)
        return cur.lastrowid

    def tasks_for_date(self, date: str) -> list[Task]:
        rows = self._conn.execute(
            "SELECT id, status, name, notes, project, start, estimate, repeat, next "
            "FROM tasks WHERE next = ? ORDER BY start, id",
            (date,),
        ).fetchall()
        return [Task(**dict(row)) for row in rows]

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
