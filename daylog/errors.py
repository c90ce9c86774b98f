"""Fatal ingestion errors. None of these are recovered per line."""

from __future__ import annotations


class IngestError(Exception):
    """Base class for errors that abort an ingestion run."""


class MalformedEstimate(IngestError):
    """Raised when a header's parenthesized estimate is not an integer."""

    def __init__(self, task_name: str, estimate_text: str):
        self.task_name = task_name
        self.estimate_text = estimate_text
        super().__init__(
            f"Failed to read estimate {estimate_text!r} for task {task_name!r}"
        )


class SinkFailure(IngestError):
    """Raised when a finished record cannot be persisted."""

    def __init__(self, record, reason: str):
        self.record = record
        super().__init__(f"Failed to store record for task {record.name!r}: {reason}")


class IoFailure(IngestError):
    """Raised when the daily log file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read log file {path}: {reason}")
