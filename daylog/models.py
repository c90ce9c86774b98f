"""Record types — work-log records produced by ingestion and planned tasks."""

from dataclasses import dataclass, asdict
from typing import Any

FULLWIDTH_COLON = "："


@dataclass
class LogRecord:
    name: str = ""
    notes: str = ""
    project: str = ""
    date: str = ""
    start: str = ""
    end: str = ""
    estimate: int = 0
    review: str = ""

    def has_times(self) -> bool:
        """True once both start and end have been filled in."""
        return bool(self.start) and bool(self.end)


@dataclass
class Task:
    name: str
    project: str
    start: str
    estimate: int
    notes: str = ""
    status: str = "ACTIVE"
    repeat: str = ""
    next: str = ""
    id: int = 0

    def to_header_line(self) -> str:
        """Render as a daily-log header line, the format ingestion reads back."""
        return (
            f"- {self.start} ({self.estimate}) [{self.project}] "
            f"{self.name}{FULLWIDTH_COLON} {self.notes}"
        )


def record_to_dict(record: LogRecord) -> dict[str, Any]:
    return asdict(record)
