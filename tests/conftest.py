"""Shared pytest fixtures for the daylog test suite."""

from __future__ import annotations

import os

import pytest

from daylog.models import LogRecord

FIXTURE_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


class ListSink:
    """In-memory record sink."""

    def __init__(self):
        self.records: list[LogRecord] = []

    def append(self, record: LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def sink() -> ListSink:
    return ListSink()


@pytest.fixture()
def sample_log_path() -> str:
    """Path to a three-task daily log for 2020-10-14."""
    return os.path.join(FIXTURE_DIR, "20201014.md")


@pytest.fixture()
def header_line() -> str:
    return "- 09:00 (45) [work] Write report：first draft only"
