"""Integration tests — E2E via subprocess against the sample daily log."""

import os
import shutil
import subprocess
import sys

import pytest

MAIN_PY = os.path.join(os.path.dirname(__file__), "..", "main.py")
SAMPLE_LOG = os.path.join(os.path.dirname(__file__), "fixtures", "20201014.md")
DATE = "2020-10-14"


@pytest.fixture()
def main_dir(tmp_path):
    shutil.copy(SAMPLE_LOG, tmp_path / "20201014.md")
    return tmp_path


def _run(main_dir, *args: str, **env_overrides: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["DAYLOG_MAIN_DIR"] = str(main_dir)
    env.pop("DAYLOG_DATABASE_FILE", None)
    env.pop("DAYLOG_REPORT_DIR", None)
    env.pop("DAYLOG_LOG_LEVEL", None)
    env.update(env_overrides)
    return subprocess.run(
        [sys.executable, MAIN_PY, *args],
        capture_output=True,
        text=True,
        env=env,
    )


class TestIngestAndReport:
    def test_ingest_then_report(self, main_dir):
        result = _run(main_dir, "ingest", "--date", DATE)
        assert result.returncode == 0, result.stderr
        assert "Stored 3 record(s)" in result.stdout

        result = _run(main_dir, "report", "--date", DATE)
        assert result.returncode == 0, result.stderr

        report = (main_dir / "log" / "20201014_log.md").read_text(encoding="utf-8")
        lines = report.splitlines()
        assert len(lines) == 5
        assert lines[2].startswith("| 09:05 | 09:40 | 35 | Inbox zero |")
        assert lines[3] == "| 10:10 | 11:45 | 95 | Write chapter 2 |  |"
        assert lines[4] == "| 13:15 |  |  | Read papers |  |"

    def test_missing_log_exits_nonzero(self, main_dir):
        result = _run(main_dir, "ingest", "--date", "2020-10-15")
        assert result.returncode == 1
        assert "Cannot read log file" in result.stderr

    def test_malformed_estimate_exits_nonzero(self, main_dir):
        (main_dir / "20201016.md").write_text("- 09:00 (soon) [a] Broken：x\n", encoding="utf-8")
        result = _run(main_dir, "ingest", "--date", "2020-10-16")
        assert result.returncode == 1
        assert "Broken" in result.stderr

    def test_bad_date_argument(self, main_dir):
        result = _run(main_dir, "ingest", "--date", "14/10/2020")
        assert result.returncode == 2


class TestPlanning:
    def test_add_task_then_plan(self, main_dir):
        result = _run(main_dir, "add-task", "--name", "Review PRs", "--project", "work",
                      "--start", "09:30", "--estimate", "20", "--notes", "team repo",
                      "--date", "2020-10-20")
        assert result.returncode == 0, result.stderr

        result = _run(main_dir, "plan", "--date", "2020-10-20")
        assert result.returncode == 0, result.stderr
        plan = (main_dir / "20201020.md").read_text(encoding="utf-8")
        assert plan == "- 09:30 (20) [work] Review PRs： team repo\n"

    def test_plan_refuses_to_overwrite(self, main_dir):
        result = _run(main_dir, "plan", "--date", DATE)
        assert result.returncode == 1
        assert (main_dir / "20201014.md").read_text(encoding="utf-8").startswith("# 2020-10-14")

    def test_plan_force_overwrites(self, main_dir):
        result = _run(main_dir, "plan", "--date", DATE, "--force")
        assert result.returncode == 0, result.stderr
        assert (main_dir / "20201014.md").read_text(encoding="utf-8") == ""

    def test_add_today_appends_header(self, main_dir):
        result = _run(main_dir, "add-today", "--name", "Walk", "--project", "health",
                      "--start", "17:00", "--estimate", "30")
        assert result.returncode == 0, result.stderr
        today_logs = [p for p in main_dir.glob("*.md") if p.name != "20201014.md"]
        assert len(today_logs) == 1
        assert "- 17:00 (30) [health] Walk： " in today_logs[0].read_text(encoding="utf-8")


class TestEnvironmentErrors:
    def test_unopenable_database_exits_nonzero(self, main_dir):
        (main_dir / "db_dir").mkdir()
        result = _run(main_dir, "ingest", "--date", DATE, DAYLOG_DATABASE_FILE="db_dir")
        assert result.returncode == 1
        assert "Traceback" not in result.stderr

    def test_unwritable_report_dir_exits_nonzero(self, main_dir):
        (main_dir / "log").write_text("not a directory", encoding="utf-8")
        result = _run(main_dir, "report", "--date", DATE)
        assert result.returncode == 1
        assert "Traceback" not in result.stderr
