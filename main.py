"""daylog — plan tasks, ingest the hand-written daily log, and report on it."""

import logging
import os
import sqlite3
import sys
from argparse import ArgumentParser

from daylog.config import load_config, load_yaml_config
from daylog.dates import today_plus, validate_date
from daylog.errors import IngestError
from daylog.ingest import ingest_file
from daylog.models import Task
from daylog.report import append_line, render_plan, render_report, write_text
from daylog.store import PlannerStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [daylog] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _add_date_arg(parser: ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "--date",
        type=validate_date,
        default=None,
        help=f"{help_text} (YYYY-MM-DD, default: today)",
    )


def _add_task_args(parser: ArgumentParser) -> None:
    parser.add_argument("--name", required=True, help="Task name")
    parser.add_argument("--project", required=True, help="Project tag")
    parser.add_argument("--start", required=True, help="Planned start time (HH:MM)")
    parser.add_argument("--estimate", type=int, required=True, help="Estimate in minutes")
    parser.add_argument("--notes", default="", help="Free-text notes")


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="daylog",
        description="Plan tasks, ingest the daily markdown log, and report on it.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Store the records of a daily log")
    _add_date_arg(ingest, "Date of the log to ingest")

    report = sub.add_parser("report", help="Write the markdown report for a date")
    _add_date_arg(report, "Date to report on")

    plan = sub.add_parser("plan", help="Write a daily log skeleton from scheduled tasks")
    _add_date_arg(plan, "Date to plan")
    plan.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing daily log",
    )

    add_task = sub.add_parser("add-task", help="Store a task scheduled for a date")
    _add_task_args(add_task)
    _add_date_arg(add_task, "Date the task is scheduled for")
    add_task.add_argument("--repeat", default="", help="Repeat rule, e.g. +1w")

    add_today = sub.add_parser("add-today", help="Append a task to today's daily log")
    _add_task_args(add_today)

    return parser


def cmd_ingest(args, config) -> int:
    with PlannerStore(config.database_path) as store:
        count = ingest_file(config.log_file_path(args.date), args.date, store)
    print(f"Stored {count} record(s) for {args.date}")
    return 0


def cmd_report(args, config) -> int:
    with PlannerStore(config.database_path) as store:
        records = store.logs_for_date(args.date)
    path = config.report_file_path(args.date)
    write_text(render_report(records), path)
    print(f"Wrote {len(records)} row(s) to {path}")
    return 0


def cmd_plan(args, config) -> int:
    path = config.log_file_path(args.date)
    if os.path.exists(path) and not args.force:
        logger.error("%s already exists, use --force to overwrite", path)
        return 1
    with PlannerStore(config.database_path) as store:
        tasks = store.tasks_for_date(args.date)
    write_text(render_plan(tasks), path)
    print(f"Planned {len(tasks)} task(s) in {path}")
    return 0


def _task_from_args(args, next_date: str = "", repeat: str = "") -> Task:
    return Task(
        name=args.name.strip(),
        project=args.project.strip(),
        start=args.start.strip(),
        estimate=args.estimate,
        notes=args.notes.strip(),
        repeat=repeat.strip(),
        next=next_date,
    )


def cmd_add_task(args, config) -> int:
    task = _task_from_args(args, next_date=args.date, repeat=args.repeat)
    with PlannerStore(config.database_path) as store:
        task_id = store.add_task(task)
    print(f"Added task {task_id}: {task.name}")
    return 0


def cmd_add_today(args, config) -> int:
    task = _task_from_args(args)
    path = config.log_file_path(today_plus(0))
    append_line(task.to_header_line(), path)
    print(f"Appended {task.name} to {path}")
    return 0


COMMANDS = {
    "ingest": cmd_ingest,
    "report": cmd_report,
    "plan": cmd_plan,
    "add-task": cmd_add_task,
    "add-today": cmd_add_today,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "date", "") is None:
        args.date = today_plus(0)

    try:
        config = load_config(load_yaml_config(args.config))
        logging.getLogger().setLevel(config.log_level)
        return COMMANDS[args.command](args, config)
    except IngestError as exc:
        logger.error("%s", exc)
        return 1
    except (ValueError, OSError, sqlite3.Error) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
