"""Date strings used for file names and CLI arguments."""

import argparse
from datetime import date, datetime, timedelta

DATE_FORMAT = "%Y-%m-%d"


def today_plus(n: int, today: date | None = None) -> str:
    """YYYY-MM-DD for today shifted by *n* days."""
    base = today or date.today()
    return (base + timedelta(days=n)).strftime(DATE_FORMAT)


def compact(date_str: str) -> str:
    """2020-10-14 -> 20201014."""
    return date_str.replace("-", "")


def validate_date(text: str) -> str:
    """argparse type for YYYY-MM-DD arguments."""
    try:
        datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {text!r}")
    return text
