"""Configuration loading from an optional YAML file and env vars."""

import logging
import os
from dataclasses import dataclass

import yaml

from daylog.dates import compact

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    main_dir: str = "./"
    database_file_name: str = "daylog.db"
    report_dir_name: str = "log"
    log_level: str = "INFO"

    @property
    def database_path(self) -> str:
        return os.path.join(self.main_dir, self.database_file_name)

    @property
    def report_dir(self) -> str:
        return os.path.join(self.main_dir, self.report_dir_name)

    def log_file_path(self, date: str) -> str:
        """Daily log for a YYYY-MM-DD date, e.g. <main_dir>/20201014.md."""
        return os.path.join(self.main_dir, f"{compact(date)}.md")

    def report_file_path(self, date: str) -> str:
        return os.path.join(self.report_dir, f"{compact(date)}_log.md")


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or no file.

    Raises ValueError for unparseable YAML or a document that is not a mapping.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from parsed YAML data, with env vars taking precedence."""
    yaml_data = yaml_data or {}
    log_level = os.environ.get(
        "DAYLOG_LOG_LEVEL", yaml_data.get("log_level", Config.log_level)
    ).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    return Config(
        main_dir=os.environ.get(
            "DAYLOG_MAIN_DIR", yaml_data.get("main_dir", Config.main_dir)
        ),
        database_file_name=os.environ.get(
            "DAYLOG_DATABASE_FILE",
            yaml_data.get("database_file_name", Config.database_file_name),
        ),
        report_dir_name=os.environ.get(
            "DAYLOG_REPORT_DIR", yaml_data.get("report_dir_name", Config.report_dir_name)
        ),
        log_level=log_level,
    )
