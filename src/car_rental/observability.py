"""Logging setup for the car rental API.

Called once from the API lifespan. ``LOG_FORMAT=json`` writes one JSON
object per line; ``text`` writes plain lines for local runs. Values passed
through ``extra=`` (car_id, path, status_code, ...) are carried into JSON
output.
"""

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord has; anything else came in through extra=
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render a log record and its extra fields as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def logging_config(level: str = "INFO", fmt: str = "json", sql_echo: bool = False) -> dict[str, Any]:
    """Build the dictConfig for the API process."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": JSONFormatter},
            "text": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if fmt == "json" else "text",
            },
        },
        "loggers": {
            # SQL statements only when DATABASE_ECHO is on
            "sqlalchemy.engine": {"level": "INFO" if sql_echo else "WARNING"},
        },
        "root": {"level": level.upper(), "handlers": ["console"]},
    }


def setup_logging(level: str = "INFO", fmt: str = "json", sql_echo: bool = False) -> None:
    """Configure logging for the application."""
    logging.config.dictConfig(logging_config(level, fmt, sql_echo))
