"""
Logging Configuration

Provides:
- JsonFormatter: one JSON object per log line
- setup_logging: YAML dictConfig loader driven by FunctionsConfig
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Optional

import yaml

from .config import FunctionsConfig

_STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}

class JsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. edge_functions.invoker)
      - message: Log message
      - any `extra=` fields passed by the caller
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config: Optional[FunctionsConfig] = None) -> None:
    """
    Configure logging for applications embedding the client.

    Reads FunctionsConfig.LOG_CONFIG_PATH as a YAML dictConfig in which
    `${VAR}` placeholders are filled from the environment, with `${LOG_LEVEL}`
    taken from FunctionsConfig.LOG_LEVEL. Falls back to basicConfig at
    LOG_LEVEL when the file does not exist.
    """
    config = config or FunctionsConfig()
    level = config.LOG_LEVEL.upper()

    if not os.path.exists(config.LOG_CONFIG_PATH):
        logging.basicConfig(level=level)
        return

    with open(config.LOG_CONFIG_PATH, "r", encoding="utf-8") as f:
        template = string.Template(f.read())

    content = template.safe_substitute({**os.environ, "LOG_LEVEL": level})
    logging.config.dictConfig(yaml.safe_load(content))
