"""
Logging setup
Text or JSON log lines on stdout, configured through LOG_LEVEL and LOG_TYPE
"""

import json
import logging
import sys
from typing import Any

import config


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "action"):
            log_data["action"] = record.action

        return json.dumps(log_data)


TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)-20s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stdout handler attached once"""
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if str(config.LOG_TYPE).lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, "%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    return logger


# Quiet the SDK's request logging
logging.getLogger("google_genai").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
