"""
Logging for the URL shortener.

Everything logs under the "shorturl_app" namespace to stdout. With
LOG_JSON=true each record is one JSON object per line; messages may carry
client input (URLs, user IDs), so they are serialized, never interpolated.
"""

import json
import logging
import sys
from typing import Optional

LOGGER_NAME = "shorturl_app"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, safe for quotes and newlines in messages"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the application logger.

    Safe to call again (create_app runs once per test app): handlers are
    replaced, not stacked.

    Args:
        level: Level name from LOG_LEVEL; unknown names fall back to INFO
        log_file: Optional extra file destination
        json_format: LOG_JSON, emit JsonFormatter lines instead of plain text
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    formatter = JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Logger inside the app namespace ("web" -> "shorturl_app.web")"""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
