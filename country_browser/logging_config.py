from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "COUNTRY_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "COUNTRY_BROWSER_LOG_LEVEL"

# gql logs every request/response body at INFO; the country payload is large
NOISY_LOGGERS = ("gql.transport.httpx", "httpx", "httpcore")

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(level: Union[int, str, None]) -> int:
    """Explicit argument, then COUNTRY_BROWSER_LOG_LEVEL, then INFO."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    return jsonlogger.JsonFormatter(JSON_FORMAT)


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    JSON lines on stderr unless "plain" is asked for (argument first, then
    COUNTRY_BROWSER_LOG_FORMAT). Replaces any handlers already on the root
    logger and keeps transport loggers at WARNING.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(format_mode))

    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
