"""
Logging configuration for the todo service.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TodoJSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if hasattr(record, "extra"):
            log_data.update(record.extra)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def resolve_level(level: int | str) -> int:
    """Turn ``"debug"``/``"INFO"``/``10`` into a logging level number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO, json_format: bool = False) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    formatter = TodoJSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


class ComponentFilter(logging.Filter):
    """Tag every record passing through a logger with its service component."""

    def __init__(self, component: str):
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        extra = getattr(record, "extra", None)
        if not isinstance(extra, dict):
            extra = {}
            record.extra = extra
        extra.setdefault("component", self.component)
        return True


def get_logger(name: str, component: str | None = None) -> logging.Logger:
    """Return the logger ``name``, tagged with ``component`` when given.

    Calling it again for the same logger replaces the previous tag instead of
    stacking filters.
    """
    logger = logging.getLogger(name)
    if component:
        for f in logger.filters[:]:
            if isinstance(f, ComponentFilter):
                logger.removeFilter(f)
        logger.addFilter(ComponentFilter(component))
    return logger
