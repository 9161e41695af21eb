"""Structured logging module for structures-toolkit.

This module provides:
- JSONFormatter emitting one JSON object per record: timestamp, level,
  service, operation, logger, module, message, plus the graph kind when a
  graph logged the record
- RotatingFileHandler writing JSON lines to a configurable path
- OperationContextFilter tagging records with the running graph operation
- Log level configurable via STRUCTURES_LOG_LEVEL env var or Settings
"""

import json
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any


# Name of the graph operation currently running (bfs, dfs, dijkstra, add_edge)
_operation: ContextVar[str | None] = ContextVar("operation", default=None)

ROOT_LOGGER = "src"


def get_operation() -> str | None:
    """Get the current operation name from context."""
    return _operation.get()


@contextmanager
def operation_context(operation: str) -> Iterator[None]:
    """Tag every log record emitted inside the block with ``operation``.

    Nested blocks restore the outer operation on exit.
    """
    token = _operation.set(operation)
    try:
        yield
    finally:
        _operation.reset(token)


class JSONFormatter(logging.Formatter):
    """JSON log formatter with standard fields."""

    def __init__(self, service_name: str = "structures-toolkit", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "operation": getattr(record, "operation", "-"),
            "logger": record.name,
            "module": record.module,
            "message": record.getMessage(),
        }

        # Set through ``extra={"graph": ...}`` by AdjacencyGraph
        graph_kind = getattr(record, "graph", None)
        if graph_kind:
            log_data["graph"] = graph_kind

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class OperationContextFilter(logging.Filter):
    """Filter that adds the current graph operation to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        operation = get_operation()
        record.operation = operation if operation else "-"
        return True


def parse_log_level(name: str | None) -> int:
    """Map a level name ("debug", "WARNING", ...) to its number; INFO if unknown."""
    level = getattr(logging, (name or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def get_log_level_from_env(service_prefix: str = "STRUCTURES") -> int:
    """Get log level from STRUCTURES_LOG_LEVEL env var."""
    return parse_log_level(os.environ.get(f"{service_prefix}_LOG_LEVEL"))


def _attach(handler: logging.Handler, service_name: str) -> logging.Handler:
    handler.setFormatter(JSONFormatter(service_name=service_name))
    handler.addFilter(OperationContextFilter())
    return handler


def create_file_handler(
    log_file_path: str,
    service_name: str = "structures-toolkit",
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
) -> RotatingFileHandler:
    """Create a rotating file handler for JSON logs."""
    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=log_file_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    _attach(handler, service_name)
    return handler


def setup_structured_logging(
    service_name: str = "structures-toolkit",
    log_file_path: str | None = None,
    log_level: int | None = None,
    logger_name: str = ROOT_LOGGER,
) -> logging.Logger:
    """Set up structured logging for the library's logger tree.

    Library modules log through ``logging.getLogger(__name__)``, so
    configuring the ``src`` logger covers every graph and container module.
    """
    if log_level is None:
        log_level = get_log_level_from_env()

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    logger.addHandler(_attach(logging.StreamHandler(sys.stdout), service_name))

    if log_file_path:
        try:
            file_handler = create_file_handler(log_file_path, service_name)
            file_handler.setLevel(log_level)
            logger.addHandler(file_handler)
        except PermissionError:
            logger.warning(f"Cannot write to {log_file_path}, file logging disabled")

    logger.propagate = False
    return logger


def setup_logging_from_settings() -> logging.Logger:
    """Configure structured logging from :func:`src.core.config.get_settings`."""
    from src.core.config import get_settings

    settings = get_settings()
    return setup_structured_logging(
        service_name=settings.service_name,
        log_file_path=settings.log_file_path,
        log_level=parse_log_level(settings.log_level),
    )
