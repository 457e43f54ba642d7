"""Logging for sqlrows.

Every logger lives under the ``sqlrows`` namespace. Result set events carry
their numbers (declared size, materialized rows, seek target) as structured
fields, which ``StructuredFormatter`` writes out as JSON lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

from sqlrows._serialization import encode_json
from sqlrows.exceptions import MissingDependencyError

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = ("StructuredFormatter", "configure_logging", "get_logger", "log_with_context")

ROOT_LOGGER_NAME = "sqlrows"
FIELDS_ATTRIBUTE = "extra_fields"
_SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """Write each record as one JSON object, with its structured fields inlined."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, FIELDS_ATTRIBUTE, {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the sqlrows namespace.

    Args:
        name: Dotted name relative to ``sqlrows``. None returns the root sqlrows logger.

    Returns:
        The logger.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Log ``message`` with structured fields attached to the record.

    Nothing is built when ``level`` is disabled for ``logger``.

    Args:
        logger: The logger to use.
        level: Log level.
        message: Log message. The fields are appended as ``key=value`` pairs.
        **fields: Structured fields for ``StructuredFormatter``.
    """
    if not logger.isEnabledFor(level):
        return
    rendered = " ".join(f"{key}={value}" for key, value in fields.items())
    logger.log(level, f"{message} {rendered}" if rendered else message, extra={FIELDS_ATTRIBUTE: fields})


def _console_handler(format_style: str) -> logging.Handler:
    if format_style == "rich":
        try:
            from rich.logging import RichHandler
        except ImportError as e:
            raise MissingDependencyError(package="rich") from e
        return RichHandler(rich_tracebacks=True, show_path=False)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if format_style == "structured" else logging.Formatter(_SIMPLE_FORMAT))
    return handler


def configure_logging(level: str = "INFO", format_style: str = "structured", log_to_file: str | None = None) -> None:
    """Configure the sqlrows root logger.

    Existing handlers on the sqlrows logger are replaced, and records stop
    propagating to the Python root logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_style: "structured" for JSON lines, "simple" for plain text,
            "rich" for a rich console handler (requires the ``rich`` extra).
        log_to_file: Optional file path; file output is always JSON lines.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper())
    root.handlers.clear()
    root.addHandler(_console_handler(format_style))

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        root.addHandler(file_handler)

    root.propagate = False
    log_with_context(root, logging.INFO, "sqlrows logging configured", level=level.upper(), format_style=format_style)
