"""Logging setup shared by the API server and command line entry points."""

import logging
import sys
from typing import Any, Optional

import structlog

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Render stdlib log records as single-line JSON, including `extra` fields."""
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(default=str),
        ],
    )


def setup_logging(level: str = "INFO", fmt: str = "text", stream: Optional[Any] = None) -> None:
    """Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, ...)
        fmt: "json" for structured output, "text" for the plain format
        stream: Output stream, defaults to stderr
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    if fmt == "json":
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
