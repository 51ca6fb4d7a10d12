"""structlog setup for todolist.

Log events go to stderr so they never mix with the task list drawn on
stdout. ``log_format`` picks a readable console renderer or one JSON
object per line.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from todolist.config import BaseSettings

DEFAULT_LEVEL = "warning"
DEFAULT_FORMAT = "console"


def _renderer(log_format: str) -> list[Processor]:
    if log_format == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback)]


def configure_logging(settings: "BaseSettings | None" = None) -> None:
    """Set up structlog from the log settings (defaults when None)."""
    level_name = settings.log_level if settings is not None else DEFAULT_LEVEL
    log_format = settings.log_format if settings is not None else DEFAULT_FORMAT
    level = logging.getLevelName(level_name.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Attach key/values to every later event in this context.

    The app binds ``data_file`` once at startup so each store and
    persistence event names the snapshot it concerns.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


class Loggers:
    """One named logger per todolist layer."""

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        return get_logger("todolist.cli")

    @staticmethod
    def store() -> structlog.stdlib.BoundLogger:
        return get_logger("todolist.tasks")

    @staticmethod
    def persistence() -> structlog.stdlib.BoundLogger:
        return get_logger("todolist.persistence")

    @staticmethod
    def config() -> structlog.stdlib.BoundLogger:
        return get_logger("todolist.config")
