"""Structured JSON logging configuration for the application."""

import logging
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

from query_pagination.config import settings

# Accepted (page, size) of the current request, as strings. Set by
# PaginationMiddleware so that route handler logs carry them.
pagination_var: ContextVar[tuple[str, str]] = ContextVar("pagination", default=("-", "-"))


class _PaginationFilter(logging.Filter):
    """Stamps page and size onto records that do not already carry them."""

    def filter(self, record: logging.LogRecord) -> bool:
        page, size = pagination_var.get()
        if not hasattr(record, "page"):
            record.page = page
        if not hasattr(record, "size"):
            record.size = size
        return True


class _AppJsonFormatter(_JsonFormatter):
    """Adds service metadata and groups the pagination fields."""

    def add_fields(
        self,
        log_record: dict[str, object],
        record: logging.LogRecord,
        message_dict: dict[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        page = log_record.pop("page", "-")
        size = log_record.pop("size", "-")
        if (page, size) != ("-", "-"):
            log_record["pagination"] = {"page": page, "size": size}
        log_record.setdefault("service", settings.app_name)
        log_record.setdefault("version", settings.app_version)
        log_record.setdefault("env", settings.env)


def configure_logging() -> None:
    """Route all log records through one JSON stream handler.

    Records emitted while a paginated request is handled get a
    ``pagination`` object with its page and size.

    Log levels:
        DEBUG: accepted pagination values (enabled when settings.debug=True)
        INFO: startup and shutdown
        WARNING: rejected pagination parameters
        ERROR: unhandled exceptions
    """
    log_level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(
        _AppJsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s %(page)s %(size)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
    )
    handler.addFilter(_PaginationFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
