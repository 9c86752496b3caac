"""
Structured logging helpers.

Keyword arguments passed to a :class:`StructuredLogger` call become attributes
on the log record, where :class:`~registry_platform.logging.StructuredJSONFormatter`
picks them up as JSON fields.
"""

import contextlib
import logging
import time
from collections.abc import Generator
from typing import Any

_RESERVED_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


class StructuredLogger:
    def __init__(self, name: str, component: str | None = None):
        self.logger = logging.getLogger(name)
        self.component = component
        self.name = name

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        options = {key: kwargs.pop(key) for key in _RESERVED_KWARGS & kwargs.keys()}
        if self.component:
            kwargs["component"] = self.component
        # stacklevel 2 attributes the record to our caller rather than this method.
        options.setdefault("stacklevel", 2)
        self.logger.log(level, msg, *args, extra=kwargs, **options)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        self.log(logging.INFO, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", 3)
        self.log(logging.DEBUG, msg, *args, **kwargs)


def get_logger(name: str, component: str | None = None) -> StructuredLogger:
    return StructuredLogger(name, component=component)


@contextlib.contextmanager
def log_operation(
    operation: str, logger: StructuredLogger, level: int = logging.DEBUG, **context: Any
) -> Generator[None, None, None]:
    """Log the start and completion of ``operation`` with its duration."""
    logger.log(level, f"Started {operation}", operation=operation, **context)
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.log(
            level,
            f"Completed {operation}",
            operation=operation,
            duration_ms=f"{duration_ms:.2f}",
            **context,
        )


__all__ = ["StructuredLogger", "get_logger", "log_operation"]
