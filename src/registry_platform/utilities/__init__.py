"""Shared helpers for the registry platform."""

from .logging_patterns import StructuredLogger, get_logger, log_operation

__all__ = ["StructuredLogger", "get_logger", "log_operation"]
