"""Logging configuration and structured formatting."""

from .correlation import correlation_context, get_correlation_id, get_log_context
from .json_formatter import StructuredJSONFormatter
from .setup import PACKAGE_LOGGER, configure_logging

__all__ = [
    "PACKAGE_LOGGER",
    "StructuredJSONFormatter",
    "configure_logging",
    "correlation_context",
    "get_correlation_id",
    "get_log_context",
]
