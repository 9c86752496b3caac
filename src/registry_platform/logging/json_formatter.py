"""JSON logging formatter with correlation ID support."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .correlation import get_log_context

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "asctime",
        "taskName",
    }
)


class StructuredJSONFormatter(logging.Formatter):
    """JSON formatter that includes correlation IDs and structured extra fields."""

    # Host-supplied context, such as connection properties, may carry these.
    SENSITIVE_KEYS = {"password", "secret", "token", "credentials"}

    def __init__(
        self,
        *,
        ensure_ascii: bool = False,
        default: Any = str,
        sort_keys: bool = False,
        timestamp_format: str = "%Y-%m-%dT%H:%M:%S.%fZ",
    ) -> None:
        super().__init__()
        self.ensure_ascii = ensure_ascii
        self.default = default
        self.sort_keys = sort_keys
        self.timestamp_format = timestamp_format

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single JSON line."""
        log_entry: dict[str, Any] = {
            "timestamp": self._format_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName if record.funcName is not None else "<module>",
            "line": record.lineno,
            "thread": record.thread,
            "process": record.process,
        }

        correlation_context = get_log_context()
        if correlation_context:
            log_entry.update(correlation_context)

        if record.exc_info:
            log_entry["exception"] = self._format_exception(record.exc_info)

        if record.stack_info:
            log_entry["stack_trace"] = record.stack_info

        for key, value in self._extract_extra_fields(record).items():
            if key not in log_entry:
                log_entry[key] = value

        log_entry = self._redact_data(log_entry)

        try:
            return json.dumps(
                log_entry,
                ensure_ascii=self.ensure_ascii,
                default=self.default,
                sort_keys=self.sort_keys,
            )
        except (TypeError, ValueError) as exc:
            fallback_entry = {
                "timestamp": log_entry["timestamp"],
                "level": log_entry["level"],
                "logger": log_entry["logger"],
                "message": f"JSON serialization failed: {exc}",
                "original_message": str(log_entry.get("message", "")),
            }
            return json.dumps(fallback_entry, ensure_ascii=self.ensure_ascii, default=str)

    def _redact_data(self, data: Any) -> Any:
        """Recursively redact sensitive keys in dictionaries."""
        if isinstance(data, dict):
            return {
                k: self._redact_data(v) if k.lower() not in self.SENSITIVE_KEYS else "[REDACTED]"
                for k, v in data.items()
            }
        elif isinstance(data, list):
            return [self._redact_data(item) for item in data]
        return data

    def _format_timestamp(self, created: float) -> str:
        return datetime.fromtimestamp(created, UTC).strftime(self.timestamp_format)

    def _format_exception(self, exc_info: Any) -> dict[str, Any]:
        exc_type, exc_value, _ = exc_info
        return {
            "type": exc_type.__name__ if exc_type else "Unknown",
            "message": str(exc_value) if exc_value else "",
            "module": getattr(exc_type, "__module__", "") if exc_type else "",
        }

    def _extract_extra_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
