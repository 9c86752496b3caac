"""Correlation fields that tie log records to the persistence session being set up."""

from __future__ import annotations

import contextvars
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, Any] = MappingProxyType({})

# Fields merged into every record emitted inside a correlation_context.
_log_fields: contextvars.ContextVar[Mapping[str, Any]] = contextvars.ContextVar(
    "registry_platform_log_fields", default=_EMPTY
)


def get_correlation_id() -> str:
    """Return the active correlation ID, or an empty string outside any context."""
    return _log_fields.get().get("correlation_id", "")


@contextmanager
def correlation_context(correlation_id: str | None = None, **fields: Any) -> Iterator[None]:
    """Tag log records emitted inside the block.

    Nested contexts inherit the enclosing fields; a fresh correlation ID is
    generated when none is given.
    """
    merged = {**_log_fields.get(), **fields}
    merged["correlation_id"] = correlation_id or str(uuid.uuid4())
    token = _log_fields.set(MappingProxyType(merged))
    try:
        yield
    finally:
        _log_fields.reset(token)


def get_log_context() -> dict[str, Any]:
    return dict(_log_fields.get())


__all__ = ["correlation_context", "get_correlation_id", "get_log_context"]
