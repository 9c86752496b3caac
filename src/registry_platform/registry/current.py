"""
Process-wide slot for the running registry.

Hosts that construct the platform from a class name alone cannot pass a
registry in. They install one here at container startup, and the platform
reaches it through :class:`AmbientRegistry`.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from registry_platform.errors import RegistryUnavailableError

from .protocols import RegistryProtocol, SelectionProtocol
from .qualifiers import Qualifier

_lock = threading.Lock()
_current: RegistryProtocol | None = None


def set_current_registry(registry: RegistryProtocol) -> None:
    global _current
    with _lock:
        _current = registry


def clear_current_registry() -> None:
    global _current
    with _lock:
        _current = None


def current_registry() -> RegistryProtocol:
    """Return the installed registry or raise :class:`RegistryUnavailableError`."""
    registry = _current
    if registry is None:
        raise RegistryUnavailableError("No registry is running in this process")
    return registry


@contextmanager
def registry_scope(registry: RegistryProtocol) -> Iterator[RegistryProtocol]:
    """Install ``registry`` for the duration of the block, restoring the previous one."""
    global _current
    with _lock:
        previous = _current
        _current = registry
    try:
        yield registry
    finally:
        with _lock:
            _current = previous


class AmbientRegistry:
    """Registry handle that looks up the current registry on every ``select``."""

    def select(
        self, capability: type[Any], qualifier: Qualifier | None = None
    ) -> SelectionProtocol[Any]:
        return current_registry().select(capability, qualifier)

    def __repr__(self) -> str:
        return "AmbientRegistry()"


__all__ = [
    "AmbientRegistry",
    "clear_current_registry",
    "current_registry",
    "registry_scope",
    "set_current_registry",
]
