"""Resolve and construct the configured server platform class."""

from __future__ import annotations

import importlib
from typing import Any

from registry_platform.errors import ConfigurationError
from registry_platform.settings import get_settings


def import_target_server(target_server: str) -> type[Any]:
    """Import a class named as ``package.module:Class`` or ``package.module.Class``."""
    path = target_server.strip()
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(
            f"Invalid target server {target_server!r}", config_key="target_server"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import module {module_name!r} for target server",
            config_key="target_server",
            original_error=exc,
        ) from exc

    target = getattr(module, attr, None)
    if not isinstance(target, type):
        raise ConfigurationError(
            f"{target_server!r} does not name a class", config_key="target_server"
        )
    return target


def load_platform(session: Any, target_server: str | None = None, **kwargs: Any) -> Any:
    """Construct the server platform for ``session`` the way the host selects it by name."""
    target = import_target_server(target_server or get_settings().target_server)
    return target(session, **kwargs)


__all__ = ["import_target_server", "load_platform"]
