"""
Host framework extension points and its built-in fallbacks.

The platform implements :class:`ServerPlatform` by composition and hands
anything it cannot satisfy from the registry to a :class:`HostServices`.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, Protocol, runtime_checkable

from registry_platform.utilities.logging_patterns import get_logger

logger = get_logger(__name__, component="host")

# Tells the host never to attempt a naming-service lookup for connections.
UNDEFINED_LOOKUP = -1


@runtime_checkable
class HostServices(Protocol):
    """Default behaviours the host framework falls back to."""

    def launch_task(self, task: Callable[[], Any] | None) -> None:
        """Run ``task`` with the host's own execution strategy."""
        ...

    def default_management_server(self) -> Any | None:
        """Return the host's own management endpoint, if it has one."""
        ...


@runtime_checkable
class ServerPlatform(Protocol):
    """Extension points the host framework calls on its server platform."""

    @property
    def jta_enabled(self) -> bool: ...

    def disable_jta(self) -> None: ...

    def is_runtime_services_enabled_default(self) -> bool: ...

    def get_management_server(self) -> Any | None: ...

    def launch_container_runnable(self, task: Callable[[], Any] | None) -> Future[Any] | None: ...

    def get_external_transaction_controller_class(self) -> type[Any]: ...

    def get_connector_lookup_type(self) -> int: ...


class ThreadedHostServices:
    """Host defaults: one daemon thread per task and no management endpoint."""

    def __init__(self, thread_name_prefix: str = "registry-platform") -> None:
        self.thread_name_prefix = thread_name_prefix
        self._counter = 0
        self._counter_lock = threading.Lock()

    def launch_task(self, task: Callable[[], Any] | None) -> None:
        if task is None:
            logger.debug("Ignoring empty task")
            return
        with self._counter_lock:
            self._counter += 1
            name = f"{self.thread_name_prefix}-{self._counter}"
        thread = threading.Thread(target=task, name=name, daemon=True)
        thread.start()

    def default_management_server(self) -> Any | None:
        return None


__all__ = ["HostServices", "ServerPlatform", "ThreadedHostServices", "UNDEFINED_LOOKUP"]
