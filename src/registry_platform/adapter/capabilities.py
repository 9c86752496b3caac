"""
Capability types the platform asks the registry for.

The task executor is the standard :class:`concurrent.futures.Executor`; the
transaction coordinator and management endpoint are structural protocols so
any container-managed implementation qualifies.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TransactionManager(Protocol):
    """Transaction coordinator used for distributed-transaction participation."""

    def begin(self) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def get_status(self) -> Any: ...


@runtime_checkable
class ManagementServer(Protocol):
    """Endpoint that runtime-services objects are published to for monitoring."""

    def register(self, name: str, obj: Any) -> None: ...

    def unregister(self, name: str) -> None: ...

    def is_registered(self, name: str) -> bool: ...


__all__ = ["Executor", "ManagementServer", "TransactionManager"]
