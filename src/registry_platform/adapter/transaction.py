"""Transaction controller that acquires its coordinator from the registry."""

from __future__ import annotations

from typing import Any

from registry_platform.errors import UnsatisfiedResolutionError
from registry_platform.registry.current import AmbientRegistry
from registry_platform.registry.protocols import RegistryProtocol
from registry_platform.resolution.resolver import ServiceResolver
from registry_platform.utilities.logging_patterns import get_logger

from .capabilities import TransactionManager
from .policies import TRANSACTION_POLICY

logger = get_logger(__name__, component="transactions")


class RegistryTransactionController:
    """
    External transaction controller advertised to the host framework.

    The host may instantiate this class with no arguments, in which case the
    coordinator is looked up in the current registry. The coordinator is
    acquired on first use and kept for the controller's lifetime.
    """

    def __init__(self, registry: RegistryProtocol | None = None) -> None:
        self.registry = registry if registry is not None else AmbientRegistry()
        self._resolver = ServiceResolver(self.registry)
        self._transaction_manager: TransactionManager | None = None

    def acquire_transaction_manager(self) -> TransactionManager:
        """Return the registry's transaction coordinator.

        Raises:
            UnsatisfiedResolutionError: if the registry has none.
        """
        resolution = self._resolver.resolve_policy(TRANSACTION_POLICY)
        if not resolution.is_found:
            raise UnsatisfiedResolutionError(
                "No transaction manager is registered",
                capability=TransactionManager,
            )
        return resolution.get()

    @property
    def transaction_manager(self) -> TransactionManager:
        if self._transaction_manager is None:
            self._transaction_manager = self.acquire_transaction_manager()
            logger.debug(
                "Acquired transaction manager",
                manager_type=type(self._transaction_manager).__name__,
            )
        return self._transaction_manager

    def begin(self) -> None:
        self.transaction_manager.begin()

    def commit(self) -> None:
        self.transaction_manager.commit()

    def rollback(self) -> None:
        self.transaction_manager.rollback()

    def status(self) -> Any:
        return self.transaction_manager.get_status()


__all__ = ["RegistryTransactionController"]
