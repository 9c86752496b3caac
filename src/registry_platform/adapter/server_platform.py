"""
Server platform that sources its cooperating services from a registry.

The host framework constructs one :class:`RegistryServerPlatform` per
persistence-session startup. At construction it decides, once and for good,
whether distributed transactions are available and which executor (if any)
runs asynchronous work. The management endpoint is resolved lazily because
the registry may finish starting after the platform is built.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import asdict, dataclass
from typing import Any

from registry_platform.logging.correlation import correlation_context
from registry_platform.registry.current import AmbientRegistry
from registry_platform.registry.protocols import RegistryProtocol
from registry_platform.resolution.policy import CapabilityPolicy, FallbackAction
from registry_platform.resolution.resolver import ServiceResolver
from registry_platform.utilities.logging_patterns import get_logger, log_operation

from .dispatch import TaskDispatcher, run_inline
from .host import UNDEFINED_LOOKUP, HostServices, ThreadedHostServices
from .management import ManagementEndpoint
from .policies import EXECUTOR_POLICY, MANAGEMENT_POLICY, TRANSACTION_POLICY
from .transaction import RegistryTransactionController

logger = get_logger(__name__, component="server_platform")


def _session_name(session: Any) -> str:
    name = getattr(session, "name", None)
    return str(name) if name else type(session).__name__


@dataclass(frozen=True)
class PlatformStatus:
    """Point-in-time view of what the platform resolved."""

    session: str
    jta_enabled: bool
    executor: str | None
    management_resolved: bool
    management_materialized: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RegistryServerPlatform:
    """
    Registry-backed implementation of the host's server platform extension points.

    Usage:
        platform = RegistryServerPlatform(session, registry=container)
        platform.launch_container_runnable(task)

    Args:
        session: The persistence session this platform serves.
        registry: Registry to query. Defaults to the process's current registry.
        host: Host fallbacks used when the registry cannot supply a service.
        transaction_policy, executor_policy, management_policy: How each
            capability is looked up, and what happens when it is unsatisfied.

    Raises:
        RegistryUnavailableError: if the registry cannot be queried.
    """

    def __init__(
        self,
        session: Any,
        registry: RegistryProtocol | None = None,
        host: HostServices | None = None,
        *,
        transaction_policy: CapabilityPolicy = TRANSACTION_POLICY,
        executor_policy: CapabilityPolicy = EXECUTOR_POLICY,
        management_policy: CapabilityPolicy = MANAGEMENT_POLICY,
    ) -> None:
        self.session = session
        self.registry = registry if registry is not None else AmbientRegistry()
        self.host = host if host is not None else ThreadedHostServices()
        self._resolver = ServiceResolver(self.registry)
        self._jta_enabled = True

        session_name = _session_name(session)
        with correlation_context(session=session_name), log_operation(
            "platform_init", logger, session=session_name
        ):
            if not self._resolver.resolve_policy(transaction_policy).is_found:
                # Any other action leaves JTA on and the host acquires its own coordinator.
                if self._fallback(transaction_policy) is FallbackAction.DISABLE_FEATURE:
                    self.disable_jta()

            self._dispatcher = self._build_dispatcher(executor_policy)
            self._management = ManagementEndpoint(self._resolver, management_policy)

        logger.info(
            "Server platform ready",
            session=session_name,
            jta_enabled=self._jta_enabled,
            executor=self._executor_name(),
        )

    @property
    def jta_enabled(self) -> bool:
        return self._jta_enabled

    def disable_jta(self) -> None:
        """Permanently turn off distributed-transaction participation."""
        if self._jta_enabled:
            self._jta_enabled = False
            logger.info("JTA disabled")

    @property
    def executor(self) -> Any | None:
        return self._dispatcher.executor

    def is_runtime_services_enabled_default(self) -> bool:
        return self._management.is_enabled()

    def get_management_server(self) -> Any | None:
        """Return the registry's endpoint, else the host default unless the policy disables it."""
        endpoint = self._management.get_endpoint()
        if endpoint is not None:
            return endpoint
        if self._fallback(self._management.policy) is FallbackAction.DISABLE_FEATURE:
            return None
        return self.host.default_management_server()

    def launch_container_runnable(self, task: Callable[[], Any] | None) -> Future[Any] | None:
        return self._dispatcher.submit(task)

    def get_external_transaction_controller_class(self) -> type[RegistryTransactionController]:
        return RegistryTransactionController

    def create_transaction_controller(self) -> RegistryTransactionController | None:
        """Build a controller bound to this platform's registry, or None when JTA is off."""
        if not self._jta_enabled:
            return None
        return self.get_external_transaction_controller_class()(registry=self.registry)

    def get_connector_lookup_type(self) -> int:
        return UNDEFINED_LOOKUP

    def status(self) -> PlatformStatus:
        return PlatformStatus(
            session=_session_name(self.session),
            jta_enabled=self._jta_enabled,
            executor=self._executor_name(),
            management_resolved=self._management.resolved,
            management_materialized=self._management.materialized,
        )

    def _build_dispatcher(self, policy: CapabilityPolicy) -> TaskDispatcher:
        resolution = self._resolver.resolve_policy(policy)
        if resolution.is_found:
            return TaskDispatcher(resolution.get(), self.host.launch_task)
        if self._fallback(policy) is FallbackAction.DISABLE_FEATURE:
            return TaskDispatcher(None, run_inline)
        return TaskDispatcher(None, self.host.launch_task)

    def _fallback(self, policy: CapabilityPolicy) -> FallbackAction:
        logger.debug(
            "Capability unavailable from registry",
            capability=getattr(policy.capability, "__qualname__", repr(policy.capability)),
            fallback=policy.fallback.value,
        )
        return policy.fallback

    def _executor_name(self) -> str | None:
        executor = self._dispatcher.executor
        return type(executor).__name__ if executor is not None else None


__all__ = ["PlatformStatus", "RegistryServerPlatform"]
