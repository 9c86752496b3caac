"""Resolution policies for the three capabilities the platform integrates."""

from __future__ import annotations

from registry_platform.registry.qualifiers import PERSISTENCE
from registry_platform.resolution.policy import CapabilityPolicy, FallbackAction

from .capabilities import Executor, ManagementServer, TransactionManager

TRANSACTION_POLICY = CapabilityPolicy.unqualified(
    TransactionManager, fallback=FallbackAction.DISABLE_FEATURE
)

EXECUTOR_POLICY = CapabilityPolicy.qualified_first(
    Executor, PERSISTENCE, fallback=FallbackAction.DEFAULT_EXECUTION
)

MANAGEMENT_POLICY = CapabilityPolicy.qualified_first(
    ManagementServer, PERSISTENCE, fallback=FallbackAction.DEFER_TO_HOST
)

__all__ = ["EXECUTOR_POLICY", "MANAGEMENT_POLICY", "TRANSACTION_POLICY"]
