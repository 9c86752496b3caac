"""
Qualifier-first service resolution against a registry handle.

The resolver only distinguishes "nothing available" from "something
available". Ambiguous matches are left to the registry, whose ``get`` decides
what to do with them. Failures raised by the registry itself, notably
:class:`~registry_platform.errors.RegistryUnavailableError`, propagate.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from registry_platform.registry.protocols import RegistryProtocol
from registry_platform.registry.qualifiers import Qualifier
from registry_platform.utilities.logging_patterns import get_logger

from .policy import CapabilityPolicy
from .types import CapabilityRequest, Found, Resolution, Unsatisfied

logger = get_logger(__name__, component="resolver")


class ServiceResolver:
    """Resolve capability instances from an explicitly supplied registry."""

    def __init__(self, registry: RegistryProtocol) -> None:
        if registry is None:
            raise ValueError("ServiceResolver requires a registry")
        self.registry = registry

    def resolve(self, capability: type[Any], qualifier: Qualifier | None = None) -> Resolution:
        """Resolve ``capability``, retrying without ``qualifier`` if the qualified query misses."""
        request = CapabilityRequest(capability, qualifier)
        if qualifier is None:
            return self._first_found((request,))
        return self._first_found((request, request.unqualified()))

    def resolve_policy(self, policy: CapabilityPolicy) -> Resolution:
        """Resolve using each of the policy's qualifiers in order."""
        return self._first_found(policy.requests())

    def _first_found(self, requests: Sequence[CapabilityRequest]) -> Resolution:
        for request in requests:
            selection = self.registry.select(request.capability, request.qualifier)
            if not selection.is_unsatisfied():
                logger.debug("Resolved capability", request=request.describe())
                return Found(request=request, selection=selection)
        logger.debug(
            "Capability unsatisfied",
            attempts=[request.describe() for request in requests],
        )
        return Unsatisfied(attempts=tuple(requests))


__all__ = ["ServiceResolver"]
