"""Lazily resolved management endpoint."""

from __future__ import annotations

from typing import Any

from registry_platform.resolution.cache import CachedResolution
from registry_platform.resolution.policy import CapabilityPolicy
from registry_platform.resolution.resolver import ServiceResolver
from registry_platform.utilities.logging_patterns import get_logger

from .policies import MANAGEMENT_POLICY

logger = get_logger(__name__, component="management")


class ManagementEndpoint:
    """
    Management endpoint that is re-checked until the registry can supply it.

    ``is_enabled`` queries the registry on every call until one succeeds;
    from then on the resolution is cached and the answer is always True.
    ``get_endpoint`` materializes the instance from the cached resolution
    once and keeps returning it.
    """

    def __init__(
        self, resolver: ServiceResolver, policy: CapabilityPolicy = MANAGEMENT_POLICY
    ) -> None:
        self.policy = policy
        self._cache = CachedResolution(lambda: resolver.resolve_policy(policy))
        self._endpoint: Any | None = None

    @property
    def resolved(self) -> bool:
        return self._cache.found is not None

    @property
    def materialized(self) -> bool:
        return self._endpoint is not None

    def is_enabled(self) -> bool:
        was_resolved = self.resolved
        enabled = self._cache.resolve().is_found
        if enabled and not was_resolved:
            logger.info("Management endpoint available from registry")
        return enabled

    def get_endpoint(self) -> Any | None:
        """Return the materialized endpoint, or None if it was never resolved."""
        if self._endpoint is None:
            found = self._cache.found
            if found is not None:
                self._endpoint = found.get()
        return self._endpoint


__all__ = ["ManagementEndpoint"]
