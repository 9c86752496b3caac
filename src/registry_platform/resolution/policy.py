"""Per-capability resolution policies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from registry_platform.registry.qualifiers import Qualifier

from .types import CapabilityRequest


class FallbackAction(Enum):
    """What the platform does when a capability cannot be resolved."""

    DISABLE_FEATURE = "disable_feature"
    DEFAULT_EXECUTION = "default_execution"
    DEFER_TO_HOST = "defer_to_host"


@dataclass(frozen=True)
class CapabilityPolicy:
    """Ordered qualifiers to try for one capability, and the action when all miss."""

    capability: type[Any]
    qualifiers: tuple[Qualifier | None, ...]
    fallback: FallbackAction

    def __post_init__(self) -> None:
        if not self.qualifiers:
            raise ValueError("A capability policy needs at least one qualifier attempt")

    @classmethod
    def qualified_first(
        cls, capability: type[Any], qualifier: Qualifier, fallback: FallbackAction
    ) -> CapabilityPolicy:
        """Try ``qualifier`` first, then any unqualified instance."""
        return cls(capability=capability, qualifiers=(qualifier, None), fallback=fallback)

    @classmethod
    def unqualified(cls, capability: type[Any], fallback: FallbackAction) -> CapabilityPolicy:
        return cls(capability=capability, qualifiers=(None,), fallback=fallback)

    def requests(self) -> tuple[CapabilityRequest, ...]:
        return tuple(CapabilityRequest(self.capability, qualifier) for qualifier in self.qualifiers)


__all__ = ["CapabilityPolicy", "FallbackAction"]
