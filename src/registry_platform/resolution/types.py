"""Value types produced and consumed by the service resolver."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from registry_platform.registry.protocols import SelectionProtocol
from registry_platform.registry.qualifiers import Qualifier


@dataclass(frozen=True)
class CapabilityRequest:
    """A single registry query: a capability type and an optional qualifier."""

    capability: type[Any]
    qualifier: Qualifier | None = None

    def unqualified(self) -> CapabilityRequest:
        return replace(self, qualifier=None)

    def describe(self) -> str:
        name = getattr(self.capability, "__qualname__", repr(self.capability))
        return f"{name} {self.qualifier}" if self.qualifier is not None else name


@dataclass(frozen=True)
class Found:
    """The registry can supply the capability; ``get`` materializes the instance."""

    request: CapabilityRequest
    selection: SelectionProtocol[Any]

    @property
    def is_found(self) -> bool:
        return True

    def get(self) -> Any:
        return self.selection.get()


@dataclass(frozen=True)
class Unsatisfied:
    """Every attempted request matched nothing."""

    attempts: tuple[CapabilityRequest, ...]

    @property
    def is_found(self) -> bool:
        return False


Resolution = Found | Unsatisfied

__all__ = ["CapabilityRequest", "Found", "Resolution", "Unsatisfied"]
