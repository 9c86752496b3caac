"""Mapping-backed registry for hosts that have no container of their own."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from registry_platform.errors import (
    AmbiguousResolutionError,
    RegistryUnavailableError,
    UnsatisfiedResolutionError,
)
from registry_platform.utilities.logging_patterns import get_logger

from .qualifiers import Qualifier

T = TypeVar("T")

logger = get_logger(__name__, component="registry")


@dataclass(frozen=True)
class RegistryEntry:
    """One registered instance with the capabilities and qualifiers it answers to.

    A ``structural`` entry was registered without explicit capabilities; besides
    its class hierarchy it also answers to any runtime-checkable protocol the
    instance satisfies.
    """

    instance: Any
    capabilities: frozenset[type[Any]]
    qualifiers: frozenset[Qualifier]
    structural: bool = False

    def provides(self, capability: type[Any]) -> bool:
        if capability in self.capabilities:
            return True
        if not self.structural or not getattr(capability, "_is_protocol", False):
            return False
        try:
            return isinstance(self.instance, capability)
        except TypeError:
            # Protocol not marked @runtime_checkable.
            return False

    def matches(self, capability: type[Any], qualifier: Qualifier | None) -> bool:
        if not self.provides(capability):
            return False
        if qualifier is None:
            # Unqualified selections only see default (unqualified) entries.
            return not self.qualifiers
        return qualifier in self.qualifiers


@dataclass(frozen=True)
class Selection(Generic[T]):
    """Snapshot of the entries that matched a single ``select`` call."""

    capability: type[Any]
    qualifier: Qualifier | None
    matches: tuple[Any, ...]

    def is_unsatisfied(self) -> bool:
        return not self.matches

    def is_ambiguous(self) -> bool:
        return len(self.matches) > 1

    def get(self) -> T:
        if self.is_unsatisfied():
            raise UnsatisfiedResolutionError(
                f"No instance of {self.capability!r} registered",
                capability=self.capability,
                qualifier=self.qualifier,
            )
        if self.is_ambiguous():
            raise AmbiguousResolutionError(
                f"{len(self.matches)} instances of {self.capability!r} match",
                capability=self.capability,
                qualifier=self.qualifier,
                candidates=len(self.matches),
            )
        return self.matches[0]


class MappingRegistry:
    """
    Thread-safe registry keyed by capability type.

    Usage:
        registry = MappingRegistry()
        registry.register(pool, capabilities=(Executor,), qualifiers=(PERSISTENCE,))
        registry.select(Executor, PERSISTENCE).get()  # -> pool
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[RegistryEntry] = []
        self._closed = False

    def register(
        self,
        instance: Any,
        *,
        capabilities: Iterable[type[Any]] | None = None,
        qualifiers: Iterable[Qualifier] = (),
    ) -> RegistryEntry:
        """Register ``instance``.

        Without explicit ``capabilities`` the instance answers to its class
        hierarchy and to every runtime-checkable protocol it satisfies. Passing
        ``capabilities`` restricts it to exactly those types.
        """
        structural = capabilities is None
        if capabilities is None:
            capabilities = [cls for cls in type(instance).__mro__ if cls is not object]
        entry = RegistryEntry(
            instance=instance,
            capabilities=frozenset(capabilities),
            qualifiers=frozenset(qualifiers),
            structural=structural,
        )
        with self._lock:
            self._ensure_open()
            self._entries.append(entry)
        logger.debug(
            "Registered instance",
            instance_type=type(instance).__name__,
            qualifiers=sorted(q.name for q in entry.qualifiers),
        )
        return entry

    def unregister(self, instance: Any) -> bool:
        """Remove every entry for ``instance``; return True if any was removed."""
        with self._lock:
            remaining = [entry for entry in self._entries if entry.instance is not instance]
            removed = len(remaining) != len(self._entries)
            self._entries = remaining
        return removed

    def select(self, capability: type[Any], qualifier: Qualifier | None = None) -> Selection[Any]:
        with self._lock:
            self._ensure_open()
            matches = tuple(
                entry.instance for entry in self._entries if entry.matches(capability, qualifier)
            )
        return Selection(capability=capability, qualifier=qualifier, matches=matches)

    def close(self) -> None:
        """Shut the registry down; later selections fail as unavailable."""
        with self._lock:
            self._closed = True
            self._entries.clear()

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise RegistryUnavailableError("Registry has been shut down")


__all__ = ["MappingRegistry", "RegistryEntry", "Selection"]
