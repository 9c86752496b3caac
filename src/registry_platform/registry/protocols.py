"""
Protocol definitions for the dependency registry the platform queries.

Any container can back the platform as long as it offers ``select`` with
these semantics; the platform never registers anything itself.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from .qualifiers import Qualifier

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SelectionProtocol(Protocol[T_co]):
    """Result of a registry query for one capability and qualifier."""

    def is_unsatisfied(self) -> bool:
        """Return True when the query matched nothing."""
        ...

    def is_ambiguous(self) -> bool:
        """Return True when the query matched more than one entry."""
        ...

    def get(self) -> T_co:
        """Return the single matching instance."""
        ...


@runtime_checkable
class RegistryProtocol(Protocol):
    """
    Protocol for ambient registries.

    ``select`` must return immediately. A registry that cannot be queried at
    all raises :class:`~registry_platform.errors.RegistryUnavailableError`.
    """

    def select(
        self, capability: type[Any], qualifier: Qualifier | None = None
    ) -> SelectionProtocol[Any]:
        """Select entries providing ``capability``, narrowed by ``qualifier``."""
        ...


__all__ = ["RegistryProtocol", "SelectionProtocol"]
