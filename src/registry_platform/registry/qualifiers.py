"""Qualifier tags attached to registry entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Qualifier:
    """
    Opaque, stable tag that narrows a registry selection.

    Two qualifiers are the same tag when their names are equal.
    """

    name: str

    def __str__(self) -> str:
        return f"@{self.name}"


# Marks an entry as intended for the persistence integration rather than generic use.
PERSISTENCE = Qualifier("persistence")

__all__ = ["PERSISTENCE", "Qualifier"]
