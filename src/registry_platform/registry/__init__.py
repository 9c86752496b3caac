"""Registry contract, qualifiers and the ambient registry slot."""

from .current import (
    AmbientRegistry,
    clear_current_registry,
    current_registry,
    registry_scope,
    set_current_registry,
)
from .mapping import MappingRegistry, RegistryEntry, Selection
from .protocols import RegistryProtocol, SelectionProtocol
from .qualifiers import PERSISTENCE, Qualifier

__all__ = [
    "AmbientRegistry",
    "MappingRegistry",
    "PERSISTENCE",
    "Qualifier",
    "RegistryEntry",
    "RegistryProtocol",
    "Selection",
    "SelectionProtocol",
    "clear_current_registry",
    "current_registry",
    "registry_scope",
    "set_current_registry",
]
