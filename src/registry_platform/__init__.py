"""
registry-platform - Registry-backed server platform for a persistence runtime.

Lets the persistence runtime obtain its transaction manager, task executor and
management endpoint from a dependency registry instead of a naming service.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .adapter import RegistryServerPlatform, RegistryTransactionController, load_platform
from .registry import PERSISTENCE, MappingRegistry, Qualifier
from .resolution import Found, ServiceResolver, Unsatisfied

__all__ = [
    "__version__",
    "Found",
    "MappingRegistry",
    "PERSISTENCE",
    "Qualifier",
    "RegistryServerPlatform",
    "RegistryTransactionController",
    "ServiceResolver",
    "Unsatisfied",
    "load_platform",
]
