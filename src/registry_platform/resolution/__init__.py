"""Service resolution core: requests, results, policies and caching."""

from .cache import CachedResolution
from .policy import CapabilityPolicy, FallbackAction
from .resolver import ServiceResolver
from .types import CapabilityRequest, Found, Resolution, Unsatisfied

__all__ = [
    "CachedResolution",
    "CapabilityPolicy",
    "CapabilityRequest",
    "FallbackAction",
    "Found",
    "Resolution",
    "ServiceResolver",
    "Unsatisfied",
]
