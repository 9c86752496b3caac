"""
Error hierarchy for the registry platform.

Capability absence is not an error: it is resolved into a boolean or an
optional value before it reaches the host framework. The types below cover
the failures that do cross that boundary.
"""

import sys
import traceback
from datetime import datetime
from typing import Any


def _capture_traceback() -> str:
    """Return the active traceback or, if none, a snapshot of the current stack."""

    exc_type, exc_value, exc_tb = sys.exc_info()
    if exc_type is not None and exc_tb is not None:
        return "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

    stack = traceback.format_stack()
    if not stack:
        return ""
    # Drop the last frame so the helper itself does not appear in the stack trace
    return "".join(stack[:-1])


def _capability_name(capability: Any) -> str:
    return getattr(capability, "__qualname__", None) or repr(capability)


class PlatformError(Exception):
    """Base exception class for all registry platform errors"""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recoverable: bool = True,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now()
        self.traceback = _capture_traceback()
        self.original_error = original_error

    def add_context(self, **kwargs: Any) -> "PlatformError":
        """Add additional context to the error"""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
            "traceback": self.traceback,
        }


class RegistryUnavailableError(PlatformError):
    """Raised when the ambient registry cannot be queried at all.

    This indicates a broken deployment and is never recovered locally.
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, error_code="REGISTRY_UNAVAILABLE", recoverable=False, **kwargs)


class UnsatisfiedResolutionError(PlatformError):
    """Raised when an instance is demanded from a selection with no matches"""

    def __init__(
        self, message: str, capability: Any = None, qualifier: Any = None, **kwargs: Any
    ) -> None:
        super().__init__(message, error_code="UNSATISFIED_RESOLUTION", **kwargs)
        if capability is not None:
            self.add_context(capability=_capability_name(capability), qualifier=str(qualifier))


class AmbiguousResolutionError(PlatformError):
    """Raised when an instance is demanded from a selection with several matches"""

    def __init__(
        self,
        message: str,
        capability: Any = None,
        qualifier: Any = None,
        candidates: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code="AMBIGUOUS_RESOLUTION", **kwargs)
        if capability is not None:
            self.add_context(
                capability=_capability_name(capability),
                qualifier=str(qualifier),
                candidates=candidates,
            )


class ConfigurationError(PlatformError):
    """Raised when there are configuration issues"""

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, error_code="CONFIG_ERROR", recoverable=False, **kwargs)
        if config_key:
            self.add_context(config_key=config_key)


__all__ = [
    "PlatformError",
    "RegistryUnavailableError",
    "UnsatisfiedResolutionError",
    "AmbiguousResolutionError",
    "ConfigurationError",
]
