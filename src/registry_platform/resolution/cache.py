"""Memoization of positive resolutions."""

from __future__ import annotations

from collections.abc import Callable

from .types import Found, Resolution


class CachedResolution:
    """
    Holds a resolution once it reaches ``Found``.

    ``Unsatisfied`` outcomes are never stored, so each call made before the
    registry can supply the capability performs a fresh query. Concurrent
    first resolutions may both query; the stored reference is a single
    attribute write and the last writer wins with an equivalent value.
    """

    def __init__(self, resolve: Callable[[], Resolution]) -> None:
        self._resolve = resolve
        self._found: Found | None = None

    @property
    def found(self) -> Found | None:
        return self._found

    def resolve(self) -> Resolution:
        cached = self._found
        if cached is not None:
            return cached
        resolution = self._resolve()
        if isinstance(resolution, Found):
            self._found = resolution
        return resolution


__all__ = ["CachedResolution"]
