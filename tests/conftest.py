"""Shared fixtures for registry platform tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import pytest

from registry_platform.registry import MappingRegistry, Qualifier, Selection
from registry_platform.registry.current import clear_current_registry
from registry_platform.settings import get_settings


@dataclass
class FakeSession:
    name: str = "test-session"


class FakeTransactionManager:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def begin(self) -> None:
        self.calls.append("begin")

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")

    def get_status(self) -> str:
        return "ACTIVE" if self.calls and self.calls[-1] == "begin" else "NO_TRANSACTION"


class FakeManagementServer:
    def __init__(self) -> None:
        self.objects: dict[str, Any] = {}

    def register(self, name: str, obj: Any) -> None:
        self.objects[name] = obj

    def unregister(self, name: str) -> None:
        self.objects.pop(name, None)

    def is_registered(self, name: str) -> bool:
        return name in self.objects


@dataclass
class RecordingHost:
    """Host defaults that record what was delegated to them."""

    launched: list[Any] = field(default_factory=list)
    management_server: Any = None

    def launch_task(self, task: Callable[[], Any] | None) -> None:
        self.launched.append(task)

    def default_management_server(self) -> Any | None:
        return self.management_server


class ScriptedRegistry:
    """Registry whose successive selections follow a script.

    Each script item is the instance to return, or None for a miss.
    """

    def __init__(self, outcomes: list[Any]) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[tuple[type[Any], Qualifier | None]] = []

    def select(self, capability: type[Any], qualifier: Qualifier | None = None) -> Selection[Any]:
        self.calls.append((capability, qualifier))
        instance = self.outcomes.pop(0) if self.outcomes else None
        matches = () if instance is None else (instance,)
        return Selection(capability=capability, qualifier=qualifier, matches=matches)


@pytest.fixture(autouse=True)
def _reset_ambient_state() -> Iterator[None]:
    clear_current_registry()
    get_settings.cache_clear()
    yield
    clear_current_registry()
    get_settings.cache_clear()


@pytest.fixture
def registry() -> MappingRegistry:
    return MappingRegistry()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def transaction_manager() -> FakeTransactionManager:
    return FakeTransactionManager()


@pytest.fixture
def management_server() -> FakeManagementServer:
    return FakeManagementServer()


@pytest.fixture
def scripted_registry() -> Callable[[list[Any]], ScriptedRegistry]:
    return ScriptedRegistry
