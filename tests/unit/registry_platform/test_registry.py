"""
Unit tests for the mapping registry and the current-registry slot.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pytest

from registry_platform.errors import (
    AmbiguousResolutionError,
    RegistryUnavailableError,
    UnsatisfiedResolutionError,
)
from registry_platform.registry import (
    PERSISTENCE,
    AmbientRegistry,
    MappingRegistry,
    Qualifier,
    RegistryProtocol,
    SelectionProtocol,
    clear_current_registry,
    current_registry,
    registry_scope,
    set_current_registry,
)


class Base:
    pass


class Derived(Base):
    pass


@runtime_checkable
class HasSize(Protocol):
    def size(self) -> int: ...


class NotCheckable(Protocol):
    def size(self) -> int: ...


class Sized:
    def size(self) -> int:
        return 3


class TestMappingRegistry:
    """Test cases for MappingRegistry."""

    def test_satisfies_registry_protocol(self, registry: MappingRegistry) -> None:
        assert isinstance(registry, RegistryProtocol)
        assert isinstance(registry.select(Base), SelectionProtocol)

    def test_capabilities_default_to_class_hierarchy(self, registry: MappingRegistry) -> None:
        instance = Derived()
        registry.register(instance)

        assert registry.select(Derived).get() is instance
        assert registry.select(Base).get() is instance
        assert registry.select(object).is_unsatisfied()

    def test_explicit_capabilities(self, registry: MappingRegistry) -> None:
        instance = Derived()
        registry.register(instance, capabilities=(Base,))

        assert registry.select(Base).get() is instance
        assert registry.select(Derived).is_unsatisfied()

    def test_default_registration_answers_to_satisfied_protocols(
        self, registry: MappingRegistry
    ) -> None:
        instance = Sized()
        registry.register(instance)

        assert registry.select(HasSize).get() is instance
        assert registry.select(NotCheckable).is_unsatisfied()

    def test_explicit_capabilities_disable_protocol_matching(
        self, registry: MappingRegistry
    ) -> None:
        registry.register(Sized(), capabilities=(Sized,))

        assert registry.select(HasSize).is_unsatisfied()

    def test_unqualified_select_sees_only_default_entries(
        self, registry: MappingRegistry
    ) -> None:
        registry.register(Base(), qualifiers=(PERSISTENCE,))

        assert registry.select(Base).is_unsatisfied()
        assert not registry.select(Base, PERSISTENCE).is_unsatisfied()

    def test_qualifiers_compare_by_name(self, registry: MappingRegistry) -> None:
        instance = Base()
        registry.register(instance, qualifiers=(Qualifier("persistence"),))

        assert registry.select(Base, PERSISTENCE).get() is instance

    def test_get_on_empty_selection_raises(self, registry: MappingRegistry) -> None:
        with pytest.raises(UnsatisfiedResolutionError):
            registry.select(Base).get()

    def test_get_on_ambiguous_selection_raises(self, registry: MappingRegistry) -> None:
        registry.register(Base())
        registry.register(Base())
        selection = registry.select(Base)

        assert selection.is_ambiguous()
        with pytest.raises(AmbiguousResolutionError) as exc_info:
            selection.get()
        assert exc_info.value.context["candidates"] == 2

    def test_selection_is_a_snapshot(self, registry: MappingRegistry) -> None:
        instance = Base()
        registry.register(instance)
        selection = registry.select(Base)

        registry.unregister(instance)

        assert selection.get() is instance
        assert registry.select(Base).is_unsatisfied()

    def test_unregister_unknown_instance(self, registry: MappingRegistry) -> None:
        assert registry.unregister(Base()) is False

    def test_closed_registry_is_unavailable(self, registry: MappingRegistry) -> None:
        registry.register(Base())
        registry.close()

        assert registry.closed is True
        with pytest.raises(RegistryUnavailableError):
            registry.select(Base)
        with pytest.raises(RegistryUnavailableError):
            registry.register(Base())


class TestCurrentRegistry:
    """Test cases for the process-wide registry slot."""

    def test_missing_registry_is_fatal(self) -> None:
        with pytest.raises(RegistryUnavailableError) as exc_info:
            current_registry()

        assert exc_info.value.error_code == "REGISTRY_UNAVAILABLE"
        assert exc_info.value.recoverable is False

    def test_set_and_clear(self, registry: MappingRegistry) -> None:
        set_current_registry(registry)
        assert current_registry() is registry

        clear_current_registry()
        with pytest.raises(RegistryUnavailableError):
            current_registry()

    def test_scope_restores_previous(self, registry: MappingRegistry) -> None:
        outer = MappingRegistry()
        set_current_registry(outer)

        with registry_scope(registry) as scoped:
            assert scoped is registry
            assert current_registry() is registry

        assert current_registry() is outer

    def test_ambient_registry_follows_current(self, registry: MappingRegistry) -> None:
        instance = Base()
        registry.register(instance)
        ambient = AmbientRegistry()

        with pytest.raises(RegistryUnavailableError):
            ambient.select(Base)

        with registry_scope(registry):
            assert ambient.select(Base).get() is instance
