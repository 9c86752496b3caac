"""
Unit tests for target-server loading.
"""

from __future__ import annotations

import pytest

from registry_platform.adapter import RegistryServerPlatform, import_target_server, load_platform
from registry_platform.errors import ConfigurationError


class TestImportTargetServer:
    @pytest.mark.parametrize(
        "path",
        [
            "registry_platform.adapter.server_platform:RegistryServerPlatform",
            "registry_platform.adapter.server_platform.RegistryServerPlatform",
            "  registry_platform.adapter:RegistryServerPlatform  ",
        ],
    )
    def test_accepts_both_path_styles(self, path: str) -> None:
        assert import_target_server(path) is RegistryServerPlatform

    @pytest.mark.parametrize("path", ["", "RegistryServerPlatform", "registry_platform:"])
    def test_rejects_malformed_paths(self, path: str) -> None:
        with pytest.raises(ConfigurationError):
            import_target_server(path)

    def test_unknown_module(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            import_target_server("registry_platform.no_such_module:Platform")

        assert isinstance(exc_info.value.original_error, ImportError)
        assert exc_info.value.context["config_key"] == "target_server"

    def test_attribute_must_be_a_class(self) -> None:
        with pytest.raises(ConfigurationError):
            import_target_server("registry_platform.adapter.loader:load_platform")


class TestLoadPlatform:
    def test_loads_configured_default(self, session, registry, host) -> None:
        platform = load_platform(session, registry=registry, host=host)

        assert isinstance(platform, RegistryServerPlatform)
        assert platform.session is session

    def test_settings_select_target(self, monkeypatch, session, registry, host) -> None:
        monkeypatch.setenv(
            "REGISTRY_PLATFORM_TARGET_SERVER",
            "registry_platform.adapter.server_platform.RegistryServerPlatform",
        )

        platform = load_platform(session, registry=registry, host=host)

        assert isinstance(platform, RegistryServerPlatform)
