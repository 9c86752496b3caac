"""
Unit tests for PlatformSettings.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from registry_platform.settings import DEFAULT_TARGET_SERVER, PlatformSettings, get_settings


class TestPlatformSettings:
    def test_defaults(self, monkeypatch) -> None:
        for key in ("TARGET_SERVER", "LOG_DIR", "DEBUG", "JSON_LOGS"):
            monkeypatch.delenv(f"REGISTRY_PLATFORM_{key}", raising=False)

        settings = PlatformSettings()

        assert settings.target_server == DEFAULT_TARGET_SERVER
        assert settings.log_dir == Path("var/logs")
        assert settings.json_logs is True
        assert settings.debug is False

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("REGISTRY_PLATFORM_DEBUG", "true")
        monkeypatch.setenv("registry_platform_log_dir", str(tmp_path))

        settings = PlatformSettings()

        assert settings.debug is True
        assert settings.log_dir == tmp_path

    def test_rejects_invalid_sizes(self) -> None:
        with pytest.raises(ValidationError):
            PlatformSettings(log_max_bytes=0)

    def test_env_file(self, tmp_path) -> None:
        env_file = tmp_path / "platform.env"
        env_file.write_text("REGISTRY_PLATFORM_JSON_LOGS=false\n")

        settings = get_settings((str(env_file),))

        assert settings.json_logs is False

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
