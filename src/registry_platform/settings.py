"""Typed configuration backed by environment variables."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TARGET_SERVER = "registry_platform.adapter.server_platform:RegistryServerPlatform"

_DEFAULT_ENV_FILES: tuple[Path, ...] = (Path(".env"),)


class PlatformSettings(BaseSettings):
    """Platform configuration loaded from ``REGISTRY_PLATFORM_*`` variables and `.env`."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="REGISTRY_PLATFORM_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    target_server: str = Field(
        default=DEFAULT_TARGET_SERVER,
        description="Dotted path of the server platform class the host should construct.",
    )
    log_dir: Path = Field(
        default=Path("var/logs"),
        description="Directory where rotating platform logs are written.",
    )
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    log_backup_count: int = Field(default=5, ge=0)
    json_logs: bool = Field(
        default=True,
        description="Also write a JSON-lines log alongside the text log.",
    )
    debug: bool = Field(default=False, description="Enable DEBUG logging for the platform.")


def _existing_env_files() -> list[str]:
    return [str(path) for path in _DEFAULT_ENV_FILES if path.exists()]


@lru_cache
def get_settings(_env_files: Sequence[str] | None = None) -> PlatformSettings:
    """Load settings once per process, respecting `.env` fallbacks."""
    env_files = list(_env_files) if _env_files is not None else _existing_env_files()
    if env_files:
        return PlatformSettings(_env_file=env_files)
    return PlatformSettings()


__all__ = ["DEFAULT_TARGET_SERVER", "PlatformSettings", "get_settings"]
