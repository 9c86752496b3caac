"""Centralized logging setup for the registry platform."""

from __future__ import annotations

import logging
import logging.handlers

from registry_platform.logging.json_formatter import StructuredJSONFormatter
from registry_platform.settings import PlatformSettings, get_settings

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGE_LOGGER = "registry_platform"


def configure_logging(settings: PlatformSettings | None = None) -> None:
    """
    Configure console and rotating file logging for the platform loggers.

    Handlers are attached to the ``registry_platform`` logger, not the root,
    so the host framework keeps control of its own logging. Calling this more
    than once does not duplicate handlers.

    Args:
        settings: Optional settings; defaults to :func:`get_settings`.
    """
    settings = settings or get_settings()

    log_dir = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    existing_targets = {
        getattr(handler, "baseFilename", None)
        for handler in logger.handlers
        if hasattr(handler, "baseFilename")
    }

    console_handlers = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    if not console_handlers:
        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter(_TEXT_FORMAT))
        logger.addHandler(console)

    text_path = str((log_dir / "registry_platform.log").resolve())
    if text_path not in existing_targets:
        text_handler = logging.handlers.RotatingFileHandler(
            text_path,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
        )
        text_handler.setLevel(logging.DEBUG)
        text_handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
        logger.addHandler(text_handler)

    if settings.json_logs:
        json_path = str((log_dir / "registry_platform.jsonl").resolve())
        if json_path not in existing_targets:
            json_handler = logging.handlers.RotatingFileHandler(
                json_path,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
            )
            json_handler.setLevel(logging.DEBUG)
            json_handler.setFormatter(StructuredJSONFormatter(sort_keys=True))
            logger.addHandler(json_handler)
