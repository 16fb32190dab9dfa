"""Configuration classes for the Flask application."""

from __future__ import annotations

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent


def _config_path() -> Path:
    """Return the YAML settings file, overridable for deployments."""

    override = os.environ.get("UNIT_CONVERTER_CONFIG")
    if override:
        return Path(override)
    return ROOT_DIR / "config.yml"


class BaseConfig:
    CONFIG_PATH = _config_path()
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1 MiB, custom-unit payloads are small
    LOG_LEVEL = os.environ.get("UNIT_CONVERTER_LOG_LEVEL", "INFO")
    # Takes precedence over plugins.unit_converter.custom_units_file in config.yml
    CUSTOM_UNITS_FILE = os.environ.get("UNIT_CONVERTER_CUSTOM_UNITS")
    RESPONSE_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
        "Referrer-Policy": "no-referrer",
        "Cache-Control": "no-store",
    }


class TestingConfig(BaseConfig):
    TESTING = True
    LOG_LEVEL = "WARNING"


__all__ = ["BaseConfig", "TestingConfig"]
