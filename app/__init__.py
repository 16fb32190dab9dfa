"""Application factory for the Unit Converter AIO server."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Mapping

import yaml
from flask import Flask
from werkzeug.exceptions import HTTPException

from common.errors import AppError, NotFoundAppError, ensure_app_error
from common.logging import get_logger, install_request_logging, set_level
from common.responses import fail, ok

from . import config as config_module
from .blueprints import iter_plugin_packages, register_plugin_blueprints

logger = get_logger(__name__)


def _load_yaml_config(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _resolve_path(root: Path, value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _load_manifests() -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in iter_plugin_packages():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if manifest:
            manifests.append(dict(manifest))
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def _unit_converter_settings(app: Flask, raw: Mapping[str, Any] | None) -> dict:
    settings = dict(raw or {})
    custom_file = app.config.get("CUSTOM_UNITS_FILE") or settings.get("custom_units_file")
    if custom_file:
        root = app.config["CONFIG_PATH"].parent
        settings["custom_units_file"] = str(_resolve_path(root, str(custom_file)))
    return settings


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)
    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj:
            app.config.from_object(config_obj)

    yaml_config = _load_yaml_config(app.config["CONFIG_PATH"])
    site_settings = yaml_config.get("site", {}) or {}
    plugin_settings = dict(yaml_config.get("plugins", {}) or {})

    if "max_content_length_kb" in site_settings:
        try:
            app.config["MAX_CONTENT_LENGTH"] = int(
                float(site_settings["max_content_length_kb"]) * 1024
            )
        except (TypeError, ValueError):
            logger.warning(
                "ignoring invalid max_content_length_kb=%r",
                site_settings["max_content_length_kb"],
            )
    app.config["SITE_SETTINGS"] = site_settings

    plugin_settings["unit_converter"] = _unit_converter_settings(
        app, plugin_settings.get("unit_converter")
    )
    app.config["PLUGIN_SETTINGS"] = plugin_settings

    set_level(site_settings.get("log_level") or app.config["LOG_LEVEL"])
    install_request_logging(app)
    register_plugin_blueprints(app)

    manifests = _load_manifests()
    for manifest in manifests:
        blueprint = manifest.get("blueprint")
        plugin_config = plugin_settings.get(blueprint, {}) if blueprint else {}
        if plugin_config.get("summary"):
            manifest["summary"] = plugin_config["summary"]
    app.config["PLUGIN_MANIFESTS"] = manifests

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.route("/")
    def home():
        return ok(
            {
                "site": app.config.get("SITE_SETTINGS", {}),
                "plugins": app.config.get("PLUGIN_MANIFESTS", []),
            }
        )

    @app.errorhandler(404)
    def not_found(error):
        return fail(NotFoundAppError(message="Resource not found"))

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        return fail(
            AppError(
                message=error.description or error.name,
                code=f"http.{error.code}",
                status_code=error.code or 400,
            )
        )

    @app.errorhandler(Exception)
    def server_error(error: Exception):  # pragma: no cover - last resort
        logger.exception("unhandled error")
        return fail(ensure_app_error(error, fallback_code="internal_error"))

    return app


__all__ = ["create_app"]
