"""Blueprint registration helpers."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Iterable

from flask import Blueprint, Flask

from common.logging import get_logger

logger = get_logger(__name__)


def iter_plugin_packages(package: str = "plugins") -> Iterable[str]:
    """Yield dotted import paths of every plugin package."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _iter_blueprints(package: str = "plugins") -> Iterable[Blueprint]:
    for dotted in iter_plugin_packages(package):
        module = importlib.import_module(f"{dotted}.api")
        module_blueprints = getattr(module, "blueprints", None)
        if module_blueprints:
            yield from module_blueprints
            continue
        blueprint = getattr(module, "bp", None)
        if blueprint is not None:
            yield blueprint


def register_plugin_blueprints(app: Flask) -> None:
    for bp in _iter_blueprints():
        app.register_blueprint(bp)
        logger.debug("registered blueprint %s at %s", bp.name, bp.url_prefix)


__all__ = ["iter_plugin_packages", "register_plugin_blueprints"]
