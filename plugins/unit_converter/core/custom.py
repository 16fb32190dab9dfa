"""User-defined unit categories layered on top of the built-in tables."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

import pydantic
import yaml
from pydantic import BaseModel, Field

from common.logging import get_logger

from .errors import LoadError

DEFAULT_CATEGORY = "CUSTOM"
PAYLOAD_KEY = "CUSTOM-UNIT"
STRUCTURED_SUFFIXES: tuple[str, ...] = (".yml", ".yaml")

logger = get_logger(__name__)


class CustomUnitFile(BaseModel):
    """Decoded custom-unit document: category -> unit -> factor."""

    model_config = pydantic.ConfigDict(extra="ignore", populate_by_name=True)

    categories: Dict[str, Dict[str, float]] = Field(alias=PAYLOAD_KEY)


class CustomUnitNamespace:
    """Ordered set of named custom categories owned by one converter.

    A fresh namespace only holds the empty ``CUSTOM`` bucket. Categories are
    replaced wholesale on merge, never deep-merged.
    """

    def __init__(self) -> None:
        self._categories: Dict[str, Dict[str, float]] = {DEFAULT_CATEGORY: {}}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    @property
    def default(self) -> Dict[str, float]:
        return self._categories.setdefault(DEFAULT_CATEGORY, {})

    def get(self, name: str) -> Optional[Dict[str, float]]:
        """Return the category called ``name``, matched case-insensitively."""

        key = name.strip()
        if key in self._categories:
            return self._categories[key]
        folded = key.upper()
        for candidate, table in self._categories.items():
            if candidate.upper() == folded:
                return table
        return None

    def add_unit(self, unit: str, factor: float) -> bool:
        self.default[unit] = factor
        return True

    def merge(self, payload: Mapping[str, Any] | None) -> Dict[str, Dict[str, float]]:
        """Merge a decoded ``CUSTOM-UNIT`` document into the namespace."""

        if not payload:
            raise LoadError("Custom unit file is empty")
        if not isinstance(payload, Mapping) or PAYLOAD_KEY not in payload:
            raise LoadError(f"Key '{PAYLOAD_KEY}' not found")
        try:
            document = CustomUnitFile.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise LoadError(f"Malformed custom unit content: {exc}") from exc
        for name, table in document.categories.items():
            self._categories[name.strip()] = dict(table)
        logger.info(
            "merged custom units",
            extra={"categories": list(document.categories.keys())},
        )
        return self.snapshot()

    def find_category(self, from_unit: str, to_unit: str) -> Optional[Tuple[str, Dict[str, float]]]:
        """Return the first category holding both units, in insertion order."""

        for name, table in self._categories.items():
            if from_unit in table and to_unit in table:
                return name, table
        return None

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        return {name: dict(table) for name, table in self._categories.items()}


def parse_custom_unit_content(content: str) -> Any:
    """Decode YAML ``content`` into a custom-unit payload."""

    if not isinstance(content, str):
        raise LoadError("Custom unit content must be a string")
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise LoadError(f"Invalid YAML content: {exc}") from exc


def read_custom_unit_file(path: str | Path) -> Any:
    """Read and decode a ``.yml``/``.yaml`` custom-unit file."""

    file_path = Path(path)
    if not file_path.exists():
        raise LoadError("File not found")
    if file_path.suffix.lower() not in STRUCTURED_SUFFIXES:
        raise LoadError("File format not supported")
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise LoadError(f"Invalid YAML content: {exc}") from exc


__all__ = [
    "DEFAULT_CATEGORY",
    "PAYLOAD_KEY",
    "STRUCTURED_SUFFIXES",
    "CustomUnitFile",
    "CustomUnitNamespace",
    "parse_custom_unit_content",
    "read_custom_unit_file",
]
