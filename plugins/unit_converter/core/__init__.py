"""Facade for the unit converter core utilities."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

from .blocks import ConversionBlock, parse_conversion_block
from .custom import CustomUnitNamespace
from .engine import BoundConverter, Number, UnitConverter
from .errors import (
    ConversionError,
    CustomConversionNotFoundError,
    LoadError,
    ParseError,
    ReferenceNotFoundError,
    UnitConverterError,
    restage,
)
from .lookup import ReferenceRows, UnitLookup, list_references
from .lookup import find_unit as _find_unit
from .lookup import get_reference_units as _get_reference_units
from .metadata import AUTHOR, DESCRIPTION, EMAIL, VERSION, PackageInfo, check_version, get_info


@lru_cache(maxsize=1)
def _converter() -> UnitConverter:
    # Shared read-only instance; never register custom units on it.
    return UnitConverter()


def go(reference_file: Optional[Union[str, Path]] = None) -> UnitConverter:
    """Return a fresh converter, optionally preloaded from a YAML file.

    The file must contain a top-level ``CUSTOM-UNIT`` mapping, e.g.::

        CUSTOM-UNIT:
          HEAT-CAPACITY:
            J/mol.K: 1
            kJ/mol.K: 0.001
    """

    converter = UnitConverter()
    if reference_file:
        try:
            converter.load_custom_unit_file(reference_file)
        except UnitConverterError as exc:
            raise restage(exc, "Initializing") from exc
    return converter


def go_from_content(content: str) -> UnitConverter:
    """Return a fresh converter preloaded from YAML ``content``."""

    converter = UnitConverter()
    try:
        converter.load_custom_unit_content(content)
    except UnitConverterError as exc:
        raise restage(exc, "Initializing from content") from exc
    return converter


def create_converter(value: Number, unit: str) -> BoundConverter:
    """Return a converter bound to ``value`` expressed in ``unit``."""

    return BoundConverter(value, unit)


def _converter_for(reference_file: Optional[Union[str, Path]]) -> UnitConverter:
    return go(reference_file) if reference_file else _converter()


def convert_from_to(
    value: Number,
    from_unit: str,
    to_unit: str,
    reference: Optional[str] = None,
    reference_file: Optional[Union[str, Path]] = None,
) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit``."""

    return _converter_for(reference_file).convert(value, from_unit, to_unit, reference)


def to(
    value: Number,
    block: str,
    reference: Optional[str] = None,
    reference_file: Optional[Union[str, Path]] = None,
) -> float:
    """Convert ``value`` using a ``"<from> => <to>"`` conversion block."""

    return _converter_for(reference_file).to(value, block, reference)


def convert(value: Number, from_unit: str, to_unit: str) -> float:
    return convert_from_to(value, from_unit, to_unit)


def check_reference(
    reference: str, as_object: bool = False
) -> Union[Dict[str, float], ReferenceRows]:
    """Return a built-in reference as a mapping or as display rows."""

    return _converter().check_reference(reference, as_object)


def get_reference_units(reference: str) -> List[str]:
    try:
        return _get_reference_units(reference, _converter().namespace)
    except UnitConverterError as exc:
        raise restage(exc, "Checking reference") from exc


def find_unit(unit: str) -> UnitLookup:
    return _find_unit(unit, _converter().namespace)


__all__ = [
    "VERSION",
    "AUTHOR",
    "EMAIL",
    "DESCRIPTION",
    "PackageInfo",
    "ConversionBlock",
    "CustomUnitNamespace",
    "UnitConverter",
    "BoundConverter",
    "UnitLookup",
    "UnitConverterError",
    "ParseError",
    "ReferenceNotFoundError",
    "ConversionError",
    "CustomConversionNotFoundError",
    "LoadError",
    "check_version",
    "get_info",
    "list_references",
    "check_reference",
    "get_reference_units",
    "go",
    "go_from_content",
    "create_converter",
    "convert_from_to",
    "to",
    "convert",
    "find_unit",
    "parse_conversion_block",
]
