"""Conversion arithmetic and the converter objects built on top of it."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from common.logging import get_logger

from .blocks import ConversionBlock, parse_conversion_block
from .custom import CustomUnitNamespace, parse_custom_unit_content, read_custom_unit_file
from .errors import (
    ConversionError,
    CustomConversionNotFoundError,
    ReferenceNotFoundError,
    UnitConverterError,
    restage,
)
from .lookup import ReferenceRows, check_reference
from .refs import CUSTOM, TEMPERATURE, TEMPERATURE_TAG, ConversionTable, get_table
from .resolver import find_reference

logger = get_logger(__name__)

Number = Union[int, float]

_AFFINE_UNITS = ("F", "R")
_KELVIN = "K"


def _coerce_value(value: Any) -> float:
    if isinstance(value, bool):
        raise ConversionError("Value must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConversionError(f"Value must be a number, got {value!r}") from exc


def _clean_unit(unit: Any) -> Any:
    return unit.strip() if isinstance(unit, str) else unit


def convert_ratio(value: Number, from_unit: str, to_unit: str, table: ConversionTable) -> float:
    """Convert with the linear factor ratio ``value / f[from] * f[to]``."""

    try:
        from_factor = table[from_unit]
        to_factor = table[to_unit]
    except KeyError as exc:
        raise ConversionError(f"Unit {exc} not found in reference table") from exc
    try:
        return value / from_factor * to_factor
    except (TypeError, ZeroDivisionError) as exc:
        raise ConversionError(
            f"Invalid factors for '{from_unit}' -> '{to_unit}': {exc}"
        ) from exc


def convert_temperature(
    value: Number,
    from_unit: str,
    to_unit: str,
    offsets: ConversionTable = TEMPERATURE,
) -> float:
    """Convert a temperature by pivoting through Celsius.

    Fahrenheit and Rankine are affine (offset then 5/9 scaling); Kelvin only
    adds its signed offset on the way in and subtracts it on the way out.
    """

    for unit in (from_unit, to_unit):
        if unit not in offsets:
            raise ConversionError(f"Unit '{unit}' is not a temperature unit")

    celsius = value
    if from_unit in _AFFINE_UNITS:
        celsius = (value - offsets[from_unit]) * 5 / 9
    elif from_unit == _KELVIN:
        celsius = value + offsets[_KELVIN]

    if to_unit in _AFFINE_UNITS:
        return celsius * 9 / 5 + offsets[to_unit]
    if to_unit == _KELVIN:
        return celsius - offsets[_KELVIN]
    return celsius


def convert_custom(
    value: Number, from_unit: str, to_unit: str, namespace: CustomUnitNamespace
) -> float:
    """Convert through the first custom category holding both units."""

    match = namespace.find_category(from_unit, to_unit)
    if match is None:
        raise CustomConversionNotFoundError(
            f"Custom conversion units not found: '{from_unit}' -> '{to_unit}'"
        )
    return convert_ratio(value, from_unit, to_unit, match[1])


def convert_value(
    value: Number,
    from_unit: str,
    to_unit: str,
    reference: Optional[str] = None,
    namespace: Optional[CustomUnitNamespace] = None,
) -> float:
    """Resolve the reference type of a unit pair and convert ``value``."""

    numeric = _coerce_value(value)
    from_unit = _clean_unit(from_unit)
    to_unit = _clean_unit(to_unit)
    tag = find_reference(from_unit, to_unit, namespace, reference)

    if tag == CUSTOM:
        return convert_custom(numeric, from_unit, to_unit, namespace or CustomUnitNamespace())
    if tag == TEMPERATURE_TAG:
        return convert_temperature(numeric, from_unit, to_unit)
    try:
        table = get_table(tag)
    except KeyError as exc:
        raise ReferenceNotFoundError(f"Reference not found: '{tag}'") from exc
    return convert_ratio(numeric, from_unit, to_unit, table)


class UnitConverter:
    """Stateless converter: the value travels with every call.

    Each instance owns its own custom-unit namespace, so units registered on
    one converter are never visible on another.
    """

    def __init__(self, namespace: Optional[CustomUnitNamespace] = None) -> None:
        self.namespace = namespace if namespace is not None else CustomUnitNamespace()

    @property
    def custom_units(self) -> Dict[str, Dict[str, float]]:
        return self.namespace.snapshot()

    # ---- Lookups ---------------------------------------------------------
    def find_reference(self, from_unit: str, to_unit: str) -> str:
        try:
            return find_reference(from_unit, to_unit, self.namespace)
        except UnitConverterError as exc:
            raise restage(exc, "Finding reference") from exc

    def check_reference(
        self, reference: str, as_object: bool = False
    ) -> Union[Dict[str, float], ReferenceRows]:
        try:
            return check_reference(reference, as_object, self.namespace)
        except UnitConverterError as exc:
            raise restage(exc, "Checking reference") from exc

    def check_conversion_block(self, block: str) -> ConversionBlock:
        try:
            return parse_conversion_block(block)
        except UnitConverterError as exc:
            raise restage(exc, "Checking conversion block") from exc

    # ---- Conversions -----------------------------------------------------
    def convert(
        self,
        value: Number,
        from_unit: str,
        to_unit: str,
        reference: Optional[str] = None,
    ) -> float:
        try:
            return convert_value(value, from_unit, to_unit, reference, self.namespace)
        except UnitConverterError as exc:
            raise restage(exc, "Conversion") from exc

    def from_to(
        self,
        value: Number,
        from_unit: str,
        to_unit: str,
        reference: Optional[str] = None,
    ) -> float:
        return self.convert(value, from_unit, to_unit, reference)

    def to(self, value: Number, block: str, reference: Optional[str] = None) -> float:
        """Convert ``value`` using a ``"<from> => <to>"`` block."""

        try:
            parsed = self.check_conversion_block(block)
            return convert_value(
                value, parsed.from_unit, parsed.to_unit, reference, self.namespace
            )
        except UnitConverterError as exc:
            raise restage(exc, "Conversion") from exc

    # ---- Custom units ----------------------------------------------------
    def add_custom_unit(self, unit: str, factor: Number) -> bool:
        return self.namespace.add_unit(unit, factor)

    def load_custom_unit(self, payload: Mapping[str, Any] | None) -> Dict[str, Dict[str, float]]:
        try:
            return self.namespace.merge(payload)
        except UnitConverterError as exc:
            raise restage(exc, "Loading custom unit") from exc

    def load_custom_unit_file(self, path: str | Path) -> Dict[str, Dict[str, float]]:
        logger.info("loading custom units from %s", path)
        try:
            return self.namespace.merge(read_custom_unit_file(path))
        except UnitConverterError as exc:
            raise restage(exc, "Loading custom unit from file") from exc

    def load_custom_unit_content(self, content: str) -> Dict[str, Dict[str, float]]:
        try:
            return self.namespace.merge(parse_custom_unit_content(content))
        except UnitConverterError as exc:
            raise restage(exc, "Loading custom unit from content") from exc


class BoundConverter:
    """Converter bound to one initial value and unit.

    >>> BoundConverter(1, "MPa").convert("bar")
    10.0
    """

    def __init__(
        self, value: Number, unit: str, converter: Optional[UnitConverter] = None
    ) -> None:
        self.value = value
        self.unit = unit.strip()
        self.converter = converter if converter is not None else UnitConverter()

    def __repr__(self) -> str:
        return f"BoundConverter(value={self.value!r}, unit={self.unit!r})"

    def convert(self, to_unit: str, reference: Optional[str] = None) -> float:
        return self.converter.convert(self.value, self.unit, to_unit, reference)

    def find_reference(self, to_unit: str) -> str:
        return self.converter.find_reference(self.unit, to_unit)

    def check_reference(
        self, reference: str, as_object: bool = False
    ) -> Union[Dict[str, float], ReferenceRows]:
        return self.converter.check_reference(reference, as_object)

    def add_custom_unit(self, unit: str, factor: Number) -> bool:
        return self.converter.add_custom_unit(unit, factor)

    def load_custom_unit(self, payload: Mapping[str, Any] | None) -> Dict[str, Dict[str, float]]:
        return self.converter.load_custom_unit(payload)

    def load_custom_unit_file(self, path: str | Path) -> Dict[str, Dict[str, float]]:
        return self.converter.load_custom_unit_file(path)


__all__ = [
    "convert_ratio",
    "convert_temperature",
    "convert_custom",
    "convert_value",
    "UnitConverter",
    "BoundConverter",
]
