"""Exception hierarchy for the unit converter core."""

from __future__ import annotations


class UnitConverterError(Exception):
    """Base exception for every unit converter failure."""


class ParseError(UnitConverterError):
    """Raised when a conversion block cannot be parsed."""


class ReferenceNotFoundError(UnitConverterError):
    """Raised when a reference tag is unknown or no table holds both units."""


class ConversionError(UnitConverterError):
    """Raised when the selected table cannot convert between two units."""


class CustomConversionNotFoundError(ConversionError):
    """Raised when no custom category contains both units."""


class LoadError(UnitConverterError):
    """Raised when a custom-unit payload cannot be read or merged."""


def restage(error: UnitConverterError, stage: str) -> UnitConverterError:
    """Return ``error`` re-created with a ``stage`` prefix, keeping its type."""

    return type(error)(f"{stage} failed! {error}")


__all__ = [
    "UnitConverterError",
    "ParseError",
    "ReferenceNotFoundError",
    "ConversionError",
    "CustomConversionNotFoundError",
    "LoadError",
    "restage",
]
