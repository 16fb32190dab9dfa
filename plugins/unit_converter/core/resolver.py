"""Reference-type inference from a pair of unit symbols."""

from __future__ import annotations

from typing import Optional

from common.logging import get_logger

from .custom import CustomUnitNamespace
from .errors import ReferenceNotFoundError
from .refs import CUSTOM, REFERENCES

logger = get_logger(__name__)


def normalize_reference(reference: str) -> str:
    return reference.strip().upper()


def find_reference(
    from_unit: str,
    to_unit: str,
    namespace: Optional[CustomUnitNamespace] = None,
    reference: Optional[str] = None,
) -> str:
    """Return the reference tag that governs ``from_unit -> to_unit``.

    An explicit ``reference`` is trusted and returned without checking
    membership. Otherwise built-in tables are scanned in priority order and
    the first one containing both symbols wins, even when a later table
    would also match. Custom categories are only consulted afterwards.
    """

    if reference:
        return normalize_reference(reference)

    for tag, table in REFERENCES.items():
        if from_unit in table and to_unit in table:
            logger.debug("resolved %s -> %s as %s", from_unit, to_unit, tag)
            return tag

    if namespace is not None:
        match = namespace.find_category(from_unit, to_unit)
        if match is not None:
            logger.debug(
                "resolved %s -> %s in custom category %s", from_unit, to_unit, match[0]
            )
            return CUSTOM

    raise ReferenceNotFoundError(
        f"Conversion units not found: '{from_unit}' -> '{to_unit}'"
    )


__all__ = ["find_reference", "normalize_reference"]
