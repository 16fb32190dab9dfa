"""Introspection helpers over the reference registry and custom namespace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .custom import DEFAULT_CATEGORY, CustomUnitNamespace
from .errors import ReferenceNotFoundError, UnitConverterError
from .refs import BUILTIN_REFERENCES, CUSTOM, REFERENCES

ReferenceRows = List[Dict[str, object]]

CATEGORY_SEPARATOR = "::"


@dataclass(frozen=True, slots=True)
class UnitLookup:
    """Outcome of :func:`find_unit`."""

    found: bool
    reference: Optional[str] = None
    factor: Optional[float] = None

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"found": self.found}
        if self.found:
            payload["reference"] = self.reference
            payload["factor"] = self.factor
        return payload


def list_references() -> List[str]:
    """Return built-in reference tags in resolver priority order, then ``CUSTOM``."""

    return [*BUILTIN_REFERENCES, CUSTOM]


def check_reference(
    reference: str,
    as_object: bool = False,
    namespace: Optional[CustomUnitNamespace] = None,
) -> Union[Dict[str, float], ReferenceRows]:
    """Return the content of ``reference``.

    ``as_object=True`` returns the unit -> factor mapping; otherwise an
    ordered list of ``{"unit", "value"}`` rows is returned for display.
    ``CUSTOM::NAME`` (or a bare ``NAME``) selects a custom category.
    """

    if not isinstance(reference, str) or not reference.strip():
        raise ReferenceNotFoundError("Reference not provided")
    if namespace is None:
        namespace = CustomUnitNamespace()

    tag = reference.strip().upper()
    if CATEGORY_SEPARATOR in tag:
        table = namespace.get(tag.split(CATEGORY_SEPARATOR, 1)[1])
    elif tag == CUSTOM:
        table = namespace.default
    elif tag in REFERENCES:
        table = REFERENCES[tag]
    else:
        table = namespace.get(tag)

    if table is None:
        raise ReferenceNotFoundError(f"Reference not found: '{reference.strip()}'")
    if as_object:
        return dict(table)
    return [{"unit": unit, "value": value} for unit, value in table.items()]


def get_reference_units(
    reference: str, namespace: Optional[CustomUnitNamespace] = None
) -> List[str]:
    """Return the unit symbols registered under ``reference``."""

    return list(check_reference(reference, True, namespace))


def find_unit(unit: str, namespace: Optional[CustomUnitNamespace] = None) -> UnitLookup:
    """Return the first reference containing ``unit``; never raises."""

    if not isinstance(unit, str):
        return UnitLookup(found=False)
    candidates = list_references()
    if namespace is not None:
        candidates.extend(
            f"{CUSTOM}{CATEGORY_SEPARATOR}{name}"
            for name in namespace
            if name != DEFAULT_CATEGORY
        )
    for reference in candidates:
        try:
            table = check_reference(reference, True, namespace)
        except UnitConverterError:
            continue
        if unit in table:
            return UnitLookup(found=True, reference=reference, factor=table[unit])
    return UnitLookup(found=False)


__all__ = [
    "CATEGORY_SEPARATOR",
    "UnitLookup",
    "list_references",
    "check_reference",
    "get_reference_units",
    "find_unit",
]
