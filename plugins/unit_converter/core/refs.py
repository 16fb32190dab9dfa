"""Built-in reference tables for the unit converter core.

Every ratio table stores, for each unit symbol, how many of that unit make
up one base unit of the family (the entry with factor ``1.0``). Converting
``value`` from ``A`` to ``B`` is therefore ``value / table[A] * table[B]``.

The temperature table is the exception: it stores an additive offset per
unit relative to Celsius and is interpreted by
:func:`~plugins.unit_converter.core.engine.convert_temperature`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

ConversionTable = Mapping[str, float]

PRESSURE: Dict[str, float] = {
    "bar": 1.0,
    "mbar": 1000.0,
    "ubar": 1000000.0,
    "Pa": 100000.0,
    "hPa": 1000.0,
    "kPa": 100.0,
    "MPa": 0.1,
    "kg/cm2": 1.01972,
    "atm": 0.986923,
    "mmHg": 750.062,
    "mmH2O": 10197.162129779,
    "mH2O": 10.197162129779,
    "psi": 14.5038,
    "ftH2O": 33.455256555148,
    "inH2O": 401.865,
    "inHg": 29.53,
}

# Offsets relative to Celsius, not ratio factors.
TEMPERATURE: Dict[str, float] = {
    "C": 0,
    "F": 32,
    "K": -273.15,
    "R": 491.67,
}

DENSITY: Dict[str, float] = {
    "g/cm3": 1.0,
    "kg/dm3": 1.0,
    "t/m3": 1.0,
    "kg/m3": 1000.0,
    "lb/ft3": 62.42796,
    "lb/in3": 0.0361273,
}

ENERGY: Dict[str, float] = {
    "J": 1.0,
    "kJ": 0.001,
    "cal": 0.239006,
    "kcal": 0.000239006,
    "Wh": 0.000277778,
    "kWh": 2.77778e-7,
    "BTU": 0.000947817,
    "ft-lb": 0.737562,
}

# Specific (per mass) and molar energies share one table.
_SPECIFIC_ENERGY: Dict[str, float] = {
    "J/mol": 1.0,
    "kJ/mol": 0.001,
    "J/kmol": 1000.0,
    "cal/mol": 0.239005736,
    "kcal/mol": 0.0002390057,
    "kcal/kmol": 0.2390057,
    "cal/kmol": 239.0057,
    "J/kg": 1.0,
    "kJ/kg": 0.001,
    "cal/g": 0.000239006,
    "kcal/g": 2.39006e-7,
    "J/g": 0.001,
    "kJ/g": 1.0e-6,
    "cal/kg": 0.239006,
    "kcal/kg": 0.000239006,
}

GIBBS_FREE_ENERGY: Dict[str, float] = dict(_SPECIFIC_ENERGY)

ENTHALPY: Dict[str, float] = dict(_SPECIFIC_ENERGY)

HEAT_CAPACITY: Dict[str, float] = {
    "J/kg.K": 1.0,
    "kJ/kg.K": 0.001,
    "cal/kg.K": 0.239006,
    "kcal/kg.K": 0.000239006,
    "cal/g.K": 0.000239006,
    "J/g.K": 0.001,
    "kJ/g.K": 1.0e-6,
    "BTU/lb.F": 0.000238846,
    "J/mol.K": 1.0,
    "kJ/mol.K": 0.001,
    "cal/mol.K": 0.239005736,
    "kcal/mol.K": 0.0002390057,
    "cal/kmol.K": 239.0057,
    "kcal/kmol.K": 0.2390057,
    "J/kmol.K": 1000.0,
    "kJ/kmol.K": 1.0,
}

VOLUME: Dict[str, float] = {
    "m3": 1.0,
    "L": 1000.0,
    "cm3": 1000000.0,
    "dm3": 1000.0,
    "ft3": 35.3147,
    "in3": 61023.7,
    "gal(US)": 264.172,
    "gal(UK)": 219.969,
}

MASS: Dict[str, float] = {
    "kg": 1.0,
    "g": 1000.0,
    "mg": 1000000.0,
    "lb": 2.20462,
    "oz": 35.274,
    "t": 0.001,
    "st": 0.157473,
}

POWER: Dict[str, float] = {
    "W": 1.0,
    "kW": 0.001,
    "MW": 1e-6,
    "GW": 1e-9,
    "HP": 0.00134102,
    "BTU/h": 3.41214,
    "ft-lb/min": 0.737562,
}

LENGTH: Dict[str, float] = {
    "m": 1.0,
    "cm": 100.0,
    "mm": 1000.0,
    "km": 0.001,
    "ft": 3.28084,
    "in": 39.3701,
    "yd": 1.09361,
    "mi": 0.000621371,
}

FORCE: Dict[str, float] = {
    "N": 1.0,
    "kN": 0.001,
    "lbf": 0.224809,
    "kgf": 0.101972,
    "dyn": 100000,
    "ozf": 3.59694,
}

# Dynamic viscosity, base Pa.s.
VISCOSITY: Dict[str, float] = {
    "Pa.s": 1.0,
    "mPa.s": 1000.0,
    "kg/m.s": 1.0,
    "P": 10.0,
    "cP": 1000.0,
    "lb/ft.s": 0.671969,
    "lb/ft.h": 2419.088,
}

# Volumetric flow, base m3/s.
FLOW_RATE: Dict[str, float] = {
    "m3/s": 1.0,
    "m3/min": 60.0,
    "m3/h": 3600.0,
    "L/s": 1000.0,
    "L/min": 60000.0,
    "L/h": 3600000.0,
    "ft3/s": 35.3147,
    "ft3/min": 2118.882,
    "ft3/h": 127132.92,
    "gal(US)/min": 15850.32,
    "gal(UK)/min": 13198.14,
}

CUSTOM = "CUSTOM"
TEMPERATURE_TAG = "TEMPERATURE"

# Resolver priority: the first table holding both units wins.
REFERENCES: Mapping[str, ConversionTable] = MappingProxyType(
    {
        "PRESSURE": MappingProxyType(PRESSURE),
        "TEMPERATURE": MappingProxyType(TEMPERATURE),
        "DENSITY": MappingProxyType(DENSITY),
        "ENERGY": MappingProxyType(ENERGY),
        "GIBBS_FREE_ENERGY": MappingProxyType(GIBBS_FREE_ENERGY),
        "ENTHALPY": MappingProxyType(ENTHALPY),
        "HEAT_CAPACITY": MappingProxyType(HEAT_CAPACITY),
        "VOLUME": MappingProxyType(VOLUME),
        "MASS": MappingProxyType(MASS),
        "POWER": MappingProxyType(POWER),
        "LENGTH": MappingProxyType(LENGTH),
        "FORCE": MappingProxyType(FORCE),
        "VISCOSITY": MappingProxyType(VISCOSITY),
        "FLOW_RATE": MappingProxyType(FLOW_RATE),
    }
)

BUILTIN_REFERENCES: tuple[str, ...] = tuple(REFERENCES.keys())


def get_table(reference: str) -> ConversionTable:
    """Return the built-in table registered under ``reference``.

    Raises :class:`KeyError` for unknown tags; callers translate it.
    """

    return REFERENCES[reference]


__all__ = [
    "ConversionTable",
    "PRESSURE",
    "TEMPERATURE",
    "DENSITY",
    "ENERGY",
    "GIBBS_FREE_ENERGY",
    "ENTHALPY",
    "HEAT_CAPACITY",
    "VOLUME",
    "MASS",
    "POWER",
    "LENGTH",
    "FORCE",
    "VISCOSITY",
    "FLOW_RATE",
    "CUSTOM",
    "TEMPERATURE_TAG",
    "REFERENCES",
    "BUILTIN_REFERENCES",
    "get_table",
]
