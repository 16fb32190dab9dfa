from itertools import permutations

import pint
import pytest

from plugins.unit_converter.core.engine import convert_ratio, convert_temperature
from plugins.unit_converter.core.refs import (
    BUILTIN_REFERENCES,
    FORCE,
    REFERENCES,
    TEMPERATURE,
)

RATIO_REFERENCES = [tag for tag in BUILTIN_REFERENCES if tag != "TEMPERATURE"]


def test_builtin_references_follow_priority_order():
    assert BUILTIN_REFERENCES == (
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
    )


def test_builtin_tables_are_read_only():
    with pytest.raises(TypeError):
        REFERENCES["PRESSURE"]["bar"] = 2.0  # type: ignore[index]


@pytest.mark.parametrize("tag", RATIO_REFERENCES)
def test_every_ratio_table_has_a_base_unit(tag):
    assert 1.0 in REFERENCES[tag].values()


@pytest.mark.parametrize("tag", RATIO_REFERENCES)
def test_ratio_identity(tag):
    table = REFERENCES[tag]
    for unit in table:
        assert convert_ratio(123.456, unit, unit, table) == pytest.approx(123.456, rel=1e-12)


@pytest.mark.parametrize("tag", RATIO_REFERENCES)
def test_ratio_round_trip(tag):
    table = REFERENCES[tag]
    for source, target in permutations(table, 2):
        there = convert_ratio(42.5, source, target, table)
        assert convert_ratio(there, target, source, table) == pytest.approx(42.5, rel=1e-9)


def test_temperature_identity_and_round_trip():
    for unit in TEMPERATURE:
        assert convert_temperature(-12.5, unit, unit) == pytest.approx(-12.5, abs=1e-9)
    for source, target in permutations(TEMPERATURE, 2):
        there = convert_temperature(300.0, source, target)
        assert convert_temperature(there, target, source) == pytest.approx(300.0, abs=1e-9)


def test_force_ounce_is_a_sixteenth_of_pound_force():
    assert FORCE["ozf"] == pytest.approx(16 * FORCE["lbf"], rel=1e-5)


# Independent check of the transcribed factors: 1 <from> expressed in <to>.
PINT_CASES = [
    ("PRESSURE", "bar", "psi", "bar", "psi"),
    ("PRESSURE", "bar", "atm", "bar", "atm"),
    ("PRESSURE", "bar", "mmHg", "bar", "mmHg"),
    ("PRESSURE", "bar", "kg/cm2", "bar", "kgf/cm**2"),
    ("PRESSURE", "MPa", "kPa", "MPa", "kPa"),
    ("DENSITY", "g/cm3", "lb/ft3", "g/cm**3", "lb/ft**3"),
    ("DENSITY", "g/cm3", "kg/m3", "g/cm**3", "kg/m**3"),
    ("ENERGY", "J", "kWh", "J", "kWh"),
    ("ENERGY", "J", "cal", "J", "cal"),
    ("ENERGY", "J", "BTU", "J", "BTU"),
    ("ENERGY", "J", "ft-lb", "J", "foot * force_pound"),
    ("ENTHALPY", "J/kg", "kcal/kg", "J/kg", "kcal/kg"),
    ("HEAT_CAPACITY", "J/kg.K", "BTU/lb.F", "J/kg/K", "BTU/lb/degR"),
    ("VOLUME", "m3", "ft3", "m**3", "ft**3"),
    ("VOLUME", "m3", "gal(US)", "m**3", "gallon"),
    ("VOLUME", "m3", "gal(UK)", "m**3", "imperial_gallon"),
    ("MASS", "kg", "lb", "kg", "lb"),
    ("MASS", "kg", "oz", "kg", "oz"),
    ("MASS", "kg", "st", "kg", "stone"),
    ("MASS", "kg", "t", "kg", "tonne"),
    ("POWER", "W", "HP", "W", "hp"),
    ("POWER", "W", "BTU/h", "W", "BTU/hour"),
    ("LENGTH", "m", "ft", "m", "ft"),
    ("LENGTH", "m", "in", "m", "inch"),
    ("LENGTH", "m", "yd", "m", "yard"),
    ("LENGTH", "m", "mi", "m", "mile"),
    ("FORCE", "N", "lbf", "N", "lbf"),
    ("FORCE", "N", "kgf", "N", "kgf"),
    ("FORCE", "N", "dyn", "N", "dyne"),
    ("VISCOSITY", "Pa.s", "cP", "Pa*s", "centipoise"),
    ("VISCOSITY", "Pa.s", "lb/ft.s", "Pa*s", "pound/foot/second"),
    ("VISCOSITY", "Pa.s", "lb/ft.h", "Pa*s", "pound/foot/hour"),
    ("FLOW_RATE", "m3/s", "L/min", "m**3/s", "liter/minute"),
    ("FLOW_RATE", "m3/s", "ft3/h", "m**3/s", "ft**3/hour"),
    ("FLOW_RATE", "m3/s", "gal(US)/min", "m**3/s", "gallon/minute"),
    ("FLOW_RATE", "m3/s", "gal(UK)/min", "m**3/s", "imperial_gallon/minute"),
]


@pytest.fixture(scope="module")
def ureg():
    return pint.UnitRegistry()


@pytest.mark.parametrize("tag,source,target,pint_source,pint_target", PINT_CASES)
def test_table_factors_agree_with_pint(ureg, tag, source, target, pint_source, pint_target):
    ours = convert_ratio(1.0, source, target, REFERENCES[tag])
    expected = ureg.Quantity(1.0, pint_source).to(pint_target).magnitude
    assert ours == pytest.approx(expected, rel=1e-5)


@pytest.mark.parametrize(
    "value,source,target,pint_source,pint_target",
    [
        (100.0, "C", "F", "degC", "degF"),
        (358.0, "K", "C", "kelvin", "degC"),
        (0.0, "C", "R", "degC", "degR"),
        (-40.0, "F", "K", "degF", "kelvin"),
    ],
)
def test_temperature_agrees_with_pint(ureg, value, source, target, pint_source, pint_target):
    expected = ureg.Quantity(value, pint_source).to(pint_target).magnitude
    assert convert_temperature(value, source, target) == pytest.approx(expected, rel=1e-9)
