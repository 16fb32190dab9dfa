import pytest

from plugins.unit_converter.core.blocks import ConversionBlock, parse_conversion_block
from plugins.unit_converter.core.errors import ParseError


def test_parse_block_splits_on_operator():
    block = parse_conversion_block("bar => psi")
    assert block == ConversionBlock(from_unit="bar", operator="=>", to_unit="psi")


def test_parse_block_tolerates_missing_whitespace():
    block = parse_conversion_block("  W=>HP  ")
    assert block.from_unit == "W"
    assert block.to_unit == "HP"


def test_parse_block_keeps_compound_units():
    block = parse_conversion_block("kJ/mol.K => cal/mol.K")
    assert (block.from_unit, block.to_unit) == ("kJ/mol.K", "cal/mol.K")


def test_parse_block_does_not_validate_units():
    block = parse_conversion_block("=> psi")
    assert block.from_unit == ""
    assert block.to_unit == "psi"


@pytest.mark.parametrize("text", ["bar > psi", "bar psi", "", "bar = > psi"])
def test_parse_block_requires_operator(text):
    with pytest.raises(ParseError, match="does not contain '=>'"):
        parse_conversion_block(text)


def test_parse_block_rejects_non_string():
    with pytest.raises(ParseError):
        parse_conversion_block(None)  # type: ignore[arg-type]
