"""Parsing of ``"<from> => <to>"`` conversion blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ParseError

OPERATOR = "=>"

_BLOCK_RE = re.compile(r"^(.*?)\s*=>\s*(.*)$")


@dataclass(frozen=True, slots=True)
class ConversionBlock:
    """A parsed from/to unit pair."""

    from_unit: str
    operator: str
    to_unit: str


def parse_conversion_block(text: str) -> ConversionBlock:
    """Split ``text`` on the first ``=>`` into source and target units.

    Neither side is checked against the reference tables; that is left to
    the resolver.
    """

    if not isinstance(text, str):
        raise ParseError("Conversion block must be a string")
    match = _BLOCK_RE.match(text.strip())
    if match is None:
        raise ParseError(f"Input string does not contain '{OPERATOR}'")
    return ConversionBlock(
        from_unit=match.group(1).strip(),
        operator=OPERATOR,
        to_unit=match.group(2).strip(),
    )


__all__ = ["OPERATOR", "ConversionBlock", "parse_conversion_block"]
