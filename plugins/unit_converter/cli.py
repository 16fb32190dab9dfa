"""Command line interface for the Unit Converter plugin."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .core import UnitConverter, UnitConverterError, get_info, go, list_references
from .core.lookup import find_unit, get_reference_units


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def command_info(args: argparse.Namespace) -> None:
    _print(get_info().to_dict())


def command_references(args: argparse.Namespace) -> None:
    _print({"references": list_references()})


def _converter(args: argparse.Namespace) -> UnitConverter:
    return go(args.custom_units)


def command_show(args: argparse.Namespace) -> None:
    units = _converter(args).check_reference(args.tag, as_object=args.object)
    _print({"reference": args.tag.upper(), "units": units})


def command_units(args: argparse.Namespace) -> None:
    units = get_reference_units(args.tag, _converter(args).namespace)
    _print({"reference": args.tag.upper(), "units": units})


def command_convert(args: argparse.Namespace) -> None:
    converter = _converter(args)
    value = converter.convert(args.value, args.from_unit, args.to_unit, args.reference)
    _print({"value": value, "from_unit": args.from_unit, "to_unit": args.to_unit})


def command_to(args: argparse.Namespace) -> None:
    converter = _converter(args)
    block = converter.check_conversion_block(args.block)
    value = converter.to(args.value, args.block, args.reference)
    _print({"value": value, "from_unit": block.from_unit, "to_unit": block.to_unit})


def command_find(args: argparse.Namespace) -> None:
    lookup = find_unit(args.unit, _converter(args).namespace)
    _print({"unit": args.unit, **lookup.to_dict()})


def _add_custom_units_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--custom-units", dest="custom_units", help="YAML file with a CUSTOM-UNIT mapping"
    )


def _add_conversion_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--reference", help="Pin the reference type (e.g. PRESSURE)")
    _add_custom_units_option(parser)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unit Converter CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="Show package metadata")
    info_parser.set_defaults(func=command_info)

    refs_parser = subparsers.add_parser("references", help="List reference types")
    refs_parser.set_defaults(func=command_references)

    show_parser = subparsers.add_parser("show", help="Show the units of a reference")
    show_parser.add_argument("tag", help="Reference tag (e.g. pressure)")
    show_parser.add_argument("--object", action="store_true", help="Print a unit -> factor mapping")
    _add_custom_units_option(show_parser)
    show_parser.set_defaults(func=command_show)

    units_parser = subparsers.add_parser("units", help="List unit symbols of a reference")
    units_parser.add_argument("tag", help="Reference tag")
    _add_custom_units_option(units_parser)
    units_parser.set_defaults(func=command_units)

    convert_parser = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_parser.add_argument("value", type=float)
    convert_parser.add_argument("from_unit")
    convert_parser.add_argument("to_unit")
    _add_conversion_options(convert_parser)
    convert_parser.set_defaults(func=command_convert)

    to_parser = subparsers.add_parser("to", help="Convert using a 'from => to' block")
    to_parser.add_argument("value", type=float)
    to_parser.add_argument("block", help="Conversion block, e.g. 'bar => psi'")
    _add_conversion_options(to_parser)
    to_parser.set_defaults(func=command_to)

    find_parser = subparsers.add_parser("find", help="Find the reference holding a unit")
    find_parser.add_argument("unit")
    _add_custom_units_option(find_parser)
    find_parser.set_defaults(func=command_find)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except UnitConverterError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
