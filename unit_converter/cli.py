"""Command-line interface for the unit converter."""

import argparse
import sys

from unit_converter.config import DISPLAY_DECIMALS
from unit_converter.converter import (
    ConversionError,
    convert,
    convert_to_all,
    format_result,
    get_categories,
    get_units,
    resolve_unit,
)


def _resolve_or_keep(name: str) -> str:
    # Unknown names are passed through so convert() reports them
    return resolve_unit(name) or name


# --- Command handlers ---

def cmd_convert(args):
    from_unit = _resolve_or_keep(args.from_unit)
    to_unit = _resolve_or_keep(args.to_unit)
    try:
        result = convert(args.value, from_unit, to_unit)
    except ConversionError as e:
        print(e)
        sys.exit(1)
    print(f"{format_result(result, args.decimals)} {to_unit}")


def cmd_units(args):
    categories = [args.category] if args.category else get_categories()
    for category in categories:
        print(f"{category.capitalize()}:")
        for unit in get_units(category):
            print(f"  {unit.label:<24}  {unit.factor:>12g}")


def cmd_table(args):
    from_unit = _resolve_or_keep(args.from_unit)
    try:
        results = convert_to_all(args.value, from_unit)
    except ConversionError as e:
        print(e)
        sys.exit(1)

    print(f"{args.value} {from_unit} =")
    for r in results:
        print(f"  {format_result(r.result, args.decimals):>16}  {r.to_unit}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="unit_converter",
        description="Convert values between length, weight and volume units",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- convert ---
    convert_p = subparsers.add_parser("convert", help="Convert a value")
    convert_p.add_argument("value", help="Numeric value to convert")
    convert_p.add_argument("from_unit", help='Source unit, e.g. "Meters (m)" or m')
    convert_p.add_argument("to_unit", help='Target unit, e.g. "Feet (ft)" or ft')
    convert_p.add_argument("--decimals", type=int, default=DISPLAY_DECIMALS)
    convert_p.set_defaults(func=cmd_convert)

    # --- units ---
    units_p = subparsers.add_parser("units", help="List available units")
    units_p.add_argument("--category", choices=get_categories())
    units_p.set_defaults(func=cmd_units)

    # --- table ---
    table_p = subparsers.add_parser("table", help="Show a value in every unit of its category")
    table_p.add_argument("value", help="Numeric value to convert")
    table_p.add_argument("from_unit", help="Source unit")
    table_p.add_argument("--decimals", type=int, default=DISPLAY_DECIMALS)
    table_p.set_defaults(func=cmd_table)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    args.func(args)
