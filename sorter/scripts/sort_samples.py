"""
Package Sorting Samples
=======================

Prints the handling category for each labeled sample package, or for a
single package given on the command line.

Usage:
    python -m sorter.scripts.sort_samples
    python -m sorter.scripts.sort_samples --width 160 --height 50 --length 50 --mass 25
"""

import argparse

import polars as pl

from sorter.calculate_categories import calculate_categories
from sorter.classify import classify_checked
from sorter.data import load_samples
from sorter.models import Category
from sorter.report import format_line
from sorter.validation import InvalidInput


DIMENSION_ARGS = ("width", "height", "length", "mass")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sort packages into STANDARD, SPECIAL or REJECTED."
    )
    parser.add_argument("--width", type=float, help="Width in centimeters")
    parser.add_argument("--height", type=float, help="Height in centimeters")
    parser.add_argument("--length", type=float, help="Length in centimeters")
    parser.add_argument("--mass", type=float, help="Mass in kilograms")
    return parser


def parse_args(
    parser: argparse.ArgumentParser,
    argv: list[str] | None = None,
) -> argparse.Namespace:
    """Parse arguments; the four measurements come all together or not at all."""
    args = parser.parse_args(argv)

    given = [name for name in DIMENSION_ARGS if getattr(args, name) is not None]
    if given and len(given) != len(DIMENSION_ARGS):
        parser.error("--width, --height, --length and --mass must be given together")
    args.single = bool(given)

    return args


def sample_lines(df: pl.DataFrame) -> list[str]:
    """Format one driver line per classified sample row."""
    return [
        format_line(
            row["description"],
            row["width_cm"],
            row["height_cm"],
            row["length_cm"],
            row["mass_kg"],
            Category(row["category"]),
        )
        for row in df.iter_rows(named=True)
    ]


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parse_args(parser, argv)

    if not args.single:
        print("Package Sorting System\n")
        df = calculate_categories(load_samples())
        for line in sample_lines(df):
            print(line)
        return

    try:
        category = classify_checked(args.width, args.height, args.length, args.mass)
    except InvalidInput as e:
        parser.error(str(e))

    print("Package Sorting System\n")
    print(format_line("Package", args.width, args.height, args.length, args.mass, category))


if __name__ == "__main__":
    main()
