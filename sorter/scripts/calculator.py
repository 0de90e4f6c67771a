"""
Package Sorting Calculator
==========================

Interactive CLI tool to classify a single package and show why.

Usage:
    python -m sorter.scripts.calculator
"""

from sorter.classify import classify_checked
from sorter.flags import BULKY, HEAVY
from sorter.models import Category, Centimeters, Kilograms, Package
from sorter.report import format_number
from sorter.version import VERSION


def get_user_input() -> Package:
    """Prompt user for package details."""
    print("\n=== Package Sorting Calculator ===")
    print(f"Version: {VERSION}\n")

    width = float(input("Width (cm): "))
    height = float(input("Height (cm): "))
    length = float(input("Length (cm): "))
    mass = float(input("Mass (kg): "))

    return Package(
        width=Centimeters(width),
        height=Centimeters(height),
        length=Centimeters(length),
        mass=Kilograms(mass),
    )


def print_results(package: Package, category: Category) -> None:
    """Print classification breakdown."""
    print("\n" + "=" * 50)
    print("CLASSIFICATION RESULTS")
    print("=" * 50)

    dims = "x".join(format_number(v) for v in (package.width, package.height, package.length))
    print(f"\nPackage: {dims} cm, {format_number(package.mass)} kg")
    print(f"Volume: {package.volume:,.0f} cm3")

    flags = [f"{f.name} ({f.description})" for f in (BULKY, HEAVY) if f.applies(package)]
    print(f"\nFlags: {', '.join(flags) if flags else 'None'}")

    print(f"\nCATEGORY: {category.value}")
    print()


def main():
    """Main entry point."""
    try:
        package = get_user_input()

        category = classify_checked(package.width, package.height, package.length, package.mass)

        print_results(package, category)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
