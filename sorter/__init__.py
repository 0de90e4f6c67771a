"""
Package Sorter

Sorts packages into STANDARD, SPECIAL or REJECTED handling from their
dimensions (cm) and mass (kg).

Structure:
    - classify: The scalar sorting rule
    - calculate_categories: The same rule over a polars DataFrame
    - flags/: BULKY and HEAVY flag definitions
    - data/reference/: Fixed thresholds and sample packages
    - scripts/: Console driver and interactive calculator
"""

from .models import Category, Centimeters, Kilograms, Package
from .classify import classify, classify_package, classify_checked, decide
from .validation import InvalidInput, check_package
from .version import VERSION

__all__ = [
    "Category",
    "Centimeters",
    "Kilograms",
    "Package",
    "classify",
    "classify_package",
    "classify_checked",
    "decide",
    "InvalidInput",
    "check_package",
    "VERSION",
]
