"""
Console Formatting

Renders packages for the scripts. Numbers print in their shortest positional
form with no trailing ".0" on whole values (50, 19.9, 10000000000000000).
"""

import math
from decimal import Decimal

from .models import Category


def format_number(value: float) -> str:
    """Shortest round-trip digits for a float, never in exponent notation."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    text = repr(value)
    if math.isinf(value):
        return text

    # repr switches to exponent form below 1e-4 and from 1e16
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_line(
    description: str,
    width: float,
    height: float,
    length: float,
    mass: float,
    category: Category,
) -> str:
    """One driver line: '<description>: <w>x<h>x<l> cm, <mass> kg -> <CATEGORY>'."""
    dims = "x".join(format_number(v) for v in (width, height, length))
    return f"{description}: {dims} cm, {format_number(mass)} kg -> {category.value}"
