"""
Package Classifier

The sorting rule. Pure and total over floats: no I/O, no state, no errors.

RULES
-----
    bulky   - volume >= 1,000,000 cm3, or any side >= 150 cm
    heavy   - mass >= 20 kg

    bulky   heavy   category
    -----   -----   --------
    yes     yes     REJECTED
    yes     no      SPECIAL
    no      yes     SPECIAL
    no      no      STANDARD

All comparisons are inclusive and use plain float arithmetic. NaN never
meets a threshold, so a NaN side or mass only matters if another value
triggers the same flag.

USAGE
-----
    from sorter import classify
    classify(100, 100, 100, 10)    # Category.SPECIAL
"""

from .flags import BULKY, HEAVY
from .models import Category, Centimeters, Kilograms, Package
from .validation import check_package


DECISION_TABLE = {
    (True, True): Category.REJECTED,
    (True, False): Category.SPECIAL,
    (False, True): Category.SPECIAL,
    (False, False): Category.STANDARD,
}


def decide(is_bulky: bool, is_heavy: bool) -> Category:
    """Map the flag pair to a category."""
    return DECISION_TABLE[(is_bulky, is_heavy)]


def classify_package(package: Package) -> Category:
    """Classify a Package."""
    return decide(BULKY.applies(package), HEAVY.applies(package))


def classify(width: float, height: float, length: float, mass: float) -> Category:
    """
    Classify a package from its dimensions and mass.

    Args:
        width: Width in centimeters
        height: Height in centimeters
        length: Length in centimeters
        mass: Mass in kilograms

    Returns:
        Category.STANDARD, Category.SPECIAL or Category.REJECTED
    """
    package = Package(
        width=Centimeters(float(width)),
        height=Centimeters(float(height)),
        length=Centimeters(float(length)),
        mass=Kilograms(float(mass)),
    )
    return classify_package(package)


def classify_checked(width: float, height: float, length: float, mass: float) -> Category:
    """
    Classify after rejecting negative or non-finite inputs.

    Raises:
        InvalidInput: If any value is NaN, infinite or negative
    """
    check_package(width, height, length, mass)
    return classify(width, height, length, mass)


__all__ = [
    "DECISION_TABLE",
    "decide",
    "classify",
    "classify_package",
    "classify_checked",
]
