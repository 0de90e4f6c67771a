"""
Sorter Models

Typed inputs and the closed set of handling categories.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# Distinct nominal types so a length is never passed where a mass is expected
Centimeters = NewType("Centimeters", float)
Kilograms = NewType("Kilograms", float)


@dataclass(frozen=True, slots=True)
class Package:
    """A package as presented to the sorting line."""

    width: Centimeters
    height: Centimeters
    length: Centimeters
    mass: Kilograms

    @property
    def volume(self) -> float:
        """Width x height x length in cubic centimeters."""
        return self.width * self.height * self.length


class Category(str, Enum):
    """
    Handling category for a package.

    Values are the display strings written at the output boundary.
    """

    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"
    REJECTED = "REJECTED"

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Restrictiveness: STANDARD < SPECIAL < REJECTED."""
        return _RANKS[self]


_RANKS = {
    Category.STANDARD: 0,
    Category.SPECIAL: 1,
    Category.REJECTED: 2,
}
