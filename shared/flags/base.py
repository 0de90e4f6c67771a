"""
Flag Base Class

Shared base class for all package flags.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType

import polars as pl


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def at_least(col: str, threshold: float) -> pl.Expr:
    """
    Check if a column meets or exceeds a threshold (inclusive).

    Polars orders NaN above every number, so a plain `>=` would flag NaN
    values. NaN is excluded explicitly to keep IEEE-754 semantics, where
    NaN compared with anything is False.

    Args:
        col: Column name to compare
        threshold: Inclusive lower bound

    Returns:
        Polars expression evaluating to True if the value is >= threshold
    """
    return pl.col(col).is_not_nan() & (pl.col(col) >= threshold)


# =============================================================================
# BASE CLASS
# =============================================================================

class Flag(ABC):
    """
    Base class for all flags.

    Attributes:
        IDENTITY
            name        - Short code (e.g., "BULKY", "HEAVY")
            description - Human readable summary of the rule

        THRESHOLDS
            thresholds  - Mapping of threshold name to value, used for
                          configuration validation
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    description: str

    # -------------------------------------------------------------------------
    # THRESHOLDS
    # -------------------------------------------------------------------------
    thresholds: Mapping[str, float] = MappingProxyType({})

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def column(cls) -> str:
        """Name of the boolean column this flag writes."""
        return f"flag_{cls.name.lower()}"

    @classmethod
    @abstractmethod
    def conditions(cls) -> pl.Expr:
        """Polars expression for when this flag triggers."""

    @classmethod
    @abstractmethod
    def applies(cls, package) -> bool:
        """Scalar check of the same rule against a single package."""
