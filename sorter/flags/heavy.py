"""
Heavy Flag

Applies to packages with mass >= 20 kg.
"""

import polars as pl
from shared.flags import Flag, at_least

from ..data import MASS_KG


class HEAVY(Flag):
    """Heavy - mass at or over the manual handling limit."""

    # Identity
    name = "HEAVY"
    description = "Mass >= 20 kg"

    # Thresholds
    MASS_KG = MASS_KG
    thresholds = {"MASS_KG": MASS_KG}

    @classmethod
    def conditions(cls) -> pl.Expr:
        return at_least("mass_kg", cls.MASS_KG)

    @classmethod
    def applies(cls, package) -> bool:
        return package.mass >= cls.MASS_KG
