"""
Bulky Flag

Applies to packages that are too large for the standard conveyor.
Triggers on any of:
  1. Volume >= 1,000,000 cm3
  2. Width >= 150 cm
  3. Height >= 150 cm
  4. Length >= 150 cm
"""

import polars as pl
from shared.flags import Flag, at_least

from ..data import VOLUME_CM3, DIMENSION_CM


class BULKY(Flag):
    """Bulky - large by volume or by any single side."""

    # Identity
    name = "BULKY"
    description = "Volume >= 1,000,000 cm3 or any side >= 150 cm"

    # Thresholds
    VOLUME_CM3 = VOLUME_CM3
    DIMENSION_CM = DIMENSION_CM
    thresholds = {"VOLUME_CM3": VOLUME_CM3, "DIMENSION_CM": DIMENSION_CM}

    @classmethod
    def conditions(cls) -> pl.Expr:
        return (
            at_least("volume_cm3", cls.VOLUME_CM3) |
            at_least("width_cm", cls.DIMENSION_CM) |
            at_least("height_cm", cls.DIMENSION_CM) |
            at_least("length_cm", cls.DIMENSION_CM)
        )

    @classmethod
    def applies(cls, package) -> bool:
        return (
            package.volume >= cls.VOLUME_CM3
            or package.width >= cls.DIMENSION_CM
            or package.height >= cls.DIMENSION_CM
            or package.length >= cls.DIMENSION_CM
        )
