"""
Sorter Data

Static reference data for the sorting rule.

Structure:
    - reference/thresholds.py: Bulky and heavy limits
    - reference/samples.py: Labeled sample packages for the console driver
"""

import polars as pl

from .reference.thresholds import VOLUME_CM3, DIMENSION_CM, MASS_KG
from .reference.samples import SAMPLES


def load_samples() -> pl.DataFrame:
    """
    Load the sample packages as a DataFrame.

    Returns:
        DataFrame with columns:
            - description: Label printed by the driver
            - width_cm, height_cm, length_cm: Dimensions (centimeters)
            - mass_kg: Mass (kilograms)
    """
    return pl.DataFrame(
        SAMPLES,
        schema={
            "description": pl.Utf8,
            "width_cm": pl.Float64,
            "height_cm": pl.Float64,
            "length_cm": pl.Float64,
            "mass_kg": pl.Float64,
        },
        orient="row",
    )


__all__ = [
    "VOLUME_CM3",
    "DIMENSION_CM",
    "MASS_KG",
    "SAMPLES",
    "load_samples",
]
