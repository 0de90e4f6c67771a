"""
Frame Classifier

DataFrame in, DataFrame out. The same sorting rule as sorter.classify,
written as polars expressions. The output is the input DataFrame with
calculation columns and the category appended.

REQUIRED INPUT COLUMNS
----------------------
    width_cm            - Package width in centimeters
    height_cm           - Package height in centimeters
    length_cm           - Package length in centimeters
    mass_kg             - Package mass in kilograms

OUTPUT COLUMNS ADDED
--------------------
    supplement_packages() adds:
        - volume_cm3 (inputs cast to Float64)

    calculate() adds:
        - flag_* booleans (bulky, heavy)
        - category (STANDARD, SPECIAL or REJECTED)
        - sorter_version

USAGE
-----
    from sorter.calculate_categories import calculate_categories
    result = calculate_categories(df)
"""

import polars as pl

from .version import VERSION
from .flags import ALL, BULKY, HEAVY
from .models import Category
from .validation import require_columns


# =============================================================================
# COLUMNS
# =============================================================================

REQUIRED_INPUT_COLS = [
    "width_cm",             # Package width (centimeters)
    "height_cm",            # Package height (centimeters)
    "length_cm",            # Package length (centimeters)
    "mass_kg",              # Package mass (kilograms)
]

SUPPLEMENT_COLS = [
    "volume_cm3",           # W x H x L (cubic centimeters)
]

FLAG_COLS = [f.column() for f in ALL]
# flag_bulky, flag_heavy

CATEGORY_DTYPE = pl.Enum([c.value for c in Category])


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_categories(df: pl.DataFrame) -> pl.DataFrame:
    """
    Classify every package in a DataFrame.

    Args:
        df: Package DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with supplemented data, flags and category
    """
    df = supplement_packages(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT PACKAGES
# =============================================================================

def supplement_packages(df: pl.DataFrame) -> pl.DataFrame:
    """
    Cast inputs to Float64 and add the volume.

    Raises:
        ValueError: If a required column is missing or holds nulls
    """
    _require_columns(df, REQUIRED_INPUT_COLS)

    df = df.with_columns([pl.col(c).cast(pl.Float64) for c in REQUIRED_INPUT_COLS])

    # Same multiplication order as Package.volume
    return df.with_columns(
        (pl.col("width_cm") * pl.col("height_cm") * pl.col("length_cm"))
        .alias("volume_cm3")
    )


def _require_columns(df: pl.DataFrame, columns: list[str]) -> None:
    """Check required columns are present and fully populated."""
    require_columns(df, columns)

    null_count = df.select(pl.any_horizontal([pl.col(c).is_null() for c in columns]).sum()).item()
    if null_count:
        raise ValueError(
            f"{null_count} package(s) have missing dimensions or mass. "
            f"Check {', '.join(columns)} values."
        )


# =============================================================================
# CALCULATE
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Apply flags and decide categories for supplemented packages.

    Args:
        df: Supplemented package DataFrame from supplement_packages

    Returns:
        DataFrame with flag columns, category and version stamp

    Processing order:
        1. Flags     - each evaluated independently
        2. Category  - decided from the flag pair
        3. Version   - stamped on output
    """
    _require_columns(df, REQUIRED_INPUT_COLS + SUPPLEMENT_COLS)

    df = _apply_flags(df)
    df = _decide_category(df)
    df = _stamp_version(df)

    return df


def _apply_flags(df: pl.DataFrame) -> pl.DataFrame:
    """Add one boolean column per flag."""
    return df.with_columns([f.conditions().alias(f.column()) for f in ALL])


def _decide_category(df: pl.DataFrame) -> pl.DataFrame:
    """Map (flag_bulky, flag_heavy) to the category."""
    bulky = pl.col(BULKY.column())
    heavy = pl.col(HEAVY.column())

    return df.with_columns(
        pl.when(bulky & heavy)
        .then(pl.lit(Category.REJECTED.value))
        .when(bulky | heavy)
        .then(pl.lit(Category.SPECIAL.value))
        .otherwise(pl.lit(Category.STANDARD.value))
        .cast(CATEGORY_DTYPE)
        .alias("category")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp sorter version on output."""
    return df.with_columns(pl.lit(VERSION).alias("sorter_version"))


__all__ = [
    "calculate_categories",
    "supplement_packages",
    "calculate",
    "REQUIRED_INPUT_COLS",
    "SUPPLEMENT_COLS",
    "FLAG_COLS",
]
