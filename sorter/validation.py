"""
Input Guard

Optional pre-check that rejects negative or non-finite inputs before the
sorting rule runs. The rule itself accepts any float; callers that take
values from people or files use this guard first.
"""

import math

import polars as pl


INPUT_FIELDS = ("width", "height", "length", "mass")

INPUT_COLUMNS = {
    "width": "width_cm",
    "height": "height_cm",
    "length": "length_cm",
    "mass": "mass_kg",
}


class InvalidInput(ValueError):
    """A dimension or mass that the sorting line cannot measure."""

    def __init__(self, field: str, value, reason: str, rows: int | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        self.rows = rows
        if rows is None:
            message = f"{field} {reason}, got {value}"
        else:
            message = f"{field} {reason} in {rows} row(s)"
        super().__init__(message)


def require_columns(df: pl.DataFrame, columns: list[str]) -> None:
    """
    Check required columns are present.

    Raises:
        ValueError: Listing every missing column
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required column(s): {', '.join(missing)}")


def check_package(width: float, height: float, length: float, mass: float) -> None:
    """
    Fail fast on the first unusable value.

    Raises:
        InvalidInput: If any value is NaN, infinite or negative
    """
    for field, value in zip(INPUT_FIELDS, (width, height, length, mass)):
        if math.isnan(value):
            raise InvalidInput(field, value, "must be a number")
        if math.isinf(value):
            raise InvalidInput(field, value, "must be finite")
        if value < 0:
            raise InvalidInput(field, value, "must not be negative")


def check_packages(df: pl.DataFrame) -> None:
    """
    Frame form of check_package.

    Raises:
        ValueError: If a required column is missing
        InvalidInput: Naming the first column with null, NaN, infinite or
            negative values and the number of affected rows
    """
    require_columns(df, list(INPUT_COLUMNS.values()))

    for field, col in INPUT_COLUMNS.items():
        values = pl.col(col).cast(pl.Float64)
        # Null cells make the comparisons null, so they are counted explicitly
        bad = df.select(
            (
                values.is_null() |
                values.is_nan() |
                values.is_infinite() |
                (values < 0)
            ).fill_null(True).sum()
        ).item()
        if bad:
            raise InvalidInput(
                field,
                None,
                "must be a finite, non-negative number",
                rows=bad,
            )
