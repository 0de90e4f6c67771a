"""
Flags Package

Exports all flag classes.

Both flags are evaluated independently; the pair (bulky, heavy) decides the
category (see sorter.classify).
"""

import math

from shared.flags import Flag
from .bulky import BULKY
from .heavy import HEAVY


# All flags
ALL = [BULKY, HEAVY]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_flags(flags: list[type[Flag]] | None = None) -> None:
    """
    Validate flag configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    if flags is None:
        flags = ALL

    errors = []
    seen = set()

    for f in flags:
        # Check names are unique (they become column names)
        if f.name in seen:
            errors.append(f"{f.name}: duplicate flag name")
        seen.add(f.name)

        if not f.thresholds:
            errors.append(f"{f.name}: no thresholds defined")

        # Check thresholds are usable limits
        for key, value in f.thresholds.items():
            if not math.isfinite(value) or value <= 0:
                errors.append(f"{f.name}: threshold {key}={value} must be finite and positive")

    if errors:
        raise ValueError("Flag configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_flags()

__all__ = [
    # Flag classes
    "BULKY",
    "HEAVY",
    # Lists
    "ALL",
    # Helpers
    "validate_flags",
]
