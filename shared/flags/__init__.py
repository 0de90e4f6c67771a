"""
Shared Flags

Base class and utilities for package flags.
"""

from .base import Flag, at_least

__all__ = [
    "Flag",
    "at_least",
]
