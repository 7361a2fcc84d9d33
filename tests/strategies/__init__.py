# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import alphanumeric_chars, seeds, STANDARD_SETTINGS
"""

from tests.strategies.settings import QUICK_SETTINGS, SLOW_SETTINGS, STANDARD_SETTINGS
from tests.strategies.values import (
    alphanumeric_chars,
    alphanumeric_strings,
    byte_chars,
    finite_float_bounds,
    finite_floats,
    finite_nonneg_floats,
    float_steps,
    int_bounds,
    letters,
    nonneg_floats,
    nonneg_ints,
    seeds,
    signed_floats,
    signed_ints,
    small_lengths,
    wide_float_steps,
    wide_ints,
)

__all__ = [
    "QUICK_SETTINGS",
    "SLOW_SETTINGS",
    "STANDARD_SETTINGS",
    "alphanumeric_chars",
    "alphanumeric_strings",
    "byte_chars",
    "finite_float_bounds",
    "finite_floats",
    "finite_nonneg_floats",
    "float_steps",
    "int_bounds",
    "letters",
    "nonneg_floats",
    "nonneg_ints",
    "seeds",
    "signed_floats",
    "signed_ints",
    "small_lengths",
    "wide_float_steps",
    "wide_ints",
]
