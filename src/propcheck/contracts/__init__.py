"""Shared contracts: error taxonomy and result types.

This package is a LEAF MODULE with no outbound dependencies to core/engine.

Import patterns:
    from propcheck.contracts import InvalidArgumentError, CheckResult
"""

from propcheck.contracts.errors import (
    FilterExhaustedError,
    InvalidArgumentError,
    PropcheckError,
    PropertyFailedError,
)
from propcheck.contracts.results import CheckResult

__all__ = [
    "CheckResult",
    "FilterExhaustedError",
    "InvalidArgumentError",
    "PropcheckError",
    "PropertyFailedError",
]
