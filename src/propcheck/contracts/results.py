"""Result type returned by the property runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a property check.

    Attributes:
        passed: True if every sampled example satisfied the property.
        examples_run: Number of examples sampled before stopping.
        original: First failing value (None when passed).
        counterexample: Minimised failing value (None when passed).
        shrink_steps: Successful reduction steps taken from original to counterexample.
        error: repr() of the exception raised by the property on the
               counterexample, or None if it simply returned False.
        seed: Seed used for the run, if one was configured.
    """

    passed: bool
    examples_run: int
    original: Any = None
    counterexample: Any = None
    shrink_steps: int = 0
    error: str | None = None
    seed: int | None = None
