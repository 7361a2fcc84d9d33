"""Error taxonomy for generators, reductions and the property runner.

Only precondition violations are errors. Reductions are total on their
domain and never raise; an uncapped filter that cannot be satisfied loops
rather than failing (see Generator.filter).
"""

from __future__ import annotations

from typing import Any


class PropcheckError(Exception):
    """Base class for all propcheck errors."""


class InvalidArgumentError(PropcheckError, ValueError):
    """Raised when a size, length, bound or probability precondition is violated.

    Raised synchronously at construction time (e.g. ``list_of(-1, gen)``),
    never deferred to sampling and never retried.
    """


class FilterExhaustedError(PropcheckError):
    """Raised when a capped filter spends its attempt budget without a match.

    Attributes:
        attempts: Number of samples drawn and rejected.
    """

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Filter predicate rejected {attempts} consecutive samples")


class PropertyFailedError(PropcheckError, AssertionError):
    """Raised by assert_property when a counterexample is found.

    Attributes:
        counterexample: Minimised failing value.
        original: First failing value before reduction.
        shrink_steps: Number of successful reduction steps taken.
        seed: Seed of the run, if one was configured.
    """

    def __init__(
        self,
        counterexample: Any,
        *,
        original: Any,
        shrink_steps: int,
        seed: int | None = None,
        error: str | None = None,
    ) -> None:
        self.counterexample = counterexample
        self.original = original
        self.shrink_steps = shrink_steps
        self.seed = seed
        self.error = error
        message = f"Property failed for {counterexample!r} (shrunk from {original!r} in {shrink_steps} steps)"
        if error is not None:
            message += f"; raised {error}"
        if seed is not None:
            message += f"; replay with seed={seed}"
        super().__init__(message)
