"""Greedy property runner built on Generator.sample and Reduction.reduce.

The runner only consumes the two capabilities the core exposes: draw a
value, and propose simpler candidates for a value. Minimisation is greedy
descent: move to the first candidate (simplest first) that still fails, and
repeat until no candidate fails or the step budget is spent.

A property fails when it returns a falsy value or raises an Exception.
"""

from __future__ import annotations

import random as random_module
from collections.abc import Callable
from typing import Any

from propcheck.contracts.errors import PropertyFailedError
from propcheck.contracts.results import CheckResult
from propcheck.core.config import RunnerSettings
from propcheck.core.generator import Generator
from propcheck.core.logging import get_logger
from propcheck.core.reduction import Reduction, empty

logger = get_logger(__name__)

type Property[T] = Callable[[T], Any]


def _evaluate[T](prop: Property[T], value: T) -> tuple[bool, str | None]:
    """Run the property once. Returns (holds, repr of raised exception)."""
    try:
        return bool(prop(value)), None
    except Exception as exc:
        return False, repr(exc)


def minimise[T](
    prop: Property[T],
    value: T,
    reduction: Reduction[T],
    *,
    max_shrinks: int = 1000,
) -> tuple[T, int, str | None]:
    """Reduce a failing value to a local minimum.

    Args:
        prop: Property that ``value`` is known to violate.
        value: Failing value to start from.
        reduction: Strategy proposing simpler candidates.
        max_shrinks: Maximum successful reduction steps.

    Returns:
        (minimised value, steps taken, repr of the exception the minimised
        value raised, or None if it returned falsy).
    """
    _, error = _evaluate(prop, value)
    return _descend(prop, value, error, reduction, max_shrinks)


def _descend[T](
    prop: Property[T],
    value: T,
    error: str | None,
    reduction: Reduction[T],
    max_shrinks: int,
) -> tuple[T, int, str | None]:
    current = value
    steps = 0
    while steps < max_shrinks:
        for candidate in reduction.reduce(current):
            holds, candidate_error = _evaluate(prop, candidate)
            if not holds:
                current, error = candidate, candidate_error
                steps += 1
                logger.debug("shrink_step", step=steps, value=current)
                break
        else:
            break
    return current, steps, error


def check[T](
    prop: Property[T],
    generator: Generator[T],
    reduction: Reduction[T] | None = None,
    *,
    settings: RunnerSettings | None = None,
    rng: random_module.Random | None = None,
) -> CheckResult:
    """Sample examples until the property fails, then minimise the failure.

    Args:
        prop: Property under test.
        generator: Source of examples.
        reduction: Strategy used to minimise a failing example (default: none).
        settings: Runner settings (default: RunnerSettings()).
        rng: Random source (default: Random seeded from settings.seed).

    Returns:
        CheckResult describing the run.
    """
    settings = settings if settings is not None else RunnerSettings()
    reducer: Reduction[Any] = reduction if reduction is not None else empty
    source = rng if rng is not None else random_module.Random(settings.seed)

    logger.info(
        "property_check_started",
        max_examples=settings.max_examples,
        max_shrinks=settings.max_shrinks,
        seed=settings.seed,
        preset=settings.preset_name,
    )

    for examples_run, value in enumerate(generator.samples(settings.max_examples, source), start=1):
        holds, error = _evaluate(prop, value)
        if holds:
            continue

        logger.info("counterexample_found", example=examples_run, value=repr(value))
        minimal, steps, error = _descend(prop, value, error, reducer, settings.max_shrinks)
        logger.info(
            "property_check_finished",
            passed=False,
            examples_run=examples_run,
            shrink_steps=steps,
            counterexample=repr(minimal),
        )
        return CheckResult(
            passed=False,
            examples_run=examples_run,
            original=value,
            counterexample=minimal,
            shrink_steps=steps,
            error=error,
            seed=settings.seed,
        )

    logger.info("property_check_finished", passed=True, examples_run=settings.max_examples)
    return CheckResult(passed=True, examples_run=settings.max_examples, seed=settings.seed)


def assert_property[T](
    prop: Property[T],
    generator: Generator[T],
    reduction: Reduction[T] | None = None,
    *,
    settings: RunnerSettings | None = None,
    rng: random_module.Random | None = None,
) -> None:
    """Run check() and raise PropertyFailedError on failure.

    Raises:
        PropertyFailedError: With the minimised counterexample.
    """
    result = check(prop, generator, reduction, settings=settings, rng=rng)
    if not result.passed:
        raise PropertyFailedError(
            result.counterexample,
            original=result.original,
            shrink_steps=result.shrink_steps,
            seed=result.seed,
            error=result.error,
        )
