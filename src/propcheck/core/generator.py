"""Composable random-value generators.

A Generator wraps a sampling function that draws one value from an explicit
``random.Random`` handle. Generators are immutable and hold no state of their
own; composition is plain function composition, so each combinator layer
adds a constant amount of work per sample.

Usage:
    pairs = combine(integer(0, 10), string(3, alphanumeric_char))
    evens = integer_nonneg(100).filter(lambda n: n % 2 == 0)

    rng = random.Random(42)
    value = pairs.sample(rng)

Base constructors validate their arguments eagerly and raise
InvalidArgumentError; nothing is validated at sampling time.

Concurrency: a generator only touches the Random handle passed to
``sample``. Threads sharing one handle need external locking; giving each
thread its own handle needs none.
"""

from __future__ import annotations

import math
import random as random_module
import string as string_module
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from propcheck.contracts.errors import FilterExhaustedError, InvalidArgumentError
from propcheck.core.logging import get_logger

logger = get_logger(__name__)

ALPHANUMERIC = string_module.ascii_lowercase + string_module.ascii_uppercase + string_module.digits


@dataclass(frozen=True, slots=True)
class Generator[T]:
    """Producer of random values of type T.

    Attributes:
        draw: Sampling function taking the random source to draw from.
    """

    draw: Callable[[random_module.Random], T]

    def sample(self, rng: random_module.Random | None = None) -> T:
        """Draw one value.

        Args:
            rng: Random source (default: a fresh, unseeded Random instance).
        """
        return self.draw(rng if rng is not None else random_module.Random())

    def samples(self, count: int, rng: random_module.Random | None = None) -> Iterator[T]:
        """Yield ``count`` values drawn from a single random source."""
        if count < 0:
            raise InvalidArgumentError(f"Sample count must be >= 0, got {count}")
        source = rng if rng is not None else random_module.Random()
        for _ in range(count):
            yield self.draw(source)

    def map[U](self, f: Callable[[T], U]) -> Generator[U]:
        """Post-process every sample with ``f``."""
        draw = self.draw
        return Generator(lambda rng: f(draw(rng)))

    def filter(self, predicate: Callable[[T], bool], *, max_attempts: int | None = None) -> Generator[T]:
        """Resample until ``predicate`` holds.

        With the default ``max_attempts=None`` there is no retry cap: if the
        predicate's satisfying set has zero (or vanishing) probability mass,
        sampling never returns. Pass ``max_attempts`` to surface that case as
        FilterExhaustedError instead.

        Raises:
            InvalidArgumentError: If max_attempts is given and < 1.
        """
        if max_attempts is not None and max_attempts < 1:
            raise InvalidArgumentError(f"max_attempts must be >= 1, got {max_attempts}")
        draw = self.draw

        def filtered(rng: random_module.Random) -> T:
            attempts = 0
            while max_attempts is None or attempts < max_attempts:
                value = draw(rng)
                if predicate(value):
                    return value
                attempts += 1
            logger.warning("filter_exhausted", attempts=attempts)
            raise FilterExhaustedError(attempts)

        return Generator(filtered)

    def partitioned_map[U](
        self,
        predicate: Callable[[T], bool],
        branches: tuple[Callable[[T], U], Callable[[T], U]],
    ) -> Generator[U]:
        """Apply the first branch to samples satisfying ``predicate``, the second otherwise."""
        on_true, on_false = branches
        draw = self.draw

        def partitioned(rng: random_module.Random) -> U:
            value = draw(rng)
            return on_true(value) if predicate(value) else on_false(value)

        return Generator(partitioned)


# =============================================================================
# Base Generators
# =============================================================================


def constant[T](value: T) -> Generator[T]:
    """Generator that always returns ``value``."""
    return Generator(lambda rng: value)


def boolean(probability: float = 0.5) -> Generator[bool]:
    """True with the given probability, decided independently per sample.

    Raises:
        InvalidArgumentError: If probability is outside [0, 1].
    """
    if not 0.0 <= probability <= 1.0:
        raise InvalidArgumentError(f"Probability must be in [0, 1], got {probability}")
    return Generator(lambda rng: rng.random() < probability)


def integer(low: int, high: int) -> Generator[int]:
    """Uniform integer in [low, high] inclusive.

    Raises:
        InvalidArgumentError: If low > high.
    """
    if low > high:
        raise InvalidArgumentError(f"Lower bound {low} exceeds upper bound {high}")
    return Generator(lambda rng: rng.randint(low, high))


def integer_nonneg(high: int) -> Generator[int]:
    """Uniform integer in [0, high] inclusive.

    Raises:
        InvalidArgumentError: If high < 0.
    """
    if high < 0:
        raise InvalidArgumentError(f"Upper bound must be >= 0, got {high}")
    return integer(0, high)


def floating(low: float, high: float) -> Generator[float]:
    """Uniform float in [low, high].

    Raises:
        InvalidArgumentError: If a bound is not finite or low > high.
    """
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidArgumentError(f"Float bounds must be finite, got [{low}, {high}]")
    if low > high:
        raise InvalidArgumentError(f"Lower bound {low} exceeds upper bound {high}")
    width = high - low
    wide = not math.isfinite(width)

    def draw(rng: random_module.Random) -> float:
        r = rng.random()
        # Bounds near +/-max float overflow the width but not each term
        value = low * (1.0 - r) + high * r if wide else low + width * r
        # Rounding may land just outside the interval for some bounds
        return min(max(value, low), high)

    return Generator(draw)


def floating_nonneg(high: float) -> Generator[float]:
    """Uniform float in [0, high].

    Raises:
        InvalidArgumentError: If high is negative or not finite.
    """
    if not math.isfinite(high) or high < 0:
        raise InvalidArgumentError(f"Upper bound must be finite and >= 0, got {high}")
    return floating(0.0, high)


char: Generator[str] = Generator(lambda rng: chr(rng.randrange(256)))
"""Uniform character with code point 0..255."""

alphanumeric_char: Generator[str] = Generator(lambda rng: rng.choice(ALPHANUMERIC))
"""Uniform character from [a-zA-Z0-9]."""


# =============================================================================
# Composite Generators
# =============================================================================


def string(length: int, char_gen: Generator[str]) -> Generator[str]:
    """String of exactly ``length`` characters, each drawn from ``char_gen``.

    Raises:
        InvalidArgumentError: If length < 0.
    """
    if length < 0:
        raise InvalidArgumentError(f"String length must be >= 0, got {length}")
    draw = char_gen.draw
    return Generator(lambda rng: "".join(draw(rng) for _ in range(length)))


def list_of[T](length: int, elem_gen: Generator[T]) -> Generator[list[T]]:
    """List of exactly ``length`` independent samples of ``elem_gen``.

    Raises:
        InvalidArgumentError: If length < 0.
    """
    if length < 0:
        raise InvalidArgumentError(f"List length must be >= 0, got {length}")
    draw = elem_gen.draw
    return Generator(lambda rng: [draw(rng) for _ in range(length)])


def combine[A, B](first: Generator[A], second: Generator[B]) -> Generator[tuple[A, B]]:
    """Pair generator: samples ``first`` then ``second`` from the same source."""
    draw_first = first.draw
    draw_second = second.draw

    def pair(rng: random_module.Random) -> tuple[A, B]:
        a = draw_first(rng)
        return a, draw_second(rng)

    return Generator(pair)
