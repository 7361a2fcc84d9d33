"""Reduction (shrinking) strategies paired with the base generators.

A Reduction maps a value to a finite sequence of simpler candidates of the
same type. Every strategy here keeps three invariants:

- candidates are ordered simplest-first
- the input value itself is never a candidate
- every candidate is a value the paired generator could have produced

Numeric strategies use one discipline throughout: enumerate every simpler
grid point bounded in magnitude by the input, ordered by non-decreasing
absolute value with positive before negative. Their results are lazy
Sequences (see propcheck.core.numeric), so reducing a large magnitude costs
no memory up front.

Composite strategies substitute one position at a time. Reducing a list or
string never changes its length and never produces the cross-product of
substitutions, so the candidate count is linear in (length x candidates
per element). ``combine`` is the exception: it is a pure ordered
cross-product of both sides.

Every strategy is total on its domain and never raises.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from propcheck.contracts.errors import InvalidArgumentError
from propcheck.core.numeric import CrossProduct, NonNegativeGrid, SignedGrid, steps_below

DEFAULT_FLOAT_STEP = 0.2

# Inclusive code point ranges a character can be reduced within.
_LOWERCASE = (ord("a"), ord("z"))
_UPPERCASE = (ord("A"), ord("Z"))
_DIGITS = (ord("0"), ord("9"))


@dataclass(frozen=True, slots=True)
class Reduction[T]:
    """Strategy proposing simpler candidates for a value of type T.

    Attributes:
        candidates: Pure function from a value to its candidates, simplest first.
    """

    candidates: Callable[[T], Sequence[T]]

    def reduce(self, value: T) -> Sequence[T]:
        """Propose simpler candidates for ``value``, simplest first."""
        return self.candidates(value)

    def filter(self, predicate: Callable[[T], bool]) -> Reduction[T]:
        """Keep only candidates satisfying ``predicate``, order preserved."""
        candidates = self.candidates
        return Reduction(lambda value: [c for c in candidates(value) if predicate(c)])


# =============================================================================
# Base Strategies
# =============================================================================


def _no_candidates[T](value: T) -> Sequence[T]:
    return ()


def _reduce_boolean(b: bool) -> Sequence[bool]:
    return [False] if b else []


def _reduce_integer(n: int) -> Sequence[int]:
    # Negative inputs may also move to their positive mirror.
    return SignedGrid(abs(n), mirror=-n if n < 0 else None)  # type: ignore[return-value]


def _reduce_integer_nonneg(n: int) -> Sequence[int]:
    return NonNegativeGrid(n)  # type: ignore[return-value]


def floating_grid(step: float = DEFAULT_FLOAT_STEP) -> Reduction[float]:
    """Signed float strategy on a grid of spacing ``step``.

    Candidates are ``k * step`` with ``|k * step| < |x|``, plus ``-x`` last
    when x is negative. Non-finite values have no candidates.

    Raises:
        InvalidArgumentError: If step is not positive and finite.
    """
    _check_step(step)

    def reduce_floating(x: float) -> Sequence[float]:
        if not math.isfinite(x):
            return ()
        magnitude = steps_below(abs(x), step)
        return SignedGrid(magnitude, step, mirror=-x if x < 0 else None)

    return Reduction(reduce_floating)


def floating_nonneg_grid(step: float = DEFAULT_FLOAT_STEP) -> Reduction[float]:
    """Non-negative float strategy: ``0, step, 2*step, ...`` strictly below x.

    Raises:
        InvalidArgumentError: If step is not positive and finite.
    """
    _check_step(step)

    def reduce_floating_nonneg(x: float) -> Sequence[float]:
        if not math.isfinite(x):
            return ()
        return NonNegativeGrid(steps_below(x, step), step)

    return Reduction(reduce_floating_nonneg)


def _check_step(step: float) -> None:
    if not math.isfinite(step) or step <= 0:
        raise InvalidArgumentError(f"Grid step must be positive and finite, got {step}")


def _letters_below(c: str, ranges: tuple[tuple[int, int], ...]) -> Sequence[str]:
    """Characters from the start of c's range up to (excluding) c."""
    if len(c) != 1:
        return ()
    code = ord(c)
    for start, end in ranges:
        if start <= code <= end:
            return [chr(point) for point in range(start, code)]
    return ()


def _reduce_char(c: str) -> Sequence[str]:
    return _letters_below(c, (_UPPERCASE, _LOWERCASE))


def _reduce_alphanum(c: str) -> Sequence[str]:
    return _letters_below(c, (_UPPERCASE, _LOWERCASE, _DIGITS))


empty: Reduction[object] = Reduction(_no_candidates)
boolean: Reduction[bool] = Reduction(_reduce_boolean)
integer: Reduction[int] = Reduction(_reduce_integer)
integer_nonneg: Reduction[int] = Reduction(_reduce_integer_nonneg)
floating: Reduction[float] = floating_grid()
floating_nonneg: Reduction[float] = floating_nonneg_grid()
char: Reduction[str] = Reduction(_reduce_char)
alphanum: Reduction[str] = Reduction(_reduce_alphanum)


# =============================================================================
# Composite Strategies
# =============================================================================


def string(char_red: Reduction[str]) -> Reduction[str]:
    """Reduce a string one character at a time.

    Position-major: for each position left to right, for each candidate of
    that character, emit the string with exactly that character replaced.
    """
    reduce_char = char_red.candidates

    def reduce_string(s: str) -> Sequence[str]:
        return [s[:i] + c + s[i + 1 :] for i, ch in enumerate(s) for c in reduce_char(ch)]

    return Reduction(reduce_string)


def list_of[T](elem_red: Reduction[T]) -> Reduction[list[T]]:
    """Reduce a list by substituting one element at a time.

    Position-major: for each position left to right, for each candidate of
    that element (simplest first), emit a full-length copy of the list with
    exactly that substitution. The list is never shortened.
    """
    reduce_elem = elem_red.candidates

    def reduce_list(values: list[T]) -> Sequence[list[T]]:
        return [[*values[:i], c, *values[i + 1 :]] for i, v in enumerate(values) for c in reduce_elem(v)]

    return Reduction(reduce_list)


def combine[A, B](first: Reduction[A], second: Reduction[B]) -> Reduction[tuple[A, B]]:
    """Ordered cross-product of both sides' candidates, ``first`` varying slowest.

    Neither side is ever held at its current value, so a pair whose
    components cannot both be reduced has no candidates. The product is
    lazy, so pairing two large numeric reductions costs no memory up front.
    """
    reduce_first = first.candidates
    reduce_second = second.candidates

    def reduce_pair(pair: tuple[A, B]) -> Sequence[tuple[A, B]]:
        a, b = pair
        return CrossProduct(reduce_first(a), reduce_second(b))

    return Reduction(reduce_pair)
