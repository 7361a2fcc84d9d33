"""Lazy candidate sequences shared by the reduction strategies.

Numeric reductions enumerate every simpler grid point bounded in magnitude
by the input. Materialising those as lists would cost memory proportional
to the magnitude, so they are exposed as read-only Sequences computed on
index. Ordering is by non-decreasing absolute value, positive before
negative:

    0, 1, -1, 2, -2, ..., m-1, -(m-1)[, m]

where the trailing ``m`` (the positive mirror of a negative input) is only
present when the input was negative.

Sizes are exact Python ints and may exceed ``sys.maxsize``, where ``len()``
raises OverflowError. Use :func:`extent` or the ``size`` property for an
unbounded count; truthiness and iteration never go through ``len()``.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from collections.abc import Iterator, Sequence
from fractions import Fraction
from typing import overload

# Largest index whose float conversion is exact
_EXACT_INDEX = 2**53


class LazySequence[T](Sequence[T]):
    """Read-only Sequence whose size is an exact, possibly huge, int."""

    __slots__ = ()

    @property
    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def _item(self, index: int) -> T: ...

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size > 0

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        size = self.size
        if isinstance(index, slice):
            return [self._item(i) for i in range(*index.indices(size))]
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("candidate index out of range")
        return self._item(index)

    def __iter__(self) -> Iterator[T]:
        for i in range(self.size):
            yield self._item(i)


def extent(candidates: Sequence[object]) -> int:
    """Number of candidates, without the ``sys.maxsize`` limit of ``len()``."""
    if isinstance(candidates, LazySequence):
        return candidates.size
    return len(candidates)


def _grid_point(index: int, step: float) -> float:
    if isinstance(step, int) or index <= _EXACT_INDEX:
        return index * step
    # index * step would convert index to float first, which can overflow
    return float(index * Fraction(step))


class SignedGrid(LazySequence[float]):
    """Signed grid points ``k * step`` with ``|k| < magnitude``, simplest first.

    Args:
        magnitude: Number of non-negative grid points strictly inside the bound.
        step: Grid spacing. Integer grids use step=1 and yield ints.
        mirror: Optional value appended after the grid (the positive mirror
            of a negative input).
    """

    __slots__ = ("_magnitude", "_mirror", "_size", "_step")

    def __init__(self, magnitude: int, step: float = 1, *, mirror: float | None = None) -> None:
        self._magnitude = max(magnitude, 0)
        self._step = step
        self._mirror = mirror
        inner = 2 * self._magnitude - 1 if self._magnitude > 0 else 0
        self._size = inner + (0 if mirror is None else 1)

    @property
    def size(self) -> int:
        return self._size

    def _item(self, index: int) -> float:
        if self._mirror is not None and index == self._size - 1:
            return self._mirror
        if index == 0:
            return 0 * self._step
        if index % 2:
            return _grid_point((index + 1) // 2, self._step)
        return -_grid_point(index // 2, self._step)

    def __repr__(self) -> str:
        return f"SignedGrid(magnitude={self._magnitude}, step={self._step}, mirror={self._mirror})"


class NonNegativeGrid(LazySequence[float]):
    """Grid points ``0, step, 2*step, ...``, ``count`` of them."""

    __slots__ = ("_count", "_step")

    def __init__(self, count: int, step: float = 1) -> None:
        self._count = max(count, 0)
        self._step = step

    @property
    def size(self) -> int:
        return self._count

    def _item(self, index: int) -> float:
        return _grid_point(index, self._step)

    def __repr__(self) -> str:
        return f"NonNegativeGrid(count={self._count}, step={self._step})"


class CrossProduct[A, B](LazySequence[tuple[A, B]]):
    """Ordered pairs ``(x, y)`` over both sequences, ``firsts`` varying slowest."""

    __slots__ = ("_firsts", "_seconds", "_width")

    def __init__(self, firsts: Sequence[A], seconds: Sequence[B]) -> None:
        self._firsts = firsts
        self._seconds = seconds
        self._width = extent(seconds)

    @property
    def size(self) -> int:
        return extent(self._firsts) * self._width if self._width else 0

    def _item(self, index: int) -> tuple[A, B]:
        row, column = divmod(index, self._width)
        return self._firsts[row], self._seconds[column]

    def __iter__(self) -> Iterator[tuple[A, B]]:
        if not self._width:
            return
        for x in self._firsts:
            for y in self._seconds:
                yield x, y

    def __repr__(self) -> str:
        return f"CrossProduct({self._firsts!r}, {self._seconds!r})"


def steps_below(bound: float, step: float) -> int:
    """Count grid points ``k * step`` (k >= 0) strictly below ``bound``.

    Counted in exact rational arithmetic against the largest float below
    ``bound``: the result never overflows, and no emitted grid point rounds
    up to the input value itself.

    >>> steps_below(1.0, 0.2)
    5
    >>> steps_below(0.0, 0.2)
    0
    """
    if bound <= 0:
        return 0
    below = math.nextafter(bound, 0.0)
    return math.floor(Fraction(below) / Fraction(step)) + 1
