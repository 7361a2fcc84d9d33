"""Property runner: samples a generator, checks a property, minimises failures.

Example:
    from propcheck.core import generator as gen, reduction as red
    from propcheck.engine import check

    result = check(
        lambda xs: sum(xs) < 10,
        gen.list_of(3, gen.integer_nonneg(5)),
        red.list_of(red.integer_nonneg),
    )
    if not result.passed:
        print(result.counterexample)
"""

from propcheck.engine.runner import assert_property, check, minimise

__all__ = [
    "assert_property",
    "check",
    "minimise",
]
