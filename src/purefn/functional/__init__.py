"""Functional primitives for purefn.

This package collects the pure functions, higher-order combinators and
recursive examples that illustrate functional programming in Python. Everything
here is stateless and side-effect-free except the counter-examples in
``purefn.functional.impure`` and the call logging done by ``with_log``.
"""

from purefn.functional.basics import (
    add,
    double,
    filter_data,
    filter_even,
    is_even,
    map_data,
    map_double,
    reduce_data,
    sum_,
    total,
)
from purefn.functional.combinators import (
    compose,
    curried_add,
    curry,
    identity,
    pipe,
    with_log,
)
from purefn.functional.recursion import duplicate, factorial, multiply, range_

__all__ = [
    "add",
    "double",
    "filter_data",
    "filter_even",
    "is_even",
    "map_data",
    "map_double",
    "reduce_data",
    "sum_",
    "total",
    "compose",
    "curried_add",
    "curry",
    "identity",
    "pipe",
    "with_log",
    "duplicate",
    "factorial",
    "multiply",
    "range_",
]
