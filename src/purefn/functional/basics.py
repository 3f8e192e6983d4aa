"""Pure building blocks and the map/filter/reduce trio.

Every function here returns a value computed only from its arguments and leaves
those arguments untouched. The list helpers are eager so results can be compared
and printed directly.

Examples:
    >>> from purefn.functional.basics import add, filter_even, map_double, total
    >>> add(3, 4)
    7
    >>> filter_even([1, 2, 3])
    [2]
    >>> map_double([1, 2, 3])
    [2, 4, 6]
    >>> total([1, 2, 3])
    6
"""

import typing as tp
from functools import reduce

__all__ = [
    "add",
    "is_even",
    "double",
    "sum_",
    "map_data",
    "filter_data",
    "reduce_data",
    "filter_even",
    "map_double",
    "total",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")

_MISSING = object()


def add(a, b):
    """Return ``a + b``."""
    return a + b


def is_even(x: int) -> bool:
    return x % 2 == 0


def double(x):
    return 2 * x


def sum_(acc, x):
    """Accumulator step for a running sum."""
    return acc + x


def map_data(func: tp.Callable[[T], U], data: tp.Iterable[T]) -> list[U]:
    return list(map(func, data))


def filter_data(predicate: tp.Callable[[T], bool], data: tp.Iterable[T]) -> list[T]:
    return list(filter(predicate, data))


def reduce_data(
    func: tp.Callable[[U, T], U], data: tp.Iterable[T], initial: tp.Any = _MISSING
) -> U:
    """Fold ``data`` with ``func``.

    Without ``initial`` this behaves like :func:`functools.reduce` and raises
    ``TypeError`` on an empty iterable.
    """
    if initial is _MISSING:
        return reduce(func, data)
    return reduce(func, data, initial)


def filter_even(data: tp.Iterable[int]) -> list[int]:
    return filter_data(is_even, data)


def map_double(data: tp.Iterable) -> list:
    return map_data(double, data)


def total(data: tp.Iterable):
    """Sum ``data`` by folding with :func:`sum_`, starting from 0."""
    return reduce_data(sum_, data, 0)
