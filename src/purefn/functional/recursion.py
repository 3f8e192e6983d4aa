"""Recursive examples: string repetition, inclusive ranges and factorial.

Each function is written as a direct recursion on its arguments. Python does not
eliminate tail calls, so the depth a call would reach is checked against
``Settings.MAX_RECURSION_DEPTH`` before any recursion starts.

Examples:
    >>> duplicate("hooray!", 3)
    'hooray!hooray!hooray!'
    >>> range_(1, 5)
    [1, 2, 3, 4, 5]
    >>> factorial(5)
    120
"""

import sys
import typing as tp

from purefn.core.config import get_settings
from purefn.functional.basics import reduce_data
from purefn.functional.combinators import compose

__all__ = ["duplicate", "range_", "multiply", "factorial"]


# Frames left free for callers (test runners, the CLI, logging) above the recursion.
_FRAME_HEADROOM = 200


def _check_depth(depth: int, what: str) -> None:
    limit = min(
        get_settings().MAX_RECURSION_DEPTH,
        sys.getrecursionlimit() - _FRAME_HEADROOM,
    )
    if depth > limit:
        raise ValueError(
            f"{what} needs {depth} levels of recursion, limit is {limit}"
        )


def _duplicate(s: str, n: int) -> str:
    if n == 0:
        return ""
    return s + _duplicate(s, n - 1)


def duplicate(s: str, n: int) -> str:
    """Repeat ``s`` exactly ``n`` times.

    Args:
        s: String to repeat.
        n: Number of repetitions, must be non-negative.

    Returns:
        ``s`` concatenated with itself ``n`` times, ``""`` when ``n`` is 0.

    Raises:
        ValueError: If ``n`` is negative or deeper than the recursion limit.
    """
    if n < 0:
        raise ValueError(f"duplicate count must be non-negative, got {n}")
    _check_depth(n, "duplicate")
    return _duplicate(s, n)


def _range(a: int, b: int, acc: list[int]) -> list[int]:
    # acc is owned by this recursion; appending keeps each level O(1)
    if a > b:
        return acc
    acc.append(a)
    return _range(a + 1, b, acc)


def range_(a: int, b: int) -> list[int]:
    """Inclusive integer range ``[a, a + 1, ..., b]``; empty when ``a > b``."""
    _check_depth(max(b - a + 1, 0), "range_")
    return _range(a, b, [])


def multiply(xs: tp.Iterable):
    """Product of ``xs``; the empty product is 1."""
    return reduce_data(lambda acc, x: acc * x, xs, 1)


def _one_to(n: int) -> list[int]:
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n, got {n}")
    return range_(1, n)


factorial: tp.Callable[[int], int] = compose(multiply, _one_to)
factorial.__name__ = "factorial"
factorial.__doc__ = "``n!`` computed as ``multiply(range_(1, n))``."
