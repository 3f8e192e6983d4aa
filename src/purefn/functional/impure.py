"""Impure counter-examples and their pure replacements.

``Counter.increment`` reads and writes state outside its arguments, and
``append_in_place`` mutates the list it is given. ``appended`` shows the pure
alternative: it returns a new list and leaves its input as it was.
"""

import typing as tp

__all__ = ["Counter", "append_in_place", "appended"]

T = tp.TypeVar("T")


class Counter:
    """Mutable counter; the same call returns a different value each time."""

    def __init__(self, start: int = 0):
        self.value = start

    def increment(self, by: int = 1) -> int:
        self.value += by
        return self.value


def append_in_place(items: list[T], x: T) -> list[T]:
    items.append(x)
    return items


def appended(items: tp.Sequence[T], x: T) -> list[T]:
    return [*items, x]
