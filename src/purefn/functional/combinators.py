"""Higher-order functions: logging wrapper, currying and composition.

These utilities take functions as arguments and/or return new functions. None
of them keep state between calls; ``with_log`` writes to the project logger
but returns exactly what the wrapped function returns.

Examples:
    >>> curried_add(3)(4)
    7
    >>> inc_then_double = compose(lambda x: 2 * x, lambda x: x + 1)
    >>> inc_then_double(3)
    8
    >>> pipe(3, lambda x: x + 1, lambda x: 2 * x)
    8
"""

import inspect
import logging
import typing as tp
from functools import reduce, wraps

from purefn.core.config import get_settings
from purefn.logger.logger import logger

__all__ = [
    "identity",
    "with_log",
    "curried_add",
    "curry",
    "compose",
    "pipe",
]

F = tp.TypeVar("F", bound=tp.Callable[..., tp.Any])


def identity(x):
    return x


def with_log(fn: F) -> F:
    """Wrap ``fn`` so every call is logged before it is delegated.

    The level is read from ``Settings.LOG_CALLS_LEVEL`` at call time.
    """

    name = getattr(fn, "__name__", None) or repr(fn)

    @wraps(fn)
    def wrapper(*args, **kwargs):
        level = getattr(logging, get_settings().LOG_CALLS_LEVEL)
        logger.log(level, f"Calling {name} with args={args} kwargs={kwargs}")
        return fn(*args, **kwargs)

    return tp.cast(F, wrapper)


def curried_add(a):
    """Two-argument addition taken one argument at a time."""
    return lambda b: a + b


def _positional_arity(fn: tp.Callable) -> int:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot inspect signature of {fn!r}") from e

    arity = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            raise TypeError(f"Cannot curry {fn!r}: it takes *args")
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ) and param.default is inspect.Parameter.empty:
            arity += 1
    return arity


def curry(fn: tp.Callable) -> tp.Callable:
    """Curry ``fn`` over its required positional parameters.

    Each call to the curried function may bind one or more arguments; ``fn`` is
    invoked as soon as all required positional arguments are bound.

    Raises:
        TypeError: If ``fn`` accepts ``*args`` (its arity is unbounded).
    """
    arity = _positional_arity(fn)

    def curried(bound: tuple, bound_kw: dict):
        @wraps(fn)
        def step(*args, **kwargs):
            new_args = bound + args
            new_kw = {**bound_kw, **kwargs}
            if len(new_args) >= arity:
                return fn(*new_args, **new_kw)
            return curried(new_args, new_kw)

        return step

    return curried((), {})


def compose(*fns: tp.Callable) -> tp.Callable:
    """Compose functions right-to-left: ``compose(f, g)(x) == f(g(x))``."""
    return reduce(lambda f, g: lambda x: f(g(x)), fns, identity)


def pipe(value, *fns: tp.Callable):
    """Thread ``value`` through ``fns`` left-to-right."""
    return reduce(lambda acc, f: f(acc), fns, value)
