"""Array versions of the pure examples, compiled with JAX.

Pure functions can be traced once and compiled, because their output depends
only on their inputs. The kernels below are the array versions of ``double``,
the running sum and ``factorial``.

Filtering is the exception: the size of the result depends on the data, which
``jax.jit`` cannot trace, so ``array_filter`` applies a NumPy boolean mask
eagerly instead.

Examples:
    >>> import jax.numpy as jnp
    >>> vmap_double(jnp.array([1, 2, 3]))
    Array([2, 4, 6], dtype=int32)
    >>> int(jit_factorial(5))
    120
"""

import typing as tp

import jax
import jax.numpy as jnp
import numpy as np

from purefn.functional.basics import double

__all__ = ["vmap_double", "array_total", "jit_factorial", "array_filter"]


@jax.jit
def vmap_double(xs: jax.Array) -> jax.Array:
    """Apply :func:`double` to every element of ``xs``."""
    return jax.vmap(double)(xs)


@jax.jit
def array_total(xs: jax.Array) -> jax.Array:
    """Sum of ``xs`` as a scalar array."""
    return jnp.sum(xs)


@jax.jit
def jit_factorial(n: jax.Array) -> jax.Array:
    """``n!`` as a scalar integer array.

    The loop bound is traced, so one compiled kernel serves every ``n``.
    Values of ``n`` above 12 overflow int32.

    Negative ``n`` returns 1 because the loop body never runs; unlike
    :func:`purefn.functional.recursion.factorial` it cannot raise under jit.
    """
    return jax.lax.fori_loop(1, n + 1, lambda i, acc: acc * i, jnp.asarray(1))


def array_filter(
    predicate: tp.Callable[[np.ndarray], np.ndarray], xs: tp.Any
) -> np.ndarray:
    """Keep the elements of ``xs`` where the vectorised ``predicate`` holds.

    Args:
        predicate: Function mapping an array to a boolean array of the same
            shape, e.g. ``lambda a: a % 2 == 0``.
        xs: Array-like input.

    Returns:
        A new one-dimensional NumPy array.
    """
    arr = np.asarray(xs)
    mask = np.asarray(predicate(arr), dtype=bool)
    if mask.shape != arr.shape:
        raise ValueError(
            f"Predicate returned shape {mask.shape}, expected {arr.shape}"
        )
    return arr[mask]
