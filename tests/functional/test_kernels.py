import jax
import jax.numpy as jnp
import numpy as np
import pytest
from purefn.functional.kernels import (
    vmap_double,
    array_total,
    jit_factorial,
    array_filter,
)


def test_vmap_double():
    result = vmap_double(jnp.array([1, 2, 3]))
    assert isinstance(result, jax.Array)
    assert jnp.array_equal(result, jnp.array([2, 4, 6]))


def test_array_total():
    result = array_total(jnp.array([1, 2, 3]))
    assert result.shape == ()
    assert int(result) == 6


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (6, 720)])
def test_jit_factorial(n, expected):
    assert int(jit_factorial(n)) == expected


def test_jit_factorial_under_vmap():
    result = jax.vmap(jit_factorial)(jnp.arange(1, 6))
    assert jnp.array_equal(result, jnp.array([1, 2, 6, 24, 120]))


def test_array_filter_even():
    result = array_filter(lambda a: a % 2 == 0, [1, 2, 3, 4])
    assert isinstance(result, np.ndarray)
    np.testing.assert_array_equal(result, np.array([2, 4]))


def test_array_filter_rejects_bad_mask_shape():
    with pytest.raises(ValueError, match="shape"):
        array_filter(lambda a: np.array([True]), [1, 2, 3])


def test_jit_factorial_negative_returns_one():
    assert int(jit_factorial(-3)) == 1
