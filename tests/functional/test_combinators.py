import functools
import logging
from unittest.mock import patch

import pytest
from purefn.functional.basics import add, double, filter_even, map_double, total
from purefn.functional.combinators import (
    compose,
    curried_add,
    curry,
    identity,
    pipe,
    with_log,
)


def test_with_log_delegates_and_logs():
    with patch("purefn.functional.combinators.logger") as mock_logger:
        logged_add = with_log(add)
        assert logged_add(3, 4) == 7

    mock_logger.log.assert_called_once()
    level, message = mock_logger.log.call_args.args
    assert level == logging.DEBUG
    assert "add" in message
    assert "(3, 4)" in message


def test_with_log_uses_configured_level(monkeypatch):
    monkeypatch.setenv("PUREFN_LOG_CALLS_LEVEL", "info")
    with patch("purefn.functional.combinators.logger") as mock_logger:
        with_log(double)(2)
    assert mock_logger.log.call_args.args[0] == logging.INFO


def test_with_log_preserves_metadata():
    logged = with_log(add)
    assert logged.__name__ == "add"
    assert logged.__doc__ == add.__doc__
    assert logged.__wrapped__ is add


def test_with_log_propagates_errors():
    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        with_log(boom)()


def test_curried_add():
    add3 = curried_add(3)
    assert add3(4) == 7
    assert add3(10) == 13


def test_curry_one_argument_at_a_time():
    assert curry(add)(3)(4) == 7


def test_curry_all_at_once():
    assert curry(add)(3, 4) == 7


def test_curry_three_arguments():
    def volume(a, b, c):
        return a * b * c

    curried = curry(volume)
    assert curried(2)(3)(4) == 24
    assert curried(2, 3)(4) == 24
    assert curried(2)(3, 4) == 24


def test_curry_partial_applications_are_independent():
    curried = curry(add)
    add1 = curried(1)
    add10 = curried(10)
    assert add1(1) == 2
    assert add10(1) == 11


def test_curry_ignores_defaulted_parameters():
    def scale(x, factor=2):
        return x * factor

    assert curry(scale)(5) == 10


def test_curry_rejects_varargs():
    def anything(*args):
        return args

    with pytest.raises(TypeError, match=r"\*args"):
        curry(anything)


def test_compose_applies_right_to_left():
    inc = lambda x: x + 1  # noqa: E731
    assert compose(double, inc)(3) == 8
    assert compose(inc, double)(3) == 7


def test_compose_empty_is_identity():
    assert compose()(42) == 42
    assert identity("x") == "x"


def test_compose_list_pipeline():
    assert compose(total, map_double, filter_even)([1, 2, 3, 4]) == 12


def test_pipe_applies_left_to_right():
    inc = lambda x: x + 1  # noqa: E731
    assert pipe(3, inc, double) == 8
    assert pipe(3) == 3


def test_with_log_accepts_partial():
    add3 = functools.partial(add, 3)
    with patch("purefn.functional.combinators.logger") as mock_logger:
        assert with_log(add3)(4) == 7
    assert "functools.partial" in mock_logger.log.call_args.args[1]


def test_with_log_accepts_callable_instance():
    class Scale:
        def __call__(self, x):
            return 3 * x

    with patch("purefn.functional.combinators.logger"):
        assert with_log(Scale())(2) == 6
