"""Catalogue of worked examples and the runner that checks them.

Every example states a call and the value it must produce. ``run_all`` evaluates
them in order and reports each outcome; a failing or raising example never
stops the run.
"""

import typing as tp

from purefn.core.data_models import Example, ExampleResult
from purefn.core.enums import Concept
from purefn.functional.basics import add, filter_even, map_double, total
from purefn.functional.combinators import compose, curried_add, curry, pipe, with_log
from purefn.functional.impure import Counter, append_in_place, appended
from purefn.functional.kernels import jit_factorial
from purefn.functional.recursion import duplicate, factorial, multiply, range_
from purefn.logger.logger import logger

__all__ = ["EXAMPLES", "run_example", "run_all"]


def _counter_twice() -> tuple[int, int]:
    counter = Counter()
    return counter.increment(), counter.increment()


def _append_effects() -> tuple[list[int], list[int]]:
    mutated = [1, 2]
    append_in_place(mutated, 3)
    kept = [1, 2]
    appended(kept, 3)
    return mutated, kept


EXAMPLES: tuple[Example, ...] = (
    Example(
        name="add",
        concept=Concept.PURE,
        expression="add(3, 4)",
        thunk=lambda: add(3, 4),
        expected=7,
    ),
    Example(
        name="impure_counter",
        concept=Concept.IMPURE,
        expression="counter.increment() twice",
        thunk=_counter_twice,
        expected=(1, 2),
    ),
    Example(
        name="append_vs_appended",
        concept=Concept.IMPURE,
        expression="append_in_place([1, 2], 3) vs appended([1, 2], 3)",
        thunk=_append_effects,
        expected=([1, 2, 3], [1, 2]),
    ),
    Example(
        name="filter_even",
        concept=Concept.MAP_FILTER_REDUCE,
        expression="[1, 2, 3].filter(is_even)",
        thunk=lambda: filter_even([1, 2, 3]),
        expected=[2],
    ),
    Example(
        name="map_double",
        concept=Concept.MAP_FILTER_REDUCE,
        expression="[1, 2, 3].map(x => 2 * x)",
        thunk=lambda: map_double([1, 2, 3]),
        expected=[2, 4, 6],
    ),
    Example(
        name="reduce_sum",
        concept=Concept.MAP_FILTER_REDUCE,
        expression="[1, 2, 3].reduce(sum)",
        thunk=lambda: total([1, 2, 3]),
        expected=6,
    ),
    Example(
        name="duplicate",
        concept=Concept.RECURSION,
        expression='duplicate("hooray!", 3)',
        thunk=lambda: duplicate("hooray!", 3),
        expected="hooray!hooray!hooray!",
    ),
    Example(
        name="range",
        concept=Concept.RECURSION,
        expression="range(1, 5)",
        thunk=lambda: range_(1, 5),
        expected=[1, 2, 3, 4, 5],
    ),
    Example(
        name="multiply_range",
        concept=Concept.RECURSION,
        expression="multiply(range(1, 5))",
        thunk=lambda: multiply(range_(1, 5)),
        expected=120,
    ),
    Example(
        name="with_log",
        concept=Concept.HIGHER_ORDER,
        expression="with_log(add)(3, 4)",
        thunk=lambda: with_log(add)(3, 4),
        expected=7,
    ),
    Example(
        name="curried_add",
        concept=Concept.CURRYING,
        expression="add(3)(4)",
        thunk=lambda: curried_add(3)(4),
        expected=7,
    ),
    Example(
        name="curry_add",
        concept=Concept.CURRYING,
        expression="curry(add)(3)(4)",
        thunk=lambda: curry(add)(3)(4),
        expected=7,
    ),
    Example(
        name="factorial_5",
        concept=Concept.COMPOSITION,
        expression="factorial(5)",
        thunk=lambda: factorial(5),
        expected=120,
    ),
    Example(
        name="factorial_6",
        concept=Concept.COMPOSITION,
        expression="factorial(6)",
        thunk=lambda: factorial(6),
        expected=720,
    ),
    Example(
        name="compose_filter_map_reduce",
        concept=Concept.COMPOSITION,
        expression="compose(total, map_double, filter_even)([1, 2, 3, 4])",
        thunk=lambda: compose(total, map_double, filter_even)([1, 2, 3, 4]),
        expected=12,
    ),
    Example(
        name="pipe",
        concept=Concept.COMPOSITION,
        expression="pipe(5, range(1, _), multiply)",
        thunk=lambda: pipe(5, lambda n: range_(1, n), multiply),
        expected=120,
    ),
    Example(
        name="jit_factorial",
        concept=Concept.PURE,
        expression="jax.jit(factorial)(5)",
        thunk=lambda: int(jit_factorial(5)),
        expected=120,
    ),
)


def run_example(example: Example) -> ExampleResult:
    """Evaluate ``example`` and compare the outcome with its expected value.

    Exceptions raised by the example, or while comparing its value with the
    expected one, are recorded on the result instead of propagating.
    """
    fields = dict(
        name=example.name,
        concept=example.concept,
        expression=example.expression,
        expected=example.expected,
    )
    try:
        actual = example.thunk()
        result = ExampleResult(**fields, actual=actual)
        passed = result.passed
    except Exception as e:
        logger.error(f"Example {example.name} raised: {e!r}")
        return ExampleResult(**fields, error=f"{type(e).__name__}: {e}")

    if not passed:
        logger.warning(
            f"Example {example.name}: expected {example.expected!r}, got {actual!r}"
        )
    return result


def run_all(
    concept: tp.Optional[Concept] = None,
    examples: tp.Iterable[Example] = EXAMPLES,
) -> list[ExampleResult]:
    """Run every example, or only those illustrating ``concept``."""
    selected = [e for e in examples if concept is None or e.concept is concept]
    logger.info(f"Running {len(selected)} examples")
    return [run_example(e) for e in selected]
