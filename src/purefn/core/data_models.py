"""Models describing catalogue examples and the outcome of running them.

An :class:`Example` pairs a zero-argument thunk with the value the tutorial
says it produces. Running it yields an :class:`ExampleResult`, which records
the actual value (or the error raised) and whether it matched.
"""

from typing import Any, Callable, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import Concept

__all__ = ["Example", "ExampleResult", "values_match"]


def values_match(actual: Any, expected: Any) -> bool:
    """Equality that also works for NumPy and JAX arrays.

    Array-likes are compared elementwise with :func:`numpy.array_equal`.
    """
    if hasattr(actual, "__array__") or hasattr(expected, "__array__"):
        return bool(np.array_equal(np.asarray(actual), np.asarray(expected)))
    return bool(actual == expected)


class Example(BaseModel):
    """A single worked example with its stated result.

    Attributes:
        name: Short identifier, e.g. ``"add"``.
        concept: Concept the example illustrates.
        expression: Human-readable form of the call, e.g. ``"add(3, 4)"``.
        thunk: Zero-argument callable that evaluates the expression.
        expected: Value the expression must produce.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    concept: Concept
    expression: str
    thunk: Callable[[], Any] = Field(..., exclude=True)
    expected: Any


class ExampleResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    concept: Concept
    expression: str
    expected: Any
    actual: Any = None
    error: Optional[str] = Field(
        None, description="Exception text when the example raised."
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.error is None and values_match(self.actual, self.expected)
