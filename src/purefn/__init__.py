"""Pure functional-programming primitives and their worked examples."""

__version__ = "0.1.0"
