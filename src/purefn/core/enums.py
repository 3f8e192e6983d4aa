"""Enumerations for the functional-programming concepts the examples illustrate."""

from enum import Enum


class Concept(Enum):
    """Concept a catalogue example demonstrates."""

    PURE = "pure"
    IMPURE = "impure"
    MAP_FILTER_REDUCE = "map_filter_reduce"
    RECURSION = "recursion"
    HIGHER_ORDER = "higher_order"
    CURRYING = "currying"
    COMPOSITION = "composition"

    @classmethod
    def from_name(cls, name: str) -> "Concept":
        """Look up a concept by value or member name, case-insensitively.

        Raises:
            ValueError: If ``name`` matches no concept.
        """
        key = name.strip().lower().replace("-", "_")
        for concept in cls:
            if key in (concept.value, concept.name.lower()):
                return concept
        choices = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown concept {name!r}, expected one of: {choices}")
