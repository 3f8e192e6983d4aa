"""Core models, enums and settings shared across purefn."""

from purefn.core.config import Settings, get_settings
from purefn.core.data_models import Example, ExampleResult
from purefn.core.enums import Concept

__all__ = [
    "Settings",
    "get_settings",
    "Example",
    "ExampleResult",
    "Concept",
]
