"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the coursework exercises as value objects and pure functions.

Contents:
    * :mod:`.selectors` - Immutable CSS-like selector builder
    * :mod:`.strings` - String exercises
    * :mod:`.shapes` - Rectangle and Circle value objects
    * :mod:`.serialization` - JSON encoding and typed rehydration
    * :mod:`.enums` - Domain enumerations (Category, Combinator, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import Category, Combinator, OutputFormat
from .errors import CombinatorError, ConfigurationError, DuplicateError, OrderError, SelectorError
from .selectors import ComplexSelector, CompoundSelector, SelectorBuilder, css_selector_builder
from .serialization import from_json, get_json
from .shapes import Circle, Rectangle

__all__ = [
    # Selectors
    "ComplexSelector",
    "CompoundSelector",
    "SelectorBuilder",
    "css_selector_builder",
    # Shapes and JSON
    "Circle",
    "Rectangle",
    "from_json",
    "get_json",
    # Enums
    "Category",
    "Combinator",
    "OutputFormat",
    # Errors
    "CombinatorError",
    "ConfigurationError",
    "DuplicateError",
    "OrderError",
    "SelectorError",
]
