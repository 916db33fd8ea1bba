"""Public package surface exposing the exercises, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Selector builder, shapes, JSON helpers, string exercises
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.enums import Category, Combinator
from .domain.errors import CombinatorError, DuplicateError, OrderError, SelectorError
from .domain.selectors import ComplexSelector, CompoundSelector, SelectorBuilder, css_selector_builder
from .domain.serialization import from_json, get_json
from .domain.shapes import Circle, Rectangle
from .domain.strings import (
    CARD_NOT_FOUND,
    concatenate_strings,
    convert_to_upper_case,
    encode_to_rot13,
    extract_emails,
    extract_name_from_template,
    get_card_id,
    get_first_char,
    get_rectangle_string,
    get_string_from_template,
    get_string_length,
    is_string,
    remove_first_occurrences,
    remove_leading_and_trailing_whitespaces,
    repeat_string,
    unbracket_tag,
)

__all__ = [
    "CARD_NOT_FOUND",
    "Category",
    "Circle",
    "Combinator",
    "CombinatorError",
    "ComplexSelector",
    "CompoundSelector",
    "DuplicateError",
    "OrderError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "concatenate_strings",
    "convert_to_upper_case",
    "css_selector_builder",
    "encode_to_rot13",
    "extract_emails",
    "extract_name_from_template",
    "from_json",
    "get_card_id",
    "get_config",
    "get_first_char",
    "get_json",
    "get_rectangle_string",
    "get_string_from_template",
    "get_string_length",
    "is_string",
    "print_info",
    "remove_first_occurrences",
    "remove_leading_and_trailing_whitespaces",
    "repeat_string",
    "unbracket_tag",
]
