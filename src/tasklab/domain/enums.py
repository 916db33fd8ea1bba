"""Type-safe domain enums for selector fragments, combinators and output formats."""

from __future__ import annotations

from enum import Enum, IntEnum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Category(IntEnum):
    """Selector fragment categories, valued by their ordering rank.

    A compound selector lists its fragments in non-decreasing rank:
    ``element#id.class[attr]:pseudo-class::pseudo-element``.

    Example:
        >>> Category.ELEMENT < Category.PSEUDO_ELEMENT
        True
        >>> int(Category.ATTRIBUTE)
        4
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def unique(self) -> bool:
        """Whether the category may occur at most once per selector."""
        return self in _UNIQUE_CATEGORIES

    def render(self, value: str) -> str:
        """Wrap *value* in the punctuation of this category.

        Example:
            >>> Category.ATTRIBUTE.render('href$=".png"')
            '[href$=".png"]'
            >>> Category.PSEUDO_ELEMENT.render("after")
            '::after'
        """
        prefix, suffix = _PUNCTUATION[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE_CATEGORIES = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_PUNCTUATION: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(str, Enum):
    """Tokens joining two selectors.

    Example:
        >>> Combinator("+") is Combinator.ADJACENT_SIBLING
        True
        >>> Combinator.CHILD == ">"
        True
    """

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


__all__ = [
    "Category",
    "Combinator",
    "OutputFormat",
]
