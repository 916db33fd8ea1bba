"""Fluent builder for CSS-like selector strings.

Selectors are immutable values: every fragment-adding call returns a new
:class:`CompoundSelector` and leaves the receiver untouched, so a failed call
never corrupts a chain that is still in use and ``stringify`` can be called
any number of times.

Contents:
    * :class:`Fragment` - One rendered piece of a selector.
    * :class:`CompoundSelector` - ``element#id.class[attr]:pseudo::pseudo-element``.
    * :class:`ComplexSelector` - Two selectors joined by a combinator.
    * :class:`SelectorBuilder` - Stateless facade starting fresh chains.
    * :data:`css_selector_builder` - Shared facade instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .enums import Category, Combinator
from .errors import CombinatorError, DuplicateError, OrderError

_DUPLICATE_MESSAGE = "Element, id and pseudo-element should not occur more then one time inside the selector"
_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


@dataclass(frozen=True, slots=True)
class Fragment:
    """A single selector fragment tagged with its category."""

    category: Category
    value: str

    def render(self) -> str:
        return self.category.render(self.value)


@dataclass(frozen=True, slots=True)
class CompoundSelector:
    """An ordered run of fragments without combinators.

    ``max_rank`` and ``seen`` are derived bookkeeping; they make the ordering
    check O(1) instead of a scan over all fragments.

    Example:
        >>> CompoundSelector().id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
        >>> CompoundSelector().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
    """

    fragments: tuple[Fragment, ...] = ()
    max_rank: int = 0
    seen: frozenset[Category] = field(default_factory=frozenset)

    def element(self, value: str) -> CompoundSelector:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> CompoundSelector:
        """Append a fragment of an arbitrary category.

        Raises:
            DuplicateError: If *category* is unique and already present.
            OrderError: If a fragment of higher rank is already present.
        """
        return self._add(category, value)

    def _add(self, category: Category, value: str) -> CompoundSelector:
        # Cardinality is reported before ordering when both are violated.
        if category.unique and category in self.seen:
            raise DuplicateError(_DUPLICATE_MESSAGE)
        if category < self.max_rank:
            raise OrderError(_ORDER_MESSAGE)
        return CompoundSelector(
            fragments=(*self.fragments, Fragment(category, value)),
            max_rank=int(category),
            seen=self.seen | {category},
        )

    def stringify(self) -> str:
        return "".join(fragment.render() for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True, slots=True)
class ComplexSelector:
    """Two selectors joined by a combinator, rendered ``left combinator right``.

    Either side may itself be a :class:`ComplexSelector`.
    """

    left: AnySelector
    combinator: Combinator
    right: AnySelector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator.value} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


AnySelector = Union[CompoundSelector, ComplexSelector]


def parse_combinator(token: Combinator | str) -> Combinator:
    """Coerce a combinator token to :class:`Combinator`.

    Raises:
        CombinatorError: If *token* is not one of ``' '``, ``'+'``, ``'~'``, ``'>'``.

    Example:
        >>> parse_combinator("~")
        <Combinator.GENERAL_SIBLING: '~'>
    """
    try:
        return Combinator(token)
    except ValueError as exc:
        allowed = ", ".join(repr(member.value) for member in Combinator)
        raise CombinatorError(f"Unknown combinator {token!r}; expected one of {allowed}") from exc


class SelectorBuilder:
    """Stateless facade whose every call starts a new selector chain.

    Example:
        >>> builder = SelectorBuilder()
        >>> builder.combine(
        ...     builder.element("div").id("main").class_("container").class_("draggable"),
        ...     "+",
        ...     builder.combine(
        ...         builder.element("table").id("data"),
        ...         "~",
        ...         builder.combine(
        ...             builder.element("tr").pseudo_class("nth-of-type(even)"),
        ...             " ",
        ...             builder.element("td").pseudo_class("nth-of-type(even)"),
        ...         ),
        ...     ),
        ... ).stringify()
        'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'
    """

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(self, left: AnySelector, combinator: Combinator | str, right: AnySelector) -> ComplexSelector:
        return ComplexSelector(left, parse_combinator(combinator), right)


css_selector_builder = SelectorBuilder()


__all__ = [
    "AnySelector",
    "ComplexSelector",
    "CompoundSelector",
    "Fragment",
    "SelectorBuilder",
    "css_selector_builder",
    "parse_combinator",
]
