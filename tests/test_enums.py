"""Domain enum tests: member values, ordering, punctuation and string equality."""

from __future__ import annotations

import pytest

from tasklab.domain.enums import Category, Combinator, OutputFormat

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_members_equal_their_strings(member: OutputFormat, expected_value: str) -> None:
    """OutputFormat members compare equal to their plain string values."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    """OutputFormat must have exactly 2 members."""
    assert len(OutputFormat) == 2


# ======================== Category ========================


@pytest.mark.os_agnostic
def test_category_ranks_follow_css_order() -> None:
    """Iteration order is the required fragment order."""
    assert [int(member) for member in Category] == [1, 2, 3, 4, 5, 6]
    assert sorted(Category) == list(Category)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "unique"),
    [
        (Category.ELEMENT, True),
        (Category.ID, True),
        (Category.CLASS, False),
        (Category.ATTRIBUTE, False),
        (Category.PSEUDO_CLASS, False),
        (Category.PSEUDO_ELEMENT, True),
    ],
)
def test_category_uniqueness(member: Category, unique: bool) -> None:
    """Only element, id and pseudo-element are limited to one occurrence."""
    assert member.unique is unique


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value", "rendered"),
    [
        (Category.ELEMENT, "div", "div"),
        (Category.ID, "main", "#main"),
        (Category.CLASS, "container", ".container"),
        (Category.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
        (Category.PSEUDO_CLASS, "focus", ":focus"),
        (Category.PSEUDO_ELEMENT, "after", "::after"),
    ],
)
def test_category_render_adds_punctuation(member: Category, value: str, rendered: str) -> None:
    """Each category wraps its value in CSS punctuation."""
    assert member.render(value) == rendered


@pytest.mark.os_agnostic
def test_category_render_keeps_empty_values() -> None:
    """Empty values are rendered as bare punctuation."""
    assert Category.CLASS.render("") == "."


# ======================== Combinator ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("token", "member"),
    [
        (" ", Combinator.DESCENDANT),
        ("+", Combinator.ADJACENT_SIBLING),
        ("~", Combinator.GENERAL_SIBLING),
        (">", Combinator.CHILD),
    ],
)
def test_combinator_lookup_by_token(token: str, member: Combinator) -> None:
    """Each token maps to exactly one combinator."""
    assert Combinator(token) is member
    assert member == token


@pytest.mark.os_agnostic
def test_combinator_rejects_unknown_tokens() -> None:
    """Tokens outside the four combinators are not members."""
    with pytest.raises(ValueError):
        Combinator("|")
