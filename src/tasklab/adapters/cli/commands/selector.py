"""CLI command assembling a selector from ``kind=value`` tokens.

Contents:
    * :func:`parse_selector_tokens` - Fold tokens into a selector value.
    * :func:`cli_selector` - Print the assembled selector.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

import lib_log_rich.runtime
import rich_click as click

from tasklab.domain.enums import Category, Combinator
from tasklab.domain.selectors import AnySelector, CompoundSelector, css_selector_builder

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

#: Token prefixes accepted on the command line.
TOKEN_KINDS: Final[dict[str, Category]] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

_COMBINATOR_TOKENS: Final[frozenset[str]] = frozenset(member.value for member in Combinator)


def _parse_fragment(token: str) -> tuple[Category, str]:
    kind, separator, value = token.partition("=")
    if not separator:
        raise ValueError(f"Invalid token {token!r}: expected KIND=VALUE or a combinator")
    try:
        return TOKEN_KINDS[kind], value
    except KeyError:
        raise ValueError(f"Unknown selector kind {kind!r}; expected one of {', '.join(TOKEN_KINDS)}") from None


def parse_selector_tokens(tokens: Sequence[str]) -> AnySelector:
    """Build a selector from ``kind=value`` tokens and combinator tokens.

    Combinators are joined left to right, which renders exactly like the
    nested form because the output is plain concatenation.

    Raises:
        ValueError: For malformed tokens, misplaced combinators, or any
            :class:`~tasklab.domain.errors.SelectorError` from the builder.

    Example:
        >>> parse_selector_tokens(["element=a", 'attr=href$=".png"', "pseudo-class=focus"]).stringify()
        'a[href$=".png"]:focus'
        >>> parse_selector_tokens(["element=ul", ">", "element=li", "+", "element=li"]).stringify()
        'ul > li + li'
    """
    compounds: list[CompoundSelector] = [CompoundSelector()]
    combinators: list[str] = []
    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            if not compounds[-1].fragments:
                raise ValueError(f"Combinator {token!r} must follow a selector")
            combinators.append(token)
            compounds.append(CompoundSelector())
            continue
        category, value = _parse_fragment(token)
        compounds[-1] = compounds[-1].add(category, value)

    if not compounds[-1].fragments:
        raise ValueError("Selector is empty" if not combinators else "Selector must not end with a combinator")

    selector: AnySelector = compounds[0]
    for combinator, compound in zip(combinators, compounds[1:]):
        selector = css_selector_builder.combine(selector, combinator, compound)
    return selector


@click.command("selector", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("tokens", nargs=-1, required=True)
def cli_selector(tokens: tuple[str, ...]) -> None:
    """Assemble a CSS selector from TOKENS and print it.

    Tokens are ``element=``, ``id=``, ``class=``, ``attr=``, ``pseudo-class=``
    and ``pseudo-element=`` fragments, separated by the combinators
    ``+``, ``~``, ``>`` or a quoted single space.

    Example: ``tasklab selector element=div id=main class=container '>' element=p``
    """
    with lib_log_rich.runtime.bind(job_id="cli-selector", extra={"command": "selector"}):
        try:
            selector = parse_selector_tokens(tokens)
        except ValueError as exc:
            logger.warning("Rejected selector tokens", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(selector.stringify())


__all__ = ["TOKEN_KINDS", "cli_selector", "parse_selector_tokens"]
