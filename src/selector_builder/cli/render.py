"""CLI command: selector-builder render -- build and print a selector.

Tokens are either ``kind=value`` fragments or combinator tokens::

    selector-builder render element=a 'attr=href$=".png"' pseudo-class=focus
    selector-builder render element=ul '>' element=li descendant element=a

Compound selectors separated by combinators are joined right to left, so
``a + b ~ c`` is built as ``combine(a, '+', combine(b, '~', c))``.
"""

from __future__ import annotations

import logging
import sys

import click

from selector_builder.accumulator import append
from selector_builder.builder import css_selector_builder
from selector_builder.errors import SelectorError
from selector_builder.model import FragmentKind, Selector

logger = logging.getLogger(__name__)

_COMBINATOR_TOKENS = {">": ">", "+": "+", "~": "~", "descendant": " ", " ": " "}


def _parse_fragment(token: str) -> tuple[FragmentKind, str]:
    name, sep, value = token.partition("=")
    if not sep:
        raise click.BadParameter(
            f"expected KIND=VALUE or a combinator, got {token!r}", param_hint="TOKENS"
        )
    try:
        kind = FragmentKind(name)
    except ValueError:
        kinds = ", ".join(k.value for k in FragmentKind)
        raise click.BadParameter(
            f"unknown fragment kind {name!r} (expected one of {kinds})",
            param_hint="TOKENS",
        ) from None
    return kind, value


def _split(tokens: tuple[str, ...]) -> tuple[list[list[str]], list[str]]:
    """Split tokens into compound groups and the combinators between them."""
    groups: list[list[str]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            combinators.append(_COMBINATOR_TOKENS[token])
            groups.append([])
        else:
            groups[-1].append(token)
    if any(not group for group in groups):
        raise click.UsageError("each combinator must sit between two selectors")
    return groups, combinators


def build_selector(tokens: tuple[str, ...]) -> Selector:
    """Build a Selector from CLI tokens. Raises SelectorError on bad order."""
    groups, combinators = _split(tokens)
    compounds: list[Selector] = []
    for group in groups:
        selector = Selector()
        for token in group:
            kind, value = _parse_fragment(token)
            logger.debug("append %s %r", kind.value, value)
            selector = append(selector, kind, value)
        compounds.append(selector)

    result = compounds[-1]
    for left, symbol in zip(reversed(compounds[:-1]), reversed(combinators)):
        logger.debug("combine with %r", symbol)
        result = css_selector_builder.combine(left, symbol, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def render(tokens: tuple[str, ...]) -> None:
    """Build a selector from fragment and combinator tokens and print it.

    Fragment kinds: element, id, class, attribute, pseudo-class,
    pseudo-element. Combinators: '>', '+', '~', descendant.
    Exits with code 1 if the fragments break CSS ordering rules.
    """
    try:
        selector = build_selector(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
