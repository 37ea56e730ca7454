"""CLI command: selector-builder build -- assemble a selector from fragments."""

from __future__ import annotations

import sys

import click

from selector_builder.builder import combine, css_selector_builder
from selector_builder.errors import SelectorError, UnknownKindError
from selector_builder.expression import SelectorExpression

# Combinator tokens accepted on the command line, mapped to builder tokens.
_COMBINATORS: dict[str, str] = {
    ">": ">",
    "+": "+",
    "~": "~",
    "descendant": " ",
}


def _extend(
    result: SelectorExpression | None, combinator: str, current: SelectorExpression
) -> SelectorExpression:
    if result is None:
        return current
    return combine(result, combinator, current)


def _assemble(tokens: tuple[str, ...]) -> SelectorExpression:
    """Fold fragments into compounds and compounds into a complex selector."""
    result: SelectorExpression | None = None
    pending = ""
    current = css_selector_builder

    for token in tokens:
        if token in _COMBINATORS:
            if current is css_selector_builder:
                raise click.UsageError(f"Combinator {token!r} must follow a selector")
            result = _extend(result, pending, current)
            pending = _COMBINATORS[token]
            current = css_selector_builder
            continue
        kind, sep, value = token.partition("=")
        if not sep:
            raise click.UsageError(f"Expected KIND=VALUE or a combinator, got {token!r}")
        try:
            current = current.append(kind, value)
        except UnknownKindError as exc:
            raise click.UsageError(str(exc)) from exc

    if current is css_selector_builder:
        raise click.UsageError("Selector must not end with a combinator")
    return _extend(result, pending, current)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments and combinators.

    KIND is one of element, id, class, attr, pseudo_class, pseudo_element
    (or its label, e.g. pseudo-class). Combinators are >, +, ~ and
    "descendant".

    Example: selector-builder build element=div id=main + element=p
    """
    try:
        expression = _assemble(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(expression.stringify())
