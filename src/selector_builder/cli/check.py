"""CLI command: selector-builder check -- parse and validate selectors."""

from __future__ import annotations

import sys

import click

from selector_builder.errors import SelectorError
from selector_builder.parser import ParseError, parse_selector


@click.command()
@click.argument("selectors", nargs=-1, required=True)
def check(selectors: tuple[str, ...]) -> None:
    """Parse each SELECTOR and check its fragment order.

    Prints the normalized selector for valid input and exits with code 1
    if any selector is invalid.
    """
    failures = 0
    for source in selectors:
        try:
            expression = parse_selector(source)
        except ParseError as exc:
            failures += 1
            click.echo(f"{source}: Parse error at {exc.location}: {exc.summary}", err=True)
            continue
        except SelectorError as exc:
            failures += 1
            click.echo(f"{source}: {exc}", err=True)
            continue
        click.echo(f"OK: {expression.stringify()}")

    click.echo()
    click.echo(f"Summary: {len(selectors) - failures} valid, {failures} invalid")
    if failures:
        sys.exit(1)
