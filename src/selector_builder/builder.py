"""Facade over :class:`SelectorExpression`.

Usage::

    from selector_builder import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selector_builder.expression import SelectorExpression

__all__ = ["css_selector_builder", "combine", "render"]

# Shared entry point. Operations return new expressions, so it never changes.
css_selector_builder = SelectorExpression()


def combine(
    left: SelectorExpression, combinator: str, right: SelectorExpression
) -> SelectorExpression:
    """Return ``"<left> <combinator> <right>"`` as a new expression."""
    return css_selector_builder.combine(left, combinator, right)


def render(expression: SelectorExpression) -> str:
    return expression.stringify()
