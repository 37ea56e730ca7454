"""Lark Transformer that replays a parsed selector through the builder."""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from selector_builder.builder import combine, css_selector_builder
from selector_builder.expression import SelectorExpression
from selector_builder.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Combinator token the builder uses for the descendant relationship.
DESCENDANT = " "

logger = logging.getLogger(__name__)

Fragment = tuple[str, str]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into fragments and combinator tokens.

    Expressions are assembled afterwards by :func:`_build`, so builder errors
    propagate unchanged instead of being wrapped in ``VisitError``.
    """

    # ---- simple selectors ----

    def element_selector(self, items: list[Token]) -> Fragment:
        return ("element", str(items[0]))

    def id_selector(self, items: list[Token]) -> Fragment:
        return ("id", str(items[0]))

    def class_selector(self, items: list[Token]) -> Fragment:
        return ("class", str(items[0]))

    def attr_selector(self, items: list[Token]) -> Fragment:
        return ("attr", str(items[0]).strip())

    def pseudo_class_selector(self, items: list[Token]) -> Fragment:
        return ("pseudo_class", "".join(str(t) for t in items))

    def pseudo_element_selector(self, items: list[Token]) -> Fragment:
        return ("pseudo_element", str(items[0]))

    # ---- structural ----

    def explicit_combinator(self, items: list[Token]) -> str:
        return str(items[0])

    def descendant_combinator(self, items: list[Token]) -> str:
        return DESCENDANT

    def compound(self, items: list[Fragment]) -> list[Fragment]:
        return list(items)

    def complex(self, items: list[object]) -> list[object]:
        return list(items)

    def start(self, items: list[object]) -> list[object]:
        return items[0]  # type: ignore[return-value]


def _build_compound(fragments: list[Fragment]) -> SelectorExpression:
    expression = css_selector_builder
    for kind_name, value in fragments:
        expression = expression.append(kind_name, value)
    return expression


def _build(parts: list[object]) -> SelectorExpression:
    """Fold ``[compound, combinator, compound, ...]`` from the left."""
    result = _build_compound(parts[0])  # type: ignore[arg-type]
    for i in range(1, len(parts), 2):
        combinator = parts[i]
        right = _build_compound(parts[i + 1])  # type: ignore[arg-type]
        result = combine(result, combinator, right)  # type: ignore[arg-type]
    return result


def _source_position(
    source: str, line: int | None, column: int | None
) -> tuple[int | None, int | None]:
    """Map a position in the stripped text back onto *source*."""
    if line is None or column is None or line < 1 or column < 1:
        return None, None
    leading = source[: len(source) - len(source.lstrip())]
    if line == 1:
        column += len(leading) - (leading.rfind("\n") + 1)
    return line + leading.count("\n"), column


def parse_selector(source: str) -> SelectorExpression:
    """Parse a CSS selector string into a SelectorExpression.

    Raises:
        ParseError: the source is not a well-formed selector.
        OrderViolationError, DuplicateUniqueError: the selector is well-formed
            but breaks the compound-selector ordering rules.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source.strip())
    except UnexpectedInput as e:
        line, column = _source_position(source, e.line, e.column)
        raise ParseError(str(e), line=line, column=column, source=source) from e
    parts = SelectorTransformer().transform(tree)
    expression = _build(parts)
    logger.debug("Parsed %r as %r", source, expression.text)
    return expression
