"""Fluent, immutable builder for CSS selector strings."""

from selector_builder.builder import combine, css_selector_builder, render
from selector_builder.errors import (
    DuplicateUniqueError,
    OrderViolationError,
    SelectorError,
    UnknownKindError,
)
from selector_builder.expression import SelectorExpression
from selector_builder.kinds import KINDS, NO_RANK, SelectorKind
from selector_builder.parser import ParseError, parse_selector

__version__ = "0.1.0"

__all__ = [
    "KINDS",
    "NO_RANK",
    "DuplicateUniqueError",
    "OrderViolationError",
    "ParseError",
    "SelectorError",
    "SelectorExpression",
    "SelectorKind",
    "UnknownKindError",
    "combine",
    "css_selector_builder",
    "parse_selector",
    "render",
]
