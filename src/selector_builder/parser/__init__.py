from selector_builder.parser.errors import ParseError
from selector_builder.parser.transformer import parse_selector

__all__ = ["ParseError", "parse_selector"]
