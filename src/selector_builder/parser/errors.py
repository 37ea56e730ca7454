"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when a selector string is not well-formed.

    ``line`` and ``column`` are 1-based positions in ``source``; both are
    None when the failure has no position (unexpected end of input).
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        self.line = line
        self.column = column
        self.source = source
        super().__init__(message)

    @property
    def location(self) -> str:
        if self.line is None or self.column is None:
            return "end of input"
        return f"line {self.line}, column {self.column}"

    @property
    def summary(self) -> str:
        """First line of the message; Lark appends the expected tokens below it."""
        return str(self).strip().splitlines()[0] if str(self).strip() else ""
