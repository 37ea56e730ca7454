"""Immutable selector expressions and the fragment operations that extend them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from selector_builder.errors import DuplicateUniqueError, OrderViolationError, UnknownKindError
from selector_builder.kinds import NO_RANK, get_kind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorExpression:
    """A CSS selector under construction.

    Every operation returns a new expression; the receiver is never modified,
    so an intermediate expression can be branched into several selectors.

    Attributes:
        text: The selector rendered so far.
        last_rank: Rank of the most recently appended kind, or ``NO_RANK``.
    """

    text: str = ""
    last_rank: int = NO_RANK

    # --- fragment operations ------------------------------------------------

    def element(self, value: str) -> SelectorExpression:
        return self.append("element", value)

    def id(self, value: str) -> SelectorExpression:
        return self.append("id", value)

    def class_(self, value: str) -> SelectorExpression:
        return self.append("class", value)

    def attr(self, value: str) -> SelectorExpression:
        return self.append("attr", value)

    def pseudo_class(self, value: str) -> SelectorExpression:
        return self.append("pseudo_class", value)

    def pseudo_element(self, value: str) -> SelectorExpression:
        return self.append("pseudo_element", value)

    def append(self, kind_name: str, value: str) -> SelectorExpression:
        """Append a fragment of the named kind.

        Raises:
            OrderViolationError: the kind ranks below the last appended kind.
            DuplicateUniqueError: a non-repeatable kind is appended twice.
            UnknownKindError: *kind_name* is not a known kind.
        """
        kind = get_kind(kind_name)
        if kind is None:
            raise UnknownKindError(kind_name)

        if kind.rank < self.last_rank:
            logger.debug(
                "Rejected %s %r after rank %d in %r", kind.label, value, self.last_rank, self.text
            )
            raise OrderViolationError(kind, self.last_rank)
        # Ranks never decrease, so a repeat can only follow its first occurrence.
        if not kind.allows_repeat and kind.rank == self.last_rank:
            logger.debug("Rejected repeated %s %r in %r", kind.label, value, self.text)
            raise DuplicateUniqueError(kind, self.last_rank)

        return replace(self, text=self.text + kind.render(value), last_rank=kind.rank)

    # --- combination and rendering ------------------------------------------

    def combine(
        self, left: SelectorExpression, combinator: str, right: SelectorExpression
    ) -> SelectorExpression:
        """Join two expressions with *combinator*, padded by single spaces.

        The result starts a fresh compound: its rank is reset to ``NO_RANK``.
        """
        text = f"{left.text} {combinator} {right.text}"
        logger.debug("Combined %r with %r: %r", left.text, combinator, text)
        return SelectorExpression(text=text)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
