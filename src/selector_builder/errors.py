"""Error hierarchy for the selector builder."""

from __future__ import annotations

from selector_builder.kinds import SelectorKind, ordered_labels, unique_labels


def _join_naturally(labels: list[str]) -> str:
    """Join labels as prose: ``"Element, id and pseudo-element"``."""
    if not labels:
        return ""
    text = labels[0]
    if len(labels) > 1:
        text = ", ".join(labels[:-1]) + " and " + labels[-1]
    return text[0].upper() + text[1:]


class SelectorError(Exception):
    """Base error for misuse of the selector grammar."""

    def __init__(
        self, message: str, *, kind: SelectorKind | None = None, last_rank: int | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.last_rank = last_rank


class OrderViolationError(SelectorError):
    """A fragment was appended after a fragment of a higher rank."""

    def __init__(self, kind: SelectorKind, last_rank: int) -> None:
        message = (
            "Selector parts should be arranged in the following order: "
            + ", ".join(ordered_labels())
        )
        super().__init__(message, kind=kind, last_rank=last_rank)


class DuplicateUniqueError(SelectorError):
    """A kind that may occur only once was appended a second time."""

    def __init__(self, kind: SelectorKind, last_rank: int) -> None:
        message = (
            f"{_join_naturally(unique_labels())} should not occur more than one time "
            "inside the selector"
        )
        super().__init__(message, kind=kind, last_rank=last_rank)


class UnknownKindError(SelectorError, KeyError):
    """No selector kind is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown selector kind: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
