"""Selector kinds: the ordered table every builder operation is driven from."""

from __future__ import annotations

from dataclasses import dataclass

# Rank of an expression nothing has been appended to yet.
NO_RANK = -1


@dataclass(frozen=True)
class SelectorKind:
    """One simple-selector kind in the canonical compound-selector order.

    Attributes:
        name: Builder operation name used for lookup (``"pseudo_class"``).
        label: Human-readable name used in error messages (``"pseudo-class"``).
        rank: Position in the required order, starting at 0 for element.
        allows_repeat: Whether the kind may occur more than once per compound.
        prefix: Text placed before the fragment value.
        suffix: Text placed after the fragment value.
    """

    name: str
    label: str
    rank: int
    allows_repeat: bool
    prefix: str = ""
    suffix: str = ""

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


KINDS: tuple[SelectorKind, ...] = (
    SelectorKind("element", "element", 0, allows_repeat=False),
    SelectorKind("id", "id", 1, allows_repeat=False, prefix="#"),
    SelectorKind("class", "class", 2, allows_repeat=True, prefix="."),
    SelectorKind("attr", "attribute", 3, allows_repeat=True, prefix="[", suffix="]"),
    SelectorKind("pseudo_class", "pseudo-class", 4, allows_repeat=True, prefix=":"),
    SelectorKind("pseudo_element", "pseudo-element", 5, allows_repeat=False, prefix="::"),
)

_BY_NAME: dict[str, SelectorKind] = {kind.name: kind for kind in KINDS}
# Labels are accepted as aliases ("attribute", "pseudo-class", ...).
_BY_NAME.update({kind.label: kind for kind in KINDS})


def get_kind(name: str) -> SelectorKind | None:
    """Return the kind registered under *name* or *label*, or None."""
    return _BY_NAME.get(name)


def ordered_labels() -> list[str]:
    return [kind.label for kind in KINDS]


def unique_labels() -> list[str]:
    """Labels of the kinds that may occur at most once, in rank order."""
    return [kind.label for kind in KINDS if not kind.allows_repeat]
