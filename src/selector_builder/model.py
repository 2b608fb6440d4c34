"""Selector model: FragmentKind enum and the Fragment dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """The six kinds of simple selector, in required CSS order.

    The value of each member is its rank:
        1 = element (a)
        2 = id (#main)
        3 = class (.container)
        4 = attribute ([href$=".png"])
        5 = pseudo-class (:focus)
        6 = pseudo-element (::before)
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return self.value

    @property
    def unique(self) -> bool:
        """True if at most one fragment of this kind may appear."""
        return self in _UNIQUE_KINDS


_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

# (prefix, suffix) wrapped around the raw value
_PUNCTUATION: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """One simple selector, already rendered with its CSS punctuation."""

    text: str  # "a", "#main", ".container", "[href]", ":focus", "::before"
    kind: FragmentKind

    @classmethod
    def render(cls, kind: FragmentKind, value: str) -> Fragment:
        """Wrap a raw value in the punctuation for *kind*."""
        prefix, suffix = _PUNCTUATION[kind]
        return cls(text=f"{prefix}{value}{suffix}", kind=kind)

    def __str__(self) -> str:
        return self.text
