"""Immutable CSS selector accumulating fragments and combinators.

Every fluent call returns a new Selector; the receiver is never modified, so
a selector can be extended or combined any number of times::

    base = Selector.start(FragmentKind.ELEMENT, "div")
    base.class_("a").stringify()    # 'div.a'
    base.class_("b").stringify()    # 'div.b'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from selector_builder.errors import DuplicateSelectorPartError, SelectorOrderError
from selector_builder.model import Fragment, FragmentKind

__all__ = ["Selector", "Part"]

logger = logging.getLogger(__name__)

# A selector part is either a rendered fragment or a literal combinator token
# such as " + ".
Part = Union[Fragment, str]


@dataclass(frozen=True)
class Selector:
    """An ordered sequence of fragments and combinator tokens."""

    parts: tuple[Part, ...] = ()

    @classmethod
    def start(cls, kind: FragmentKind, value: str) -> Selector:
        """Create a selector holding a single fragment."""
        return cls().append(kind, value)

    # --- fluent fragment appends ----------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- combination -----------------------------------------------------------

    def combine(self, combinator: str, other: Selector) -> Selector:
        """Join *other* after this selector with a combinator token.

        The token is inserted verbatim between two spaces. Neither operand is
        modified and the parts of each side are not re-validated.
        """
        token = f" {combinator} "
        logger.debug("Combining selectors with %r", token)
        return Selector(parts=self.parts + (token,) + other.parts)

    # --- output ----------------------------------------------------------------

    def stringify(self) -> str:
        """Return the CSS text of the selector."""
        return "".join(str(part) for part in self.parts)

    def __str__(self) -> str:
        return self.stringify()

    # --- inspection --------------------------------------------------------------

    @property
    def fragments(self) -> list[Fragment]:
        """All fragments in append order, ignoring combinators."""
        return [part for part in self.parts if isinstance(part, Fragment)]

    @property
    def compound(self) -> list[Fragment]:
        """Fragments after the last combinator.

        Appends extend this compound selector, so only it is validated.
        """
        trailing: list[Fragment] = []
        for part in reversed(self.parts):
            if not isinstance(part, Fragment):
                break
            trailing.append(part)
        trailing.reverse()
        return trailing

    # --- validation ----------------------------------------------------------------

    def append(self, kind: FragmentKind, value: str) -> Selector:
        """Return a new selector with one more fragment of *kind*.

        Raises DuplicateSelectorPartError or SelectorOrderError if the
        trailing compound selector would become invalid.
        """
        selector = Selector(parts=self.parts + (Fragment.render(kind, value),))
        kinds = [f.kind for f in selector.compound]
        _check_unique(kinds)
        _check_order(kinds)
        return selector


def _check_unique(kinds: list[FragmentKind]) -> None:
    """Raise DuplicateSelectorPartError if a unique kind occurs twice."""
    for kind in FragmentKind:
        if kind.unique and kinds.count(kind) > 1:
            logger.debug("Rejected duplicate %s fragment", kind.name)
            raise DuplicateSelectorPartError(kind)


def _check_order(kinds: list[FragmentKind]) -> None:
    """Raise SelectorOrderError unless kinds are in non-decreasing rank."""
    ordered = sorted(kinds, key=lambda k: k.rank)
    for position, (actual, expected) in enumerate(zip(kinds, ordered)):
        if actual is not expected:
            offender = kinds[-1]
            previous = max(kinds[:-1], key=lambda k: k.rank)
            logger.debug(
                "Rejected %s fragment at position %d after %s",
                offender.name,
                position,
                previous.name,
            )
            raise SelectorOrderError(offender, previous)
