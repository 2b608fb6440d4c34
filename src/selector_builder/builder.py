"""Stateless facade creating selectors.

Example::

    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

from selector_builder.model import FragmentKind
from selector_builder.selector import Selector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Factory for Selector values. Holds no state of its own."""

    def element(self, value: str) -> Selector:
        return Selector.start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return Selector.start(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return Selector.start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return Selector.start(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector.start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector.start(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(self, selector1: Selector, combinator: str, selector2: Selector) -> Selector:
        """Return ``selector1 + " " + combinator + " " + selector2`` as a Selector."""
        return selector1.combine(combinator, selector2)


css_selector_builder = CssSelectorBuilder()
