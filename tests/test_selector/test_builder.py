"""Tests for the css_selector_builder facade."""

import pytest

from selector_builder import (
    CssSelectorBuilder,
    DuplicateSelectorPartError,
    Selector,
    SelectorOrderError,
    css_selector_builder,
)


@pytest.fixture
def builder() -> CssSelectorBuilder:
    return css_selector_builder


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class TestFactories:
    def test_element(self, builder):
        assert builder.element("div").stringify() == "div"

    def test_id(self, builder):
        assert builder.id("main").stringify() == "#main"

    def test_class(self, builder):
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self, builder):
        assert builder.attr("disabled").stringify() == "[disabled]"

    def test_pseudo_class(self, builder):
        assert builder.pseudo_class("focus").stringify() == ":focus"

    def test_pseudo_element(self, builder):
        assert builder.pseudo_element("first-line").stringify() == "::first-line"

    def test_returns_selector(self, builder):
        assert isinstance(builder.element("a"), Selector)

    def test_facade_holds_no_state(self, builder):
        builder.id("one")
        assert builder.id("two").stringify() == "#two"


# ---------------------------------------------------------------------------
# Documented examples
# ---------------------------------------------------------------------------


class TestExamples:
    def test_id_with_classes(self, builder):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_nested_combine(self, builder):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_pseudo_element_selector(self, builder):
        sel = builder.element("p").pseudo_class("first-of-type").pseudo_element("first-letter")
        assert sel.stringify() == "p:first-of-type::first-letter"


# ---------------------------------------------------------------------------
# Errors through the facade
# ---------------------------------------------------------------------------


class TestFacadeErrors:
    def test_second_id(self, builder):
        with pytest.raises(DuplicateSelectorPartError):
            builder.id("a").id("b")

    def test_second_element(self, builder):
        with pytest.raises(DuplicateSelectorPartError):
            builder.element("a").element("b")

    def test_id_after_class(self, builder):
        with pytest.raises(SelectorOrderError):
            builder.class_("a").id("b")

    def test_element_after_pseudo_class(self, builder):
        with pytest.raises(SelectorOrderError):
            builder.pseudo_class("hover").element("a")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    @pytest.mark.parametrize("combinator", ["+", "~", ">", " "])
    def test_combine_concatenates(self, builder, combinator):
        a = builder.element("ul").class_("menu")
        b = builder.element("li").pseudo_class("hover")
        expected = a.stringify() + f" {combinator} " + b.stringify()
        assert builder.combine(a, combinator, b).stringify() == expected

    def test_nested_associativity(self, builder):
        x = builder.element("section")
        y = builder.class_("card")
        z = builder.attr("data-id")
        sel = builder.combine(x, ">", builder.combine(y, "~", z))
        assert sel.stringify() == (
            x.stringify() + " > " + y.stringify() + " ~ " + z.stringify()
        )

    def test_same_operand_in_two_combines(self, builder):
        item = builder.element("li")
        first = builder.combine(builder.element("ul"), ">", item)
        second = builder.combine(builder.element("ol"), ">", item)
        assert first.stringify() == "ul > li"
        assert second.stringify() == "ol > li"
        assert item.stringify() == "li"
