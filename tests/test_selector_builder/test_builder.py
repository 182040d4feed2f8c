"""Tests for the builder facade and rendering."""

import pytest

from selector_builder import (
    DuplicateError,
    InvalidCombinatorError,
    OrderError,
    SelectorBuilder,
    css_selector_builder,
    stringify,
)

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_element_attr_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_id_with_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_every_kind(self):
        sel = (
            builder.element("input")
            .id("email")
            .class_("field")
            .class_("wide")
            .attr("type=email")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_class("invalid")
            .pseudo_element("placeholder")
        )
        assert sel.stringify() == (
            "input#email.field.wide[type=email][required]:focus:invalid::placeholder"
        )

    @pytest.mark.parametrize(
        "method, value, expected",
        [
            ("element", "div", "div"),
            ("id", "nav", "#nav"),
            ("class_", "menu", ".menu"),
            ("attr", "disabled", "[disabled]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "after", "::after"),
        ],
    )
    def test_entry_points(self, method, value, expected):
        assert getattr(builder, method)(value).stringify() == expected

    def test_stringify_on_facade(self):
        sel = builder.element("p")
        assert builder.stringify(sel) == "p"
        assert stringify(sel) == "p"


class TestErrors:
    def test_duplicate_id(self):
        with pytest.raises(DuplicateError):
            builder.id("a").id("b")

    def test_duplicate_element(self):
        with pytest.raises(DuplicateError):
            builder.element("a").element("b")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateError):
            builder.pseudo_element("before").pseudo_element("after")

    def test_class_then_id(self):
        with pytest.raises(OrderError):
            builder.class_("box").id("main")

    def test_pseudo_class_then_attr(self):
        with pytest.raises(OrderError):
            builder.pseudo_class("hover").attr("href")

    def test_id_then_element(self):
        with pytest.raises(OrderError):
            builder.id("main").element("div")

    def test_invalid_combinator(self):
        with pytest.raises(InvalidCombinatorError):
            builder.combine(builder.element("a"), "|", builder.element("b"))

    def test_chain_usable_after_error(self):
        with pytest.raises(DuplicateError):
            builder.id("a").id("b")
        assert builder.id("c").stringify() == "#c"


# ---------------------------------------------------------------------------
# Combined selectors
# ---------------------------------------------------------------------------


class TestCombine:
    @pytest.mark.parametrize("symbol", [" ", ">", "+", "~"])
    def test_single_join(self, symbol):
        sel = builder.combine(builder.element("x"), symbol, builder.element("y"))
        assert sel.stringify() == f"x {symbol} y"

    def test_adjacent_sibling(self):
        sel = builder.combine(builder.element("x"), "+", builder.element("y"))
        assert sel.stringify() == "x + y"

    def test_nested_padding(self):
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

    def test_left_nested(self):
        inner = builder.combine(builder.element("ul"), ">", builder.element("li"))
        sel = builder.combine(inner, "~", builder.element("p"))
        assert sel.stringify() == "ul > li ~ p"

    def test_children_reused(self):
        a = builder.element("a")
        first = builder.combine(a, ">", builder.element("b"))
        second = builder.combine(a, "+", builder.element("c"))
        assert first.stringify() == "a > b"
        assert second.stringify() == "a + c"
        assert a.stringify() == "a"


# ---------------------------------------------------------------------------
# Idempotence and isolation
# ---------------------------------------------------------------------------


class TestIsolation:
    def test_render_twice(self):
        sel = builder.combine(
            builder.element("div").class_("a"), " ", builder.element("span")
        )
        assert sel.stringify() == sel.stringify() == "div.a   span"

    def test_interleaved_chains(self):
        a = builder.element("div")
        b = builder.id("main")
        a = a.class_("box").pseudo_class("hover")
        b = b.class_("wide")
        assert a.stringify() == "div.box:hover"
        assert b.stringify() == "#main.wide"

    def test_branching_from_shared_prefix(self):
        base = builder.element("a").class_("link")
        hover = base.pseudo_class("hover")
        visited = base.pseudo_class("visited")
        assert base.stringify() == "a.link"
        assert hover.stringify() == "a.link:hover"
        assert visited.stringify() == "a.link:visited"

    def test_separate_builders_agree(self):
        other = SelectorBuilder()
        assert other.element("p").stringify() == builder.element("p").stringify()
