"""Tests for the selector facade functions."""

import pytest

from cssbuilder.selector import CardinalityViolation, OrderViolation, SelectorBuilder
from cssbuilder.selector import facade as builder


class TestEntryPoints:
    def test_each_call_returns_new_builder(self):
        a = builder.element("div")
        b = builder.element("div")
        assert isinstance(a, SelectorBuilder)
        assert a is not b

    def test_independent_chains(self):
        a = builder.element("div")
        b = builder.element("span")
        a.class_("x")
        assert b.stringify() == "span"
        assert a.stringify() == "div.x"

    @pytest.mark.parametrize(
        "start, value, expected",
        [
            (builder.element, "div", "div"),
            (builder.id, "main", "#main"),
            (builder.class_, "box", ".box"),
            (builder.attr, "disabled", "[disabled]"),
            (builder.pseudo_class, "hover", ":hover"),
            (builder.pseudo_element, "first-line", "::first-line"),
        ],
    )
    def test_part_entry_points(self, start, value, expected):
        assert start(value).stringify() == expected

    def test_stringify_is_empty(self):
        assert builder.stringify() == ""


class TestDocumentedExamples:
    def test_id_and_classes(self):
        result = builder.id("main").class_("container").class_("editable").stringify()
        assert result == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert result == 'a[href$=".png"]:focus'

    def test_element_twice(self):
        with pytest.raises(CardinalityViolation):
            builder.element("table").element("div")

    def test_id_after_class(self):
        with pytest.raises(OrderViolation):
            builder.class_("x").id("main")

    def test_combine(self):
        result = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        assert result == "div#main + table#data"

    def test_nested_combine(self):
        result = builder.combine(
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
        ).stringify()
        assert result == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_result_as_left_operand(self):
        result = builder.combine(
            builder.combine(builder.element("a"), ">", builder.element("b")),
            "~",
            builder.element("c"),
        ).stringify()
        assert result == "a > b ~ c"
