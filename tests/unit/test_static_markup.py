#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_static_markup.py
"""Unit tests for static markup rendering of compiled elements.

Tests cover:
- Attribute names, booleans and style serialization
- Escaping of text and attribute values
- Void elements and fragments
- Invocation of custom renderers
- Semantic props that must not leak into markup

"""

import pytest

from md2ui.components import CustomRenderer
from md2ui.elements import CompiledElement, Fragment
from md2ui.renderers.html import render_to_static_markup, serialize_style, style_declaration_name


def el(type_, props=None, *children):
    """Build a compiled element."""
    return CompiledElement(type=type_, props=dict(props or {}), children=list(children))


@pytest.mark.unit
class TestAttributes:
    """Tests for prop to attribute serialization."""

    def test_class_and_for(self):
        """Test that UI prop names map back to attribute names."""
        assert render_to_static_markup(el("label", {"className": "a b", "htmlFor": "x"}, "L")) == (
            '<label class="a b" for="x">L</label>'
        )

    def test_booleans(self):
        """Test that true booleans render empty and false ones are omitted."""
        assert render_to_static_markup(el("input", {"type": "checkbox", "checked": True, "disabled": False})) == (
            '<input type="checkbox" checked=""/>'
        )

    def test_style(self):
        """Test style mapping serialization."""
        markup = render_to_static_markup(el("td", {"style": {"textAlign": "left", "-webkit-transition": "none"}}))
        assert markup == '<td style="text-align:left;-webkit-transition:none"></td>'

    def test_data_and_aria(self):
        """Test that hyphenated attributes are emitted unchanged."""
        assert render_to_static_markup(el("i", {"data-whatever": "x", "aria-label": "y"})) == (
            '<i data-whatever="x" aria-label="y"></i>'
        )

    def test_svg_names(self):
        """Test SVG attribute spelling."""
        assert render_to_static_markup(el("svg", {"viewBox": "0 0 1 1", "strokeWidth": "2"})) == (
            '<svg viewBox="0 0 1 1" stroke-width="2"></svg>'
        )

    def test_semantic_props_are_not_emitted(self):
        """Test that compiler-added props stay out of markup."""
        tree = el(
            "ul",
            {"ordered": False, "depth": 0},
            el("li", {"ordered": False, "checked": True, "index": 0}, "x"),
        )
        assert render_to_static_markup(tree) == "<ul><li>x</li></ul>"
        assert render_to_static_markup(el("h1", {"level": 1}, "T")) == "<h1>T</h1>"
        assert render_to_static_markup(el("code", {"inline": True}, "c")) == "<code>c</code>"

    def test_escaping(self):
        """Test that text and attribute values are escaped."""
        assert render_to_static_markup(el("a", {"title": 'say "hi"'}, "<b> & co")) == (
            '<a title="say &quot;hi&quot;">&lt;b&gt; &amp; co</a>'
        )


@pytest.mark.unit
class TestStructure:
    """Tests for elements, fragments and custom renderers."""

    def test_void_elements(self):
        """Test that void elements self-close and ignore children."""
        assert render_to_static_markup(el("p", {}, "a", el("br"), "b", el("hr"))) == "<p>a<br/>b<hr/></p>"

    def test_fragment(self):
        """Test that fragments render only their children."""
        assert render_to_static_markup(el(Fragment, {}, el("p", {}, "a"), "b")) == "<p>a</p>b"

    def test_plain_values(self):
        """Test strings, numbers, lists and None."""
        assert render_to_static_markup(["a", None, 1, [el("em", {}, "b")]]) == "a1<em>b</em>"

    def test_custom_renderer(self):
        """Test that custom renderers receive props plus children."""
        received = {}

        def heading(props):
            received.update(props)
            return el(f"h{props['level'] + 1}", {}, *props["children"])

        tree = el(CustomRenderer(heading), {"level": 1, "node": object()}, "Title")
        assert render_to_static_markup(tree) == "<h2>Title</h2>"
        assert received["children"] == ["Title"]
        assert received["level"] == 1

    def test_custom_renderer_returning_none(self):
        """Test that a renderer returning None renders nothing."""
        assert render_to_static_markup(el("p", {}, el(CustomRenderer(lambda props: None), {}, "x"))) == "<p></p>"

    def test_invalid_render_result(self):
        """Test that unrenderable objects raise TypeError."""
        with pytest.raises(TypeError):
            render_to_static_markup(el(CustomRenderer(lambda props: object())))


@pytest.mark.unit
class TestStyleHelpers:
    """Tests for style name conversion helpers."""

    def test_declaration_name(self):
        """Test camelCase to CSS name conversion."""
        assert style_declaration_name("backgroundColor") == "background-color"
        assert style_declaration_name("--accent") == "--accent"

    def test_serialize_style_skips_empty(self):
        """Test that empty values are skipped."""
        assert serialize_style({"color": "red", "width": "", "height": None}) == "color:red"
