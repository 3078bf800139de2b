#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_property_mapper.py
"""Unit tests for property schema lookups and property mapping.

Tests cover:
- Canonical and attribute-form property names
- data-* and aria-* attribute restoration
- Value typing (booleans, comma/space separated lists)
- Inline style parsing and tolerance to malformed declarations
- Table cell alignment moved into style
- SVG properties

"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2ui.properties import (
    find,
    map_properties,
    parse_style,
    restore_aria_attribute,
    restore_data_attribute,
    style_property_name,
)
from md2ui.renderers.html import style_declaration_name


@pytest.mark.unit
class TestSchemaLookup:
    """Tests for the property schema."""

    def test_find_by_property_name(self):
        """Test lookup by canonical property name."""
        info = find("className")
        assert info is not None
        assert info.attribute == "class"
        assert info.space_separated

    def test_find_by_attribute_name(self):
        """Test lookup by markup attribute name."""
        assert find("class").property == "className"
        assert find("for").property == "htmlFor"
        assert find("accept-charset").property == "acceptCharset"
        assert find("stroke-width").property == "strokeWidth"

    def test_find_unknown(self):
        """Test that unknown names are not found."""
        assert find("fooBar") is None
        assert find("") is None

    def test_data_attributes(self):
        """Test that data properties resolve to hyphenated attributes."""
        assert restore_data_attribute("dataFooBar") == "data-foo-bar"
        assert find("dataWhatever").ui_name == "data-whatever"
        assert find("data-whatever").ui_name == "data-whatever"

    def test_aria_attributes(self):
        """Test that aria properties resolve to lower-case attributes."""
        assert restore_aria_attribute("ariaDescribedBy") == "aria-describedby"
        assert find("ariaLabel").ui_name == "aria-label"

    def test_ui_name_overrides(self):
        """Test properties whose UI prop name differs from the canonical name."""
        assert find("xLinkHref").ui_name == "xlinkHref"
        assert find("strokeDashArray").ui_name == "strokeDasharray"


@pytest.mark.unit
class TestParseStyle:
    """Tests for inline style parsing."""

    def test_basic(self):
        """Test parsing declarations into UI style names."""
        assert parse_style("color: red; font-weight: bold") == {"color": "red", "fontWeight": "bold"}

    def test_vendor_prefix_and_custom_property(self):
        """Test that vendor prefixes and custom properties are kept verbatim."""
        assert parse_style("-webkit-transition: all 1s; --accent: blue") == {
            "-webkit-transition": "all 1s",
            "--accent": "blue",
        }

    def test_value_containing_colon(self):
        """Test that only the first colon splits a declaration."""
        assert parse_style("background: url(http://example.com/a.png)") == {
            "background": "url(http://example.com/a.png)"
        }

    def test_malformed_declarations_are_dropped_individually(self):
        """Test that broken declarations do not discard the rest."""
        assert parse_style("broken; color: red; : nothing; width:") == {"color": "red"}

    def test_empty(self):
        """Test that an empty style yields an empty mapping."""
        assert parse_style("") == {}
        assert parse_style(" ; ; ") == {}


@pytest.mark.unit
class TestMapProperties:
    """Tests for map_properties."""

    def test_class_and_data(self):
        """Test class lists and data attributes."""
        assert map_properties("i", {"className": ["a", "b"], "dataWhatever": "x"}) == {
            "className": "a b",
            "data-whatever": "x",
        }

    def test_attribute_form_names(self):
        """Test that HTML attribute names are normalized."""
        assert map_properties("label", {"class": "a b", "for": "field"}) == {"className": "a b", "htmlFor": "field"}

    def test_comma_separated_and_boolean(self):
        """Test comma-joined lists and presence booleans."""
        assert map_properties("input", {"accept": ["a", "b"], "required": "", "disabled": False}) == {
            "accept": "a, b",
            "required": True,
            "disabled": False,
        }

    def test_missing_values_are_dropped(self):
        """Test that None and NaN values are dropped."""
        assert map_properties("img", {"alt": None, "width": math.nan, "src": "a.png"}) == {"src": "a.png"}

    def test_unknown_properties_are_dropped(self):
        """Test that properties outside the schema are dropped."""
        assert map_properties("div", {"fooBar": "x", "id": "main"}) == {"id": "main"}

    def test_style_string_becomes_mapping(self):
        """Test inline style conversion."""
        assert map_properties("span", {"style": "color:red;-ms-transform:none"}) == {
            "style": {"color": "red", "-ms-transform": "none"}
        }

    def test_style_list_is_parsed(self):
        """Test that a style given as a list of declarations is parsed."""
        assert map_properties("span", {"style": ["color: red", "font-weight: bold"]}) == {
            "style": {"color": "red", "fontWeight": "bold"}
        }

    def test_style_mapping_names_are_converted(self):
        """Test that an already split style gets UI names."""
        assert map_properties("span", {"style": {"font-weight": "bold"}}) == {"style": {"fontWeight": "bold"}}

    def test_empty_style_is_omitted(self):
        """Test that a style without valid declarations is omitted."""
        assert map_properties("span", {"style": "broken", "id": "x"}) == {"id": "x"}

    @pytest.mark.parametrize("tag_name", ["td", "th"])
    def test_cell_align_moves_into_style(self, tag_name):
        """Test that table cell alignment becomes style.textAlign."""
        assert map_properties(tag_name, {"align": "center"}) == {"style": {"textAlign": "center"}}

    def test_cell_align_merges_with_style(self):
        """Test that alignment is merged into an existing style."""
        assert map_properties("td", {"style": "color: red", "align": "right"}) == {
            "style": {"color": "red", "textAlign": "right"}
        }

    def test_align_kept_on_other_elements(self):
        """Test that alignment stays an attribute outside table cells."""
        assert map_properties("p", {"align": "left"}) == {"align": "left"}

    def test_svg_properties(self):
        """Test SVG property names in both forms."""
        assert map_properties(
            "svg",
            {"viewBox": "0 0 10 10", "stroke-width": "2", "xLinkHref": "#a", "xmlns": "http://www.w3.org/2000/svg"},
        ) == {"viewBox": "0 0 10 10", "strokeWidth": "2", "xlinkHref": "#a", "xmlns": "http://www.w3.org/2000/svg"}

    def test_lowercased_svg_attribute(self):
        """Test that SVG attributes lower-cased by an HTML parser are recognized."""
        assert map_properties("svg", {"viewbox": "0 0 1 1"}) == {"viewBox": "0 0 1 1"}

    def test_empty_input(self):
        """Test that missing properties map to an empty dict."""
        assert map_properties("p", None) == {}
        assert map_properties("p", {}) == {}

    def test_input_is_not_modified(self):
        """Test that the raw properties mapping is left untouched."""
        raw = {"className": ["a"], "style": "color: red"}
        map_properties("p", raw)
        assert raw == {"className": ["a"], "style": "color: red"}


@pytest.mark.unit
@pytest.mark.fuzzing
class TestStyleNameProperties:
    """Property-based tests for style name conversion."""

    @given(st.from_regex(r"[a-z]+(-[a-z]+)*", fullmatch=True))
    def test_camel_case_has_no_hyphens(self, name):
        """Property: hyphenated CSS names become hyphen-free UI names."""
        converted = style_property_name(name)
        assert "-" not in converted
        assert style_declaration_name(converted) == name

    @given(st.text(max_size=100))
    def test_parse_style_never_raises(self, value):
        """Property: arbitrary style strings parse into a mapping."""
        result = parse_style(value)
        assert all(name and declared for name, declared in result.items())
