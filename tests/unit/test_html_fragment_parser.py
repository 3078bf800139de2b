#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_fragment_parser.py
"""Unit tests for the raw HTML fragment parser.

Tests cover:
- Configuration lifecycle and the not-configured error
- Conversion of tags, text and comments
- Source positions on parsed elements
- Validity predicate and processing instructions
- Missing dependency reporting

"""

import importlib

import pytest
from utils import position, raw

from md2ui.ast import Comment, Element, Text
from md2ui.exceptions import DependencyError, HtmlParserNotConfiguredError
from md2ui.parsers.html_fragment import HtmlFragmentParser, ProcessingInstruction, create_html_parser
from md2ui.utils import decorators


@pytest.mark.unit
class TestConfiguration:
    """Tests for parser configuration."""

    def test_unconfigured_parser_raises(self):
        """Test that using the parser before configuring it fails clearly."""
        parser = HtmlFragmentParser()
        assert parser.configured is False
        with pytest.raises(HtmlParserNotConfiguredError, match="called before use"):
            parser.parse(raw("<b>x</b>"))

    def test_configure_returns_parser(self):
        """Test that configure enables the parser and supports chaining."""
        parser = HtmlFragmentParser()
        assert parser.configure() is parser
        assert parser.configured is True

    def test_factory(self):
        """Test that create_html_parser returns a configured parser."""
        assert create_html_parser().configured is True


@pytest.mark.unit
class TestConversion:
    """Tests for converting markup into nodes."""

    def test_tags_and_text(self):
        """Test that tags become elements and text becomes text nodes."""
        nodes = create_html_parser()(raw('<b class="a b">hi</b> there'))
        assert nodes == [Element("b", {"class": ["a", "b"]}, [Text("hi")]), Text(" there")]

    def test_nested_elements(self):
        """Test nesting and attribute values."""
        [div] = create_html_parser().parse(raw('<div id="x"><a href="/y">link</a></div>'))
        assert div.tag_name == "div"
        assert div.properties == {"id": "x"}
        assert div.children == [Element("a", {"href": "/y"}, [Text("link")])]

    def test_comments(self):
        """Test that markup comments become comment nodes."""
        assert create_html_parser().parse(raw("<!-- note -->")) == [Comment(" note ")]

    def test_boolean_attribute(self):
        """Test that attributes without a value are kept as empty strings."""
        [checkbox] = create_html_parser().parse(raw('<input type="checkbox" checked>'))
        assert checkbox.properties == {"type": "checkbox", "checked": ""}

    def test_positions_are_copied(self):
        """Test that every parsed element carries the raw node's position."""
        pos = position(4, 1, 4, 30)
        [outer] = create_html_parser().parse(raw("<p><em>x</em></p>", pos=pos))
        assert outer.position == pos
        assert outer.children[0].position == pos


@pytest.mark.unit
@pytest.mark.security
class TestHooks:
    """Tests for the validity predicate and processing instructions."""

    def test_invalid_nodes_are_dropped_with_subtree(self):
        """Test that rejected elements disappear with their children."""
        parser = create_html_parser(is_valid_node=lambda element: element.tag_name != "script")
        nodes = parser.parse(raw("<p>a<script>alert(1)</script>b</p><script>x</script>"))
        assert nodes == [Element("p", {}, [Text("a"), Text("b")])]

    def test_processing_instruction_replaces_element(self):
        """Test replacing an element by the instruction's result."""
        instruction = ProcessingInstruction("x-note", lambda element: Text("[note]"))
        parser = create_html_parser(processing_instructions=[instruction])
        assert parser.parse(raw("<p><x-note>hidden</x-note></p>")) == [Element("p", {}, [Text("[note]")])]

    def test_processing_instruction_can_drop_or_expand(self):
        """Test None and list results."""
        instructions = [
            ProcessingInstruction("iframe", lambda element: None),
            ProcessingInstruction("span", lambda element: element.children),
        ]
        parser = create_html_parser(processing_instructions=instructions)
        assert parser.parse(raw("<iframe></iframe><span>a<b>b</b></span>")) == [
            Text("a"),
            Element("b", {}, [Text("b")]),
        ]

    def test_first_matching_instruction_wins(self):
        """Test instruction ordering."""
        instructions = [
            ProcessingInstruction("em", lambda element: Text("first")),
            ProcessingInstruction("em", lambda element: Text("second")),
        ]
        parser = create_html_parser(processing_instructions=instructions)
        assert parser.parse(raw("<em>x</em>")) == [Text("first")]

    def test_predicate_runs_before_instructions(self):
        """Test that invalid elements never reach processing instructions."""
        calls = []
        parser = create_html_parser(
            is_valid_node=lambda element: False,
            processing_instructions=[ProcessingInstruction("em", lambda element: calls.append(element))],
        )
        assert parser.parse(raw("<em>x</em>")) == []
        assert calls == []


@pytest.mark.unit
class TestDependencies:
    """Tests for dependency checking."""

    def test_missing_beautifulsoup_raises_dependency_error(self, monkeypatch):
        """Test that a missing bs4 is reported with an install hint."""
        real_import_module = importlib.import_module

        def fake_import_module(name, *args, **kwargs):
            if name == "bs4":
                raise ImportError("No module named 'bs4'")
            return real_import_module(name, *args, **kwargs)

        monkeypatch.setattr(importlib, "import_module", fake_import_module)
        with pytest.raises(DependencyError) as exc_info:
            create_html_parser().parse(raw("<b>x</b>"))
        assert exc_info.value.missing_packages == [("beautifulsoup4", ">=4.9.0")]
        assert "pip install" in exc_info.value.install_command

    def test_outdated_beautifulsoup_raises_dependency_error(self, monkeypatch):
        """Test that an installed bs4 below the required version is reported."""
        monkeypatch.setattr(decorators.metadata, "version", lambda name: "4.0.0")
        with pytest.raises(DependencyError) as exc_info:
            create_html_parser().parse(raw("<b>x</b>"))
        assert exc_info.value.version_mismatches == [("beautifulsoup4", ">=4.9.0", "4.0.0")]
        assert "version mismatches" in str(exc_info.value)
