#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_serialization.py
"""Unit tests for hast-style dictionary and JSON conversion.

Tests cover:
- Serializing each node type
- Deserializing trees with positions and properties
- Strict and lenient handling of unknown node types
- Malformed input

"""

import json

import pytest
from utils import h, position, raw, root

from md2ui.ast import Comment, Element, Point, Position, Root, Text, ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from md2ui.ast.visitors import NodeVisitor
from md2ui.exceptions import AstDeserializationError


@pytest.mark.unit
class TestAstToDict:
    """Tests for serialization."""

    def test_element(self):
        """Test serializing an element with properties and children."""
        node = h("a", {"href": "/x", "className": ["a", "b"]}, "link", pos=position(1, 1, 1, 10))
        assert ast_to_dict(node) == {
            "type": "element",
            "tagName": "a",
            "properties": {"href": "/x", "className": ["a", "b"]},
            "children": [{"type": "text", "value": "link"}],
            "position": {
                "start": {"line": 1, "column": 1, "offset": None},
                "end": {"line": 1, "column": 10, "offset": None},
            },
        }

    def test_leaves(self):
        """Test serializing text, comment and raw nodes."""
        assert ast_to_dict(root("a", Comment("b"), raw("<c>"))) == {
            "type": "root",
            "children": [
                {"type": "text", "value": "a"},
                {"type": "comment", "value": "b"},
                {"type": "raw", "value": "<c>"},
            ],
        }

    def test_json(self):
        """Test compact and indented JSON output."""
        tree = root(h("p", {}, "é"))
        assert json.loads(ast_to_json(tree)) == ast_to_dict(tree)
        assert "é" in ast_to_json(tree)
        assert "\n" in ast_to_json(tree, indent=2)


@pytest.mark.unit
class TestDictToAst:
    """Tests for deserialization."""

    def test_tree(self):
        """Test rebuilding a tree from hast dictionaries."""
        data = {
            "type": "root",
            "children": [
                {
                    "type": "element",
                    "tagName": "h1",
                    "properties": {"id": "title"},
                    "children": [{"type": "text", "value": "Title"}],
                    "position": {"start": {"line": 1, "column": 1, "offset": 0}, "end": {"line": 1, "column": 8}},
                },
                {"type": "text", "value": "\n"},
            ],
        }
        tree = dict_to_ast(data)
        assert tree == Root(
            children=[
                Element(
                    "h1",
                    {"id": "title"},
                    [Text("Title")],
                    Position(Point(1, 1, 0), Point(1, 8)),
                ),
                Text("\n"),
            ]
        )

    def test_missing_properties_default_to_empty(self):
        """Test that elements may omit properties and children."""
        assert dict_to_ast({"type": "element", "tagName": "hr"}) == Element("hr")

    def test_unknown_type_strict(self):
        """Test that unknown node types raise by default."""
        with pytest.raises(AstDeserializationError, match="Unknown node type"):
            dict_to_ast({"type": "root", "children": [{"type": "doctype"}]})

    def test_unknown_type_lenient(self):
        """Test that lenient mode skips unknown node types."""
        tree = dict_to_ast({"type": "root", "children": [{"type": "doctype"}, {"type": "text", "value": "x"}]}, False)
        assert tree == Root(children=[Text("x")])

    @pytest.mark.parametrize(
        "data",
        [
            {"type": "element"},
            {"type": "element", "tagName": "p", "properties": "x"},
            {"type": "text", "value": 3},
            {"type": "root", "children": "nope"},
            {"type": "root", "children": ["nope"]},
            {"type": "text", "value": "x", "position": {"start": {"line": 1}}},
        ],
    )
    def test_malformed(self, data):
        """Test that malformed dictionaries raise AstDeserializationError."""
        with pytest.raises(AstDeserializationError):
            dict_to_ast(data)

    def test_invalid_json(self):
        """Test that invalid JSON raises AstDeserializationError."""
        with pytest.raises(AstDeserializationError):
            json_to_ast("{not json")

    def test_json_round_trip(self, sample_tree):
        """Test that JSON serialization preserves the tree."""
        assert json_to_ast(ast_to_json(sample_tree)) == sample_tree


class TagCollector(NodeVisitor):
    """Visitor collecting element tag names."""

    def __init__(self):
        self.tags = []

    def visit_root(self, node):
        for child in node.children:
            child.accept(self)

    def visit_element(self, node):
        self.tags.append(node.tag_name)
        for child in node.children:
            child.accept(self)

    def visit_text(self, node):
        pass

    def visit_comment(self, node):
        pass

    def visit_raw(self, node):
        pass


@pytest.mark.unit
class TestVisitor:
    """Tests for visitor dispatch."""

    def test_accept_dispatches(self):
        """Test that accept calls the matching visit method."""
        collector = TagCollector()
        root(h("p", {}, h("em", {}, "x")), raw("<b>"), Comment("c")).accept(collector)
        assert collector.tags == ["p", "em"]
