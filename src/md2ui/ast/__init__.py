#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/ast/__init__.py
"""Hypertext AST module.

The module consists of several components:

- nodes: node classes (Root, Element, Text, Comment, Raw) and positions
- visitors: Visitor pattern implementation for AST traversal
- serialization: conversion from and to hast-style dictionaries and JSON

Examples
--------
    >>> from md2ui.ast import Element, Root, Text
    >>> tree = Root(children=[Element("h1", children=[Text("Title")])])

"""

from __future__ import annotations

from md2ui.ast.nodes import (
    Comment,
    Element,
    Node,
    ParentNode,
    Point,
    Position,
    PropertyValue,
    Raw,
    Root,
    Text,
    copy_parent,
)
from md2ui.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from md2ui.ast.visitors import NodeVisitor

__all__ = [
    "Comment",
    "Element",
    "Node",
    "NodeVisitor",
    "ParentNode",
    "Point",
    "Position",
    "PropertyValue",
    "Raw",
    "Root",
    "Text",
    "ast_to_dict",
    "ast_to_json",
    "copy_parent",
    "dict_to_ast",
    "json_to_ast",
]
