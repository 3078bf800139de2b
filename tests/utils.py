"""Test utilities for md2ui test suite.

This module provides small builders for hypertext trees so tests can be
written compactly, plus helpers for inspecting compiled output.
"""

from typing import Any, Optional, Union

from md2ui.ast import Element, Node, Point, Position, Raw, Root, Text
from md2ui.elements import CompiledElement


def position(start_line: int, start_column: int, end_line: int, end_column: int) -> Position:
    """Build a source position from line/column pairs."""
    return Position(start=Point(start_line, start_column), end=Point(end_line, end_column))


def h(
    tag_name: str,
    properties: Optional[dict[str, Any]] = None,
    *children: Union[Node, str],
    pos: Optional[Position] = None,
) -> Element:
    """Build an element; string children become Text nodes."""
    return Element(
        tag_name=tag_name,
        properties=dict(properties or {}),
        children=[Text(child) if isinstance(child, str) else child for child in children],
        position=pos,
    )


def root(*children: Union[Node, str]) -> Root:
    """Build a root; string children become Text nodes."""
    return Root(children=[Text(child) if isinstance(child, str) else child for child in children])


def raw(value: str, pos: Optional[Position] = None) -> Raw:
    """Build a raw HTML node."""
    return Raw(value=value, position=pos)


def find_elements(element: CompiledElement, tag_name: str) -> list[CompiledElement]:
    """Return every compiled descendant (or self) rendered as ``tag_name``."""
    return [item for item in element.iter_elements() if item.type == tag_name]


def tag_names(tree: Node) -> list[str]:
    """Return the tag names of all elements in ``tree``, pre-order."""
    names: list[str] = []
    stack: list[Node] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Element):
            names.append(node.tag_name)
        if isinstance(node, (Root, Element)):
            stack.extend(reversed(node.children))
    return names
