#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/ast/nodes.py
"""Hypertext AST node classes.

This module defines the input tree consumed by md2ui: a generic hypertext
AST produced upstream (typically by converting a markdown AST), independent
of any rendering framework.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

    - Root: top-level container, never filtered
    - Element: a tag with properties and children
    - Text: character data
    - Comment: markup comment, never rendered
    - Raw: raw HTML text passed through from the markdown source

Nodes are treated as immutable by the filter and the compiler: every stage
builds new nodes instead of editing the ones it was given.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

PropertyValue = Union[str, int, float, bool, None, list[Union[str, int, float]]]


@dataclass(frozen=True)
class Point:
    """A single place in the source document.

    Parameters
    ----------
    line : int
        1-based line number
    column : int
        1-based column number
    offset : int or None, default = None
        0-based character offset

    """

    line: int
    column: int
    offset: Optional[int] = None


@dataclass(frozen=True)
class Position:
    """Source span attributed to a node.

    Positions are computed upstream and only forwarded by md2ui.

    Parameters
    ----------
    start : Point
        First character of the node
    end : Point
        Point just after the last character of the node

    """

    start: Point
    end: Point

    def __str__(self) -> str:
        """Format as ``line:column-line:column``."""
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


class Node(ABC):
    """Base class for all hypertext AST nodes.

    Parameters
    ----------
    position : Position or None, default = None
        Source span of this node, if known

    """

    type: str
    position: Optional[Position]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class Root(Node):
    """Root node containing the whole document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes
    position : Position or None, default = None
        Source span of the document

    """

    children: list[Node] = field(default_factory=list)
    position: Optional[Position] = None
    type = "root"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_root``."""
        return visitor.visit_root(self)


@dataclass
class Element(Node):
    """An element (tag) node.

    Parameters
    ----------
    tag_name : str
        Lower-case tag name, e.g. ``"a"`` or ``"h1"``
    properties : dict, default = empty dict
        Property name to value. Names may use the hast convention
        (``className``, ``dataFoo``) or the HTML attribute convention
        (``class``, ``data-foo``); they are normalized before mapping.
    children : list of Node, default = empty list
        Child nodes in document order
    position : Position or None, default = None
        Source span of the element

    """

    tag_name: str
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    position: Optional[Position] = None
    type = "element"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_element``."""
        return visitor.visit_element(self)


@dataclass
class Text(Node):
    """Character data.

    Parameters
    ----------
    value : str
        The text
    position : Position or None, default = None
        Source span of the text

    """

    value: str
    position: Optional[Position] = None
    type = "text"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Comment(Node):
    """A markup comment. Comments never reach the compiled output."""

    value: str
    position: Optional[Position] = None
    type = "comment"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_comment``."""
        return visitor.visit_comment(self)


@dataclass
class Raw(Node):
    """Raw HTML passed through from the markdown source.

    Depending on configuration a raw node is dropped (``skip_html``),
    parsed into elements by an HTML fragment parser, or shown as text.

    Parameters
    ----------
    value : str
        The raw HTML source text
    position : Position or None, default = None
        Source span of the raw HTML

    """

    value: str
    position: Optional[Position] = None
    type = "raw"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_raw``."""
        return visitor.visit_raw(self)


ParentNode = Union[Root, Element]


def copy_parent(node: ParentNode, children: list[Node]) -> ParentNode:
    """Shallow-copy a parent node with a new children list.

    Properties are copied so that later stages can never alias the input
    tree's mappings.

    Parameters
    ----------
    node : Root or Element
        Node to copy
    children : list of Node
        Children for the copy

    Returns
    -------
    Root or Element
        New node of the same type

    """
    if isinstance(node, Root):
        return Root(children=children, position=node.position)
    return Element(
        tag_name=node.tag_name,
        properties=dict(node.properties),
        children=children,
        position=node.position,
    )
