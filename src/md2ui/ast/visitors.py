#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/ast/visitors.py
"""Visitor pattern implementation for hypertext AST traversal.

Visitors separate algorithms (serialization, validation) from the node
classes. Each node's ``accept`` dispatches to the matching ``visit_*``
method.

Examples
--------
Count text characters in a tree:

    >>> class TextLength(NodeVisitor):
    ...     def visit_root(self, node):
    ...         return sum(child.accept(self) for child in node.children)
    ...     visit_element = visit_root
    ...     def visit_text(self, node):
    ...         return len(node.value)
    ...     def visit_comment(self, node):
    ...         return 0
    ...     visit_raw = visit_comment

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2ui.ast.nodes import Comment, Element, Raw, Root, Text


class NodeVisitor(ABC):
    """Abstract base class for hypertext AST visitors."""

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit a Root node.

        Parameters
        ----------
        node : Root
            The root node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_element(self, node: Element) -> Any:
        """Visit an Element node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_raw(self, node: Raw) -> Any:
        """Visit a Raw node."""
        pass
