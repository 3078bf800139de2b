#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/filter.py
"""Element filtering for hypertext trees.

The filter decides, for every element, whether it is kept, dropped with its
whole subtree, or unwrapped (replaced by its own children). Decisions are
made top-down: a parent is decided before its children, and the children of
an unwrapped element are decided one by one with the same rules, so they may
be unwrapped or dropped in turn.

The input tree is never modified; :func:`filter_tree` returns a new tree.
Traversal uses an explicit work stack, so deeply nested input cannot exhaust
the interpreter's recursion limit.

Examples
--------
    >>> from md2ui.ast import Element, Root, Text
    >>> tree = Root(children=[Element("p", children=[Element("em", children=[Text("hi")])])])
    >>> result = filter_tree(tree, RenderOptions(disallowed_elements=["em"], unwrap_disallowed=True))
    >>> result.children[0].children
    [Text(value='hi', position=None)]

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from md2ui.ast.nodes import Element, Node, ParentNode, Raw, copy_parent
from md2ui.exceptions import ConfigurationError
from md2ui.options import AllowElement, RenderOptions

logger = logging.getLogger(__name__)


class FilterDecision(Enum):
    """Verdict for a single element."""

    KEEP = "keep"
    DROP = "drop"
    UNWRAP = "unwrap"


class NodeFilter:
    """Filter configured with allow/deny rules.

    Parameters
    ----------
    allowed_elements : collection of str, optional
        Only these tags are kept
    disallowed_elements : collection of str, optional
        These tags are removed
    allow_element : callable, optional
        ``allow_element(element, index, parent) -> bool``; only consulted for
        elements, after the tag lists
    unwrap_disallowed : bool, default False
        Splice the children of disallowed elements into their place
    skip_html : bool, default False
        Drop raw HTML nodes

    Raises
    ------
    ConfigurationError
        If both ``allowed_elements`` and ``disallowed_elements`` are given

    """

    def __init__(
        self,
        allowed_elements: Any = None,
        disallowed_elements: Any = None,
        allow_element: Optional[AllowElement] = None,
        unwrap_disallowed: bool = False,
        skip_html: bool = False,
    ):
        """Validate and store the rules."""
        if allowed_elements is not None and disallowed_elements is not None:
            raise ConfigurationError(
                "Only one of `allowed_elements` and `disallowed_elements` should be defined",
                parameter_name="allowed_elements",
            )
        self.allowed_elements = frozenset(allowed_elements) if allowed_elements is not None else None
        self.disallowed_elements = frozenset(disallowed_elements) if disallowed_elements is not None else None
        self.allow_element = allow_element
        self.unwrap_disallowed = unwrap_disallowed
        self.skip_html = skip_html

    @classmethod
    def from_options(cls, options: RenderOptions) -> "NodeFilter":
        """Create a filter from render options."""
        return cls(
            allowed_elements=options.allowed_elements,
            disallowed_elements=options.disallowed_elements,
            allow_element=options.allow_element,
            unwrap_disallowed=options.unwrap_disallowed,
            skip_html=options.skip_html,
        )

    @property
    def is_noop(self) -> bool:
        """True when no rule can remove anything."""
        return (
            self.allowed_elements is None
            and self.disallowed_elements is None
            and self.allow_element is None
            and not self.skip_html
        )

    def is_allowed(self, element: Element, index: int, parent: ParentNode) -> bool:
        """Apply the tag lists, then the predicate, to one element."""
        if self.allowed_elements is not None:
            allowed = element.tag_name in self.allowed_elements
        elif self.disallowed_elements is not None:
            allowed = element.tag_name not in self.disallowed_elements
        else:
            allowed = True

        if allowed and self.allow_element is not None:
            allowed = bool(self.allow_element(element, index, parent))

        return allowed

    def decide(self, element: Element, index: int, parent: ParentNode) -> FilterDecision:
        """Return the verdict for ``element`` at ``index`` under ``parent``.

        Parameters
        ----------
        element : Element
            Element being decided (from the input tree)
        index : int
            Position the element would take in the filtered parent
        parent : Root or Element
            The filtered parent

        Returns
        -------
        FilterDecision
            KEEP, DROP or UNWRAP

        """
        if self.is_allowed(element, index, parent):
            return FilterDecision.KEEP
        if self.unwrap_disallowed:
            return FilterDecision.UNWRAP
        return FilterDecision.DROP

    def filter(self, tree: ParentNode) -> ParentNode:
        """Return a filtered copy of ``tree``.

        The top node itself is never filtered.

        Parameters
        ----------
        tree : Root or Element
            Tree to filter

        Returns
        -------
        Root or Element
            New tree containing kept nodes; text, comment and (unless
            ``skip_html``) raw nodes are carried over unchanged

        """
        result = copy_parent(tree, [])
        # (input node, filtered parent receiving it)
        stack: list[tuple[Node, ParentNode]] = [(child, result) for child in reversed(tree.children)]

        while stack:
            node, parent = stack.pop()

            if isinstance(node, Raw) and self.skip_html:
                logger.debug("Skipping raw HTML node")
                continue

            if not isinstance(node, Element):
                parent.children.append(node)
                continue

            decision = self.decide(node, len(parent.children), parent)
            if decision is FilterDecision.KEEP:
                copy = copy_parent(node, [])
                parent.children.append(copy)
                stack.extend((child, copy) for child in reversed(node.children))
            elif decision is FilterDecision.UNWRAP:
                logger.debug("Unwrapping disallowed <%s>", node.tag_name)
                stack.extend((child, parent) for child in reversed(node.children))
            else:
                logger.debug("Dropping disallowed <%s>", node.tag_name)

        return result


def filter_tree(tree: ParentNode, options: RenderOptions | NodeFilter | None = None) -> ParentNode:
    """Filter ``tree`` according to ``options``.

    Parameters
    ----------
    tree : Root or Element
        Tree to filter; never modified
    options : RenderOptions or NodeFilter, optional
        Filtering rules. Without rules the tree is copied unchanged.

    Returns
    -------
    Root or Element
        Filtered copy of the tree

    Raises
    ------
    ConfigurationError
        If both ``allowed_elements`` and ``disallowed_elements`` are set

    """
    if isinstance(options, NodeFilter):
        node_filter = options
    else:
        node_filter = NodeFilter.from_options(options or RenderOptions())
    return node_filter.filter(tree)
