#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/api.py
"""High-level rendering entry point.

:func:`render` runs the whole pipeline on a hypertext tree:

1. validate the options (a ``RenderOptions`` or a mapping of option keys);
2. replace raw HTML nodes by parsed nodes when an ``html_parser`` is set;
3. filter elements (allow/deny lists, predicate, unwrapping, ``skip_html``);
4. compile the filtered tree into UI elements.

The result is a single :class:`~md2ui.elements.CompiledElement` whose type is
:data:`~md2ui.elements.Fragment`, or a ``div`` when ``class_name`` is set.

Examples
--------
    >>> from md2ui import render
    >>> from md2ui.ast import Element, Root, Text
    >>> result = render(Root(children=[Element("h1", children=[Text("Title")])]))
    >>> result.children[0].type, result.children[0].children
    ('h1', ['Title'])

"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from md2ui.ast.nodes import Element, Node, ParentNode, Raw, Root, copy_parent
from md2ui.ast.serialization import dict_to_ast
from md2ui.compiler import AstToUiCompiler
from md2ui.constants import ROOT_KEY
from md2ui.deprecation import WarningRegistry
from md2ui.elements import CompiledElement, Fragment
from md2ui.exceptions import ValidationError
from md2ui.filter import filter_tree
from md2ui.options import HtmlParser, RenderOptions, coerce_options

logger = logging.getLogger(__name__)


def _as_tree(tree: Any) -> ParentNode:
    if isinstance(tree, (Root, Element)):
        return tree
    if isinstance(tree, Mapping):
        node = dict_to_ast(dict(tree))
        if isinstance(node, (Root, Element)):
            return node
        return Root(children=[node])
    raise ValidationError(
        f"Expected a Root node or a hast dictionary, got {type(tree).__name__}",
        parameter_name="tree",
        parameter_value=tree,
    )


def expand_raw_html(tree: ParentNode, html_parser: HtmlParser) -> ParentNode:
    """Return a copy of ``tree`` with raw HTML nodes replaced by parsed nodes.

    Parameters
    ----------
    tree : Root or Element
        Tree possibly containing :class:`~md2ui.ast.Raw` nodes
    html_parser : callable
        ``html_parser(raw) -> list of Node``

    Returns
    -------
    Root or Element
        New tree; the input is not modified

    """
    result = copy_parent(tree, [])
    stack: list[tuple[Node, ParentNode]] = [(child, result) for child in reversed(tree.children)]

    while stack:
        node, parent = stack.pop()
        if isinstance(node, Raw):
            parsed = html_parser(node)
            logger.debug("Parsed raw HTML into %d node(s)", len(parsed))
            parent.children.extend(parsed)
        elif isinstance(node, Element):
            copy = copy_parent(node, [])
            parent.children.append(copy)
            stack.extend((child, copy) for child in reversed(node.children))
        else:
            parent.children.append(node)

    return result


def render(
    tree: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
    *,
    warnings: WarningRegistry | None = None,
) -> CompiledElement:
    """Render a hypertext tree into a UI element tree.

    Parameters
    ----------
    tree : Root, Element or dict
        The hypertext tree, or its hast-style dictionary form
    options : RenderOptions or Mapping, optional
        Render configuration. Mappings accept camelCase or snake_case keys.
    warnings : WarningRegistry, optional
        Caller-owned record of deprecation warnings already logged. Share one
        registry between calls to log each deprecated option once; when
        omitted, every call starts from a fresh registry and warns again.

    Returns
    -------
    CompiledElement
        A ``Fragment`` holding the compiled children, wrapped in a ``div``
        carrying ``className`` when ``class_name`` is set

    Raises
    ------
    ConfigurationError
        If the options are invalid
    ValidationError
        If ``tree`` is neither a node nor a dictionary
    AstDeserializationError
        If a dictionary tree is malformed
    HtmlParserNotConfiguredError
        If ``html_parser`` has not been configured

    """
    resolved = coerce_options(options, warnings=warnings)
    root = _as_tree(tree)

    if resolved.html_parser is not None and not resolved.skip_html:
        root = expand_raw_html(root, resolved.html_parser)

    filtered = filter_tree(root, resolved)
    children = AstToUiCompiler(resolved).compile(filtered, key=ROOT_KEY)
    fragment = CompiledElement(type=Fragment, props={}, children=children, key=ROOT_KEY)

    if resolved.class_name:
        return CompiledElement(type="div", props={"className": resolved.class_name}, children=[fragment], key=ROOT_KEY)
    return fragment


__all__ = ["expand_raw_html", "render"]
