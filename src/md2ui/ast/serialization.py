#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/ast/serialization.py
"""Conversion between hast-style dictionaries/JSON and node dataclasses.

Upstream pipelines usually hand over the hypertext AST as plain data (the
``hast`` shape: ``{"type": "element", "tagName": "p", "properties": {},
"children": [...]}``). This module turns that data into the node classes of
:mod:`md2ui.ast.nodes` and back.

Examples
--------
    >>> from md2ui.ast.serialization import dict_to_ast
    >>> tree = dict_to_ast({
    ...     "type": "root",
    ...     "children": [
    ...         {"type": "element", "tagName": "h1", "properties": {},
    ...          "children": [{"type": "text", "value": "Title"}]},
    ...     ],
    ... })
    >>> tree.children[0].tag_name
    'h1'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from md2ui.ast.nodes import Comment, Element, Node, Point, Position, Raw, Root, Text
from md2ui.ast.visitors import NodeVisitor
from md2ui.exceptions import AstDeserializationError

logger = logging.getLogger(__name__)


def _serialize_position(position: Position | None) -> dict[str, Any] | None:
    if position is None:
        return None
    return {
        "start": {"line": position.start.line, "column": position.start.column, "offset": position.start.offset},
        "end": {"line": position.end.line, "column": position.end.column, "offset": position.end.offset},
    }


class HastDictSerializer(NodeVisitor):
    """Visitor producing hast-style dictionaries."""

    def _with_position(self, result: dict[str, Any], node: Node) -> dict[str, Any]:
        position = _serialize_position(node.position)
        if position is not None:
            result["position"] = position
        return result

    def visit_root(self, node: Root) -> dict[str, Any]:
        """Serialize a Root node."""
        return self._with_position({"type": "root", "children": [child.accept(self) for child in node.children]}, node)

    def visit_element(self, node: Element) -> dict[str, Any]:
        """Serialize an Element node."""
        properties = {name: list(value) if isinstance(value, list) else value for name, value in node.properties.items()}
        return self._with_position(
            {
                "type": "element",
                "tagName": node.tag_name,
                "properties": properties,
                "children": [child.accept(self) for child in node.children],
            },
            node,
        )

    def visit_text(self, node: Text) -> dict[str, Any]:
        """Serialize a Text node."""
        return self._with_position({"type": "text", "value": node.value}, node)

    def visit_comment(self, node: Comment) -> dict[str, Any]:
        """Serialize a Comment node."""
        return self._with_position({"type": "comment", "value": node.value}, node)

    def visit_raw(self, node: Raw) -> dict[str, Any]:
        """Serialize a Raw node."""
        return self._with_position({"type": "raw", "value": node.value}, node)


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its subtree) to a hast-style dictionary.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Examples
    --------
    >>> ast_to_dict(Text(value="Hello"))
    {'type': 'text', 'value': 'Hello'}

    """
    return node.accept(HastDictSerializer())


def _deserialize_point(data: Any) -> Point:
    if not isinstance(data, dict) or "line" not in data or "column" not in data:
        raise AstDeserializationError("Position points need 'line' and 'column'", node_data=data)
    return Point(line=int(data["line"]), column=int(data["column"]), offset=data.get("offset"))


def _deserialize_position(data: Any) -> Position | None:
    """Deserialize a position, returning None when the data is absent or empty."""
    if not data:
        return None
    if not isinstance(data, dict) or "start" not in data or "end" not in data:
        raise AstDeserializationError("Position needs 'start' and 'end' points", node_data=data)
    return Position(start=_deserialize_point(data["start"]), end=_deserialize_point(data["end"]))


def _deserialize_properties(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise AstDeserializationError("Element 'properties' must be a mapping", node_data=data)
    return {str(name): list(value) if isinstance(value, (list, tuple)) else value for name, value in data.items()}


def _deserialize_literal(cls: Callable[..., Node]) -> Callable[[dict[str, Any]], Node]:
    def deserialize(data: dict[str, Any]) -> Node:
        value = data.get("value", "")
        if not isinstance(value, str):
            raise AstDeserializationError(f"'{data.get('type')}' node value must be a string", node_data=data)
        return cls(value=value, position=_deserialize_position(data.get("position")))

    return deserialize


def _deserialize_root(data: dict[str, Any]) -> Root:
    return Root(position=_deserialize_position(data.get("position")))


def _deserialize_element(data: dict[str, Any]) -> Element:
    tag_name = data.get("tagName")
    if not isinstance(tag_name, str) or not tag_name:
        raise AstDeserializationError("Element nodes need a non-empty 'tagName'", node_data=data)
    return Element(
        tag_name=tag_name,
        properties=_deserialize_properties(data.get("properties")),
        position=_deserialize_position(data.get("position")),
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Node]] = {
    "root": _deserialize_root,
    "element": _deserialize_element,
    "text": _deserialize_literal(Text),
    "comment": _deserialize_literal(Comment),
    "raw": _deserialize_literal(Raw),
}


def _build_node(data: Any, strict_mode: bool) -> Node | None:
    if not isinstance(data, dict):
        raise AstDeserializationError("Nodes must be mappings", node_data=data)

    node_type = data.get("type")
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if isinstance(node_type, str) else None
    if deserializer is None:
        if strict_mode:
            raise AstDeserializationError(f"Unknown node type: {node_type!r}", node_data=data)
        logger.warning("Unknown node type %r, skipping", node_type)
        return None
    return deserializer(data)


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a hast-style dictionary into node dataclasses.

    The conversion walks the input with an explicit stack, so arbitrarily
    deep input does not exhaust the interpreter's recursion limit.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log a warning and
        skip them.

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    AstDeserializationError
        If the dictionary is malformed, or contains an unknown node type and
        strict_mode is True

    """
    top = _build_node(data, strict_mode)
    if top is None:
        raise AstDeserializationError(f"Unknown node type: {data.get('type')!r}", node_data=data)

    stack: list[tuple[Node, Any]] = [(top, data)]
    while stack:
        node, source = stack.pop()
        if not isinstance(node, (Root, Element)):
            continue
        children_data = source.get("children") or []
        if not isinstance(children_data, list):
            raise AstDeserializationError("'children' must be a list", node_data=source)
        for child_data in children_data:
            child = _build_node(child_data, strict_mode)
            if child is None:
                continue
            node.children.append(child)
            stack.append((child, child_data))

    return top


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to a JSON string.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string representation

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string into node dataclasses.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        If True, raise on unknown node types

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    AstDeserializationError
        If the JSON is invalid or describes a malformed tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise AstDeserializationError(f"Invalid JSON: {e}", original_error=e) from e
    return dict_to_ast(data, strict_mode=strict_mode)
