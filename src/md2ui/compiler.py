#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/compiler.py
"""Compile a (filtered) hypertext tree into UI elements.

For every element the compiler resolves a renderer, maps its properties,
sanitizes ``href``/``src`` values, adds element-specific props, compiles its
children and assigns a key derived from its position in the tree:

==========  ===========================================================
tag         added props
==========  ===========================================================
h1..h6      ``level``
ol, ul      ``ordered``, ``depth`` (0 for the outermost list)
li          ``ordered``, ``checked`` (None unless a task item), ``index``
code        ``inline`` (only when not inside ``pre``)
tr          ``isHeader`` (inside ``thead``)
th, td      ``isHeader`` (``th`` only)
==========  ===========================================================

Custom renderers also receive ``node`` and, when enabled, ``index``,
``siblingCount`` and ``sourcePosition``.

Text becomes plain strings; comments are omitted. The compiler walks the
tree with an explicit stack and keeps no state between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple, Optional

from md2ui.ast.nodes import Comment, Element, Node, ParentNode, Raw, Root, Text
from md2ui.components import PlainTag
from md2ui.constants import HEADING_TAGS, LIST_TAGS, ROOT_KEY, SOURCE_POSITION_ATTRIBUTE, TABLE_CELL_TAGS
from md2ui.deprecation import WarningRegistry
from md2ui.elements import CompiledChild, CompiledElement
from md2ui.options import RenderOptions, coerce_options
from md2ui.properties import map_properties

logger = logging.getLogger(__name__)


class _Frame(NamedTuple):
    """Pending node together with everything derived from its ancestors."""

    node: Node
    parent: ParentNode
    output: list[CompiledChild]
    key: str
    element_index: int
    list_item_index: int
    sibling_count: int
    list_depth: int


def _find_task_checkbox(node: Element) -> Optional[Element]:
    """Return the checkbox marking ``node`` as a task-list item, if any.

    The checkbox is searched among the item's direct children, then inside a
    leading paragraph (loose lists wrap item content in ``p``).
    """
    candidates = node.children
    first_element = next((child for child in node.children if isinstance(child, Element)), None)
    if first_element is not None and first_element.tag_name == "p":
        candidates = [*node.children, *first_element.children]

    for child in candidates:
        if isinstance(child, Element) and child.tag_name == "input":
            input_type = child.properties.get("type")
            if input_type is None or str(input_type).lower() == "checkbox":
                return child
    return None


def _is_checked(checkbox: Element) -> bool:
    # Attributes parsed from markup carry an empty string when present
    value = checkbox.properties.get("checked")
    if value is None or isinstance(value, bool):
        return bool(value)
    return True


class AstToUiCompiler:
    """Compiler turning hypertext nodes into :class:`CompiledElement` trees.

    Parameters
    ----------
    options : RenderOptions
        Render configuration; only read

    """

    def __init__(self, options: RenderOptions):
        """Store options and resolve the URI policies once."""
        self.options = options
        self.components = options.components
        self._transform_link_uri = options.link_uri_transform
        self._transform_image_uri = options.image_uri_transform

    def compile(self, tree: ParentNode, key: str = ROOT_KEY) -> list[CompiledChild]:
        """Compile the children of ``tree``.

        Parameters
        ----------
        tree : Root or Element
            Filtered tree; the top node itself is not compiled
        key : str, default "root"
            Key of the top node, prefix of every generated key

        Returns
        -------
        list
            Compiled elements and text strings, in document order

        """
        output: list[CompiledChild] = []
        stack: list[_Frame] = []
        self._push_children(stack, tree, output, key, list_depth=0)

        while stack:
            frame = stack.pop()
            node = frame.node

            if isinstance(node, Text):
                frame.output.append(node.value)
            elif isinstance(node, Comment):
                continue
            elif isinstance(node, Raw):
                # Raw HTML that was neither parsed nor skipped is shown as text
                frame.output.append(node.value)
            elif isinstance(node, Element) and not node.tag_name:
                # Nameless elements cannot be rendered; their children take their place
                logger.debug("Unwrapping element without a tag name at %s", frame.key)
                self._push_children(stack, node, frame.output, frame.key, list_depth=frame.list_depth)
            elif isinstance(node, Element):
                element = self._compile_element(frame)
                frame.output.append(element)
                depth = frame.list_depth + 1 if node.tag_name in LIST_TAGS else frame.list_depth
                self._push_children(stack, node, element.children, element.key, list_depth=depth)
            else:
                logger.debug("Ignoring unsupported node type %s", type(node).__name__)

        return output

    def _push_children(
        self,
        stack: list[_Frame],
        parent: ParentNode,
        output: list[CompiledChild],
        parent_key: str,
        list_depth: int,
    ) -> None:
        sibling_count = sum(1 for child in parent.children if isinstance(child, Element))
        frames: list[_Frame] = []
        element_index = 0
        list_item_index = 0
        for index, child in enumerate(parent.children):
            frames.append(
                _Frame(
                    node=child,
                    parent=parent,
                    output=output,
                    key=f"{parent_key}-{index}",
                    element_index=element_index,
                    list_item_index=list_item_index,
                    sibling_count=sibling_count,
                    list_depth=list_depth,
                )
            )
            if isinstance(child, Element):
                element_index += 1
                if child.tag_name == "li":
                    list_item_index += 1
        stack.extend(reversed(frames))

    def _compile_element(self, frame: _Frame) -> CompiledElement:
        node = frame.node
        assert isinstance(node, Element)
        tag_name = node.tag_name
        renderer = self.components.resolve(tag_name)
        plain = isinstance(renderer, PlainTag)

        props = map_properties(tag_name, node.properties)
        self._apply_uri_policies(node, props)
        props.update(self._semantic_props(frame))

        if self.options.source_pos and node.position is not None:
            props[SOURCE_POSITION_ATTRIBUTE] = str(node.position)

        if not plain:
            props["node"] = node
            if self.options.include_element_index:
                props["index"] = frame.element_index
                props["siblingCount"] = frame.sibling_count
            if self.options.raw_source_pos and node.position is not None:
                props["sourcePosition"] = node.position

        element_type: Any = renderer.name if isinstance(renderer, PlainTag) else renderer
        return CompiledElement(type=element_type, props=props, children=[], key=frame.key)

    def _apply_uri_policies(self, node: Element, props: dict[str, Any]) -> None:
        title = props.get("title")

        if node.tag_name == "a" and self.options.link_target is not None:
            # Computed from the href before it is transformed
            target = self.options.link_target
            if not isinstance(target, str):
                target = target(str(props.get("href") or ""), node.children, title)
            if target:
                props["target"] = target

        if "href" in props:
            props["href"] = self._transform_link_uri(props["href"], node.children, title)

        if "src" in props:
            props["src"] = self._transform_image_uri(props["src"], props.get("alt"), title)

        for name in ("href", "src"):
            if name in props and props[name] is None:
                del props[name]

    def _semantic_props(self, frame: _Frame) -> dict[str, Any]:
        node = frame.node
        assert isinstance(node, Element)
        tag_name = node.tag_name
        parent = frame.parent
        parent_tag = parent.tag_name if isinstance(parent, Element) else None
        semantic: dict[str, Any] = {}

        if tag_name in HEADING_TAGS:
            semantic["level"] = int(tag_name[1])
        elif tag_name in LIST_TAGS:
            semantic["ordered"] = tag_name == "ol"
            semantic["depth"] = frame.list_depth
        elif tag_name == "li":
            checkbox = _find_task_checkbox(node)
            semantic["ordered"] = parent_tag == "ol"
            semantic["checked"] = _is_checked(checkbox) if checkbox is not None else None
            semantic["index"] = frame.list_item_index
        elif tag_name == "code":
            if parent_tag != "pre":
                semantic["inline"] = True
        elif tag_name == "tr":
            semantic["isHeader"] = parent_tag == "thead"
        elif tag_name in TABLE_CELL_TAGS:
            semantic["isHeader"] = tag_name == "th"

        return semantic


def compile_tree(
    tree: ParentNode,
    options: RenderOptions | Mapping[str, Any] | None = None,
    warnings: WarningRegistry | None = None,
) -> list[CompiledChild]:
    """Compile a filtered tree into UI elements.

    Parameters
    ----------
    tree : Root or Element
        Filtered tree (see :func:`md2ui.filter.filter_tree`)
    options : RenderOptions or Mapping, optional
        Render configuration
    warnings : WarningRegistry, optional
        Caller-owned record of deprecation warnings already logged.
        Without a shared registry, deprecated options warn on every call.

    Returns
    -------
    list
        Compiled elements and text strings for the children of ``tree``

    Raises
    ------
    ConfigurationError
        If the options are invalid (including invalid component entries)

    Examples
    --------
    >>> from md2ui.ast import Element, Root, Text
    >>> [heading] = compile_tree(Root(children=[Element("h1", children=[Text("Title")])]))
    >>> heading.type, heading.props, heading.children, heading.key
    ('h1', {'level': 1}, ['Title'], 'root-0')

    """
    resolved = coerce_options(options, warnings=warnings)
    if not isinstance(tree, (Root, Element)):
        raise TypeError(f"Expected a Root or Element node, got {type(tree).__name__}")
    return AstToUiCompiler(resolved).compile(tree)


__all__ = ["AstToUiCompiler", "compile_tree"]
