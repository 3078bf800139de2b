#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/renderers/html.py
"""Static markup rendering of compiled UI elements.

This module provides the StaticMarkupRenderer class which serializes a
:class:`~md2ui.elements.CompiledElement` tree to an HTML string, the way a
UI runtime renders components on the server. Custom renderers are invoked
with their props (plus ``children``) and whatever they return is rendered
in their place.

Props are mapped back to attribute names (``className`` becomes ``class``),
style mappings are serialized as ``name:value`` declarations, and the
element-specific props added by the compiler (``level``, ``ordered`` and
friends) are not emitted.

"""

from __future__ import annotations

import logging
import re
from html import escape
from typing import Any, Mapping, NamedTuple

from md2ui.components import CustomRenderer
from md2ui.constants import VENDOR_STYLE_PREFIXES, VOID_ELEMENTS
from md2ui.elements import CompiledElement, Fragment
from md2ui.properties.schema import PROPERTIES_BY_NAME

logger = logging.getLogger(__name__)

# Props only meaningful to custom renderers
_SEMANTIC_PROPS = frozenset(
    {
        "checked",
        "children",
        "depth",
        "index",
        "inline",
        "isHeader",
        "level",
        "node",
        "ordered",
        "siblingCount",
        "sourcePosition",
    }
)

# Tags on which a semantic prop name is a real attribute
_ATTRIBUTE_EXCEPTIONS = {"checked": frozenset({"input"})}

_ATTRIBUTE_BY_UI_NAME = {info.ui_name: info.attribute for info in PROPERTIES_BY_NAME.values()}

_UPPERCASE_RE = re.compile(r"[A-Z]")


class _Markup(NamedTuple):
    """Literal markup queued for output, never escaped."""

    text: str


def style_declaration_name(name: str) -> str:
    """Convert a UI style name back to its CSS property name.

    Examples
    --------
    >>> style_declaration_name("fontWeight")
    'font-weight'
    >>> style_declaration_name("-webkit-transition")
    '-webkit-transition'

    """
    if name.startswith("--") or name.startswith(VENDOR_STYLE_PREFIXES):
        return name
    return _UPPERCASE_RE.sub(lambda m: "-" + m.group(0).lower(), name)


def serialize_style(style: Mapping[str, Any]) -> str:
    """Serialize a style mapping as ``name:value;name:value``."""
    return ";".join(
        f"{style_declaration_name(str(name))}:{value}" for name, value in style.items() if value not in (None, "")
    )


def _attribute_name(ui_name: str) -> str:
    return _ATTRIBUTE_BY_UI_NAME.get(ui_name, ui_name)


class StaticMarkupRenderer:
    """Serialize compiled elements to HTML.

    The renderer keeps its output buffer only for the duration of one
    :meth:`render_to_string` call.

    """

    def __init__(self) -> None:
        """Initialize the renderer with an empty output buffer."""
        self._output: list[str] = []

    def render_to_string(self, element: Any) -> str:
        """Render a compiled element (or string, list, None) to HTML.

        Parameters
        ----------
        element : CompiledElement, str, list or None
            What to render

        Returns
        -------
        str
            HTML text

        Raises
        ------
        TypeError
            If a custom renderer returns something that cannot be rendered

        """
        self._output = []
        stack: list[Any] = [element]

        while stack:
            item = stack.pop()
            if item is None or isinstance(item, bool):
                continue
            if isinstance(item, _Markup):
                self._output.append(item.text)
            elif isinstance(item, str):
                self._output.append(escape(item))
            elif isinstance(item, (int, float)):
                self._output.append(str(item))
            elif isinstance(item, (list, tuple)):
                stack.extend(reversed(item))
            elif isinstance(item, CompiledElement):
                self._push_element(stack, item)
            else:
                raise TypeError(f"Cannot render object of type {type(item).__name__}")

        return "".join(self._output)

    def _push_element(self, stack: list[Any], element: CompiledElement) -> None:
        if element.type is Fragment:
            stack.extend(reversed(element.children))
            return

        if isinstance(element.type, CustomRenderer) or callable(element.type):
            props = dict(element.props)
            props["children"] = list(element.children)
            stack.append(element.type(props))
            return

        tag_name = str(element.type)
        attributes = self._render_attributes(tag_name, element.props)
        if tag_name in VOID_ELEMENTS:
            self._output.append(f"<{tag_name}{attributes}/>")
            return

        self._output.append(f"<{tag_name}{attributes}>")
        stack.append(_Markup(f"</{tag_name}>"))
        stack.extend(reversed(element.children))

    def _render_attributes(self, tag_name: str, props: Mapping[str, Any]) -> str:
        parts: list[str] = []
        for name, value in props.items():
            if name in _SEMANTIC_PROPS and tag_name not in _ATTRIBUTE_EXCEPTIONS.get(name, ()):
                continue
            if value is None or value is False or callable(value):
                continue

            attribute = _attribute_name(name)
            if value is True:
                parts.append(f' {attribute}=""')
            elif name == "style" and isinstance(value, Mapping):
                declarations = serialize_style(value)
                if declarations:
                    parts.append(f' style="{escape(declarations)}"')
            elif isinstance(value, (str, int, float)):
                parts.append(f' {attribute}="{escape(str(value))}"')
            else:
                logger.debug("Not rendering prop %r of type %s", name, type(value).__name__)

        return "".join(parts)


def render_to_static_markup(element: Any) -> str:
    """Render compiled elements to an HTML string.

    Parameters
    ----------
    element : CompiledElement, str, list or None
        Output of :func:`md2ui.render` or part of it

    Returns
    -------
    str
        HTML text

    Examples
    --------
    >>> from md2ui.elements import CompiledElement
    >>> render_to_static_markup(CompiledElement("h1", {"level": 1}, ["Title"]))
    '<h1>Title</h1>'

    """
    return StaticMarkupRenderer().render_to_string(element)


__all__ = ["StaticMarkupRenderer", "render_to_static_markup", "serialize_style", "style_declaration_name"]
