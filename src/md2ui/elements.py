#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/elements.py
"""Output element tree.

The compiler produces :class:`CompiledElement` nodes whose children are
other compiled elements or plain strings. The tree is the hand-off point to a
rendering collaborator (a UI runtime, or :mod:`md2ui.renderers.html` for
static markup).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from md2ui.components import CustomRenderer


class _FragmentType:
    """Marker type for elements that render only their children."""

    _instance: "_FragmentType | None" = None

    def __new__(cls) -> "_FragmentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Fragment"


Fragment = _FragmentType()

ElementType = Union[str, CustomRenderer, _FragmentType]


@dataclass
class CompiledElement:
    """A renderable UI element.

    Parameters
    ----------
    type : str, CustomRenderer or Fragment
        Tag name, custom renderer, or :data:`Fragment`
    props : dict, default = empty dict
        Props passed to the renderer
    children : list, default = empty list
        Child elements and text strings, in order
    key : str, default = ""
        Identity derived from the element's structural position

    """

    type: ElementType
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Union["CompiledElement", str]] = field(default_factory=list)
    key: str = ""

    @property
    def is_plain_tag(self) -> bool:
        """True when the element renders as a plain tag."""
        return isinstance(self.type, str)

    @property
    def tag_name(self) -> str | None:
        """Tag name for plain tags, None otherwise."""
        return self.type if isinstance(self.type, str) else None

    def iter_elements(self):
        """Yield this element and every descendant element, pre-order."""
        stack: list[CompiledElement] = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(child for child in reversed(element.children) if isinstance(child, CompiledElement))

    def text_content(self) -> str:
        """Concatenate all text leaves below this element."""
        parts: list[str] = []
        stack: list[CompiledElement | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            else:
                stack.extend(reversed(item.children))
        return "".join(parts)


CompiledChild = Union[CompiledElement, str]
