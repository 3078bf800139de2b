#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/parsers/html_fragment.py
"""Raw HTML fragment parser.

Markdown documents may contain raw HTML. When an :class:`HtmlFragmentParser`
is passed as ``html_parser`` in the render options, every :class:`~md2ui.ast.Raw`
node is parsed with BeautifulSoup and replaced by the resulting nodes, which
then go through the same filtering and compilation as the rest of the tree.

The parser must be configured before use. Configuration sets the hooks that
decide which parsed elements survive:

- ``is_valid_node(element) -> bool``: elements for which it returns False are
  dropped together with their subtree;
- processing instructions: the first :class:`ProcessingInstruction` whose
  ``tag_name`` matches replaces the element with the result of its
  ``process`` callable.

Examples
--------
    >>> parser = create_html_parser(is_valid_node=lambda element: element.tag_name != "script")
    >>> [element.tag_name for element in parser.parse(Raw("<b>hi</b><script>x</script>"))]
    ['b']

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Union

from md2ui.ast.nodes import Comment, Element, Node, Raw, Text
from md2ui.constants import DEPS_HTML_FRAGMENT
from md2ui.exceptions import HtmlParserNotConfiguredError
from md2ui.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

NodeValidator = Callable[[Element], bool]
ProcessResult = Union[Node, list[Node], None]


@dataclass(frozen=True)
class ProcessingInstruction:
    """Replace elements with a given tag by the result of ``process``.

    Parameters
    ----------
    tag_name : str
        Tag the instruction applies to (compared case-insensitively)
    process : callable
        ``process(element)`` returning a node, a list of nodes, or None to
        drop the element

    """

    tag_name: str
    process: Callable[[Element], ProcessResult]

    def matches(self, element: Element) -> bool:
        """Check whether the instruction applies to ``element``."""
        return element.tag_name == self.tag_name.lower()


def _accept_all(_element: Element) -> bool:
    return True


class HtmlFragmentParser:
    """Parser turning raw HTML nodes into hypertext nodes.

    A new parser is unconfigured; call :meth:`configure` (or use
    :func:`create_html_parser`) before handing it to the renderer.

    Attributes
    ----------
    configured : bool
        True once :meth:`configure` has been called

    """

    def __init__(self) -> None:
        """Create an unconfigured parser."""
        self.configured = False
        self.is_valid_node: NodeValidator = _accept_all
        self.processing_instructions: tuple[ProcessingInstruction, ...] = ()

    def configure(
        self,
        is_valid_node: Optional[NodeValidator] = None,
        processing_instructions: Optional[Iterable[ProcessingInstruction]] = None,
    ) -> "HtmlFragmentParser":
        """Set the parser hooks and mark the parser as ready.

        Parameters
        ----------
        is_valid_node : callable, optional
            Predicate deciding whether a parsed element is kept; all
            elements are kept when omitted
        processing_instructions : iterable of ProcessingInstruction, optional
            Element replacement hooks, tried in order

        Returns
        -------
        HtmlFragmentParser
            This parser, for chaining

        """
        self.is_valid_node = is_valid_node if is_valid_node is not None else _accept_all
        self.processing_instructions = tuple(processing_instructions or ())
        self.configured = True
        return self

    def __call__(self, raw: Raw) -> list[Node]:
        """Parse ``raw``; see :meth:`parse`."""
        return self.parse(raw)

    def parse(self, raw: Raw) -> list[Node]:
        """Parse a raw HTML node into hypertext nodes.

        Parameters
        ----------
        raw : Raw
            Raw HTML node from the input tree

        Returns
        -------
        list of Node
            Parsed nodes, after the validity check and processing
            instructions. Every element carries the position of ``raw``.

        Raises
        ------
        HtmlParserNotConfiguredError
            If the parser has not been configured
        DependencyError
            If beautifulsoup4 is not installed

        """
        if not self.configured:
            raise HtmlParserNotConfiguredError()
        parsed = self._parse_markup(raw)
        return self._apply_hooks(parsed)

    @requires_dependencies("html fragment parser", DEPS_HTML_FRAGMENT)
    def _parse_markup(self, raw: Raw) -> list[Node]:
        from bs4 import BeautifulSoup
        from bs4.element import Comment as SoupComment
        from bs4.element import Declaration, Doctype, NavigableString, Tag
        from bs4.element import ProcessingInstruction as SoupProcessingInstruction

        soup = BeautifulSoup(raw.value, "html.parser")
        result: list[Node] = []
        stack: list[tuple[Any, list[Node]]] = [(child, result) for child in reversed(list(soup.children))]

        while stack:
            soup_node, output = stack.pop()

            if isinstance(soup_node, Tag):
                element = Element(
                    tag_name=soup_node.name.lower(),
                    properties=dict(soup_node.attrs),
                    children=[],
                    position=raw.position,
                )
                output.append(element)
                stack.extend((child, element.children) for child in reversed(list(soup_node.children)))
            elif isinstance(soup_node, SoupComment):
                output.append(Comment(value=str(soup_node)))
            elif isinstance(soup_node, (Doctype, Declaration, SoupProcessingInstruction)):
                logger.debug("Ignoring markup declaration in raw HTML: %r", str(soup_node))
            elif isinstance(soup_node, NavigableString):
                output.append(Text(value=str(soup_node)))

        return result

    def _apply_hooks(self, nodes: list[Node]) -> list[Node]:
        result: list[Node] = []
        stack: list[tuple[Node, list[Node]]] = [(node, result) for node in reversed(nodes)]

        while stack:
            node, output = stack.pop()
            if not isinstance(node, Element):
                output.append(node)
                continue

            if not self.is_valid_node(node):
                logger.debug("Dropping invalid <%s> from raw HTML", node.tag_name)
                continue

            instruction = next((item for item in self.processing_instructions if item.matches(node)), None)
            if instruction is not None:
                replacement = instruction.process(node)
                if replacement is None:
                    continue
                if isinstance(replacement, Node):
                    output.append(replacement)
                else:
                    output.extend(replacement)
                continue

            copy = Element(
                tag_name=node.tag_name,
                properties=node.properties,
                children=[],
                position=node.position,
            )
            output.append(copy)
            stack.extend((child, copy.children) for child in reversed(node.children))

        return result


def create_html_parser(
    is_valid_node: Optional[NodeValidator] = None,
    processing_instructions: Optional[Iterable[ProcessingInstruction]] = None,
) -> HtmlFragmentParser:
    """Create a configured :class:`HtmlFragmentParser`.

    Parameters
    ----------
    is_valid_node : callable, optional
        Predicate deciding whether a parsed element is kept
    processing_instructions : iterable of ProcessingInstruction, optional
        Element replacement hooks, tried in order

    Returns
    -------
    HtmlFragmentParser
        Parser ready to be passed as ``html_parser``

    """
    return HtmlFragmentParser().configure(
        is_valid_node=is_valid_node,
        processing_instructions=processing_instructions,
    )


__all__ = ["HtmlFragmentParser", "ProcessingInstruction", "create_html_parser"]
