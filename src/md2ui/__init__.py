"""md2ui - Render hypertext trees produced from markdown as UI element trees.

md2ui takes a hypertext AST (elements, text, comments and raw HTML, as
produced by converting a markdown AST) and compiles it into a tree of UI
elements that a rendering runtime can draw. Along the way it filters
elements, sanitizes link and image URIs, maps HTML and SVG attributes to
UI prop names, and lets callers substitute their own renderers per tag.

Key Features
------------
- Allow/deny lists and a predicate for elements, with optional unwrapping
- Protocol allow-list for ``href`` and ``src`` (http, https, mailto, tel)
- Attribute normalization (``class`` -> ``className``, inline style parsing)
- Per-tag custom renderers receiving semantic props (``level``, ``checked``)
- Optional raw HTML parsing with BeautifulSoup
- Static markup rendering for previews and tests

Examples
--------
Render a tree and serialize it:

    >>> from md2ui import render, render_to_static_markup
    >>> from md2ui.ast import Element, Root, Text
    >>> tree = Root(children=[Element("h1", children=[Text("Title")])])
    >>> render_to_static_markup(render(tree))
    '<h1>Title</h1>'

Override renderers and filter elements:

    >>> options = {"components": {"h1": "h2"}, "disallowedElements": ["img"]}
    >>> render_to_static_markup(render(tree, options))
    '<h2>Title</h2>'

See Also
--------
md2ui.ast : hypertext node definitions and serialization
md2ui.options : render configuration

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2ui requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2ui.api import expand_raw_html, render  # noqa: E402
from md2ui.compiler import AstToUiCompiler, compile_tree  # noqa: E402
from md2ui.components import ComponentRegistry, CustomRenderer, PlainTag  # noqa: E402
from md2ui.deprecation import WarningRegistry  # noqa: E402
from md2ui.elements import CompiledElement, Fragment  # noqa: E402
from md2ui.exceptions import (  # noqa: E402
    AstDeserializationError,
    ConfigurationError,
    DependencyError,
    HtmlParserNotConfiguredError,
    InvalidComponentError,
    Md2UiError,
    ValidationError,
)
from md2ui.filter import FilterDecision, NodeFilter, filter_tree  # noqa: E402
from md2ui.options import RenderOptions  # noqa: E402
from md2ui.parsers.html_fragment import HtmlFragmentParser, ProcessingInstruction, create_html_parser  # noqa: E402
from md2ui.renderers.html import render_to_static_markup  # noqa: E402
from md2ui.utils.security import uri_transformer  # noqa: E402

__all__ = [
    "__version__",
    # Pipeline
    "render",
    "expand_raw_html",
    "compile_tree",
    "filter_tree",
    "render_to_static_markup",
    "uri_transformer",
    # Building blocks
    "AstToUiCompiler",
    "NodeFilter",
    "FilterDecision",
    "ComponentRegistry",
    "CustomRenderer",
    "PlainTag",
    "CompiledElement",
    "Fragment",
    "RenderOptions",
    "WarningRegistry",
    "HtmlFragmentParser",
    "ProcessingInstruction",
    "create_html_parser",
    # Exceptions
    "Md2UiError",
    "ValidationError",
    "ConfigurationError",
    "InvalidComponentError",
    "HtmlParserNotConfiguredError",
    "AstDeserializationError",
    "DependencyError",
]
