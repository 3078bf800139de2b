#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the md2ui library.

Constants are organized by category:
1. URI Sanitization
2. Element Semantics
3. Property Mapping
4. Deprecated Options
5. Dependencies
"""

from __future__ import annotations

# =============================================================================
# URI Sanitization
# =============================================================================

# Schemes allowed by the default URI policy (compared case-insensitively)
SAFE_PROTOCOLS: tuple[str, ...] = ("http", "https", "mailto", "tel")

# Characters removed before looking for a scheme: ASCII whitespace, C0/C1
# control characters and DEL. Browsers ignore them inside a scheme.
URI_IGNORED_CHARACTERS = "".join(chr(code) for code in range(0x00, 0x21)) + "".join(
    chr(code) for code in range(0x7F, 0xA0)
)

URI_SCHEME_PATTERN = r"^([A-Za-z][A-Za-z0-9+.\-]*):"

# =============================================================================
# Element Semantics
# =============================================================================

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
LIST_TAGS = frozenset({"ol", "ul"})
TABLE_CELL_TAGS = frozenset({"th", "td"})

# Void elements never receive children when rendered to markup
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Attribute carrying the source span when ``source_pos`` is enabled
SOURCE_POSITION_ATTRIBUTE = "data-sourcepos"

ROOT_KEY = "root"

# =============================================================================
# Property Mapping
# =============================================================================

# Vendor prefixes kept verbatim when camel-casing inline style property names
VENDOR_STYLE_PREFIXES: tuple[str, ...] = ("-ms-", "-moz-", "-webkit-", "-o-", "-khtml-")

# Separator used when a comma-separated list property is stringified
COMMA_SEPARATOR = ", "
SPACE_SEPARATOR = " "

# =============================================================================
# Deprecated Options
# =============================================================================

# Option key -> replacement advice, logged once per WarningRegistry
DEPRECATED_OPTIONS: dict[str, str] = {
    "source": "`source` is ignored, pass the parsed tree to render() instead",
    "escapeHtml": "please use `skipHtml` instead of `escapeHtml`",
}

# =============================================================================
# Dependencies
# =============================================================================

DEPS_HTML_FRAGMENT = [("beautifulsoup4", "bs4", ">=4.9.0")]
