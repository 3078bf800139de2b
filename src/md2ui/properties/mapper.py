#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/properties/mapper.py
"""Translate element properties into UI element props.

``map_properties`` is total: it never raises for well-typed input, and the
worst outcome for a single property is that it is dropped.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from md2ui.constants import COMMA_SEPARATOR, SPACE_SEPARATOR, TABLE_CELL_TAGS, VENDOR_STYLE_PREFIXES
from md2ui.properties.schema import PropertyInfo, find

logger = logging.getLogger(__name__)

_HYPHEN_LETTER_RE = re.compile(r"-([a-z])")


def style_property_name(name: str) -> str:
    """Convert a CSS property name to the UI casing convention.

    Vendor-prefixed names and custom properties are kept verbatim.

    Examples
    --------
    >>> style_property_name("font-weight")
    'fontWeight'
    >>> style_property_name("-webkit-transition")
    '-webkit-transition'
    >>> style_property_name("--accent")
    '--accent'

    """
    if name.startswith("--"):
        return name
    lowered = name.lower()
    if lowered.startswith(VENDOR_STYLE_PREFIXES):
        return lowered
    return _HYPHEN_LETTER_RE.sub(lambda m: m.group(1).upper(), lowered)


def parse_style(value: str) -> dict[str, str]:
    """Split an inline style string into a property -> value mapping.

    Declarations are separated by ``;`` and split on the first ``:``. A
    declaration without a colon, with an empty property name or an empty
    value is dropped on its own; the rest of the style is kept.

    Parameters
    ----------
    value : str
        Inline style, e.g. ``"color: red; font-weight: bold"``

    Returns
    -------
    dict
        Ordered mapping of UI style names to values

    Examples
    --------
    >>> parse_style("color: red; font-weight: bold")
    {'color': 'red', 'fontWeight': 'bold'}
    >>> parse_style("broken; color: red")
    {'color': 'red'}

    """
    result: dict[str, str] = {}
    for declaration in value.split(";"):
        declaration = declaration.strip()
        if not declaration:
            continue
        name, separator, declared = declaration.partition(":")
        name = name.strip()
        declared = declared.strip()
        if not separator or not name or not declared:
            logger.debug("Dropping malformed style declaration: %r", declaration)
            continue
        result[style_property_name(name)] = declared
    return result


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _convert_value(info: PropertyInfo, value: Any) -> Any:
    """Convert a raw value according to the schema entry."""
    if info.boolean:
        if isinstance(value, bool):
            return value
        # Boolean attributes parsed from markup carry an empty (or repeated) string
        return True

    if info.property == "style":
        if isinstance(value, (list, tuple)):
            value = ";".join(str(item) for item in value if not _is_missing(item))
        if isinstance(value, str):
            return parse_style(value)
        if isinstance(value, Mapping):
            return {style_property_name(str(name)): declared for name, declared in value.items()}
        return None

    if isinstance(value, (list, tuple)):
        items = [str(item) for item in value if not _is_missing(item)]
        separator = COMMA_SEPARATOR if info.comma_separated else SPACE_SEPARATOR
        return separator.join(items)

    return value


def map_properties(tag_name: str, raw_props: Mapping[str, Any] | None) -> dict[str, Any]:
    """Map element properties to UI element props.

    Parameters
    ----------
    tag_name : str
        Tag of the element the properties belong to
    raw_props : Mapping or None
        Properties as found on the hypertext element

    Returns
    -------
    dict
        UI props: canonical names (``className``, ``htmlFor``, ``viewBox``),
        ``data-*``/``aria-*`` attributes in their hyphenated form, typed
        values, ``style`` as a mapping

    Examples
    --------
    >>> map_properties("i", {"className": ["a", "b"], "dataWhatever": "x"})
    {'className': 'a b', 'data-whatever': 'x'}
    >>> map_properties("input", {"accept": ["a", "b"], "required": ""})
    {'accept': 'a, b', 'required': True}

    """
    props: dict[str, Any] = {}
    if not raw_props:
        return props

    for name, value in raw_props.items():
        if _is_missing(value):
            continue

        info = find(str(name))
        if info is None:
            logger.debug("Dropping unknown property %r on <%s>", name, tag_name)
            continue

        converted = _convert_value(info, value)
        if info.property == "style" and not converted:
            continue
        props[info.ui_name] = converted

    if tag_name in TABLE_CELL_TAGS and "align" in props:
        align = props.pop("align")
        if align:
            style = dict(props.get("style") or {})
            style["textAlign"] = align
            props["style"] = style

    return props
