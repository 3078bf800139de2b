#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/properties/schema.py
"""Static HTML and SVG property schema.

Each known property has a canonical (hast-style) property name, the attribute
name used in markup, and value flags. The tables are the single source of
truth for translating element properties into UI element props: anything
absent from them (apart from ``data-*`` and ``aria-*`` attributes) is not
rendered.

Lookups accept either naming convention: ``find("className")`` and
``find("class")`` return the same :class:`PropertyInfo`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PropertyInfo:
    """Description of a single property.

    Parameters
    ----------
    property : str
        Canonical property name, e.g. ``"className"`` or ``"strokeWidth"``
    attribute : str
        Attribute name in markup, e.g. ``"class"`` or ``"stroke-width"``
    ui_name : str
        Prop name on the compiled element
    boolean : bool, default False
        Attribute whose presence means true (``required``, ``disabled``)
    comma_separated : bool, default False
        List values are joined with ``", "``
    space_separated : bool, default False
        List values are joined with ``" "``
    number : bool, default False
        Value is numeric
    defined : bool, default True
        False for ``data-*``/``aria-*`` attributes, which are resolved
        without the static tables

    """

    property: str
    attribute: str
    ui_name: str
    boolean: bool = False
    comma_separated: bool = False
    space_separated: bool = False
    number: bool = False
    defined: bool = True


BOOLEAN = "boolean"
COMMA = "comma"
SPACE = "space"
NUMBER = "number"

# Canonical HTML property name -> flags. The attribute is the lower-cased
# property name unless listed in _HTML_ATTRIBUTE_OVERRIDES.
_HTML_PROPERTIES: dict[str, tuple[str, ...]] = {
    "abbr": (),
    "accept": (COMMA,),
    "acceptCharset": (SPACE,),
    "accessKey": (SPACE,),
    "action": (),
    "align": (),
    "allow": (),
    "allowFullScreen": (BOOLEAN,),
    "alt": (),
    "as": (),
    "async": (BOOLEAN,),
    "autoCapitalize": (),
    "autoComplete": (SPACE,),
    "autoFocus": (BOOLEAN,),
    "autoPlay": (BOOLEAN,),
    "bgColor": (),
    "border": (NUMBER,),
    "capture": (BOOLEAN,),
    "cellPadding": (),
    "cellSpacing": (),
    "charSet": (),
    "checked": (BOOLEAN,),
    "cite": (),
    "className": (SPACE,),
    "color": (),
    "cols": (NUMBER,),
    "colSpan": (NUMBER,),
    "content": (),
    "contentEditable": (),
    "controls": (BOOLEAN,),
    "controlsList": (SPACE,),
    "coords": (NUMBER, COMMA),
    "crossOrigin": (),
    "data": (),
    "dateTime": (),
    "decoding": (),
    "default": (BOOLEAN,),
    "defer": (BOOLEAN,),
    "dir": (),
    "dirName": (),
    "disabled": (BOOLEAN,),
    "download": (),
    "draggable": (),
    "encType": (),
    "enterKeyHint": (),
    "face": (),
    "form": (),
    "formAction": (),
    "formEncType": (),
    "formMethod": (),
    "formNoValidate": (BOOLEAN,),
    "formTarget": (),
    "frameBorder": (),
    "headers": (SPACE,),
    "height": (NUMBER,),
    "hidden": (BOOLEAN,),
    "high": (NUMBER,),
    "href": (),
    "hrefLang": (),
    "hSpace": (NUMBER,),
    "htmlFor": (SPACE,),
    "httpEquiv": (SPACE,),
    "id": (),
    "imageSizes": (),
    "imageSrcSet": (),
    "inputMode": (),
    "integrity": (),
    "is": (),
    "isMap": (BOOLEAN,),
    "itemId": (),
    "itemProp": (SPACE,),
    "itemRef": (SPACE,),
    "itemScope": (BOOLEAN,),
    "itemType": (SPACE,),
    "kind": (),
    "label": (),
    "lang": (),
    "list": (),
    "loading": (),
    "loop": (BOOLEAN,),
    "low": (NUMBER,),
    "max": (),
    "maxLength": (NUMBER,),
    "media": (),
    "method": (),
    "min": (),
    "minLength": (NUMBER,),
    "multiple": (BOOLEAN,),
    "muted": (BOOLEAN,),
    "name": (),
    "nonce": (),
    "noModule": (BOOLEAN,),
    "noValidate": (BOOLEAN,),
    "noWrap": (BOOLEAN,),
    "open": (BOOLEAN,),
    "optimum": (NUMBER,),
    "pattern": (),
    "ping": (SPACE,),
    "placeholder": (),
    "playsInline": (BOOLEAN,),
    "poster": (),
    "preload": (),
    "readOnly": (BOOLEAN,),
    "referrerPolicy": (),
    "rel": (SPACE,),
    "required": (BOOLEAN,),
    "reversed": (BOOLEAN,),
    "role": (),
    "rows": (NUMBER,),
    "rowSpan": (NUMBER,),
    "sandbox": (SPACE,),
    "scope": (),
    "selected": (BOOLEAN,),
    "shape": (),
    "size": (NUMBER,),
    "sizes": (),
    "slot": (),
    "span": (NUMBER,),
    "spellCheck": (),
    "src": (),
    "srcDoc": (),
    "srcLang": (),
    "srcSet": (),
    "start": (NUMBER,),
    "step": (),
    "style": (),
    "summary": (),
    "tabIndex": (NUMBER,),
    "target": (),
    "title": (),
    "translate": (),
    "type": (),
    "useMap": (),
    "vAlign": (),
    "value": (),
    "width": (NUMBER,),
    "wrap": (),
}

_HTML_ATTRIBUTE_OVERRIDES = {
    "acceptCharset": "accept-charset",
    "className": "class",
    "htmlFor": "for",
    "httpEquiv": "http-equiv",
}

# Canonical SVG property name -> (attribute, flags). Only properties that the
# HTML table does not already define are listed.
_SVG_PROPERTIES: dict[str, tuple[str, tuple[str, ...]]] = {
    "clipPath": ("clip-path", ()),
    "clipRule": ("clip-rule", ()),
    "cx": ("cx", ()),
    "cy": ("cy", ()),
    "d": ("d", ()),
    "dominantBaseline": ("dominant-baseline", ()),
    "dx": ("dx", ()),
    "dy": ("dy", ()),
    "fill": ("fill", ()),
    "fillOpacity": ("fill-opacity", ()),
    "fillRule": ("fill-rule", ()),
    "focusable": ("focusable", ()),
    "fontFamily": ("font-family", ()),
    "fontSize": ("font-size", ()),
    "fontWeight": ("font-weight", ()),
    "fx": ("fx", ()),
    "fy": ("fy", ()),
    "gradientTransform": ("gradientTransform", ()),
    "gradientUnits": ("gradientUnits", ()),
    "markerEnd": ("marker-end", ()),
    "markerMid": ("marker-mid", ()),
    "markerStart": ("marker-start", ()),
    "offset": ("offset", ()),
    "opacity": ("opacity", ()),
    "pathLength": ("pathLength", (NUMBER,)),
    "points": ("points", ()),
    "preserveAspectRatio": ("preserveAspectRatio", ()),
    "r": ("r", ()),
    "rx": ("rx", ()),
    "ry": ("ry", ()),
    "stopColor": ("stop-color", ()),
    "stopOpacity": ("stop-opacity", ()),
    "stroke": ("stroke", ()),
    "strokeDashArray": ("stroke-dasharray", (COMMA,)),
    "strokeDashOffset": ("stroke-dashoffset", ()),
    "strokeLineCap": ("stroke-linecap", ()),
    "strokeLineJoin": ("stroke-linejoin", ()),
    "strokeMiterLimit": ("stroke-miterlimit", (NUMBER,)),
    "strokeOpacity": ("stroke-opacity", (NUMBER,)),
    "strokeWidth": ("stroke-width", ()),
    "textAnchor": ("text-anchor", ()),
    "transform": ("transform", ()),
    "version": ("version", ()),
    "viewBox": ("viewBox", ()),
    "x": ("x", ()),
    "x1": ("x1", ()),
    "x2": ("x2", ()),
    "xLinkHref": ("xlink:href", ()),
    "xLinkTitle": ("xlink:title", ()),
    "xmlns": ("xmlns", ()),
    "xmlnsXLink": ("xmlns:xlink", ()),
    "xmlSpace": ("xml:space", ()),
    "y": ("y", ()),
    "y1": ("y1", ()),
    "y2": ("y2", ()),
}

# Canonical property names whose UI prop is spelled differently
UI_NAME_OVERRIDES = {
    "classId": "classID",
    "itemId": "itemID",
    "strokeDashArray": "strokeDasharray",
    "strokeDashOffset": "strokeDashoffset",
    "strokeLineCap": "strokeLinecap",
    "strokeLineJoin": "strokeLinejoin",
    "strokeMiterLimit": "strokeMiterlimit",
    "xLinkHref": "xlinkHref",
    "xLinkTitle": "xlinkTitle",
    "xmlnsXLink": "xmlnsXlink",
}


def _make_info(prop: str, attribute: str, flags: tuple[str, ...]) -> PropertyInfo:
    return PropertyInfo(
        property=prop,
        attribute=attribute,
        ui_name=UI_NAME_OVERRIDES.get(prop, prop),
        boolean=BOOLEAN in flags,
        comma_separated=COMMA in flags,
        space_separated=SPACE in flags,
        number=NUMBER in flags,
    )


def _build_tables() -> tuple[dict[str, PropertyInfo], dict[str, PropertyInfo]]:
    by_property: dict[str, PropertyInfo] = {}
    by_attribute: dict[str, PropertyInfo] = {}

    for prop, flags in _HTML_PROPERTIES.items():
        info = _make_info(prop, _HTML_ATTRIBUTE_OVERRIDES.get(prop, prop.lower()), flags)
        by_property[prop] = info
        by_attribute[info.attribute] = info

    for prop, (attribute, flags) in _SVG_PROPERTIES.items():
        info = _make_info(prop, attribute, flags)
        by_property.setdefault(prop, info)
        # HTML parsers lower-case attribute names, so SVG attributes are
        # matched case-insensitively too.
        by_attribute.setdefault(attribute.lower(), info)

    return by_property, by_attribute


PROPERTIES_BY_NAME, PROPERTIES_BY_ATTRIBUTE = _build_tables()

_DATA_PROPERTY_RE = re.compile(r"^data[A-Z0-9]")
_ARIA_PROPERTY_RE = re.compile(r"^aria[A-Z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")


def _data_info(attribute: str) -> PropertyInfo:
    return PropertyInfo(property=attribute, attribute=attribute, ui_name=attribute, defined=False)


def restore_data_attribute(name: str) -> str:
    """Turn an internal ``dataFooBar`` property name into ``data-foo-bar``.

    Examples
    --------
    >>> restore_data_attribute("dataWhatever")
    'data-whatever'
    >>> restore_data_attribute("dataFooBar")
    'data-foo-bar'

    """
    return "data-" + _UPPERCASE_RE.sub(lambda m: "-" + m.group(0).lower(), name[4:]).lstrip("-")


def restore_aria_attribute(name: str) -> str:
    """Turn an internal ``ariaDescribedBy`` property name into ``aria-describedby``.

    Examples
    --------
    >>> restore_aria_attribute("ariaDescribedBy")
    'aria-describedby'

    """
    return "aria-" + name[4:].lower()


def find(name: str) -> Optional[PropertyInfo]:
    """Look up a property by canonical name or attribute name.

    Parameters
    ----------
    name : str
        Property name (``className``, ``dataFoo``, ``ariaLabel``) or
        attribute name (``class``, ``data-foo``, ``aria-label``)

    Returns
    -------
    PropertyInfo or None
        Schema entry, a synthetic entry for ``data-*``/``aria-*`` names, or
        None when the name is unknown

    """
    if not name:
        return None

    info = PROPERTIES_BY_NAME.get(name)
    if info is not None:
        return info

    lowered = name.lower()
    if lowered.startswith("data-") and len(lowered) > 5:
        return _data_info(lowered)
    if lowered.startswith("aria-") and len(lowered) > 5:
        return _data_info(lowered)
    if _DATA_PROPERTY_RE.match(name):
        return _data_info(restore_data_attribute(name))
    if _ARIA_PROPERTY_RE.match(name):
        return _data_info(restore_aria_attribute(name))

    return PROPERTIES_BY_ATTRIBUTE.get(lowered)
