#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/options.py
"""Render options.

:class:`RenderOptions` is a frozen dataclass: share one instance between
threads and derive variants with :meth:`RenderOptions.create_updated`.
Invalid combinations are rejected when the options are constructed.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Optional, Union

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2ui.ast.nodes import Element, Node, ParentNode, Raw
from md2ui.components import ComponentRegistry
from md2ui.constants import DEPRECATED_OPTIONS
from md2ui.deprecation import WarningRegistry
from md2ui.exceptions import ConfigurationError, HtmlParserNotConfiguredError
from md2ui.utils.security import UriTransform, resolve_uri_policy, uri_transformer

AllowElement = Callable[[Element, int, ParentNode], bool]
LinkTarget = Union[str, Callable[[Any, list[Node], Any], Optional[str]]]
HtmlParser = Callable[[Raw], list[Node]]

# camelCase option keys accepted by RenderOptions.from_mapping
OPTION_ALIASES = {
    "allowedElements": "allowed_elements",
    "disallowedElements": "disallowed_elements",
    "allowElement": "allow_element",
    "unwrapDisallowed": "unwrap_disallowed",
    "transformLinkUri": "transform_link_uri",
    "transformImageUri": "transform_image_uri",
    "linkTarget": "link_target",
    "sourcePos": "source_pos",
    "rawSourcePos": "raw_source_pos",
    "skipHtml": "skip_html",
    "includeElementIndex": "include_element_index",
    "className": "class_name",
    "htmlParser": "html_parser",
}


def _as_tag_set(value: Any, name: str) -> frozenset[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        raise ConfigurationError(f"`{name}` must be a collection of tag names, not a string", name, value)
    try:
        return frozenset(str(tag) for tag in value)
    except TypeError as e:
        raise ConfigurationError(f"`{name}` must be a collection of tag names", name, value, original_error=e) from e


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration for filtering and compiling a hypertext AST.

    Parameters
    ----------
    allowed_elements : collection of str, optional
        Only these tags are kept. Mutually exclusive with ``disallowed_elements``.
    disallowed_elements : collection of str, optional
        These tags are removed. Mutually exclusive with ``allowed_elements``.
    allow_element : callable, optional
        ``allow_element(element, index, parent) -> bool``, evaluated for
        elements after the tag lists
    unwrap_disallowed : bool, default False
        Replace disallowed elements with their (filtered) children instead of
        dropping the whole subtree
    transform_link_uri : callable, None or False
        ``transform(href, children, title) -> str``. Defaults to the protocol
        allow-list sanitizer; None or False disables sanitization explicitly.
    transform_image_uri : callable, None or False
        ``transform(src, alt, title) -> str``, same defaults as links
    link_target : str or callable, optional
        ``target`` for ``a`` elements, or ``link_target(href, children, title)``
    source_pos : bool, default False
        Add ``data-sourcepos`` to every element
    raw_source_pos : bool, default False
        Pass ``sourcePosition`` to custom renderers
    skip_html : bool, default False
        Drop raw HTML nodes instead of parsing or displaying them
    components : mapping, optional
        Tag name to tag name, callable, ``PlainTag`` or ``CustomRenderer``
    include_element_index : bool, default False
        Pass ``index`` and ``siblingCount`` to custom renderers
    class_name : str, optional
        Wrap the output in a ``div`` with this class
    html_parser : callable, optional
        Turns a ``Raw`` node into element subtrees, e.g. a configured
        :class:`~md2ui.parsers.html_fragment.HtmlFragmentParser`

    Raises
    ------
    ConfigurationError
        If both tag lists are set, or a value has the wrong type

    """

    allowed_elements: Optional[frozenset[str]] = field(
        default=None,
        metadata={"help": "Only render these tags (mutually exclusive with disallowed_elements)"},
    )
    disallowed_elements: Optional[frozenset[str]] = field(
        default=None,
        metadata={"help": "Never render these tags (mutually exclusive with allowed_elements)"},
    )
    allow_element: Optional[AllowElement] = field(
        default=None,
        metadata={"help": "Predicate (element, index, parent) -> bool deciding whether an element is kept"},
    )
    unwrap_disallowed: bool = field(
        default=False,
        metadata={"help": "Keep the children of disallowed elements in their place"},
    )
    transform_link_uri: Any = field(
        default=uri_transformer,
        metadata={"help": "Transform for href values; None or False disables sanitization"},
    )
    transform_image_uri: Any = field(
        default=uri_transformer,
        metadata={"help": "Transform for src values; None or False disables sanitization"},
    )
    link_target: Optional[LinkTarget] = field(
        default=None,
        metadata={"help": "Target attribute for links, or a function of (href, children, title)"},
    )
    source_pos: bool = field(
        default=False,
        metadata={"help": "Add data-sourcepos attributes to rendered elements"},
    )
    raw_source_pos: bool = field(
        default=False,
        metadata={"help": "Pass sourcePosition to custom renderers"},
    )
    skip_html: bool = field(
        default=False,
        metadata={"help": "Drop raw HTML instead of parsing or displaying it"},
    )
    components: ComponentRegistry = field(
        default_factory=ComponentRegistry,
        metadata={"help": "Tag name to renderer overrides"},
    )
    include_element_index: bool = field(
        default=False,
        metadata={"help": "Pass index and siblingCount to custom renderers"},
    )
    class_name: Optional[str] = field(
        default=None,
        metadata={"help": "Wrap the rendered output in a div with this class"},
    )
    html_parser: Optional[HtmlParser] = field(
        default=None,
        metadata={"help": "Parser turning raw HTML nodes into element subtrees"},
    )

    def __post_init__(self) -> None:
        """Normalize collections and reject invalid combinations.

        Raises
        ------
        ConfigurationError
            If both tag lists are set, or a value has the wrong type

        """
        allowed = _as_tag_set(self.allowed_elements, "allowed_elements")
        disallowed = _as_tag_set(self.disallowed_elements, "disallowed_elements")
        if allowed is not None and disallowed is not None:
            raise ConfigurationError(
                "Only one of `allowed_elements` and `disallowed_elements` should be defined",
                parameter_name="allowed_elements",
                parameter_value=(sorted(allowed), sorted(disallowed)),
            )
        object.__setattr__(self, "allowed_elements", allowed)
        object.__setattr__(self, "disallowed_elements", disallowed)

        if self.allow_element is not None and not callable(self.allow_element):
            raise ConfigurationError("`allow_element` must be callable", "allow_element", self.allow_element)

        resolve_uri_policy(self.transform_link_uri, "transform_link_uri")
        resolve_uri_policy(self.transform_image_uri, "transform_image_uri")

        if self.link_target is not None and not (isinstance(self.link_target, str) or callable(self.link_target)):
            raise ConfigurationError(
                "`link_target` must be a string or a callable", "link_target", self.link_target
            )

        if not isinstance(self.components, ComponentRegistry):
            if not isinstance(self.components, Mapping):
                raise ConfigurationError("`components` must be a mapping", "components", self.components)
            object.__setattr__(self, "components", ComponentRegistry(self.components))

        if self.html_parser is not None:
            if not callable(self.html_parser):
                raise ConfigurationError("`html_parser` must be callable", "html_parser", self.html_parser)
            if getattr(self.html_parser, "configured", True) is False:
                raise HtmlParserNotConfiguredError()

    @property
    def link_uri_transform(self) -> UriTransform:
        """Callable applied to ``href`` values."""
        return resolve_uri_policy(self.transform_link_uri, "transform_link_uri")

    @property
    def image_uri_transform(self) -> UriTransform:
        """Callable applied to ``src`` values."""
        return resolve_uri_policy(self.transform_image_uri, "transform_image_uri")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], warnings: WarningRegistry | None = None) -> "RenderOptions":
        """Build options from a mapping of camelCase or snake_case keys.

        Deprecated keys are ignored after a warning, logged once per
        ``warnings`` registry.

        Parameters
        ----------
        mapping : Mapping
            Option values, e.g. ``{"disallowedElements": ["em"], "unwrapDisallowed": True}``
        warnings : WarningRegistry, optional
            Caller-owned record of warnings already issued. A fresh registry
            is used when omitted, so deprecated keys warn on every call.

        Returns
        -------
        RenderOptions
            Validated options

        Raises
        ------
        ConfigurationError
            For unknown keys or invalid values

        """
        registry = warnings if warnings is not None else WarningRegistry()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for key, value in mapping.items():
            if key in DEPRECATED_OPTIONS:
                registry.warn_once(key, f"[md2ui] Warning: {DEPRECATED_OPTIONS[key]}")
                continue
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown render option: `{key}`", parameter_name=key, parameter_value=value)
            kwargs[name] = value

        return cls(**kwargs)


def coerce_options(
    options: "RenderOptions | Mapping[str, Any] | None", warnings: WarningRegistry | None = None
) -> RenderOptions:
    """Return ``options`` as a :class:`RenderOptions` instance."""
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    if isinstance(options, Mapping):
        return RenderOptions.from_mapping(options, warnings=warnings)
    raise ConfigurationError(
        f"Options must be RenderOptions or a mapping, got {type(options).__name__}",
        parameter_name="options",
        parameter_value=options,
    )

