#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/utils/security.py
"""URI sanitization for link and image attributes.

The default policy only looks at the scheme of a URI. References without a
scheme (relative paths, ``//host`` protocol-relative references, ``?query``
and ``#fragment`` references) are always allowed, as are the ``http``,
``https``, ``mailto`` and ``tel`` schemes. Any other explicit scheme
(``javascript:``, ``vbscript:``, ``data:``, ``file:``, ...) is blocked and
replaced by an empty string.

Scheme detection is done on a decoded copy of the URI: character references
are resolved and whitespace/control characters removed first, so that
``java&#x09;script:`` or ``JaVaScRiPt&colon;`` are recognized. The URI that
is returned for allowed input is always the original, untouched string.

Sanitization never raises.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Callable

from md2ui.constants import SAFE_PROTOCOLS, URI_IGNORED_CHARACTERS, URI_SCHEME_PATTERN
from md2ui.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

UriTransform = Callable[..., Any]

_SCHEME_RE = re.compile(URI_SCHEME_PATTERN)
_IGNORED_CHARACTERS_TABLE = str.maketrans("", "", URI_IGNORED_CHARACTERS)


def _decode_for_scheme_detection(uri: str) -> str:
    """Resolve character references and drop characters browsers ignore.

    Character references may themselves decode to whitespace, so references are
    resolved until the value is stable before stripping.
    """
    decoded = uri
    for _ in range(3):
        unescaped = html.unescape(decoded)
        if unescaped == decoded:
            break
        decoded = unescaped
    return decoded.translate(_IGNORED_CHARACTERS_TABLE)


def get_uri_scheme(uri: str) -> str | None:
    """Return the lower-cased scheme of a URI, or None for scheme-less references.

    Parameters
    ----------
    uri : str
        URI to inspect

    Returns
    -------
    str or None
        Scheme without the colon, or None

    Examples
    --------
    >>> get_uri_scheme("HTTPS://example.com")
    'https'
    >>> get_uri_scheme(" java\\tscript:alert(1)")
    'javascript'
    >>> get_uri_scheme("?javascript:foo") is None
    True

    """
    match = _SCHEME_RE.match(_decode_for_scheme_detection(uri))
    if match is None:
        return None
    return match.group(1).lower()


def is_relative_url(url: str) -> bool:
    """Check if a URL carries no scheme.

    Relative references include paths (``/a``, ``a/b``), protocol-relative
    references (``//host``), and query or fragment only references.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL is relative, False otherwise

    """
    return get_uri_scheme(url or "") is None


def is_url_safe(url: str | None, protocols: tuple[str, ...] = SAFE_PROTOCOLS) -> bool:
    """Check if a URL passes the scheme allow-list.

    Parameters
    ----------
    url : str or None
        URL to validate
    protocols : tuple of str, default SAFE_PROTOCOLS
        Allowed schemes (lower-case, without colon)

    Returns
    -------
    bool
        True if the URL has no scheme or an allowed one

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True
    >>> is_url_safe("javascript:alert('xss')")
    False
    >>> is_url_safe("/relative/path")
    True

    """
    if not url:
        return True
    scheme = get_uri_scheme(url)
    return scheme is None or scheme in protocols


def sanitize_uri(uri: str | None, protocols: tuple[str, ...] = SAFE_PROTOCOLS) -> str:
    """Return ``uri`` if its scheme is allowed, otherwise an empty string.

    Parameters
    ----------
    uri : str or None
        URI to sanitize
    protocols : tuple of str, default SAFE_PROTOCOLS
        Allowed schemes (lower-case, without colon)

    Returns
    -------
    str
        The original URI, or ``""`` if it is blocked or missing

    Examples
    --------
    >>> sanitize_uri("https://example.com")
    'https://example.com'
    >>> sanitize_uri("javascript:alert('xss')")
    ''
    >>> sanitize_uri("#vbscript:orders")
    '#vbscript:orders'

    """
    if uri is None:
        return ""
    if not isinstance(uri, str):
        uri = str(uri)
    if is_url_safe(uri, protocols):
        return uri
    logger.debug("Blocked URI with disallowed scheme: %.50s", uri)
    return ""


def uri_transformer(uri: str | None, *_context: Any) -> str:
    """Sanitize ``href``/``src`` values with the default protocol allow-list.

    This is the default value of ``transform_link_uri`` and
    ``transform_image_uri``. The extra positional arguments (link children and
    title, or image alt and title) are accepted so the function can be used
    wherever a custom transform can.

    Parameters
    ----------
    uri : str or None
        URI to sanitize
    *_context : Any
        Ignored context passed by the compiler

    Returns
    -------
    str
        The URI, or ``""`` if its scheme is not allowed

    """
    return sanitize_uri(uri)


def _identity_transform(uri: Any, *_context: Any) -> Any:
    return uri


def resolve_uri_policy(value: Any, option_name: str) -> UriTransform:
    """Turn a ``transform_*_uri`` option value into a callable.

    Parameters
    ----------
    value : callable, None or False
        A custom transform, or ``None``/``False`` to disable sanitization
        explicitly
    option_name : str
        Option name used in error messages

    Returns
    -------
    callable
        Transform called as ``transform(uri, *context)``

    Raises
    ------
    ConfigurationError
        If the value is neither callable nor an explicit opt-out

    """
    if value is None or value is False:
        return _identity_transform
    if callable(value):
        return value
    raise ConfigurationError(
        f"`{option_name}` must be a callable, or None/False to disable URI sanitization, got {value!r}",
        parameter_name=option_name,
        parameter_value=value,
    )


__all__ = [
    "UriTransform",
    "get_uri_scheme",
    "is_relative_url",
    "is_url_safe",
    "resolve_uri_policy",
    "sanitize_uri",
    "uri_transformer",
]
