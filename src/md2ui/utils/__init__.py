#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/utils/__init__.py
"""Utility modules for md2ui package.

This package contains URI sanitization and the dependency checking
decorator.
"""

from md2ui.utils.security import is_url_safe, sanitize_uri, uri_transformer

__all__ = [
    "is_url_safe",
    "sanitize_uri",
    "uri_transformer",
]
