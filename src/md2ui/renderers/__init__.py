#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/renderers/__init__.py
"""Renderers for compiled UI element trees."""

from md2ui.renderers.html import StaticMarkupRenderer, render_to_static_markup

__all__ = ["StaticMarkupRenderer", "render_to_static_markup"]
