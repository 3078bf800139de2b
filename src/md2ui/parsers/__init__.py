#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/parsers/__init__.py
"""Parsers for raw HTML found in hypertext trees."""

from md2ui.parsers.html_fragment import HtmlFragmentParser, ProcessingInstruction, create_html_parser

__all__ = ["HtmlFragmentParser", "ProcessingInstruction", "create_html_parser"]
