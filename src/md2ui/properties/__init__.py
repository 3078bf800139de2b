#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/properties/__init__.py
"""Property schema and mapping from element properties to UI props."""

from md2ui.properties.mapper import map_properties, parse_style, style_property_name
from md2ui.properties.schema import PropertyInfo, find, restore_aria_attribute, restore_data_attribute

__all__ = [
    "PropertyInfo",
    "find",
    "map_properties",
    "parse_style",
    "restore_aria_attribute",
    "restore_data_attribute",
    "style_property_name",
]
