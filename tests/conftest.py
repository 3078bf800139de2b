"""Pytest configuration and shared fixtures for md2ui test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import h, position

from md2ui.ast import Root, Text
from md2ui.deprecation import WarningRegistry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "security: Tests for URI sanitization and unsafe input handling")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def warning_registry() -> WarningRegistry:
    """Provide a fresh deprecation warning registry.

    Returns
    -------
    WarningRegistry
        Registry with no warnings issued yet.

    """
    return WarningRegistry()


@pytest.fixture
def sample_tree() -> Root:
    """Provide a small document tree exercising the common elements.

    Returns
    -------
    Root
        Tree with a heading, a paragraph with a link and emphasis, and a
        two-item task list.

    """
    return Root(
        children=[
            h("h1", {}, "Sample", pos=position(1, 1, 1, 9)),
            Text("\n"),
            h(
                "p",
                {},
                "See ",
                h("a", {"href": "https://example.com", "title": "Example"}, "the site"),
                " and ",
                h("em", {}, "enjoy"),
                pos=position(3, 1, 3, 45),
            ),
            Text("\n"),
            h(
                "ul",
                {"className": ["contains-task-list"]},
                h("li", {"className": ["task-list-item"]}, h("input", {"type": "checkbox", "checked": True}), " done"),
                h("li", {"className": ["task-list-item"]}, h("input", {"type": "checkbox", "checked": False}), " todo"),
            ),
        ]
    )
