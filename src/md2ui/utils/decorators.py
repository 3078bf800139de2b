#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/utils/decorators.py
"""Utility decorators for md2ui components.

This module provides the dependency-checking decorator used by components
that rely on optional packages, such as the raw-HTML fragment parser.

"""

from __future__ import annotations

import importlib
from functools import wraps
from importlib import metadata
from typing import Any, Callable, List, Optional, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet

from md2ui.exceptions import DependencyError


def _meets_version_spec(install_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Return whether ``install_name`` satisfies ``version_spec``, and its installed version."""
    try:
        installed = metadata.version(install_name)
    except metadata.PackageNotFoundError:
        return False, None
    try:
        return version.parse(installed) in SpecifierSet(version_spec), installed
    except (InvalidSpecifier, version.InvalidVersion):
        return False, installed


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g., "html fragment parser"). This appears in
        error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.9.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("html fragment parser", [("beautifulsoup4", "bs4", ">=4.9.0")])
        ... def parse(self, raw):
        ...     from bs4 import BeautifulSoup
        ...     # parsing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
                    importlib.import_module(import_name)

                    if version_spec:
                        meets_requirement, installed_version = _meets_version_spec(install_name, version_spec)
                        if not meets_requirement:
                            version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator
