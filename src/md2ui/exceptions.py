#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2ui library.

This module defines the exception classes raised while turning a hypertext
AST into a UI element tree. Only misconfiguration raises: malformed but
well-typed markup always degrades gracefully (blocked URIs become empty
strings, broken style declarations are dropped, missing positions are
omitted).

Exception Hierarchy
-------------------
- Md2UiError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (invalid option combinations, unknown keys)
      - InvalidComponentError (component registry entry is not a tag or callable)
      - HtmlParserNotConfiguredError (raw-HTML parser used before configure())

  - AstDeserializationError (malformed hast dictionaries)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2UiError(Exception):
    """Base exception class for all md2ui-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2UiError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConfigurationError(ValidationError):
    """Exception raised for programmer errors in render configuration.

    Configuration errors fail fast and synchronously: both
    ``allowed_elements`` and ``disallowed_elements`` set, an unknown option
    key, or a URI policy that is neither callable nor an explicit opt-out.

    """


class InvalidComponentError(ConfigurationError):
    """Exception raised when a component registry entry cannot render.

    Registry values must be a tag name string, a ``PlainTag``, a callable or a
    ``CustomRenderer``. Anything else is rejected when the registry is built.

    Parameters
    ----------
    tag_name : str
        Tag whose registry entry is invalid
    value : any
        The offending registry value
    message : str, optional
        Custom error message. If not provided, generates one naming the tag

    Attributes
    ----------
    tag_name : str
        Tag whose registry entry is invalid

    """

    def __init__(self, tag_name: str, value: Any, message: str | None = None):
        """Initialize the invalid component error."""
        if message is None:
            message = (
                f"Component for name `{tag_name}` not found or invalid: expected a tag name "
                f"or a callable renderer, got {type(value).__name__} ({value!r})"
            )
        super().__init__(message, parameter_name="components", parameter_value=value)
        self.tag_name = tag_name


class HtmlParserNotConfiguredError(ConfigurationError):
    """Exception raised when the raw-HTML fragment parser is called before use.

    The parser must be configured with its hooks (node validity predicate and
    optional processing instructions) before it is handed to the renderer.

    """

    def __init__(self, message: str | None = None):
        """Initialize with the default guidance message."""
        if message is None:
            message = (
                "HtmlFragmentParser called before use: call configure() (or use "
                "create_html_parser()) to set its hooks before passing it as `html_parser`"
            )
        super().__init__(message, parameter_name="html_parser")


class AstDeserializationError(Md2UiError):
    """Exception raised when a hast dictionary cannot be turned into nodes.

    Parameters
    ----------
    message : str
        Description of the problem
    node_data : any, optional
        The offending dictionary fragment
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_data: Any = None, original_error: Exception | None = None):
        """Initialize the deserialization error."""
        super().__init__(message, original_error=original_error)
        self.node_data = node_data


class DependencyError(Md2UiError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError that triggered this error

    Attributes
    ----------
    converter_name : str
        The component that has missing dependencies
    missing_packages : list[tuple[str, str]]
        Packages that need to be installed
    version_mismatches : list[tuple[str, str, str]]
        Packages with version mismatches
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if not install_command:
            packages = [name for name, _ in missing_packages] + [name for name, _, _ in version_mismatches]
            install_command = f"pip install --upgrade {' '.join(packages)}" if packages else ""
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_details = [
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                ]
                message_parts.append(f"{converter_name} has version mismatches: {', '.join(mismatch_details)}")

            message = ". ".join(message_parts) or f"{converter_name} has unmet dependencies"
            if install_command:
                message += f". Install with: {install_command}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "Md2UiError",
    "ValidationError",
    "ConfigurationError",
    "InvalidComponentError",
    "HtmlParserNotConfiguredError",
    "AstDeserializationError",
    "DependencyError",
]
