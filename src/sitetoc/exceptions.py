#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the sitetoc library.

This module defines specialized exception classes for the error conditions
that can occur while configuring and rendering tables of contents. The
rendering algorithm itself is total over well-formed trees, so these
exceptions cover the edges: option validation, configuration files,
cursor construction, and output rendering.

Exception Hierarchy
-------------------
- SiteTocError (base exception)

  - ValidationError (option values and keys)

  - ConfigurationError (config file discovery and parsing)

  - InvalidLocationError (cursor construction from an index path)

  - RenderingError (output generation failures)

"""

from typing import Any, Sequence


class SiteTocError(Exception):
    """Base exception class for all sitetoc-specific errors.

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


class ValidationError(SiteTocError):
    """Exception raised for invalid option values or unknown option keys.

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


class ConfigurationError(SiteTocError):
    """Exception raised when a configuration file cannot be loaded.

    Covers missing files, unsupported extensions, parse errors, and files
    whose root is not a mapping.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path to the offending configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class InvalidLocationError(SiteTocError):
    """Exception raised when an index path does not address a node in a tree.

    Parameters
    ----------
    message : str
        Description of the problem
    indices : sequence of int, optional
        The index path that could not be followed

    """

    def __init__(self, message: str, indices: Sequence[int] | None = None):
        """Initialize the error with the index path that failed."""
        super().__init__(message)
        self.indices = tuple(indices) if indices is not None else None


class RenderingError(SiteTocError):
    """Exception raised when a renderer cannot produce output for a node.

    Parameters
    ----------
    message : str
        Description of the rendering error
    node_type : str, optional
        Name of the node type that could not be rendered
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        node_type: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the rendering error with the offending node type."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


__all__ = [
    "SiteTocError",
    "ValidationError",
    "ConfigurationError",
    "InvalidLocationError",
    "RenderingError",
]
