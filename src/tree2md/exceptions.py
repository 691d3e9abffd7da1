#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tree2md library.

This module defines specialized exception classes for the error conditions
that can occur while loading document trees and serializing them to
Markdown. These exceptions provide more specific error information than
generic built-ins.

Exception Hierarchy
-------------------
- Tree2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)
    - TreeFormatError (malformed JSON document tree)
    - ConfigError (unreadable or invalid configuration file)

  - RenderingError (output generation failures)
    - UnknownNodeTypeError (no renderer registered for a node kind)
    - UnknownMarkTypeError (no markup registered for a mark kind)
    - OutputWriteError (file write failures)

"""

from typing import Any


class Tree2MdError(Exception):
    """Base exception class for all tree2md-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(Tree2MdError):
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
        Exception that triggered this one

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Renderer the options were passed to (e.g. "markdown")
    expected_type : type
        Options dataclass the renderer accepts
    received_type : type
        Type of the object that was passed instead
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"The {renderer_name} renderer takes {expected_type.__name__} options, "
                f"not {received_type.__name__}"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class TreeFormatError(ValidationError):
    """Exception raised when a serialized document tree is malformed.

    Parameters
    ----------
    message : str
        Description of the problem
    path : str, optional
        Location of the offending value inside the tree (e.g. ``content[2].marks[0]``)
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the tree format error."""
        if path:
            message = f"{message} (at {path})"
        super().__init__(message, parameter_name="tree", parameter_value=path, original_error=original_error)
        self.path = path


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be loaded or is invalid.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path to the configuration file
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class RenderingError(Tree2MdError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnknownNodeTypeError(RenderingError):
    """Exception raised when a node kind has no registered renderer.

    This is a configuration error (a missing registration), not a data error.

    Parameters
    ----------
    node_type : str
        The node kind that could not be rendered

    """

    def __init__(self, node_type: str):
        """Initialize the unknown node type error."""
        super().__init__(f"No markdown renderer registered for node type '{node_type}'", rendering_stage="block")
        self.node_type = node_type


class UnknownMarkTypeError(RenderingError):
    """Exception raised when a mark kind has no registered markup.

    Parameters
    ----------
    mark_type : str
        The mark kind that could not be rendered

    """

    def __init__(self, mark_type: str):
        """Initialize the unknown mark type error."""
        super().__init__(f"No markdown markup registered for mark type '{mark_type}'", rendering_stage="inline")
        self.mark_type = mark_type


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path

