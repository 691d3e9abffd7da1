#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class renderers inherit from, giving
them a consistent interface for turning a document tree into output text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from tree2md.ast.nodes import Node
from tree2md.exceptions import InvalidOptionsError
from tree2md.options.base import BaseRendererOptions
from tree2md.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for document tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return doc.text_content

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the document tree to a string.

        Parameters
        ----------
        doc : Node
            Root document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document tree and write it to ``output``.

        Parameters
        ----------
        doc : Node
            Root document node to render
        output : str, Path, IO[bytes], or IO[str]
            File path or file-like object (text or binary mode)

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If the output path cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        write_content(text, output)
