"""tree2md - serialize rich-text document trees to CommonMark.

tree2md turns an in-memory document tree (typed block and inline nodes with
formatting *marks* on text runs) into Markdown text in a single pass. It
takes care of the parts that are easy to get wrong by hand:

- nested block prefixes for block quotes, list items and indented code
- tight versus loose list spacing, and keeping adjacent lists of the same
  kind from merging
- balanced emphasis/strong/link/code markup for overlapping spans, keeping
  marks open across adjacent runs
- escaping that depends on whether text starts a line

Node and mark kinds are dispatched through a registry, so new kinds can be
added without touching the serializer.

Examples
--------
    >>> from tree2md import to_markdown
    >>> from tree2md.ast import bullet_list, doc, em, list_item, paragraph, text
    >>> tree = doc(
    ...     paragraph(text("Some "), text("emphasis", em())),
    ...     bullet_list(list_item(paragraph(text("one"))), list_item(paragraph(text("two"))), tight=True),
    ... )
    >>> print(to_markdown(tree))
    Some *emphasis*
    <BLANKLINE>
    * one
    * two

"""

from __future__ import annotations

from tree2md.api import to_markdown
from tree2md.ast.nodes import Mark, Node, TextNode
from tree2md.exceptions import (
    ConfigError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    Tree2MdError,
    TreeFormatError,
    UnknownMarkTypeError,
    UnknownNodeTypeError,
    ValidationError,
)
from tree2md.options import MarkdownRendererOptions
from tree2md.renderers import MarkdownRenderer, MarkSpec, SerializerRegistry, markdown_registry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "to_markdown",
    # Document model
    "Mark",
    "Node",
    "TextNode",
    # Rendering
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "MarkSpec",
    "SerializerRegistry",
    "markdown_registry",
    # Exceptions
    "ConfigError",
    "InvalidOptionsError",
    "OutputWriteError",
    "RenderingError",
    "Tree2MdError",
    "TreeFormatError",
    "UnknownMarkTypeError",
    "UnknownNodeTypeError",
    "ValidationError",
]
