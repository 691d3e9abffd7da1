#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/ast/__init__.py
"""Document tree module.

This package provides the read-only document model consumed by the
Markdown serializer:

- nodes: ``Node``, ``TextNode`` and ``Mark``
- builder: helper functions for assembling trees in code
- serialization: JSON serialization and deserialization of trees

Examples
--------
>>> from tree2md.ast import doc, heading, text
>>> from tree2md.renderers.markdown import MarkdownRenderer
>>> MarkdownRenderer().render_to_string(doc(heading(2, text("Title"))))
'## Title'

"""

from __future__ import annotations

from tree2md.ast.builder import (
    blockquote,
    bullet_list,
    code,
    code_block,
    doc,
    em,
    hard_break,
    heading,
    horizontal_rule,
    image,
    link,
    list_item,
    ordered_list,
    paragraph,
    strong,
    text,
)
from tree2md.ast.nodes import Mark, Node, TextNode
from tree2md.ast.serialization import dict_to_node, json_to_node, node_to_dict, node_to_json

__all__ = [
    # Nodes
    "Mark",
    "Node",
    "TextNode",
    # Builder helpers
    "blockquote",
    "bullet_list",
    "code",
    "code_block",
    "doc",
    "em",
    "hard_break",
    "heading",
    "horizontal_rule",
    "image",
    "link",
    "list_item",
    "ordered_list",
    "paragraph",
    "strong",
    "text",
    # Serialization
    "dict_to_node",
    "json_to_node",
    "node_to_dict",
    "node_to_json",
]
