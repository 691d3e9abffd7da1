#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/ast/builder.py
"""Helper functions for constructing document trees.

These helpers hide the attribute-name bookkeeping of the built-in node and
mark kinds so trees can be assembled concisely in code and tests.

Examples
--------
>>> from tree2md.ast.builder import doc, paragraph, text, strong
>>> tree = doc(paragraph(text("Hello "), text("world", strong())))

"""

from __future__ import annotations

from typing import Any

from tree2md.ast.nodes import Mark, Node, TextNode
from tree2md.constants import (
    MARK_CODE,
    MARK_EM,
    MARK_LINK,
    MARK_STRONG,
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_DOC,
    NODE_HARD_BREAK,
    NODE_HEADING,
    NODE_HORIZONTAL_RULE,
    NODE_IMAGE,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
)


def _attrs(**kwargs: Any) -> dict[str, Any]:
    """Drop unset attributes so absent values stay absent."""
    return {key: value for key, value in kwargs.items() if value is not None}


# ============================================================================
# Marks
# ============================================================================


def em() -> Mark:
    """Create an emphasis mark."""
    return Mark(MARK_EM)


def strong() -> Mark:
    """Create a strong-emphasis mark."""
    return Mark(MARK_STRONG)


def code() -> Mark:
    """Create a code-span mark."""
    return Mark(MARK_CODE)


def link(href: str, title: str | None = None) -> Mark:
    """Create a link mark.

    Parameters
    ----------
    href : str
        Link destination
    title : str or None, default = None
        Optional link title

    """
    return Mark(MARK_LINK, _attrs(href=href, title=title))


# ============================================================================
# Inline nodes
# ============================================================================


def text(content: str, *marks: Mark) -> TextNode:
    """Create a text run carrying ``marks`` (outermost first)."""
    return TextNode(text=content, marks=list(marks))


def image(
    src: str | None = None,
    alt: str | None = None,
    title: str | None = None,
    marks: list[Mark] | None = None,
) -> Node:
    """Create an inline image node."""
    return Node(NODE_IMAGE, _attrs(src=src, alt=alt, title=title), marks=list(marks or []))


def hard_break(marks: list[Mark] | None = None) -> Node:
    """Create a forced line break."""
    return Node(NODE_HARD_BREAK, marks=list(marks or []))


# ============================================================================
# Block nodes
# ============================================================================


def doc(*children: Node) -> Node:
    """Create the root document node."""
    return Node(NODE_DOC, content=list(children))


def paragraph(*children: Node) -> Node:
    """Create a paragraph from inline children."""
    return Node(NODE_PARAGRAPH, content=list(children))


def heading(level: int, *children: Node) -> Node:
    """Create a heading of the given level from inline children."""
    return Node(NODE_HEADING, {"level": level}, list(children))


def blockquote(*children: Node) -> Node:
    """Create a block quote wrapping block children."""
    return Node(NODE_BLOCKQUOTE, content=list(children))


def code_block(source: str, params: str | None = None) -> Node:
    """Create a code block.

    Parameters
    ----------
    source : str
        Raw code content
    params : str or None, default = None
        Info string. ``None`` produces an indented code block, any string
        (including the empty string) produces a fenced block.

    """
    children: list[Node] = [TextNode(text=source)] if source else []
    return Node(NODE_CODE_BLOCK, {"params": params}, children)


def horizontal_rule(markup: str | None = None) -> Node:
    """Create a thematic break, optionally with custom markup."""
    return Node(NODE_HORIZONTAL_RULE, _attrs(markup=markup))


def list_item(*children: Node) -> Node:
    """Create a list item from block children."""
    return Node(NODE_LIST_ITEM, content=list(children))


def bullet_list(*items: Node, tight: bool = False, bullet: str | None = None) -> Node:
    """Create a bullet list of ``list_item`` nodes."""
    return Node(NODE_BULLET_LIST, _attrs(tight=tight, bullet=bullet), list(items))


def ordered_list(*items: Node, start: int = 1, tight: bool = False) -> Node:
    """Create an ordered list of ``list_item`` nodes numbered from ``start``."""
    return Node(NODE_ORDERED_LIST, {"start": start, "tight": tight}, list(items))
