#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/renderers/markdown.py
"""Markdown rendering from document trees.

This module provides the MarkdownRenderer class which serializes a document
tree into CommonMark text in a single pass.

Rendering is driven by a :class:`MarkdownSerializerState` that owns the
output buffer, the stack of line prefixes ("delimiters") contributed by the
enclosing blocks, and a lazily flushed *closed block* marker. Blocks do not
emit their trailing blank lines when they end; the next write decides how
much spacing to insert, which is what lets tight lists stay tight and keeps
adjacent lists of the same kind from merging.

Node kinds render through functions looked up in a
:class:`~tree2md.renderers.registry.SerializerRegistry`; marks are emitted
as open/close markup around text runs, keeping marks open across adjacent
runs where possible.

"""

from __future__ import annotations

import logging
from typing import Callable

from tree2md.ast.nodes import Mark, Node
from tree2md.constants import (
    BLOCKQUOTE_PREFIX,
    BULLET_LIST_INDENT,
    CLOSE_DEFAULT,
    CLOSE_SEPARATE_LISTS,
    CLOSE_TIGHT,
    CODE_FENCE,
    DEFAULT_BULLET,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_HORIZONTAL_RULE,
    DEFAULT_ORDERED_LIST_START,
    INDENTED_CODE_PREFIX,
    MARK_CODE,
    MARK_EM,
    MARK_LINK,
    MARK_STRONG,
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_HARD_BREAK,
    NODE_HEADING,
    NODE_HORIZONTAL_RULE,
    NODE_IMAGE,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
    NODE_TEXT,
)
from tree2md.options.markdown import MarkdownRendererOptions
from tree2md.renderers.base import BaseRenderer
from tree2md.renderers.registry import MarkSpec, SerializerRegistry
from tree2md.utils.escape import escape_markdown, quote_title

logger = logging.getLogger(__name__)


class MarkdownSerializerState:
    """Mutable state for one Markdown serialization pass.

    Instances are passed to node render functions and mark markup functions.
    A state is created per conversion and discarded afterwards; it must not
    be shared between two trees.

    Parameters
    ----------
    options : MarkdownRendererOptions
        Rendering options
    registry : SerializerRegistry
        Node renderers and mark specs to dispatch through

    Attributes
    ----------
    out : str
        Markdown produced so far
    delim : str
        Accumulated line prefix of the enclosing blocks (quote markers,
        list and code indentation)
    closed : Node or None
        The block that has just ended and whose trailing spacing is still
        pending
    in_tight_list : bool
        Whether rendering is currently inside a tight list

    """

    def __init__(self, options: MarkdownRendererOptions, registry: SerializerRegistry):
        """Initialize an empty serialization state."""
        self.options = options
        self.registry = registry
        self.out = ""
        self.delim = ""
        self.closed: Node | None = None
        self.in_tight_list = False

    # ------------------------------------------------------------------
    # Output primitives
    # ------------------------------------------------------------------

    def flush_close(self, size: int = CLOSE_DEFAULT) -> None:
        """Emit the spacing owed by a pending closed block.

        Parameters
        ----------
        size : int, default 2
            Number of line breaks separating the closed block from what
            follows: 1 for none blank, 2 for one blank line, 3 for two.
            Blank lines carry the current prefix with trailing whitespace
            removed, so they keep ``>`` markers inside block quotes.

        """
        if self.closed is None:
            return
        if not self.at_blank():
            self.out += "\n"
        if size > 1:
            delim_min = self.delim.rstrip()
            self.out += (delim_min + "\n") * (size - 1)
        self.closed = None

    def wrap_block(self, delim: str, first_delim: str | None, node: Node, render: Callable[[], None]) -> None:
        """Render a block whose lines are prefixed with ``delim``.

        Parameters
        ----------
        delim : str
            Prefix added to every line of the block
        first_delim : str or None
            Prefix for the first line instead of ``delim`` (list markers)
        node : Node
            The node closed at the end of the block
        render : callable
            Function that renders the block's content

        """
        old = self.delim
        self.write(first_delim or delim)
        self.delim += delim
        try:
            render()
        finally:
            self.delim = old
        self.close_block(node)

    def at_blank(self) -> bool:
        """Whether the output is empty or ends with a line break."""
        return not self.out or self.out.endswith("\n")

    def ensure_new_line(self) -> None:
        """Ensure the output ends with a line break."""
        if not self.at_blank():
            self.out += "\n"

    def write(self, content: str | None = None) -> None:
        """Prepare for output, then append ``content`` unescaped.

        Flushes a pending closed block and, at the start of a line, emits
        the current prefix.
        """
        self.flush_close()
        if self.delim and self.at_blank():
            self.out += self.delim
        if content:
            self.out += content

    def close_block(self, node: Node) -> None:
        """Mark ``node``'s block as closed; spacing is decided by the next write."""
        self.closed = node

    def text(self, text: str, escape: bool = True) -> None:
        """Add text to the document, escaping it unless ``escape`` is False.

        Each line is written separately so continuation lines receive the
        current prefix, and line-start escaping applies to lines that begin
        a fresh output line.
        """
        lines = text.split("\n")
        for i, line in enumerate(lines):
            start_of_line = self.at_blank() or self.closed is not None
            self.write()
            self.out += self.esc(line, start_of_line) if escape else line
            if i != len(lines) - 1:
                self.out += "\n"

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, node: Node) -> None:
        """Render ``node`` through its registered render function.

        Raises
        ------
        UnknownNodeTypeError
            If the node kind has no registered renderer

        """
        self.registry.node_renderer(node.type)(self, node)

    def render_content(self, parent: Node) -> None:
        """Render the children of ``parent`` as blocks."""
        for child in parent:
            self.render(child)

    def render_inline(self, parent: Node) -> None:
        """Render the children of ``parent`` as inline content.

        Marks stay open across adjacent runs that share them. After the last
        child, every mark still open is closed.
        """
        active: list[Mark] = []
        for child in parent:
            self._progress_inline(child, active)
        self._progress_inline(None, active)

    def _progress_inline(self, node: Node | None, active: list[Mark]) -> None:
        marks = list(node.marks) if node is not None else []
        literal = marks[-1] if marks and self._mark_spec(marks[-1]).literal else None
        length = len(marks) - (1 if literal is not None else 0)

        # Move mixable marks (em, strong) that are already open to their
        # position in the active stack, so they are not closed and reopened
        # just because the run lists them in a different order.
        for i in range(length):
            mark = marks[i]
            if not self._mark_spec(mark).mixable:
                break
            for j, other in enumerate(active):
                if not self._mark_spec(other).mixable:
                    break
                if mark == other:
                    if i != j:
                        del marks[i]
                        marks.insert(min(j, length - 1), mark)
                    break

        keep = 0
        while keep < min(len(active), length) and marks[keep] == active[keep]:
            keep += 1

        while keep < len(active):
            self.text(self.mark_string(active.pop(), False), False)

        while len(active) < length:
            add = marks[len(active)]
            active.append(add)
            self.text(self.mark_string(add, True), False)

        if node is None:
            return
        if literal is not None and node.is_text:
            self.text(
                self.mark_string(literal, True) + node.text_content + self.mark_string(literal, False),
                False,
            )
        else:
            self.render(node)

    def render_list(self, node: Node, delim: str, first_delim: Callable[[int], str]) -> None:
        """Render a list node's items.

        Parameters
        ----------
        node : Node
            The list node
        delim : str
            Continuation indentation for item content
        first_delim : callable
            Maps an item index to the marker prefix of its first line

        """
        if self.closed is not None and self.closed.type == node.type:
            self.flush_close(CLOSE_SEPARATE_LISTS)
        elif self.in_tight_list:
            self.flush_close(CLOSE_TIGHT)

        prev_tight = self.in_tight_list
        self.in_tight_list = bool(node.attrs.get("tight"))
        try:
            for i, item in enumerate(node.content):
                if i and self.in_tight_list:
                    self.flush_close(CLOSE_TIGHT)
                self.wrap_block(delim, first_delim(i), node, lambda: self.render(item))
        finally:
            self.in_tight_list = prev_tight

    # ------------------------------------------------------------------
    # Helpers for render functions
    # ------------------------------------------------------------------

    def esc(self, text: str, start_of_line: bool = False) -> str:
        """Escape ``text`` for Markdown; see :func:`~tree2md.utils.escape.escape_markdown`."""
        return escape_markdown(text, start_of_line)

    def quote(self, text: str) -> str:
        """Quote a title; see :func:`~tree2md.utils.escape.quote_title`."""
        return quote_title(text)

    def mark_string(self, mark: Mark, opening: bool) -> str:
        """Get the markup string opening or closing ``mark``.

        Raises
        ------
        UnknownMarkTypeError
            If the mark kind has no registered markup

        """
        return self._mark_spec(mark).markup(self, mark, opening)

    def _mark_spec(self, mark: Mark) -> MarkSpec:
        return self.registry.mark_spec(mark.type)


# ============================================================================
# Built-in node and mark serialization
# ============================================================================

markdown_registry = SerializerRegistry()


def _str_attr(attrs: dict, name: str) -> str:
    """Return a string attribute, or an empty string when it is missing or not a string."""
    value = attrs.get(name)
    return value if isinstance(value, str) else ""


@markdown_registry.node(NODE_BLOCKQUOTE)
def _render_blockquote(state: MarkdownSerializerState, node: Node) -> None:
    state.wrap_block(BLOCKQUOTE_PREFIX, None, node, lambda: state.render_content(node))


@markdown_registry.node(NODE_CODE_BLOCK)
def _render_code_block(state: MarkdownSerializerState, node: Node) -> None:
    """Render an indented block without an info string, a fenced one otherwise."""
    params = node.attrs.get("params")
    if params is None:
        state.wrap_block(INDENTED_CODE_PREFIX, None, node, lambda: state.text(node.text_content, False))
    else:
        state.write(CODE_FENCE + str(params) + "\n")
        state.text(node.text_content, False)
        state.ensure_new_line()
        state.write(CODE_FENCE)
        state.close_block(node)


@markdown_registry.node(NODE_HEADING)
def _render_heading(state: MarkdownSerializerState, node: Node) -> None:
    level = node.attrs.get("level")
    if not isinstance(level, int) or isinstance(level, bool) or level < 1:
        level = DEFAULT_HEADING_LEVEL
    state.write("#" * level + " ")
    state.render_inline(node)
    state.close_block(node)


@markdown_registry.node(NODE_HORIZONTAL_RULE)
def _render_horizontal_rule(state: MarkdownSerializerState, node: Node) -> None:
    state.write(_str_attr(node.attrs, "markup") or DEFAULT_HORIZONTAL_RULE)
    state.close_block(node)


@markdown_registry.node(NODE_BULLET_LIST)
def _render_bullet_list(state: MarkdownSerializerState, node: Node) -> None:
    marker = (_str_attr(node.attrs, "bullet") or DEFAULT_BULLET) + " "
    state.render_list(node, BULLET_LIST_INDENT, lambda _: marker)


@markdown_registry.node(NODE_ORDERED_LIST)
def _render_ordered_list(state: MarkdownSerializerState, node: Node) -> None:
    """Right-align item numbers to the width of the largest one."""
    start = node.attrs.get("start")
    if not isinstance(start, int) or isinstance(start, bool):
        start = DEFAULT_ORDERED_LIST_START
    max_width = len(str(start + node.child_count - 1))
    space = " " * (max_width + 2)
    state.render_list(node, space, lambda i: str(start + i).rjust(max_width) + ". ")


@markdown_registry.node(NODE_LIST_ITEM)
def _render_list_item(state: MarkdownSerializerState, node: Node) -> None:
    state.render_content(node)


@markdown_registry.node(NODE_PARAGRAPH)
def _render_paragraph(state: MarkdownSerializerState, node: Node) -> None:
    state.render_inline(node)
    state.close_block(node)


@markdown_registry.node(NODE_IMAGE)
def _render_image(state: MarkdownSerializerState, node: Node) -> None:
    alt = _str_attr(node.attrs, "alt")
    src = _str_attr(node.attrs, "src")
    title = _str_attr(node.attrs, "title")
    state.write(
        "![" + state.esc(alt) + "](" + state.esc(src) + (" " + state.quote(title) if title else "") + ")"
    )


@markdown_registry.node(NODE_HARD_BREAK)
def _render_hard_break(state: MarkdownSerializerState, node: Node) -> None:
    state.write(state.options.hard_break)


@markdown_registry.node(NODE_TEXT)
def _render_text(state: MarkdownSerializerState, node: Node) -> None:
    state.text(node.text_content)


def _link_close(state: MarkdownSerializerState, mark: Mark) -> str:
    href = _str_attr(mark.attrs, "href")
    title = _str_attr(mark.attrs, "title")
    return "](" + state.esc(href) + (" " + state.quote(title) if title else "") + ")"


markdown_registry.register_mark(MARK_EM, MarkSpec("*", "*", mixable=True))
markdown_registry.register_mark(MARK_STRONG, MarkSpec("**", "**", mixable=True))
markdown_registry.register_mark(MARK_LINK, MarkSpec("[", _link_close))
markdown_registry.register_mark(MARK_CODE, MarkSpec("`", "`", literal=True))


class MarkdownRenderer(BaseRenderer):
    """Render document trees to CommonMark text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options
    registry : SerializerRegistry or None, default = None
        Node renderers and mark specs to use. Defaults to the built-in
        ``markdown_registry``.

    Examples
    --------
    Basic usage:

        >>> from tree2md.ast import doc, heading, text
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_to_string(doc(heading(1, text("Title"))))
        '# Title'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None, registry: SerializerRegistry | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self.registry = registry if registry is not None else markdown_registry

    def render_to_string(self, doc: Node) -> str:
        """Render a document tree to a Markdown string.

        The document's children are rendered as top-level blocks. Failures
        (such as an unregistered node or mark kind) abort the whole
        conversion; no partial output is returned.

        Parameters
        ----------
        doc : Node
            The document node to render

        Returns
        -------
        str
            Markdown text

        """
        logger.debug(f"Serializing document with {doc.child_count} top-level node(s)")
        state = MarkdownSerializerState(self.options, self.registry)
        state.render_content(doc)
        logger.debug(f"Serialized document to {len(state.out)} characters")
        return state.out
