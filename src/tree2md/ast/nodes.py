#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/ast/nodes.py
"""Document tree classes consumed by the Markdown serializer.

This module defines the read-only rich-text document model: a tree of typed
block and inline nodes where inline formatting is carried as *marks* attached
to text runs rather than as wrapper nodes.

Node Model
----------
Every element is a :class:`Node` with a kind name (``type``), a kind-specific
attribute mapping and an ordered list of children. Text runs are
:class:`TextNode` instances holding literal content and the ordered sequence
of :class:`Mark` objects applied to that run.

Block kinds used by the built-in serializer:
    - doc, paragraph, heading, blockquote, code_block, horizontal_rule
    - bullet_list, ordered_list, list_item

Inline kinds:
    - text, image, hard_break

Mark kinds:
    - em, strong, link, code

Kinds are plain strings, so new kinds only need a serializer registration
(see :mod:`tree2md.renderers.registry`).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from tree2md.constants import NODE_TEXT


@dataclass(frozen=True)
class Mark:
    """Inline formatting applied to a text run.

    Marks are immutable. Two marks are equal when they share the same kind and
    attributes, which is the comparison the inline serializer uses to keep
    marks open across adjacent runs.

    Parameters
    ----------
    type : str
        Mark kind name (e.g. ``"em"``, ``"link"``)
    attrs : dict, default = empty dict
        Kind-specific attributes (e.g. ``href`` and ``title`` for links)

    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)


@dataclass
class Node:
    """Block or inline container node.

    Parameters
    ----------
    type : str
        Node kind name (e.g. ``"paragraph"``, ``"bullet_list"``)
    attrs : dict, default = empty dict
        Kind-specific attributes (heading level, list tightness, image source, ...)
    content : list of Node, default = empty list
        Ordered child nodes
    marks : list of Mark, default = empty list
        Marks applied to this node when it appears in inline content

    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)
    content: list[Node] = field(default_factory=list)
    marks: list[Mark] = field(default_factory=list)

    @property
    def is_text(self) -> bool:
        """Whether this node is a text run."""
        return False

    @property
    def child_count(self) -> int:
        """Number of direct children."""
        return len(self.content)

    def child(self, index: int) -> Node:
        """Return the child at ``index``."""
        return self.content[index]

    def __iter__(self) -> Iterator[Node]:
        """Iterate over direct children in document order."""
        return iter(self.content)

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant text runs."""
        return "".join(child.text_content for child in self.content)


@dataclass
class TextNode(Node):
    """Leaf node holding literal text.

    Parameters
    ----------
    text : str
        The literal content of the run
    marks : list of Mark, default = empty list
        Formatting applied to the run, outermost first

    """

    type: str = NODE_TEXT
    text: str = ""

    @property
    def is_text(self) -> bool:
        """Whether this node is a text run."""
        return True

    @property
    def text_content(self) -> str:
        """The literal text of this run."""
        return self.text
