#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/renderers/registry.py
"""Serializer registry for node and mark kinds.

The Markdown serializer does not hard-code the kinds it understands. Each
node kind maps to a render function and each mark kind maps to a
:class:`MarkSpec` describing its opening/closing markup and how it may be
nested. The registry is consulted by kind at render time; an unregistered
kind is a hard failure.

Examples
--------
Register a custom node kind on a copy of the built-in registry:

    >>> from tree2md.renderers.markdown import markdown_registry
    >>> registry = markdown_registry.copy()
    >>> @registry.node("aside")
    ... def render_aside(state, node):
    ...     state.wrap_block("| ", None, node, lambda: state.render_content(node))

Register a mark kind:

    >>> registry.register_mark("strike", MarkSpec("~~", "~~", mixable=True))

Plugins can ship registrations through the ``tree2md.serializers`` entry point
group. Each entry point must resolve to a callable that accepts the registry::

    [project.entry-points."tree2md.serializers"]
    strike = "my_package.markdown:register"

"""

from __future__ import annotations

import importlib.metadata
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

from tree2md.constants import PLUGIN_ENTRY_POINT_GROUP
from tree2md.exceptions import UnknownMarkTypeError, UnknownNodeTypeError

if TYPE_CHECKING:
    from tree2md.ast.nodes import Mark, Node
    from tree2md.renderers.markdown import MarkdownSerializerState

logger = logging.getLogger(__name__)

NodeRenderFunc = Callable[["MarkdownSerializerState", "Node"], None]
MarkupFunc = Callable[["MarkdownSerializerState", "Mark"], str]
Markup = Union[str, MarkupFunc]


@dataclass(frozen=True)
class MarkSpec:
    """Markdown behavior of a mark kind.

    Parameters
    ----------
    open : str or callable
        Opening markup, or a function of ``(state, mark)`` returning it
    close : str or callable
        Closing markup, or a function of ``(state, mark)`` returning it
    mixable : bool, default False
        Whether the nesting order of this mark relative to other mixable
        marks carries no meaning, so the serializer may reorder it to avoid
        closing and reopening it between adjacent runs
    literal : bool, default False
        Whether the marked text is emitted unescaped as one atomic unit
        (code spans)

    """

    open: Markup
    close: Markup
    mixable: bool = False
    literal: bool = False

    def markup(self, state: MarkdownSerializerState, mark: Mark, opening: bool) -> str:
        """Resolve the opening or closing markup for ``mark``."""
        value = self.open if opening else self.close
        if isinstance(value, str):
            return value
        return value(state, mark)


class SerializerRegistry:
    """Mapping from node kinds to render functions and mark kinds to markup.

    Unlike the process-wide default (``tree2md.renderers.markdown.markdown_registry``),
    instances are independent; use :meth:`copy` to extend the built-ins
    without affecting other callers.

    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._nodes: dict[str, NodeRenderFunc] = {}
        self._marks: dict[str, MarkSpec] = {}

    def register_node(self, node_type: str, func: NodeRenderFunc) -> None:
        """Register the render function for a node kind.

        Parameters
        ----------
        node_type : str
            Node kind name
        func : callable
            Function of ``(state, node)`` that writes the node's markdown

        Notes
        -----
        Registering an existing kind overwrites it and logs a warning.

        """
        if node_type in self._nodes:
            logger.warning(f"Node type '{node_type}' already registered, overwriting")
        self._nodes[node_type] = func
        logger.debug(f"Registered node type: {node_type}")

    def register_mark(self, mark_type: str, spec: MarkSpec) -> None:
        """Register the markup for a mark kind.

        Parameters
        ----------
        mark_type : str
            Mark kind name
        spec : MarkSpec
            Opening/closing markup and nesting flags

        """
        if mark_type in self._marks:
            logger.warning(f"Mark type '{mark_type}' already registered, overwriting")
        self._marks[mark_type] = spec
        logger.debug(f"Registered mark type: {mark_type}")

    def node(self, node_type: str) -> Callable[[NodeRenderFunc], NodeRenderFunc]:
        """Register the decorated function as the renderer for ``node_type``."""

        def decorator(func: NodeRenderFunc) -> NodeRenderFunc:
            self.register_node(node_type, func)
            return func

        return decorator

    def node_renderer(self, node_type: str) -> NodeRenderFunc:
        """Return the render function for a node kind.

        Raises
        ------
        UnknownNodeTypeError
            If no function is registered for ``node_type``

        """
        try:
            return self._nodes[node_type]
        except KeyError:
            raise UnknownNodeTypeError(node_type) from None

    def mark_spec(self, mark_type: str) -> MarkSpec:
        """Return the markup spec for a mark kind.

        Raises
        ------
        UnknownMarkTypeError
            If no spec is registered for ``mark_type``

        """
        try:
            return self._marks[mark_type]
        except KeyError:
            raise UnknownMarkTypeError(mark_type) from None

    def has_node(self, node_type: str) -> bool:
        """Check whether a node kind is registered."""
        return node_type in self._nodes

    def has_mark(self, mark_type: str) -> bool:
        """Check whether a mark kind is registered."""
        return mark_type in self._marks

    def list_node_types(self) -> list[str]:
        """Return the registered node kinds, sorted."""
        return sorted(self._nodes)

    def list_mark_types(self) -> list[str]:
        """Return the registered mark kinds, sorted."""
        return sorted(self._marks)

    def copy(self) -> SerializerRegistry:
        """Return an independent registry with the same registrations."""
        clone = SerializerRegistry()
        clone._nodes = dict(self._nodes)
        clone._marks = dict(self._marks)
        return clone

    def discover_plugins(self, group: str = PLUGIN_ENTRY_POINT_GROUP) -> int:
        """Load registrations from installed entry points.

        Each entry point in ``group`` must resolve to a callable that takes
        this registry and registers its node and mark kinds on it. Entry
        points that fail to load are logged and skipped.

        Parameters
        ----------
        group : str, default "tree2md.serializers"
            Entry point group to scan

        Returns
        -------
        int
            Number of plugins applied

        """
        discovered_count = 0

        for ep in importlib.metadata.entry_points().select(group=group):
            try:
                register = ep.load()
                if not callable(register):
                    logger.warning(f"Entry point '{ep.name}' is not callable, skipping")
                    continue
                register(self)
                discovered_count += 1
                logger.debug(f"Applied serializer plugin from entry point: {ep.name}")
            except Exception as e:
                logger.warning(f"Failed to load serializer entry point '{ep.name}': {e}")
                continue

        logger.info(f"Discovered {discovered_count} serializer plugin(s) from entry points")
        return discovered_count
