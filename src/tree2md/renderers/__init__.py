#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that serialize document trees to text formats."""

from tree2md.renderers.base import BaseRenderer
from tree2md.renderers.markdown import MarkdownRenderer, MarkdownSerializerState, markdown_registry
from tree2md.renderers.registry import MarkSpec, SerializerRegistry

__all__ = [
    "BaseRenderer",
    "MarkSpec",
    "MarkdownRenderer",
    "MarkdownSerializerState",
    "SerializerRegistry",
    "markdown_registry",
]
