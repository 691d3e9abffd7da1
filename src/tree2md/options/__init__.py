#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for tree2md renderers.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from tree2md.options.base import BaseRendererOptions, CloneFrozenMixin
from tree2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
]
