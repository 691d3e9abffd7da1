#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown serialization.

This module defines the options recognized by the Markdown serializer.
"""
# src/tree2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from tree2md.constants import DEFAULT_HARD_BREAK
from tree2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting document trees to Markdown text.

    Parameters
    ----------
    hard_break : str, default "\\\n"
        Markup emitted for a forced line break. The default is a backslash
        followed by a newline; two trailing spaces plus a newline is the
        common alternative.

    Examples
    --------
    >>> options = MarkdownRendererOptions(hard_break="  \n")
    >>> options.create_updated(hard_break="\\\n").hard_break
    '\\\n'

    """

    hard_break: str = field(
        default=DEFAULT_HARD_BREAK,
        metadata={"help": "Markup to emit for hard line breaks (default: backslash + newline)"},
    )

    def __post_init__(self) -> None:
        """Validate the hard break markup.

        Raises
        ------
        ValueError
            If hard_break is not a non-empty string.

        """
        super().__post_init__()
        if not isinstance(self.hard_break, str) or not self.hard_break:
            raise ValueError(f"hard_break must be a non-empty string, got {self.hard_break!r}")
