"""Utility helpers for tree2md."""

from tree2md.utils.escape import escape_markdown, quote_title
from tree2md.utils.io_utils import write_content

__all__ = ["escape_markdown", "quote_title", "write_content"]
