#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/utils/escape.py
"""Markdown text escaping utilities.

This module provides the escaping and quoting helpers shared by the block
and inline serializers.

"""

from __future__ import annotations

import re

from tree2md.constants import MARKDOWN_ESCAPE_CHARS, MARKDOWN_LINE_START_ESCAPE_CHARS

_ESCAPE_RE = re.compile("[" + re.escape(MARKDOWN_ESCAPE_CHARS) + "]")
_LINE_START_RE = re.compile("^[" + re.escape(MARKDOWN_LINE_START_ESCAPE_CHARS) + "]")


def escape_markdown(text: str, at_line_start: bool = False) -> str:
    r"""Escape text so it can safely appear in Markdown content.

    The characters ``` ` * \ ~ + [ ] ``` are backslash-escaped wherever they
    occur. A leading ``:``, ``#`` or ``-`` is escaped only when the text
    begins a fresh output line, since those characters only carry block
    meaning (definition, heading, list marker) in that position.

    Parameters
    ----------
    text : str
        Text to escape
    at_line_start : bool, default False
        Whether ``text`` starts a new output line

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("Hello *world*")
        'Hello \\*world\\*'
        >>> escape_markdown("# not a heading", at_line_start=True)
        '\\# not a heading'
        >>> escape_markdown("# mid-line")
        '# mid-line'

    """
    if not text:
        return text
    text = _ESCAPE_RE.sub(r"\\\g<0>", text)
    if at_line_start:
        text = _LINE_START_RE.sub(r"\\\g<0>", text)
    return text


def quote_title(text: str) -> str:
    """Wrap a link or image title in the first delimiter pair it does not contain.

    Tries ``"..."``, then ``'...'``, then ``(...)``.

    Parameters
    ----------
    text : str
        Title text

    Returns
    -------
    str
        Quoted title

    Examples
    --------
        >>> quote_title("plain")
        '"plain"'
        >>> quote_title('say "hi"')
        '\\'say "hi"\\''

    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    return f"({text})"
