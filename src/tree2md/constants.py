#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for tree2md library.

This module centralizes the hardcoded values used across the serializer:
node and mark kind names, default markup, and configuration discovery
settings.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# =============================================================================
# Node and Mark Kinds
# =============================================================================

NODE_DOC = "doc"
NODE_TEXT = "text"
NODE_PARAGRAPH = "paragraph"
NODE_HEADING = "heading"
NODE_BLOCKQUOTE = "blockquote"
NODE_CODE_BLOCK = "code_block"
NODE_HORIZONTAL_RULE = "horizontal_rule"
NODE_BULLET_LIST = "bullet_list"
NODE_ORDERED_LIST = "ordered_list"
NODE_LIST_ITEM = "list_item"
NODE_IMAGE = "image"
NODE_HARD_BREAK = "hard_break"

MARK_EM = "em"
MARK_STRONG = "strong"
MARK_LINK = "link"
MARK_CODE = "code"

# =============================================================================
# Markdown Output Defaults
# =============================================================================

# Backslash followed by a newline
DEFAULT_HARD_BREAK = "\\\n"
DEFAULT_BULLET = "*"
DEFAULT_HORIZONTAL_RULE = "---"
DEFAULT_ORDERED_LIST_START = 1
DEFAULT_HEADING_LEVEL = 1

CODE_FENCE = "```"
BLOCKQUOTE_PREFIX = "> "
INDENTED_CODE_PREFIX = "    "
BULLET_LIST_INDENT = "  "

# Blank-line counts passed to flush_close(): 1 => adjacent, 2 => one blank line,
# 3 => two blank lines so sibling lists of the same kind do not merge.
CLOSE_TIGHT = 1
CLOSE_DEFAULT = 2
CLOSE_SEPARATE_LISTS = 3

# Escaped anywhere in text
MARKDOWN_ESCAPE_CHARS = "`*\\~+[]"
# Escaped only when they begin a line
MARKDOWN_LINE_START_ESCAPE_CHARS = ":#-"

# =============================================================================
# Plugins and Configuration
# =============================================================================

PLUGIN_ENTRY_POINT_GROUP = "tree2md.serializers"

CONFIG_ENV_VAR = "TREE2MD_CONFIG"
CONFIG_FILENAMES = [".tree2md.toml", ".tree2md.yaml", ".tree2md.yml", ".tree2md.json"]
PYPROJECT_TOOL_SECTION = "tree2md"

DEFAULT_LOG_LEVEL: LogLevelName = "WARNING"
