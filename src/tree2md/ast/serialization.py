#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tree2md/ast/serialization.py
"""JSON serialization and deserialization for document trees.

Trees are exchanged in the same JSON shape rich-text editors commonly use::

    {
      "type": "doc",
      "content": [
        {"type": "paragraph", "content": [
          {"type": "text", "text": "Hello ", "marks": []},
          {"type": "text", "text": "world", "marks": [{"type": "strong"}]}
        ]}
      ]
    }

Kinds are not validated here; a tree with an unregistered kind loads fine
and fails when it is serialized.

Examples
--------
>>> from tree2md.ast.serialization import json_to_node, node_to_json
>>> tree = json_to_node('{"type": "doc", "content": []}')
>>> node_to_json(tree)
'{"type": "doc"}'

"""

from __future__ import annotations

import json
from typing import Any

from tree2md.ast.nodes import Mark, Node, TextNode
from tree2md.constants import NODE_TEXT
from tree2md.exceptions import TreeFormatError


def _mark_to_dict(mark: Mark) -> dict[str, Any]:
    result: dict[str, Any] = {"type": mark.type}
    if mark.attrs:
        result["attrs"] = dict(mark.attrs)
    return result


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its descendants) to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        Dictionary with ``type`` and, where non-empty, ``attrs``,
        ``content``, ``text`` and ``marks`` keys

    """
    result: dict[str, Any] = {"type": node.type}
    if isinstance(node, TextNode):
        result["text"] = node.text
    if node.attrs:
        result["attrs"] = dict(node.attrs)
    if node.content:
        result["content"] = [node_to_dict(child) for child in node.content]
    if node.marks:
        result["marks"] = [_mark_to_dict(mark) for mark in node.marks]
    return result


def node_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node tree to a JSON string.

    Parameters
    ----------
    node : Node
        Root node to serialize
    indent : int or None, default = None
        JSON indentation level (None for compact output)

    Returns
    -------
    str
        JSON string representation of the tree

    """
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False)


def _require_mapping(value: Any, path: str, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TreeFormatError(f"Expected {what} to be an object, got {type(value).__name__}", path=path)
    return value


def _read_attrs(data: dict[str, Any], path: str) -> dict[str, Any]:
    attrs = data.get("attrs")
    if attrs is None:
        return {}
    return dict(_require_mapping(attrs, f"{path}.attrs", "attrs"))


def _read_list(data: dict[str, Any], key: str, path: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TreeFormatError(f"Expected '{key}' to be a list, got {type(value).__name__}", path=f"{path}.{key}")
    return value


def _read_type(data: dict[str, Any], path: str) -> str:
    kind = data.get("type")
    if not isinstance(kind, str) or not kind:
        raise TreeFormatError("Missing or invalid 'type'", path=path)
    return kind


def _dict_to_mark(data: Any, path: str) -> Mark:
    data = _require_mapping(data, path, "mark")
    return Mark(_read_type(data, path), _read_attrs(data, path))


def dict_to_node(data: Any, path: str = "$") -> Node:
    """Build a node tree from a dictionary.

    Parameters
    ----------
    data : dict
        Dictionary in the JSON tree shape
    path : str, default = "$"
        Location of ``data`` within the enclosing document, used in error messages

    Returns
    -------
    Node
        The reconstructed node

    Raises
    ------
    TreeFormatError
        If the dictionary does not describe a valid node

    """
    data = _require_mapping(data, path, "node")
    kind = _read_type(data, path)
    attrs = _read_attrs(data, path)
    marks = [_dict_to_mark(item, f"{path}.marks[{i}]") for i, item in enumerate(_read_list(data, "marks", path))]

    if kind == NODE_TEXT:
        value = data.get("text")
        if not isinstance(value, str):
            raise TreeFormatError("Text node requires a string 'text'", path=path)
        return TextNode(text=value, attrs=attrs, marks=marks)

    content = [dict_to_node(item, f"{path}.content[{i}]") for i, item in enumerate(_read_list(data, "content", path))]
    return Node(kind, attrs, content, marks)


def json_to_node(json_str: str) -> Node:
    """Deserialize a JSON string to a node tree.

    Parameters
    ----------
    json_str : str
        JSON document in the tree shape

    Returns
    -------
    Node
        Root node of the tree

    Raises
    ------
    TreeFormatError
        If the JSON is invalid or does not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON: {e}", original_error=e) from e
    return dict_to_node(data)
