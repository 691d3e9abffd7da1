#  Copyright (c) 2025 Tom Villani, Ph.D.
"""High-level API for serializing document trees to Markdown.

Examples
--------
    >>> from tree2md import to_markdown
    >>> from tree2md.ast import doc, paragraph, text
    >>> to_markdown(doc(paragraph(text("Hello *world*"))))
    'Hello \\\\*world\\\\*'

"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Optional, Union

from tree2md.ast.nodes import Node
from tree2md.exceptions import InvalidOptionsError
from tree2md.options.markdown import MarkdownRendererOptions
from tree2md.renderers.markdown import MarkdownRenderer
from tree2md.renderers.registry import SerializerRegistry


def _resolve_options(options: Optional[MarkdownRendererOptions], **kwargs: Any) -> MarkdownRendererOptions:
    """Merge keyword overrides onto ``options``.

    Raises
    ------
    InvalidOptionsError
        If ``options`` has the wrong type, a keyword is not an option field,
        or an override value is rejected

    """
    if options is not None and not isinstance(options, MarkdownRendererOptions):
        raise InvalidOptionsError(
            renderer_name="markdown",
            expected_type=MarkdownRendererOptions,
            received_type=type(options),
        )
    options = options or MarkdownRendererOptions()
    if not kwargs:
        return options

    unknown = sorted(set(kwargs) - MarkdownRendererOptions.field_names())
    if unknown:
        raise InvalidOptionsError(
            renderer_name="markdown",
            expected_type=MarkdownRendererOptions,
            received_type=MarkdownRendererOptions,
            message=f"Unknown markdown option(s): {', '.join(unknown)}",
        )
    try:
        return options.create_updated(**kwargs)
    except ValueError as e:
        raise InvalidOptionsError(
            renderer_name="markdown",
            expected_type=MarkdownRendererOptions,
            received_type=MarkdownRendererOptions,
            message=str(e),
            original_error=e,
        ) from e


def to_markdown(
    doc: Node,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    options: Optional[MarkdownRendererOptions] = None,
    registry: Optional[SerializerRegistry] = None,
    **kwargs: Any,
) -> Optional[str]:
    r"""Serialize a document tree to CommonMark.

    Parameters
    ----------
    doc : Node
        Root document node; its children are rendered as top-level blocks
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the Markdown is returned.
    options : MarkdownRendererOptions, optional
        Rendering options
    registry : SerializerRegistry, optional
        Node renderers and mark specs; defaults to the built-in registry
    kwargs : Any
        Option overrides applied on top of ``options`` (e.g. ``hard_break="  \n"``)

    Returns
    -------
    str or None
        The Markdown text if ``output`` is None, otherwise None

    Raises
    ------
    InvalidOptionsError
        If options are of the wrong type, an unknown keyword is given,
        or an override value is invalid
    RenderingError
        If a node or mark kind has no registration

    """
    renderer = MarkdownRenderer(_resolve_options(options, **kwargs), registry=registry)
    if output is None:
        return renderer.render_to_string(doc)
    renderer.render(doc, output)
    return None
