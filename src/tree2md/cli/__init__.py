"""Command-line interface for the tree2md serializer.

Reads a JSON document tree and writes its CommonMark rendering.

Environment Variable Support
----------------------------
``TREE2MD_CONFIG`` names a configuration file to use when ``--config`` is
not given. Command-line options always override configuration values.

Examples
--------
Serialize a tree to stdout::

    $ tree2md document.json

Write to a file using two trailing spaces for hard breaks::

    $ tree2md document.json --out document.md --hard-break '  \\n'

Read the tree from stdin::

    $ cat document.json | tree2md -

"""

import argparse
import codecs
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from tree2md.ast.nodes import Node
from tree2md.ast.serialization import json_to_node
from tree2md.cli.config import discover_config_file, load_config_file, options_from_config
from tree2md.constants import CONFIG_ENV_VAR, DEFAULT_LOG_LEVEL
from tree2md.exceptions import OutputWriteError, RenderingError, TreeFormatError, ValidationError
from tree2md.logging_utils import configure_logging, resolve_log_level
from tree2md.options.markdown import MarkdownRendererOptions
from tree2md.renderers.markdown import MarkdownRenderer, markdown_registry
from tree2md.renderers.registry import SerializerRegistry
from tree2md.utils.io_utils import write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]

EXIT_SUCCESS = 0
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tree2md",
        description="Serialize a JSON rich-text document tree to CommonMark.",
    )
    parser.add_argument("input", help="JSON document tree file, or '-' to read from stdin")
    parser.add_argument("--out", "-o", dest="output", help="Output file (default: stdout)")
    parser.add_argument(
        "--hard-break",
        help=MarkdownRendererOptions.__dataclass_fields__["hard_break"].metadata["help"]
        + ". Backslash escapes such as '\\n' are interpreted.",
    )
    parser.add_argument(
        "--load-plugins",
        action="store_true",
        help="Apply serializer plugins registered under the 'tree2md.serializers' entry point group",
    )

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument("--config", help=f"Configuration file (default: discovered, or ${CONFIG_ENV_VAR})")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    return parser


def _resolve_config_path(parsed_args: argparse.Namespace) -> Optional[Path]:
    """Pick the configuration file: --config, then $TREE2MD_CONFIG, then discovery."""
    if parsed_args.config:
        return Path(parsed_args.config)
    if parsed_args.no_config:
        return None
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return discover_config_file()


def _build_options(parsed_args: argparse.Namespace) -> MarkdownRendererOptions:
    """Combine configuration file values and command-line overrides.

    Raises
    ------
    ValidationError
        If the configuration or an option value is invalid

    """
    options = MarkdownRendererOptions()
    config_path = _resolve_config_path(parsed_args)
    if config_path is not None:
        logger.info(f"Using configuration file: {config_path}")
        options = options_from_config(load_config_file(config_path), options, str(config_path))

    if parsed_args.hard_break is not None:
        hard_break = codecs.decode(parsed_args.hard_break, "unicode_escape")
        try:
            options = options.create_updated(hard_break=hard_break)
        except ValueError as e:
            raise ValidationError(str(e), parameter_name="hard_break", parameter_value=hard_break) from e
    return options


def _read_tree(source: str) -> Node:
    """Load the document tree from a path or stdin ('-')."""
    if source == "-":
        return json_to_node(sys.stdin.read())
    try:
        data = Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TreeFormatError(f"Input is not valid UTF-8: {source}", original_error=e) from e
    return json_to_node(data)


def _build_registry(load_plugins: bool) -> SerializerRegistry:
    if not load_plugins:
        return markdown_registry
    registry = markdown_registry.copy()
    registry.discover_plugins()
    return registry


def main(args: list[str] | None = None) -> int:
    """Execute the command-line entry point.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(
        resolve_log_level(parsed_args.log_level, parsed_args.verbose, parsed_args.trace),
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
    )

    try:
        options = _build_options(parsed_args)
        tree = _read_tree(parsed_args.input)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    registry = _build_registry(parsed_args.load_plugins)

    try:
        markdown = MarkdownRenderer(options, registry=registry).render_to_string(tree)
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR

    if parsed_args.output:
        try:
            write_content(markdown, parsed_args.output)
        except OutputWriteError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info(f"Wrote {parsed_args.output}")
    else:
        sys.stdout.write(markdown + "\n")

    return EXIT_SUCCESS
