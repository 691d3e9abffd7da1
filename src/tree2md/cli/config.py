#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration file discovery and loading for the tree2md CLI.

Configuration can live in a dedicated file (``.tree2md.toml``,
``.tree2md.yaml``/``.yml`` or ``.tree2md.json``) or in the ``[tool.tree2md]``
table of a ``pyproject.toml``. Keys are the fields of
:class:`~tree2md.options.markdown.MarkdownRendererOptions`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from tree2md.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from tree2md.exceptions import ConfigError
from tree2md.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.tree2md]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping at root level, got {type(config).__name__}", str(config_path)
        )
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object at root level, got {type(config).__name__}", str(config_path)
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching ``start_dir`` and its parents.

    In each directory the dedicated config files are checked in
    ``CONFIG_FILENAMES`` order, then ``pyproject.toml`` (only if it has a
    ``[tool.tree2md]`` section).

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches ``start_dir`` (default: cwd) and its parents first, then the
    user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    The format is detected from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path)
            )
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def options_from_config(
    config: Dict[str, Any],
    base: Optional[MarkdownRendererOptions] = None,
    config_path: Optional[str] = None,
) -> MarkdownRendererOptions:
    """Build renderer options from a configuration mapping.

    Parameters
    ----------
    config : dict
        Configuration values keyed by option field name
    base : MarkdownRendererOptions, optional
        Options to update; defaults to a fresh default instance
    config_path : str, optional
        Source file, used in error messages

    Returns
    -------
    MarkdownRendererOptions
        Options with the configured values applied

    Raises
    ------
    ConfigError
        If the mapping has unknown keys or invalid values

    """
    base = base or MarkdownRendererOptions()
    unknown = sorted(set(config) - MarkdownRendererOptions.field_names())
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}", config_path)
    try:
        return base.create_updated(**config)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration value: {e}", config_path, e) from e
