#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for table of contents options.

Site generators usually keep their ToC settings next to the rest of the
site configuration. This module finds such a file, loads it from JSON, TOML,
or YAML, and turns it into :class:`~sitetoc.options.TocOptions`.

A file may hold the options at its top level, under a ``toc`` table, or
both, in which case the ``toc`` table wins:

.. code-block:: toml

    [toc]
    max_depth = 2
    auto_expand = true

In ``pyproject.toml`` the options live in ``[tool.sitetoc]`` (optionally under
``[tool.sitetoc.toc]``).
"""

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from sitetoc.constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAMES,
    CONFIG_TOC_SECTION,
    DEDICATED_CONFIG_FILENAMES,
    PYPROJECT_TOOL_SECTION,
)
from sitetoc.exceptions import ConfigurationError
from sitetoc.options import TocOptions

logger = logging.getLogger(__name__)

__all__ = [
    "CONFIG_FILENAMES",
    "find_config_in_parents",
    "load_config_file",
    "merge_configs",
    "load_config_with_priority",
    "load_options",
]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.sitetoc] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.sitetoc], or empty dict if absent

    Raises
    ------
    ConfigurationError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for, in order: ``.sitetoc.toml``, ``.sitetoc.yaml``,
    ``.sitetoc.yml``, ``.sitetoc.json``, and a ``pyproject.toml`` with a
    ``[tool.sitetoc]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to the current directory

    Returns
    -------
    Path or None
        Path to the first config file found, or None

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError as e:
                logger.warning(f"Ignoring unreadable {pyproject_path}: {e.message}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

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
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".sitetoc.toml")  # doctest: +SKIP
    >>> config.get("toc", {}).get("max_depth")  # doctest: +SKIP
    2

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise ConfigurationError(
            f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
        )

    logger.debug(f"Loaded table of contents configuration from {config_path}")
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a TOML file."""
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading TOML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Raises
    ------
    ConfigurationError
        If the JSON cannot be parsed or its root is not an object

    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading JSON config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a YAML file.

    An empty YAML file loads as an empty configuration.

    Raises
    ------
    ConfigurationError
        If the YAML cannot be parsed or its root is not a mapping

    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading YAML config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    Parameters
    ----------
    base : dict
        Base configuration dictionary
    override : dict
        Override configuration dictionary (higher priority)

    Returns
    -------
    dict
        Merged configuration dictionary

    Examples
    --------
    >>> merge_configs({"toc": {"max_depth": 2, "ordered": True}}, {"toc": {"ordered": False}})
    {'toc': {'max_depth': 2, 'ordered': False}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    start_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path
    2. Config file path from the SITETOC_CONFIG environment variable
    3. Config file discovered from ``start_dir`` upwards

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path
    env_var_path : str, optional
        Config file path taken from the environment
    start_dir : Path, optional
        Where discovery starts, defaults to the current directory

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigurationError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents(start_dir)
    if discovered_path:
        return load_config_file(discovered_path)

    logger.debug("No table of contents configuration file found, using defaults")
    return {}


def load_options(
    config_path: Optional[Path | str] = None,
    start_dir: Optional[Path] = None,
    **overrides: Any,
) -> TocOptions:
    """Load table of contents options from configuration.

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit config file. When omitted, the SITETOC_CONFIG environment
        variable is consulted, then discovery from ``start_dir``.
    start_dir : Path, optional
        Where discovery starts, defaults to the current directory
    **overrides : Any
        Option values applied on top of the file's values. Top-level
        options in the file are merged with its ``toc`` table, the table
        taking precedence.

    Returns
    -------
    TocOptions
        Options built from the file, the overrides, and defaults

    Raises
    ------
    ConfigurationError
        If a config file is specified but cannot be loaded
    ValidationError
        If the configuration holds unknown keys or invalid values

    """
    config = load_config_with_priority(
        explicit_path=str(config_path) if config_path is not None else None,
        env_var_path=os.environ.get(CONFIG_ENV_VAR),
        start_dir=start_dir,
    )

    toc_section = config.get(CONFIG_TOC_SECTION, {})
    if not isinstance(toc_section, dict):
        raise ConfigurationError(
            f"'{CONFIG_TOC_SECTION}' configuration must be a table, got {type(toc_section).__name__}",
            config_path=str(config_path) if config_path is not None else None,
        )

    # Options in the toc table win over top-level ones, whatever their spelling
    top_level = _normalize_keys({key: value for key, value in config.items() if key != CONFIG_TOC_SECTION})
    merged = merge_configs(top_level, _normalize_keys(toc_section))
    merged = merge_configs(merged, _normalize_keys(overrides))

    return TocOptions.from_dict(merged)


def _normalize_keys(section: Dict[str, Any]) -> Dict[str, Any]:
    return {TocOptions.normalize_key(str(key)): value for key, value in section.items()}
