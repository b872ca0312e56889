#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the orgwiki CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning them into
:class:`~orgwiki.options.wiki.WikiRendererOptions`.
"""

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from orgwiki.exceptions import FileError, ValidationError
from orgwiki.options.wiki import WikiRendererOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ORGWIKI_CONFIG"
DEDICATED_CONFIG_FILENAMES = [".orgwiki.toml", ".orgwiki.yaml", ".orgwiki.yml", ".orgwiki.json"]
CONFIG_FILENAMES = DEDICATED_CONFIG_FILENAMES + ["pyproject.toml"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.orgwiki] section from pyproject.toml.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.orgwiki], or empty dict if not found

    Raises
    ------
    ValidationError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValidationError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise FileError(f"Error reading {pyproject_path}: {e}", file_path=str(pyproject_path), original_error=e) from e

    config = data.get("tool", {}).get("orgwiki")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValidationError(
            f"[tool.orgwiki] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for, in order, ``.orgwiki.toml``, ``.orgwiki.yaml``, ``.orgwiki.yml``,
    ``.orgwiki.json`` and a ``pyproject.toml`` with a ``[tool.orgwiki]``
    section.

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
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except (ValidationError, FileError) as e:
                logger.debug("Ignoring unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Parent directories are searched first (see :func:`find_config_in_parents`),
    then the dedicated config files in the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValidationError(f"Invalid TOML in config file {config_path}: {e}", original_error=e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in config file {config_path}: {e}", original_error=e) from e
    if not isinstance(config, dict):
        raise ValidationError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid YAML in config file {config_path}: {e}", original_error=e) from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValidationError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension. For
    ``pyproject.toml`` only the ``[tool.orgwiki]`` section is returned.

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
    FileError
        If the file does not exist or cannot be read
    ValidationError
        If the file cannot be parsed or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".orgwiki.toml")
    >>> print(config.get("dialect_style"))
    creole

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise FileError(f"Configuration file does not exist: {config_path}", file_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            return _load_pyproject_section(config_path)
        if ext == ".toml":
            return _load_toml_config(config_path)
        if ext in (".yaml", ".yml"):
            return _load_yaml_config(config_path)
        if ext == ".json":
            return _load_json_config(config_path)
    except OSError as e:
        raise FileError(f"Error reading config file {config_path}: {e}", file_path=str(config_path), original_error=e) from e

    raise ValidationError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (ORGWIKI_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug("Using configuration file %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def options_from_config(
    config: Dict[str, Any], base: Optional[WikiRendererOptions] = None
) -> WikiRendererOptions:
    """Build wiki options from a configuration dictionary.

    Keys are option field names; dashes are accepted in place of
    underscores.

    Parameters
    ----------
    config : dict
        Configuration values
    base : WikiRendererOptions, optional
        Options the values are applied to, defaults to the default options

    Returns
    -------
    WikiRendererOptions
        Options with the configured values

    Raises
    ------
    ValidationError
        If a key is not an option name or a value is rejected

    """
    option_names = {field.name for field in fields(WikiRendererOptions)}
    values: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        if name not in option_names:
            raise ValidationError(f"Unknown configuration key: {key}", parameter_name=str(key), parameter_value=value)
        values[name] = value

    try:
        return (base or WikiRendererOptions()).create_updated(**values)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid configuration: {e}", original_error=e) from e
