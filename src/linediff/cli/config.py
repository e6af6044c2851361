#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the linediff CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and applying them underneath the values the
user gave on the command line or through ``LINEDIFF_*`` environment variables.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from linediff.cli.custom_actions import env_var_name, provided_args
from linediff.constants import COLOR_MODES, CONFIG_FILENAMES, DIFF_MODES, PYPROJECT_TOOL_SECTION
from linediff.lines import strip_quotes

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.linediff] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.linediff] section, or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root.
    In each directory the dedicated files (``.linediff.toml``,
    ``.linediff.yaml``, ``.linediff.yml``, ``.linediff.json``) are checked
    first, then ``pyproject.toml`` if it has a ``[tool.linediff]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

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
            except argparse.ArgumentTypeError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The parent directory search runs first; the user's home directory is the
    fallback (dedicated files only, no pyproject.toml).

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
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

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
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".linediff.toml")
    >>> print(config.get("mode"))
    unified

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML document is an empty configuration
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (LINEDIFF_CONFIG)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from --config flag
    env_var_path : str, optional
        Config file path from LINEDIFF_CONFIG environment variable

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug(f"Using configuration file {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise argparse.ArgumentTypeError(f"Config option '{key}' must be true or false, got {value!r}")


def _as_non_negative_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise argparse.ArgumentTypeError(f"Config option '{key}' must be a non-negative integer, got {value!r}")
    return value


def _as_positive_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise argparse.ArgumentTypeError(f"Config option '{key}' must be a positive integer, got {value!r}")
    return value


def _as_choice(choices: tuple[str, ...]) -> Callable[[str, Any], str]:
    def convert(key: str, value: Any) -> str:
        if value not in choices:
            raise argparse.ArgumentTypeError(
                f"Config option '{key}' must be one of {', '.join(choices)}, got {value!r}"
            )
        return value

    return convert


def _as_marker(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise argparse.ArgumentTypeError(f"Config option '{key}' must be a string, got {value!r}")
    return strip_quotes(value)


# Config key -> (argparse dest, converter)
CONFIG_OPTIONS: Dict[str, tuple[str, Callable[[str, Any], Any]]] = {
    "mode": ("mode", _as_choice(DIFF_MODES)),
    "color": ("color", _as_choice(COLOR_MODES)),
    "marker": ("marker", _as_marker),
    "skip_empty": ("skip_empty", _as_bool),
    "context": ("context", _as_non_negative_int),
    "strip_cr": ("strip_cr", _as_bool),
    "max_lines": ("max_lines", _as_positive_int),
    "file_headers": ("file_headers", _as_bool),
}


def apply_config_to_args(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> argparse.Namespace:
    """Fill unset arguments from a loaded configuration.

    A config value is used only when the option was not given on the command
    line and its ``LINEDIFF_<DEST>`` environment variable is unset. Unknown
    keys are reported with a warning and ignored. Keys may use dashes or
    underscores.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Arguments returned by the parser
    config : dict
        Loaded configuration

    Returns
    -------
    argparse.Namespace
        The same namespace, updated in place

    Raises
    ------
    argparse.ArgumentTypeError
        If a known option has a value of the wrong type

    """
    explicit = provided_args(parsed_args)

    for raw_key, value in config.items():
        key = raw_key.replace("-", "_")
        if key not in CONFIG_OPTIONS:
            logger.warning(f"Ignoring unknown configuration option: {raw_key}")
            continue

        dest, convert = CONFIG_OPTIONS[key]
        converted = convert(raw_key, value)
        if dest in explicit or env_var_name(dest) in os.environ:
            logger.debug(f"Config option '{raw_key}' overridden by command line or environment")
            continue
        setattr(parsed_args, dest, converted)

    return parsed_args
