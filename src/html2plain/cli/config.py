#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the html2plain CLI.

Configuration files hold ``RenderOptions`` field names as keys, with table
style settings in a nested ``pretty_tables_options`` table::

    # .html2plain.toml
    pretty_tables = true
    line_width = 72

    [pretty_tables_options]
    row_line = true
    alignment = "left"

"""

import argparse
import json
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from html2plain.exceptions import ValidationError
from html2plain.options.render import RenderOptions
from html2plain.options.tables import PrettyTablesOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".html2plain.toml", ".html2plain.yaml", ".html2plain.yml", ".html2plain.json", "pyproject.toml"]
TABLE_OPTIONS_KEY = "pretty_tables_options"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.html2plain]`` table of a pyproject.toml file."""
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    config = data.get("tool", {}).get("html2plain", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.html2plain] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` (default: the working directory).

    A ``pyproject.toml`` only counts when it has a ``[tool.html2plain]`` table.
    """
    directory = start_dir or Path.cwd()
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if not candidate.is_file():
            continue
        if filename == "pyproject.toml":
            try:
                if not _load_pyproject_section(candidate):
                    continue
            except (OSError, tomllib.TOMLDecodeError, argparse.ArgumentTypeError) as e:
                logger.debug("Ignoring unreadable %s: %s", candidate, e)
                continue
        logger.debug("Discovered config file: %s", candidate)
        return candidate
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

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

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config: Any = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except argparse.ArgumentTypeError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        # TOMLDecodeError and JSONDecodeError are both ValueErrors
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries, ``override`` winning on conflicts.

    Nested dictionaries are merged recursively rather than replaced.

    Examples
    --------
        >>> base = {"line_width": 72, "pretty_tables_options": {"row_line": True}}
        >>> merge_configs(base, {"pretty_tables_options": {"borders": False}})
        {'line_width': 72, 'pretty_tables_options': {'row_line': True, 'borders': False}}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def _check_keys(config: Dict[str, Any], allowed: set[str], section: str) -> None:
    unknown = sorted(set(config) - allowed)
    if unknown:
        raise ValidationError(
            f"Unknown {section} option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=config[unknown[0]],
        )


def build_render_options(config: Dict[str, Any]) -> RenderOptions:
    """Create RenderOptions from a configuration mapping.

    Parameters
    ----------
    config : dict
        ``RenderOptions`` field values, with table style values nested
        under ``pretty_tables_options``

    Returns
    -------
    RenderOptions
        The validated options

    Raises
    ------
    ValidationError
        If a key is unknown or a value is invalid

    """
    render_fields = {f.name for f in fields(RenderOptions)}
    table_fields = {f.name for f in fields(PrettyTablesOptions)}
    _check_keys(config, render_fields, "render")

    values = dict(config)
    table_config = values.pop(TABLE_OPTIONS_KEY, None)

    try:
        if table_config is not None:
            if not isinstance(table_config, dict):
                raise ValidationError(
                    f"{TABLE_OPTIONS_KEY} must be a mapping",
                    parameter_name=TABLE_OPTIONS_KEY,
                    parameter_value=table_config,
                )
            _check_keys(table_config, table_fields, "table")
            table_values = dict(table_config)
            if "column_alignment" in table_values:
                table_values["column_alignment"] = tuple(table_values["column_alignment"])
            values[TABLE_OPTIONS_KEY] = PrettyTablesOptions(**table_values)
        return RenderOptions(**values)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid configuration: {e}", original_error=e) from e
