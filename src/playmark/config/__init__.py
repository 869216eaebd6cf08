"""
playmark.config - Configuration loading and defaults

Configuration lives in ``.playmark.toml``, found by walking up from the
working directory. Values are merged over DEFAULT_CONFIG and can be
overridden with ``PLAYMARK_<SECTION>_<KEY>`` environment variables.
Configuration only affects the command-line tool, never parsing.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from playmark.config.defaults import DEFAULT_CONFIG

CONFIG_FILENAME = ".playmark.toml"
ENV_PREFIX = "PLAYMARK_"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or parsed."""


def parse_toml_document(text: str) -> tomlkit.TOMLDocument:
    """Parse TOML text, preserving formatting for round-trip edits."""
    try:
        return tomlkit.parse(text)
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def find_config_file(start_dir: Path) -> Optional[Path]:
    """
    Find ``.playmark.toml`` in start_dir or any parent directory.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to the config file, or None if not found
    """
    current = Path(start_dir).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(defaults: dict[str, Any], user: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge user configuration over defaults.

    Nested tables are merged key by key; any other user value replaces the
    default. Neither input is modified.
    """
    merged = copy.deepcopy(defaults)
    for key, value in user.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(raw: str) -> Any:
    """
    Convert an environment variable string to a typed value.

    JSON arrays/objects, booleans and integers are converted; anything
    else (including malformed JSON) is returned unchanged.
    """
    stripped = raw.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if stripped.lstrip("-").isdigit():
        return int(stripped)
    return raw


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply ``PLAYMARK_<SECTION>_<KEY>`` environment overrides.

    Only sections already present in the configuration can be targeted,
    e.g. ``PLAYMARK_OUTPUT_FORMAT=json`` sets ``output.format``.
    """
    for env_name, raw in os.environ.items():
        if not env_name.startswith(ENV_PREFIX):
            continue
        remainder = env_name[len(ENV_PREFIX) :].lower()
        for section, table in config.items():
            prefix = f"{section}_"
            if isinstance(table, dict) and remainder.startswith(prefix):
                key = remainder[len(prefix) :]
                if key:
                    table[key] = _try_parse_env_value(raw)
                break
    return config


def load_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load configuration merged over defaults.

    Args:
        config_path: Explicit config file; if None, defaults are used

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML
    """
    user: dict[str, Any] = {}
    if config_path is not None:
        try:
            text = Path(config_path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
        user = parse_toml_document(text).unwrap()
    return _apply_env_overrides(merge_configs(DEFAULT_CONFIG, user))


def get_config(config_path: Optional[Path] = None, start_dir: Optional[Path] = None) -> dict[str, Any]:
    """
    Load configuration from an explicit path or by discovery.

    Args:
        config_path: Explicit config file (takes precedence)
        start_dir: Directory to start discovery from (defaults to cwd)

    Returns:
        Merged configuration dictionary
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    return load_config(config_path)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CONFIG",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
    "parse_toml_document",
]
