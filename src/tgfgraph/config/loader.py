"""
tgfgraph.config.loader - Configuration loading

Settings come from, in increasing priority:
1. DEFAULT_CONFIG
2. The nearest .tgfgraph.toml (or an explicit --config path)
3. TGFGRAPH_<SECTION>_<KEY> environment variables
4. Command-line flags (applied by the caller)
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit import TOMLDocument

from tgfgraph.config.defaults import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    ENV_PREFIX,
    VALID_MODES,
)


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML keeping comments and layout (for round-trip edits)."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def find_config_file(start_dir: Path) -> Path | None:
    """Find .tgfgraph.toml in start_dir or any parent.

    Args:
        start_dir: Directory to start searching from.

    Returns:
        Path to the config file, or None if not found.
    """
    current = start_dir.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(raw: str) -> Any:
    """Parse an environment value into a typed Python value.

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
    try:
        return int(stripped)
    except ValueError:
        return raw


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply TGFGRAPH_<SECTION>_<KEY> variables onto config in place.

    The first segment after the prefix names the section, the rest the key
    (so TGFGRAPH_OUTPUT_SHOW_VALUES sets output.show_values).
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not key:
            continue
        config.setdefault(section, {})[key] = _try_parse_env_value(raw)
    return config


def validate_config(config: dict[str, Any]) -> list[str]:
    """Return a list of problems (empty when valid)."""
    errors = []
    mode = config.get("graph", {}).get("mode")
    if mode not in VALID_MODES:
        errors.append(f"graph.mode must be one of {', '.join(VALID_MODES)}, got {mode!r}")
    start = config.get("bfs", {}).get("start")
    if isinstance(start, bool) or not isinstance(start, int):
        errors.append(f"bfs.start must be an integer, got {start!r}")
    show_values = config.get("output", {}).get("show_values")
    if not isinstance(show_values, bool):
        errors.append(f"output.show_values must be a boolean, got {show_values!r}")
    return errors


def load_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """Load the effective configuration.

    Args:
        config_path: Explicit config file; searched for when None.
        start_dir: Where the search starts (defaults to the cwd).

    Returns:
        The merged configuration dict.

    Raises:
        FileNotFoundError: If config_path is given but does not exist.
        ValueError: If the result fails validate_config().
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    elif not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        config = merge_configs(config, parse_toml(config_path.read_text(encoding="utf-8")))
    config = _apply_env_overrides(config)

    errors = validate_config(config)
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))
    return config


__all__ = [
    "load_config",
    "find_config_file",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "validate_config",
]
