"""
tgfgraph.config - Configuration loading and defaults
"""

from tgfgraph.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX, VALID_MODES
from tgfgraph.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
    validate_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "VALID_MODES",
    "load_config",
    "find_config_file",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "validate_config",
]
