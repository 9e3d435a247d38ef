"""
tgfgraph.config.defaults - Default configuration values
"""

from __future__ import annotations

from typing import Any

CONFIG_FILENAME = ".tgfgraph.toml"
ENV_PREFIX = "TGFGRAPH_"

# bfs.start < 0 means "pick an arbitrary start vertex"
DEFAULT_CONFIG: dict[str, Any] = {
    "graph": {
        "mode": "undirected",
    },
    "bfs": {
        "start": -1,
    },
    "output": {
        "show_values": True,
    },
}

VALID_MODES = ("undirected", "directed")
