"""
tgfgraph.commands.traverse - Print a breadth-first walk of a TGF file.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from tgfgraph.graph import GraphMode, load


def run(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Run the traversal.

    Reads args.file, walks it breadth-first and prints one record per
    line in visitation order. Graph and I/O errors propagate to the caller.
    """
    mode = GraphMode(getattr(args, "mode", None) or config["graph"]["mode"])
    start = getattr(args, "start", None)
    if start is None and config["bfs"]["start"] >= 0:
        start = config["bfs"]["start"]
    show_values = config["output"]["show_values"] and not getattr(args, "no_values", False)

    graph = load(args.file, mode)
    records = graph.bfs(start) if start is not None else graph.bfs_random_start()

    for record in records:
        print(record.format(show_value=show_values))

    if getattr(args, "verbose", False):
        print(
            f"Visited {len(records)} of {graph.vertex_count()} vertices "
            f"({graph.edge_count()} edges, {graph.mode.value})",
            file=sys.stderr,
        )
    return 0
