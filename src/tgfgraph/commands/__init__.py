"""
tgfgraph.commands - CLI command implementations
"""

__all__ = [
    "traverse",
]
