"""Entry point for running tgfgraph directly.

Usage:
    python -m tgfgraph FILE
"""

import sys

from tgfgraph.cli import main

if __name__ == "__main__":
    sys.exit(main())
