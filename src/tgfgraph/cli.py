"""
tgfgraph.cli - Command-line interface.

Reads a Trivial Graph Format file and prints its breadth-first traversal.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tgfgraph import __version__
from tgfgraph.commands import traverse
from tgfgraph.config import load_config


def _vertex_id(text: str) -> int:
    """argparse type for an unsigned vertex id."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid vertex id: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"vertex id must be non-negative: {value}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tgfgraph",
        description="Breadth-first traversal of Trivial Graph Format files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tgfgraph months.tgf              # Walk from an arbitrary vertex
  tgfgraph months.tgf --start 5    # Walk from vertex 5
  tgfgraph deps.tgf --directed     # Read edges as directed
  tgfgraph deps.tgf --undirected   # Ignore a configured directed mode

Output, one line per visited vertex:
  <id> <value> [<neighbor ids>]    # or <id> [<neighbor ids>] without a value

Configuration:
  Settings are read from the nearest .tgfgraph.toml ([graph] mode,
  [bfs] start, [output] show_values) and TGFGRAPH_<SECTION>_<KEY>
  environment variables. Command-line flags win.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tgfgraph {__version__}",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="File in Trivial Graph Format",
        metavar="FILE",
    )
    parser.add_argument(
        "--start",
        type=_vertex_id,
        help="Start vertex id (default: arbitrary)",
        metavar="ID",
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--directed",
        dest="mode",
        action="store_const",
        const="directed",
        help="Read edges as directed (default: graph.mode, else undirected)",
    )
    mode_group.add_argument(
        "--undirected",
        dest="mode",
        action="store_const",
        const="undirected",
        help="Read edges as undirected, overriding graph.mode",
    )
    parser.add_argument(
        "--no-values",
        action="store_true",
        help="Omit vertex values from the output",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a summary to stderr and show tracebacks on error",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install tgfgraph[completion]
    # Then activate: eval "$(register-python-argcomplete tgfgraph)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        return traverse.run(args, config)

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
