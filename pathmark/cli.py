"""
Command-line interface for pathmark.

Usage:
    python -m pathmark.cli mark map.txt            Print the map with the path marked
    python -m pathmark.cli mark map.txt --cost     Also report path cost on stderr
    python -m pathmark.cli solve map.txt           Print path cells and cost
    cat map.txt | python -m pathmark.cli mark      Read the map from stdin
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text

from pathmark.api import PATH_MARKER, find_path, render_path
from pathmark.config import Config, load_config, setup_logging
from pathmark.exceptions import MapError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_MAP_ERROR = 2


def _read_map(path: Optional[str]) -> str:
    """Read map text from a file, or stdin for None or '-'."""
    if path is None or path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    # A trailing newline ends the last row, it does not start a new one
    return text[:-1] if text.endswith("\n") else text


def _styled_map(text: str) -> Text:
    """Build a rich Text with every path marker highlighted."""
    styled = Text(text)
    for offset, char in enumerate(text):
        if char == PATH_MARKER:
            styled.stylize("bold green", offset, offset + 1)
    return styled


def _write_map(text: str, output: Optional[str], color: bool) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote marked map to {output}")
    elif color:
        # Rows are never wrapped to the console width
        Console(highlight=False).print(_styled_map(text), soft_wrap=True)
    else:
        sys.stdout.write(text + "\n")


def cmd_mark(args: argparse.Namespace, config: Config) -> int:
    """Mark the shortest path on a map."""
    text = _read_map(args.file)
    result = find_path(text)
    marked = render_path(result.grid.lines, result.start, result.path)

    color = args.color or config.output.color
    _write_map(marked, args.output, color)

    if args.cost or config.output.show_cost:
        if result:
            print(f"cost: {result.cost}, steps: {len(result)}", file=sys.stderr)
        else:
            print("unreachable", file=sys.stderr)
    return EXIT_OK


def cmd_solve(args: argparse.Namespace, config: Config) -> int:
    """Print the path cells and total cost without rendering the map."""
    text = _read_map(args.file)
    result = find_path(text)

    if not result:
        print("unreachable")
        return EXIT_OK

    for cell in result.marked_cells:
        print(f"{cell.row},{cell.col}")
    print(f"cost: {result.cost}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathmark",
        description="pathmark - mark the shortest path between S and X on a text map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level override",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # mark command
    mark_parser = subparsers.add_parser("mark", help="Print the map with the shortest path marked")
    mark_parser.add_argument("file", nargs="?", default=None, help="Map file (default: stdin)")
    mark_parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write the marked map to this file instead of stdout",
    )
    mark_parser.add_argument(
        "--cost",
        action="store_true",
        help="Report path cost and step count on stderr",
    )
    mark_parser.add_argument(
        "--color",
        action="store_true",
        help="Highlight the path when printing to the terminal",
    )
    mark_parser.set_defaults(func=cmd_mark)

    # solve command
    solve_parser = subparsers.add_parser("solve", help="Print path cells and total cost")
    solve_parser.add_argument("file", nargs="?", default=None, help="Map file (default: stdin)")
    solve_parser.set_defaults(func=cmd_solve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config and set up logging
    config = load_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    if args.command is None:
        parser.print_help()
        return EXIT_IO_ERROR

    try:
        return args.func(args, config)
    except MapError as e:
        logger.error(f"Invalid map: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MAP_ERROR
    except OSError as e:
        logger.error(f"Could not read or write map: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR


if __name__ == "__main__":
    sys.exit(main())
