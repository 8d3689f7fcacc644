"""
Command line entry point.

Replays a sequence of directions against a focus controller, without
opening a window, and prints the resulting focused index.

Usage:
    python -m arrow_focus --items N [options] DIRECTION ...

Options:
    --items N         Number of items
    --grid W          Items per row (enables left/right)
    --disabled I,J    Disabled positions
    --bounded         Stop at the ends instead of wrapping
    --initial I       Starting index [default: 0]
    --verbose         Log every transition

Examples:
    python -m arrow_focus --items 5 --disabled 2 down down down
    python -m arrow_focus --items 9 --grid 3 --bounded down right up
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Config
from .factory import create_focus_manager
from .navigation import Direction


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)


def format_index(index: Optional[int]) -> str:
    """Render a focused index for output."""
    return "none" if index is None else str(index)


def parse_direction(value: str) -> Direction:
    """Convert a command line word to a Direction."""
    try:
        return Direction.from_name(value)
    except KeyError:
        raise argparse.ArgumentTypeError(f"invalid direction: {value!r}")


def parse_positions(value: str) -> List[int]:
    """Convert "2,5" to [2, 5]."""
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid position list: {value!r}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Replay arrow key navigation over a list or grid"
    )
    parser.add_argument(
        "--items",
        type=int,
        required=True,
        help="Number of items"
    )
    parser.add_argument(
        "--grid",
        type=int,
        default=None,
        help="Items per row (enables left/right navigation)"
    )
    parser.add_argument(
        "--disabled",
        type=parse_positions,
        default=[],
        help="Comma-separated disabled positions (e.g. 2,5)"
    )
    parser.add_argument(
        "--bounded",
        action="store_true",
        help="Disable cyclic traversal"
    )
    parser.add_argument(
        "--initial",
        type=int,
        default=0,
        help="Starting index (negative = nothing focused)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every transition"
    )
    parser.add_argument(
        "directions",
        nargs="*",
        type=parse_direction,
        help="Directions to apply, in order (up, down, left, right)"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    config = Config(
        item_count=args.items,
        initial_focused_index=args.initial,
        disabled_positions=args.disabled,
        grid_width=args.grid,
        disable_cyclic_traversal=args.bounded,
        verbose=args.verbose,
    )

    manager = create_focus_manager(
        config,
        on_focused_index_change=lambda index: logger.info(f"Focused: {format_index(index)}")
    )

    for direction in args.directions:
        manager.controller.on_direction(direction)

    print(format_index(manager.focused_index))
    return 0


if __name__ == "__main__":
    sys.exit(main())
