#!/usr/bin/env python3
# run_traversal.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Command-line interface for trying out traversal orders

import sys
import argparse
from itertools import islice
from typing import Any, Callable, List, Optional, Tuple, Union

from transiter import (
    Mode,
    TransIter,
    TransPrioQueue,
    UnknownModeError,
    trans_iter_with,
    trans_prio_queue_with,
)
from model.words import append_each, append_each_up_to
from parser import parse_tree, ParseError
from utils.logger import configure_logging, get_logger
from utils.tree_visualizer import DiscoveryRecorder, discovery_digraph

PRIORITY = "priority"


class UsageError(ValueError):
    """Raised when the command line arguments do not describe a traversal."""


def resolve_mode(name: str) -> Optional[Mode]:
    """Map a mode name to a Mode, or None for priority order.

    Raises:
        UnknownModeError: name is neither a Mode nor "priority"
    """
    if name.strip().lower() == PRIORITY:
        return None
    return Mode.from_name(name)


def build_source(args: argparse.Namespace) -> Tuple[Any, Callable[[Any], List[Any]], Callable[[Any], str]]:
    """Determine the initial item, recursion function and item formatter.

    Raises:
        UsageError: Arguments are inconsistent
        ParseError: The tree literal is malformed
    """
    if (args.tree is None) == (args.words is None):
        raise UsageError("Exactly one of --tree and --words is required")
    if args.take is not None and args.take < 0:
        raise UsageError("--take must not be negative")
    if args.max_length is not None and args.max_length < 0:
        raise UsageError("--max-length must not be negative")

    if args.tree is not None:
        root = parse_tree(args.tree)
        return root, type(root).recursion, lambda node: str(node.label)

    if not args.words:
        raise UsageError("--words needs a non-empty alphabet")
    if args.max_length is not None:
        return "", append_each_up_to(args.words, args.max_length), repr
    if args.take is None:
        raise UsageError("--words without --max-length is infinite, pass --take")
    return "", append_each(args.words), repr


def start_traversal(
    root: Any,
    recursion: Callable[[Any], List[Any]],
    mode: Optional[Mode],
) -> Union[TransIter, TransPrioQueue]:
    """Start a sequence traversal in `mode`, or a priority one if `mode` is None."""
    if mode is None:
        return trans_prio_queue_with(root, recursion)
    return trans_iter_with(root, recursion, mode)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="transiter traversal explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_traversal.py -t "1(2(4), 3)" -m depth-first
  python run_traversal.py -t "1(2(4), 3)" -m depth-first-unordered --dot
  python run_traversal.py -w abc -n 10
  python run_traversal.py -w ab --max-length 2 -m priority

Tree literal format:
  A node is a label (integer or identifier), optionally followed by its
  children in parentheses, e.g. root(a(c, d), b).
        """,
    )

    source = parser.add_argument_group("item source")
    source.add_argument("-t", "--tree", help="Tree literal to traverse")
    source.add_argument("-w", "--words", help="Alphabet for word enumeration from the empty word")
    source.add_argument(
        "--max-length", type=int, help="Do not extend words of this length (makes --words finite)"
    )

    parser.add_argument(
        "-m",
        "--mode",
        default=str(Mode.BREADTH_FIRST),
        help="breadth-first (default), depth-first, depth-first-unordered or priority",
    )
    parser.add_argument("-n", "--take", type=int, help="Stop after this many items")
    parser.add_argument(
        "--dot", action="store_true", help="Print the discovery tree as Graphviz DOT source"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the traversal explorer.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        mode = resolve_mode(args.mode)
        root, recursion, fmt = build_source(args)

        recorder = DiscoveryRecorder(recursion)
        logger.traversal_start("tree" if args.tree is not None else "word", args.mode, 1)

        traversal = start_traversal(root, recorder, mode)
        produced = 0
        for item in islice(traversal, args.take):
            produced += 1
            print(fmt(item))

        logger.traversal_summary(produced, traversal.pending)

        if args.dot:
            print(discovery_digraph(recorder, [root], label=fmt, mode=mode).source)

        return 0

    except ParseError as e:
        logger.error(f"Tree literal error: {e}")
        return 2

    except (UnknownModeError, UsageError) as e:
        logger.error(f"Argument error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Traversal interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
