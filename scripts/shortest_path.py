# scripts/shortest_path.py

#!/usr/bin/env python3
"""
Range-limited shortest path search with a priority traversal.

We can hop to any waypoint as long as it is closer than `--range`. Paths are
explored shortest first; the first path that ends at the goal is printed
together with its length. Pass -v to see every path as it is produced.
"""

import sys
import argparse

from model.waypoint import Waypoint, InRangeExtension
from utils.logger import LogLevel, get_logger

WAYPOINTS = [
    Waypoint("A", 45, 59),
    Waypoint("B", 68, 69),
    Waypoint("C", 32, 78),
    Waypoint("D", 15, 65),
    Waypoint("E", 45, 12),
    Waypoint("F", 98, 80),
]


def main():
    parser = argparse.ArgumentParser(
        description="Find the shortest range-limited path between waypoints"
    )
    parser.add_argument(
        "-g", "--goal",
        default="F",
        help="Name of the destination waypoint"
    )
    parser.add_argument(
        "-r", "--range",
        type=int,
        default=50,
        dest="max_range",
        help="Maximum distance of a single hop (exclusive)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every path as it is produced"
    )
    args = parser.parse_args()

    logger = get_logger()
    logger.set_level(LogLevel.INFO if args.verbose else LogLevel.WARNING)

    start = Waypoint("S", 0, 0)
    search = start.trans_prio_queue_with(InRangeExtension(WAYPOINTS, args.max_range))

    for path in search:
        logger.info(f"{path} {path.length}")
        if path.last.name == args.goal:
            print(f"S->{args.goal}: {path}, length: {path.length}")
            sys.exit(0)

    sys.exit(f"ERROR: could not find a path to {args.goal}")


if __name__ == "__main__":
    main()
