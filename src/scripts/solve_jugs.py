#!/usr/bin/env python3
"""
Water Jug Solver CLI

Prints the shortest sequence of jug positions for each requested volume.

    solve_jugs.py <CapacityX> <CapacityY> <target1> [<target2> ...]
"""

import argparse
import re
import sys
import time
from pathlib import Path

# Add src/ to path
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jug_solver import WaterJugSolver, utils

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def atoi(text: str) -> int:
    """Parse the leading integer of `text`; anything unparseable is 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Measure volumes of water with two jugs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("capacity_x", type=atoi, help="Capacity of the first jug")
    parser.add_argument("capacity_y", type=atoi, help="Capacity of the second jug")
    parser.add_argument(
        "targets",
        type=atoi,
        nargs="+",
        help="Volumes to measure, solved in order",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print search statistics after the solutions",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.capacity_x < 0 or args.capacity_y < 0:
        parser.error(
            f"jug capacities must be non-negative, got {args.capacity_x} and {args.capacity_y}"
        )

    start_time = time.time()
    solver = WaterJugSolver(args.capacity_x, args.capacity_y)
    for target in args.targets:
        path = solver.solve(target)
        if path is not None:
            print(utils.format_path(path, target))
        else:
            print(utils.format_unreachable(target, args.capacity_x, args.capacity_y))
    elapsed_time = time.time() - start_time

    if args.summary:
        engine = solver.engine
        print(f"\nReduced capacities: {engine.capacities} (gcd {solver.divisor})")
        print(f"   Lattice size: {engine.size}")
        print(f"   States discovered: {engine.discovered}")
        print(f"   States expanded: {engine.expanded}")
        print(f"   Time elapsed: {elapsed_time:.4f} seconds")

    return 0


if __name__ == "__main__":
    sys.exit(main())
