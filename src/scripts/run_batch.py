#!/usr/bin/env python3
"""
Batch Water Jug Runner

Solves several jug pairs described in a JSON or TOML params file:

    [[jobs]]
    capacity_x = 3
    capacity_y = 5
    targets = [1, 4, 7]

    [[jobs]]
    capacity_x = 4
    capacity_y = 9
    targets = "all"
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

# Add src/ to path
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jug_solver import JugConfig, WaterJugSolver, utils


def load_jobs(path) -> List[JugConfig]:
    params = utils.load_params(path)
    jobs = params.get("jobs")
    if not jobs:
        raise ValueError(f"No jobs found in {path}")
    return [JugConfig.from_params(job) for job in jobs]


def run_job(config: JugConfig) -> Dict[str, Any]:
    """Solve every target of one job and collect a summary."""
    solver = WaterJugSolver.from_config(config)
    results = solver.solve_many(config.targets)
    solved = [r for r in results if r.found]
    return {
        "capacities": solver.capacities,
        "divisor": solver.divisor,
        "results": results,
        "solved": len(solved),
        "unreachable": len(results) - len(solved),
        "max_moves": max((r.moves for r in solved), default=0),
        "states_expanded": solver.engine.expanded,
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Solve a batch of water jug problems",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--params",
        type=str,
        required=True,
        help="JSON or TOML file listing the jobs",
    )
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print the full path of every solution",
    )
    args = parser.parse_args(argv)

    jobs = load_jobs(args.params)
    print(f"Running {len(jobs)} job(s) from {args.params}")

    start_time = time.time()
    for config in jobs:
        summary = run_job(config)
        x, y = summary["capacities"]
        print(f"\nJugs ({x}, {y}), gcd {summary['divisor']}")
        for result in summary["results"]:
            if args.paths:
                print(utils.format_result(result))
            elif result.found:
                print(f"   {result.target:>6}: {result.moves} moves")
            else:
                print(f"   {result.target:>6}: unreachable")
        print(
            f"   solved={summary['solved']} unreachable={summary['unreachable']} "
            f"max_moves={summary['max_moves']} expanded={summary['states_expanded']}"
        )
    elapsed_time = time.time() - start_time

    print(f"\nBatch completed in {elapsed_time:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
