# src/scripts/plot_path.py
import argparse
import os
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jug_solver import WaterJugSolver, lattice  # type: ignore[import]


def format_title(capacity_x, capacity_y, target, moves=None):
    parts = [f"Jugs=({capacity_x}, {capacity_y})", f"target={target}"]
    if moves is not None:
        parts.append(f"moves={moves}")
    return " | ".join(parts)


def render(path, capacity_x, capacity_y, title=None, output=None, dpi=150, cmap="viridis"):
    """
    Draw the jug-state plane with the canonical lattice on its boundary and
    the solution path as arrows, coloured by move number.

    Args:
        path: Sequence of (a, b) positions, origin first
        capacity_x: Capacity of the first jug (horizontal axis)
        capacity_y: Capacity of the second jug (vertical axis)
        title: Optional title string
        output: Output file path (None to skip saving)
        dpi: DPI for output
        cmap: Matplotlib colormap name for the arrows
    """
    pts = np.asarray(path, dtype=np.float64).reshape(-1, 2)
    fig, ax = plt.subplots(figsize=(6, 6))

    # Canonical positions all lie on the border of [0, X] x [0, Y]
    border = np.array(
        [[0, 0], [capacity_x, 0], [capacity_x, capacity_y], [0, capacity_y], [0, 0]],
        dtype=np.float64,
    )
    ax.plot(border[:, 0], border[:, 1], color="lightgray", lw=1.0, zorder=1)
    canon = lattice.canonical_positions(capacity_x, capacity_y)
    ax.scatter(canon[:, 0], canon[:, 1], s=8, color="gray", zorder=2)

    colors = plt.colormaps[cmap](np.linspace(0.0, 1.0, max(len(pts) - 1, 1)))
    for k in range(len(pts) - 1):
        (x0, y0), (x1, y1) = pts[k], pts[k + 1]
        ax.annotate(
            "",
            xy=(x1, y1),
            xytext=(x0, y0),
            arrowprops=dict(arrowstyle="->", color=colors[k], lw=1.5),
            zorder=3,
        )
    ax.scatter(pts[:1, 0], pts[:1, 1], s=40, color="black", zorder=4, label="start")
    ax.scatter(pts[-1:, 0], pts[-1:, 1], s=40, color="red", zorder=4, label="end")

    ax.set_xlim(-0.5, capacity_x + 0.5)
    ax.set_ylim(-0.5, capacity_y + 0.5)
    ax.set_xlabel("jug 1")
    ax.set_ylabel("jug 2")
    ax.set_aspect("equal")
    ax.legend(loc="upper left", fontsize="small")

    if title:
        ax.set_title(title, pad=10)

    if output:
        os.makedirs(os.path.dirname(output) if os.path.dirname(output) else ".", exist_ok=True)
        plt.savefig(output, dpi=dpi, bbox_inches="tight")
        print(f"Saved figure to {output}")

    return fig


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Plot the shortest water jug solution for one target"
    )
    parser.add_argument("capacity_x", type=int, help="Capacity of the first jug")
    parser.add_argument("capacity_y", type=int, help="Capacity of the second jug")
    parser.add_argument("target", type=int, help="Volume to measure")
    parser.add_argument(
        "--out",
        default=None,
        help="Output image path (PNG)",
    )
    parser.add_argument(
        "--cmap",
        default="viridis",
        help="Matplotlib colormap for the arrows (default: viridis)",
    )
    parser.add_argument("--dpi", type=int, default=150, help="DPI for output file")
    parser.add_argument(
        "--show",
        action="store_true",
        help="Show plot interactively",
    )
    args = parser.parse_args(argv)

    if args.capacity_x < 0 or args.capacity_y < 0:
        parser.error("jug capacities must be non-negative")

    solver = WaterJugSolver(args.capacity_x, args.capacity_y)
    path = solver.solve(args.target)
    if path is None:
        print(
            f"Error: cannot get volume {args.target} from jugs "
            f"{args.capacity_x} and {args.capacity_y}"
        )
        return 1

    title = format_title(args.capacity_x, args.capacity_y, args.target, moves=len(path) - 1)
    fig = render(
        path,
        args.capacity_x,
        args.capacity_y,
        title=title,
        output=args.out,
        dpi=args.dpi,
        cmap=args.cmap,
    )
    if args.show:
        plt.show()
    plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
