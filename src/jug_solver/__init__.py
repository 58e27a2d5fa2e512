"""
Water Jug Solver

Finds shortest fill / empty / pour sequences that measure a given volume with
two jugs:
- WaterJugSolver: arbitrary capacities, reduced by their gcd
- CoprimeLatticeSolver: cached BFS over the canonical lattice of a coprime pair
"""

from .engine import CoprimeLatticeSolver
from .solver import JugConfig, WaterJugSolver, gcd
from . import lattice, utils

__all__ = [
    # Solvers
    "WaterJugSolver",
    "CoprimeLatticeSolver",
    # Configuration
    "JugConfig",
    # Helpers
    "gcd",
    "lattice",
    "utils",
]
