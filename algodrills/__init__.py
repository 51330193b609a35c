"""Classic algorithm drills: backtracking, dynamic programming, trees, graphs, hashing, sorting and OS simulations."""

__version__ = "0.1.0"