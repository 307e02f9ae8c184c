"""Number theory, combinatorics, matrices, graphs and 2D geometry algorithms."""

__version__ = "0.1.0"