"""Pallet selection for a delivery truck: greedy, brute-force, DP, backtracking and ILP solvers, with an interactive menu."""

__version__ = "0.1.0"