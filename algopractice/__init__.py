"""Classic algorithm exercises: sorting, stacks, recursion, greedy, DP and graphs."""

__version__ = "0.1.0"

__all__ = [
    "dp_grid",
    "dp_linear",
    "dp_strings",
    "dp_subsets",
    "graphs",
    "greedy",
    "grids",
    "recursion",
    "sorting",
    "stacks",
    "topo",
]