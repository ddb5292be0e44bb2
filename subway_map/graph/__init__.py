"""Graph-related utilities for the campus network.

This subpackage builds the in-memory graph from node records, runs the
breadth-first shortest-path search on it and classifies the resulting
route into coloured lines.
"""

from .bfs import find_path
from .lines import classify, describe_route, format_route, load_line_table
from .load_graph import Graph, load_graph, parse_nodes

__all__ = [
    "Graph",
    "load_graph",
    "parse_nodes",
    "find_path",
    "classify",
    "load_line_table",
    "describe_route",
    "format_route",
]
