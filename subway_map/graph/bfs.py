"""Shortest-path computation by breadth-first search.

Edges are unweighted, so the first time BFS dequeues the end node it
holds a path with the minimum number of hops.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Set, Tuple

from .load_graph import Graph

Path = Tuple[str, ...]


def find_path(graph: Graph, start: str, end: str) -> Path:
    """Compute a minimum-hop path between two nodes.

    Parameters
    ----------
    graph:
        Campus graph as produced by ``load_graph``.
    start:
        Identifier of the departure node.
    end:
        Identifier of the arrival node.

    Returns
    -------
    tuple[str, ...]
        Node identifiers from ``start`` to ``end`` (inclusive). Empty
        when either identifier is unknown or ``end`` is unreachable.
        Among equally short paths, the one found by following each
        node's neighbours in declaration order is returned.
    """
    if start not in graph or end not in graph:
        return ()

    if start == end:
        return (start,)

    visited: Set[str] = {start}
    queue: Deque[Tuple[str, Path]] = deque([(start, (start,))])

    while queue:
        current, path = queue.popleft()

        if current == end:
            return path

        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, path + (neighbor,)))

    return ()
