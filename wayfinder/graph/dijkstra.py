"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum-weight path between two nodes of the
navigation graph and recomputes the weight of an existing path.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..domain.errors import GraphError, UnknownNodeError
from .model import Graph


@dataclass(frozen=True)
class PathResult:
    """Ordered node ids from start to end and the accumulated distance."""

    path: Tuple[str, ...]
    distance: float


def dijkstra(graph: Graph, start: str, end: str) -> Optional[PathResult]:
    """Compute the shortest path between two nodes using Dijkstra.

    Parameters
    ----------
    graph:
        Navigation graph as produced by ``build_graph``.
    start:
        Identifier of the departure node.
    end:
        Identifier of the arrival node.

    Returns
    -------
    PathResult or None
        The path from ``start`` to ``end`` (inclusive) and its total
        distance, or ``None`` when ``end`` is unreachable.

    Raises
    ------
    UnknownNodeError
        If ``start`` or ``end`` is not a node of the graph.
    """
    missing = tuple(node_id for node_id in (start, end) if node_id not in graph)
    if missing:
        raise UnknownNodeError(
            f"Node not in graph: {', '.join(missing)}",
            node_ids=missing,
        )

    if start == end:
        return PathResult(path=(start,), distance=0.0)

    adjacency = graph.adjacency()
    distances: Dict[str, float] = {start: 0.0}
    previous: Dict[str, str] = {}
    settled: Set[str] = set()

    # The counter breaks distance ties in insertion order.
    counter = itertools.count()
    heap: List[Tuple[float, int, str]] = [(0.0, next(counter), start)]

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled.add(u)

        if u == end:
            break

        for v, weight in adjacency[u]:
            if v in settled:
                continue
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, next(counter), v))

    if end not in settled:
        return None

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return PathResult(path=tuple(path), distance=distances[end])


def path_distance(graph: Graph, path: Sequence[str]) -> float:
    """Sum the weights along a path.

    For each consecutive pair the lightest connecting edge is used.

    Raises
    ------
    GraphError
        If two consecutive nodes are not connected by any edge.
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        weight = graph.edge_weight(a, b)
        if weight is None:
            raise GraphError(f"No edge between {a} and {b}")
        total += weight
    return total
