"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Typed failure for unreachable targets
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoPathFoundError
from ...graph.dijkstra import PathResult, dijkstra
from ...graph.model import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, source: str, target: str) -> PathResult:
        """Find the shortest path between two nodes.

        Args:
            graph: The navigation graph.
            source: Start node id.
            target: End node id.

        Returns:
            PathResult with the ordered node ids and distance.

        Raises:
            UnknownNodeError: If source or target not in graph.
            NoPathFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target},
        )

        result = dijkstra(graph, source, target)

        if result is None:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise NoPathFoundError(
                f"No route found between {source} and {target}",
                source=source,
                target=target,
            )

        self._logger.debug(
            "Route found",
            extra={
                "source": source,
                "target": target,
                "stops": len(result.path),
                "distance": result.distance,
            },
        )
        return result
