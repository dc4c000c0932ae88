"""Route service - Query orchestration for shortest-path requests.

Validates the requested identifiers, runs the route solver on the
loaded graph and turns the solver output into a RouteResult whose
distance is recomputed from the path itself.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..domain.errors import (
    InvalidInputError,
    NoPathFoundError,
    UnknownNodeError,
    WayfinderError,
)
from ..domain.models import NodeType, RouteResult
from ..graph.dijkstra import path_distance
from ..ports.cache import CachePort
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RouteService:
    """Main service for computing routes between graph nodes.

    Attributes:
        graph_repository: Loads the navigation graph
        route_solver: Computes shortest paths
        cache: Optional memo of computed routes, keyed by node pair
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    cache: Optional[CachePort[RouteResult]] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def route(self, from_id: Optional[str], to_id: Optional[str]) -> RouteResult:
        """Compute the shortest route between two nodes.

        Args:
            from_id: Start node id.
            to_id: End node id.

        Returns:
            RouteResult with path, distance and resolved nodes.

        Raises:
            InvalidInputError: If either id is missing or blank.
            GraphLoadError: If the graph is not available.
            UnknownNodeError: If either id is not a node of the graph.
            NoPathFoundError: If the nodes are not connected.
        """
        source = (from_id or "").strip()
        target = (to_id or "").strip()

        missing = tuple(
            name for name, value in (("from", source), ("to", target)) if not value
        )
        if missing:
            raise InvalidInputError(
                f"Missing parameters: {' and '.join(missing)} required",
                missing=missing,
            )

        if self.cache is None:
            return self._compute(source, target)
        return self.cache.get_or_compute(
            json.dumps([source, target]),
            lambda: self._compute(source, target),
        )

    def _compute(self, source: str, target: str) -> RouteResult:
        graph = self.graph_repository.load()

        unknown = tuple(node_id for node_id in (source, target) if node_id not in graph)
        if unknown:
            self._logger.info("Unknown node requested", extra={"node_ids": unknown})
            raise UnknownNodeError(
                f"Node not found: {', '.join(unknown)}",
                node_ids=unknown,
            )

        result = self.route_solver.solve(graph, source, target)
        nodes = tuple(graph.nodes[node_id] for node_id in result.path)
        route = RouteResult(
            path=result.path,
            distance=path_distance(graph, result.path),
            nodes=nodes,
        )

        self._logger.info(
            "Route computed",
            extra={
                "source": source,
                "target": target,
                "stops": route.num_stops,
                "distance": route.distance,
            },
        )
        return route

    def clear_cache(self) -> int:
        """Forget memoized routes, e.g. after the graph was reloaded."""
        if self.cache is None:
            return 0
        return self.cache.clear()

    def route_safe(
        self, from_id: Optional[str], to_id: Optional[str]
    ) -> Tuple[Optional[RouteResult], Optional[str]]:
        """Compute a route, returning an error message instead of raising.

        Returns:
            Tuple of (RouteResult or None, error message or None).
        """
        try:
            return self.route(from_id, to_id), None
        except InvalidInputError as e:
            return None, f"Invalid input: {e.message}"
        except UnknownNodeError as e:
            return None, f"Unknown node: {', '.join(e.node_ids)}"
        except NoPathFoundError as e:
            return None, f"No route found between {e.source} and {e.target}"
        except WayfinderError as e:
            self._logger.exception("Route computation failed")
            return None, f"Error: {e}"

    def format_result(self, route: RouteResult) -> str:
        """Format a route as a human-readable summary."""
        lines = [
            f"Route: {' -> '.join(route.path)}",
            f"Distance: {route.distance:g} m",
            f"Stops: {route.num_stops}",
        ]
        doors = route.count_by_type(NodeType.DOOR)
        stairs = route.count_by_type(NodeType.STAIRS)
        if doors:
            lines.append(f"Doors: {doors}")
        if stairs:
            lines.append(f"Stairs: {stairs}")
        if route.is_multi_floor:
            floors = ", ".join(str(floor) for floor in route.floors)
            lines.append(f"Floors crossed: {floors}")
        return "\n".join(lines)
