"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the building's navigation network and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Node
    from ..graph.dijkstra import PathResult
    from ..graph.model import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/json_repository.py

    The repository loads the navigation graph once from static storage
    and serves the same read-only instance afterwards.
    """

    def load(self) -> Graph:
        """Load the navigation graph.

        Returns:
            The validated graph.

        Raises:
            GraphLoadError: If the static data is missing or inconsistent.
        """
        ...

    def get_node(self, node_id: str) -> Optional[Node]:
        """Get node details by id.

        Args:
            node_id: The node id to look up (e.g., 'node_304').

        Returns:
            The node, or None if not found.
        """
        ...

    def clear_cache(self) -> None:
        """Drop the loaded graph so the next load rereads storage."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes minimum-weight paths through the graph.
    """

    def solve(self, graph: Graph, source: str, target: str) -> PathResult:
        """Find the shortest path between two nodes.

        Args:
            graph: The navigation graph.
            source: Start node id.
            target: End node id.

        Returns:
            PathResult with the ordered node ids and distance.

        Raises:
            UnknownNodeError: If either node is not in the graph.
            NoPathFoundError: If the target is unreachable.
        """
        ...
