"""In-memory navigation graph.

This module defines the Graph type used throughout the project and the
function that builds it from the raw node and edge collections found
in ``graph.json``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..domain.errors import GraphLoadError
from ..domain.models import Edge, Node, NodeType

Adjacency = Mapping[str, Tuple[Tuple[str, float], ...]]


class Graph:
    """Read-only set of nodes and undirected weighted edges.

    Nodes are keyed by id. Edges keep the order of the input collection,
    which fixes the adjacency order and therefore the tie-break between
    equally short paths.
    """

    __slots__ = ("_nodes", "_edges", "_adjacency")

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        node_map: Dict[str, Node] = {}
        for node in nodes:
            if node.id in node_map:
                raise GraphLoadError(f"Duplicate node id: {node.id}")
            node_map[node.id] = node

        edge_list = tuple(edges)
        for edge in edge_list:
            for endpoint in (edge.source, edge.target):
                if endpoint not in node_map:
                    raise GraphLoadError(
                        f"Edge {edge.source}-{edge.target} references unknown node: {endpoint}"
                    )

        self._nodes: Mapping[str, Node] = MappingProxyType(node_map)
        self._edges: Tuple[Edge, ...] = edge_list
        self._adjacency: Optional[Adjacency] = None

    @property
    def nodes(self) -> Mapping[str, Node]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def adjacency(self) -> Adjacency:
        """Return the neighbour lists of every node.

        Each edge (u, v, w) contributes (v, w) to u's list and (u, w) to
        v's list. Parallel edges stay as separate entries. Built once on
        first use.
        """
        if self._adjacency is None:
            building: Dict[str, List[Tuple[str, float]]] = {
                node_id: [] for node_id in self._nodes
            }
            for edge in self._edges:
                building[edge.source].append((edge.target, edge.weight))
                building[edge.target].append((edge.source, edge.weight))
            self._adjacency = MappingProxyType(
                {node_id: tuple(entries) for node_id, entries in building.items()}
            )
        return self._adjacency

    def edge_weight(self, a: str, b: str) -> Optional[float]:
        """Minimum weight among the edges joining a and b, or None."""
        weights = [w for neighbour, w in self.adjacency().get(a, ()) if neighbour == b]
        return min(weights) if weights else None

    def nodes_of_type(self, node_type: NodeType) -> List[Node]:
        return [node for node in self._nodes.values() if node.type is node_type]

    def nodes_on_floor(self, floor: int) -> List[Node]:
        return [node for node in self._nodes.values() if node.floor == floor]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self._nodes.values()],
            "edges": [edge.to_dict() for edge in self._edges],
        }

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"


def parse_floor(value: Any) -> int:
    """Parse a floor number, rejecting fractional values such as 1.5."""
    if isinstance(value, bool):
        raise ValueError(f"floor must be an integer, got {value!r}")
    if isinstance(value, str):
        return int(value.strip())
    floor = float(value)
    if not floor.is_integer():
        raise ValueError(f"floor must be an integer, got {value!r}")
    return int(floor)


def _parse_node(raw: Mapping[str, Any]) -> Node:
    node_id = str(raw["id"]).strip()
    if not node_id:
        raise ValueError("node id is empty")
    return Node(
        id=node_id,
        floor=parse_floor(raw.get("floor", 1)),
        x=float(raw.get("x", 0.0)),
        y=float(raw.get("y", 0.0)),
        type=NodeType.parse(raw.get("type")),
    )


def _parse_edge(raw: Mapping[str, Any]) -> Edge:
    return Edge(
        source=str(raw["from"]).strip(),
        target=str(raw["to"]).strip(),
        weight=float(raw["weight"]),
    )


def build_graph(
    nodes: Iterable[Mapping[str, Any]],
    edges: Iterable[Mapping[str, Any]],
) -> Graph:
    """Build a Graph from raw node and edge collections.

    Parameters
    ----------
    nodes:
        Entries shaped like ``{"id", "floor", "x", "y", "type"}``.
    edges:
        Entries shaped like ``{"from", "to", "weight"}``.

    Returns
    -------
    Graph
        The validated, read-only graph.

    Raises
    ------
    GraphLoadError
        If an entry is malformed, a node id is duplicated, a weight is
        negative or not finite, or an edge references an unknown node.
    """
    parsed_nodes: List[Node] = []
    for index, raw in enumerate(nodes):
        try:
            parsed_nodes.append(_parse_node(raw))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise GraphLoadError(f"Invalid node entry #{index}", cause=e)

    parsed_edges: List[Edge] = []
    for index, raw in enumerate(edges):
        try:
            parsed_edges.append(_parse_edge(raw))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise GraphLoadError(f"Invalid edge entry #{index}", cause=e)

    return Graph(parsed_nodes, parsed_edges)
