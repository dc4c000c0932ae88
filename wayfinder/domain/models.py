"""Immutable domain models for the college wayfinder.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the building: the
navigation nodes and edges, the rooms people search for, and the
routes computed between them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class NodeType(Enum):
    """Kind of point in the navigation graph."""

    WAYPOINT = "waypoint"
    DOOR = "door"
    ROOM = "room"
    STAIRS = "stairs"
    ENTRANCE = "entrance"

    @classmethod
    def parse(cls, value: Optional[str]) -> NodeType:
        """Parse a raw type string, defaulting to WAYPOINT."""
        if not value:
            return cls.WAYPOINT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.WAYPOINT


@dataclass(frozen=True, slots=True)
class Node:
    """A point in the navigation graph.

    Attributes:
        id: Unique node identifier (e.g., 'node_304', 'd12', 'stairs_1')
        floor: Floor number the node sits on
        x: Horizontal pixel position on the floor image
        y: Vertical pixel position on the floor image
        type: Kind of node
    """

    id: str
    floor: int
    x: float = 0.0
    y: float = 0.0
    type: NodeType = NodeType.WAYPOINT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "floor": self.floor,
            "x": self.x,
            "y": self.y,
            "type": self.type.value,
        }


@dataclass(frozen=True, slots=True)
class Edge:
    """Undirected weighted connection between two nodes.

    Attributes:
        source: One endpoint node id
        target: The other endpoint node id
        weight: Physical distance in metres
    """

    source: str
    target: str
    weight: float

    def __post_init__(self) -> None:
        """Validate the weight."""
        if math.isnan(self.weight) or math.isinf(self.weight):
            raise ValueError(f"Edge weight must be finite, got {self.weight}")
        if self.weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {self.weight}")

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "weight": self.weight}


@dataclass(frozen=True, slots=True)
class Room:
    """A searchable room of the building.

    Attributes:
        room_id: Room number or code shown to users (e.g., '304')
        node_id: Graph node the room is reached through
        label: Human-readable room name
        floor: Floor number
        type: Free-form room category (classroom, office, library...)
        aliases: Alternative names used by search
        description: Optional longer description
    """

    room_id: str
    node_id: str
    label: str
    floor: int
    type: str = ""
    aliases: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on label, aliases and id."""
        needle = query.lower()
        if needle in self.label.lower():
            return True
        if any(needle in alias.lower() for alias in self.aliases):
            return True
        return needle in self.room_id.lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "nodeId": self.node_id,
            "label": self.label,
            "floor": self.floor,
            "type": self.type,
            "aliases": list(self.aliases),
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two nodes.

    Attributes:
        path: Ordered tuple of node ids forming the route
        distance: Total distance of the route in metres
        nodes: Resolved node details for each stop
    """

    path: tuple[str, ...]
    distance: float
    nodes: tuple[Node, ...] = field(default_factory=tuple)

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def target(self) -> str:
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of nodes in the route."""
        return len(self.path)

    @property
    def floors(self) -> tuple[int, ...]:
        """Distinct floors crossed, in the order they are reached."""
        seen: list[int] = []
        for node in self.nodes:
            if node.floor not in seen:
                seen.append(node.floor)
        return tuple(seen)

    @property
    def is_multi_floor(self) -> bool:
        return len(self.floors) > 1

    def count_by_type(self, node_type: NodeType) -> int:
        """Count route nodes of the given type."""
        return sum(1 for node in self.nodes if node.type is node_type)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "path": list(self.path),
            "distance": self.distance,
        }
