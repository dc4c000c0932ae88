"""Room service - Directory lookup and search orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import RoomNotFoundError
from ..domain.models import Node, NodeType, Room
from ..ports.graph import GraphRepositoryPort
from ..ports.rooms import RoomDirectoryPort

SPECIAL_NODE_TYPES = (NodeType.ENTRANCE, NodeType.STAIRS)


@dataclass
class RoomService:
    """Service answering room lookups and searches.

    Attributes:
        room_directory: Source of room metadata
        graph_repository: Used to check which rooms are routable
    """

    room_directory: RoomDirectoryPort
    graph_repository: GraphRepositoryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_rooms(self) -> List[Room]:
        return list(self.room_directory.list_rooms())

    def get_room(self, room_id: str) -> Room:
        """Get a room by id.

        Raises:
            RoomNotFoundError: If no room has this id.
        """
        room = self.room_directory.get_room(room_id)
        if room is None:
            raise RoomNotFoundError(f"Room not found: {room_id}", room_id=room_id)
        return room

    def room_for_node(self, node_id: str) -> Optional[Room]:
        return self.room_directory.find_by_node(node_id)

    def search(self, query: Optional[str]) -> List[Room]:
        """Case-insensitive substring search on label, aliases and room id.

        A blank query matches nothing.
        """
        needle = (query or "").strip()
        if not needle:
            return []
        results = [room for room in self.room_directory.list_rooms() if room.matches(needle)]
        self._logger.debug(
            "Room search",
            extra={"query": needle, "count": len(results)},
        )
        return results

    def routable_rooms(self) -> List[Room]:
        """Rooms whose node exists in the graph, sorted by room id."""
        graph = self.graph_repository.load()
        rooms = [room for room in self.room_directory.list_rooms() if room.node_id in graph]
        return sorted(rooms, key=lambda room: room.room_id)

    def special_points(self) -> List[Node]:
        """Entrance and stairs nodes, offered alongside rooms as route endpoints."""
        graph = self.graph_repository.load()
        points: List[Node] = []
        for node_type in SPECIAL_NODE_TYPES:
            points.extend(sorted(graph.nodes_of_type(node_type), key=lambda node: node.id))
        return points
