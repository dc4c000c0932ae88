"""Room directory port - Abstraction over the room metadata store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Room


class RoomDirectoryPort(Protocol):
    """Port for room metadata lookup.

    Implementation: adapters/rooms/json_directory.py
    """

    def list_rooms(self) -> Sequence[Room]:
        """List all rooms in their stored order."""
        ...

    def get_room(self, room_id: str) -> Optional[Room]:
        """Get a room by its room id, or None if not found."""
        ...

    def find_by_node(self, node_id: str) -> Optional[Room]:
        """Get the room reached through the given graph node, if any."""
        ...

    def clear_cache(self) -> None:
        """Drop loaded room data so the next lookup rereads storage."""
        ...
