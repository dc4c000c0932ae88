"""JSON Room Directory adapter.

Reads ``rooms.json`` (``{"rooms": [...]}`` with camelCase keys) once and
serves room metadata from memory.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import Room
from ...graph.model import parse_floor


def _parse_room(raw: Mapping[str, Any]) -> Room:
    room_id = str(raw["roomId"]).strip()
    node_id = str(raw["nodeId"]).strip()
    if not room_id or not node_id:
        raise ValueError("roomId and nodeId must not be empty")

    aliases = raw.get("aliases") or []
    return Room(
        room_id=room_id,
        node_id=node_id,
        label=str(raw.get("label") or room_id),
        floor=parse_floor(raw.get("floor", 1)),
        type=str(raw.get("type") or ""),
        aliases=tuple(str(alias) for alias in aliases),
        description=str(raw.get("description") or ""),
    )


@dataclass
class JSONRoomDirectory:
    """Room directory backed by a JSON file.

    This adapter implements RoomDirectoryPort.

    Attributes:
        config: Graph configuration (data directory, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    # Cached data
    _rooms: Optional[List[Room]] = field(default=None, repr=False)
    _by_id: Dict[str, Room] = field(default_factory=dict, repr=False)
    _by_node: Dict[str, Room] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _load(self) -> List[Room]:
        if self._rooms is not None:
            return self._rooms

        with self._lock:
            if self._rooms is None:
                self._read_rooms()
        return self._rooms

    def _read_rooms(self) -> None:
        path = self.config.rooms_path
        try:
            with path.open(encoding="utf-8") as f:
                document = json.load(f)
            entries = document["rooms"]
            rooms = [_parse_room(entry) for entry in entries]
        except (OSError, ValueError, KeyError, TypeError) as e:
            self._logger.error(
                "Room data unreadable",
                extra={"rooms_path": str(path), "error": str(e)},
            )
            raise GraphLoadError(
                f"Failed to load rooms: {path}",
                file_path=str(path),
                cause=e,
            )

        by_id: Dict[str, Room] = {}
        by_node: Dict[str, Room] = {}
        for room in rooms:
            if room.room_id in by_id:
                raise GraphLoadError(
                    f"Duplicate room id: {room.room_id}",
                    file_path=str(path),
                )
            by_id[room.room_id] = room
            by_node.setdefault(room.node_id, room)

        self._by_id = by_id
        self._by_node = by_node
        self._rooms = rooms
        self._logger.info("Rooms loaded", extra={"rooms": len(rooms)})

    def list_rooms(self) -> Sequence[Room]:
        return list(self._load())

    def get_room(self, room_id: str) -> Optional[Room]:
        self._load()
        return self._by_id.get(room_id)

    def find_by_node(self, node_id: str) -> Optional[Room]:
        self._load()
        return self._by_node.get(node_id)

    def clear_cache(self) -> None:
        """Drop cached room data."""
        with self._lock:
            self._rooms = None
            self._by_id = {}
            self._by_node = {}
