"""Room adapters - Implementations of RoomDirectoryPort.

Available implementations:
- JSONRoomDirectory: Loads room metadata from a JSON file
"""

from .json_directory import JSONRoomDirectory

__all__ = ["JSONRoomDirectory"]
