"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    GraphLoadError,
    InvalidInputError,
    NoPathFoundError,
    RenderingError,
    RoomNotFoundError,
    UnknownFloorError,
    UnknownNodeError,
    WayfinderError,
)
from .models import Edge, Node, NodeType, Room, RouteResult

__all__ = [
    # Models
    "NodeType",
    "Node",
    "Edge",
    "Room",
    "RouteResult",
    # Errors
    "WayfinderError",
    "InvalidInputError",
    "UnknownNodeError",
    "NoPathFoundError",
    "GraphError",
    "GraphLoadError",
    "RoomNotFoundError",
    "ConfigurationError",
    "RenderingError",
    "UnknownFloorError",
]
