"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- RouteService: Validated shortest-path queries
- RoomService: Room lookup and search
"""

from .room_service import RoomService
from .route_service import RouteService

__all__ = ["RouteService", "RoomService"]
