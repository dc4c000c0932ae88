"""Rendering port - Abstraction for floor-plan map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, static images, etc.) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Room, RouteResult
    from ..graph.model import Graph


class MapRendererPort(Protocol):
    """Port for floor-plan rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Map renderers draw one floor of the building, its nodes, and
    optionally the part of a route that lies on that floor.
    """

    def render_floor(
        self,
        graph: Graph,
        floor: int,
        route: Optional[RouteResult] = None,
        rooms: Sequence[Room] = (),
    ) -> str:
        """Render a floor as a standalone HTML document.

        Args:
            graph: The navigation graph.
            floor: Floor number to draw.
            route: Optional route to overlay.
            rooms: Room metadata used for popups.

        Returns:
            The HTML document.
        """
        ...
