"""Folium floor-plan renderer adapter.

Draws one floor of the building on a pixel-coordinate (CRS Simple)
Leaflet map: the floor image as an overlay, every node as a circle
marker styled by type, and the part of a route lying on that floor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import folium

from ...config import MapConfig, get_config
from ...domain.errors import RenderingError, UnknownFloorError
from ...domain.models import Node, NodeType, Room, RouteResult
from ...graph.model import Graph

NODE_STYLES: Dict[NodeType, Dict[str, Any]] = {
    NodeType.WAYPOINT: {
        "radius": 4,
        "color": "#9E9E9E",
        "fill_color": "#BDBDBD",
        "fill_opacity": 0.6,
    },
    NodeType.DOOR: {
        "radius": 6,
        "color": "#FF9800",
        "fill_color": "#FFB74D",
        "fill_opacity": 0.8,
    },
    NodeType.ROOM: {
        "radius": 10,
        "color": "#2196F3",
        "fill_color": "#64B5F6",
        "fill_opacity": 0.9,
    },
    NodeType.STAIRS: {
        "radius": 12,
        "color": "#F44336",
        "fill_color": "#EF5350",
        "fill_opacity": 0.9,
    },
    NodeType.ENTRANCE: {
        "radius": 14,
        "color": "#4CAF50",
        "fill_color": "#66BB6A",
        "fill_opacity": 1.0,
    },
}

ROUTE_COLOR = "#E91E63"

REMOTE_IMAGE_PREFIXES = ("http://", "https://")


def node_label(node: Node, room: Optional[Room] = None) -> str:
    """Human-readable name of a node."""
    if room is not None:
        return room.label
    if node.id.startswith("node_"):
        return f"Room {node.id[len('node_'):]}"
    if node.id == "entrance":
        return "Main entrance"
    if node.id.startswith("stairs_"):
        return f"Stairs {node.id[len('stairs_'):]}"
    if node.type is NodeType.DOOR and node.id.startswith("d"):
        return f"Door {node.id[1:]}"
    return node.id


def floor_runs(route: RouteResult, floor: int) -> List[List[Node]]:
    """Split a route into maximal runs of consecutive nodes on one floor."""
    runs: List[List[Node]] = []
    current: List[Node] = []
    for node in route.nodes:
        if node.floor == floor:
            current.append(node)
        elif current:
            runs.append(current)
            current = []
    if current:
        runs.append(current)
    return runs


@dataclass
class FoliumFloorPlanRenderer:
    """Folium-based floor-plan renderer.

    This adapter implements MapRendererPort.

    Attributes:
        config: Map configuration (image size and offset, floors)
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def to_map_coords(self, node: Node) -> Tuple[float, float]:
        """Convert image pixel coordinates to (lat, lng) on the simple CRS."""
        inverted_y = self.config.image_height - node.y - self.config.image_offset_y
        return inverted_y, node.x

    @property
    def bounds(self) -> List[List[float]]:
        offset = self.config.image_offset_y
        return [
            [-offset, 0],
            [self.config.image_height - offset, self.config.image_width],
        ]

    def render_floor(
        self,
        graph: Graph,
        floor: int,
        route: Optional[RouteResult] = None,
        rooms: Sequence[Room] = (),
    ) -> str:
        """Render a floor as a standalone HTML document.

        Raises:
            UnknownFloorError: If the floor is not configured.
            RenderingError: If folium fails to build the document.
        """
        if floor not in self.config.floors:
            raise UnknownFloorError(
                f"Unknown floor: {floor}",
                floor=floor,
                renderer_type="folium",
            )

        rooms_by_node = {room.node_id: room for room in rooms}
        floor_nodes = graph.nodes_on_floor(floor)

        self._logger.info(
            "Rendering floor",
            extra={
                "floor": floor,
                "nodes": len(floor_nodes),
                "with_route": route is not None,
            },
        )

        try:
            fmap = self._base_map(floor)

            for node in floor_nodes:
                style = NODE_STYLES[node.type]
                room = rooms_by_node.get(node.id)
                folium.CircleMarker(
                    location=self.to_map_coords(node),
                    radius=style["radius"],
                    color=style["color"],
                    fill=True,
                    fill_color=style["fill_color"],
                    fill_opacity=style["fill_opacity"],
                    tooltip=node_label(node, room),
                    popup=self._popup(node, room),
                ).add_to(fmap)

            if route is not None:
                self._draw_route(fmap, route, floor)

            return fmap.get_root().render()
        except Exception as e:
            self._logger.error(
                "Floor rendering failed",
                extra={"floor": floor, "error": str(e)},
            )
            raise RenderingError(
                f"Floor rendering failed: {e}",
                floor=floor,
                renderer_type="folium",
                cause=e,
            )

    def _base_map(self, floor: int) -> folium.Map:
        bounds = self.bounds
        center = [
            (bounds[0][0] + bounds[1][0]) / 2,
            (bounds[0][1] + bounds[1][1]) / 2,
        ]
        fmap = folium.Map(
            location=center,
            crs="Simple",
            tiles=None,
            zoom_start=-1,
            min_zoom=-3,
            max_zoom=2,
            max_bounds=True,
        )
        image = self.floor_image(floor)
        if image is not None:
            folium.raster_layers.ImageOverlay(
                image=image,
                bounds=bounds,
                opacity=1,
                interactive=False,
            ).add_to(fmap)
        fmap.fit_bounds(bounds)
        return fmap

    def floor_image(self, floor: int) -> Optional[str]:
        """Locate the background image of a floor.

        URLs are returned unchanged. Local files are looked up under
        images_dir; a missing file yields None and the floor is drawn
        without a background.
        """
        image = self.config.floor_image_template.format(floor=floor)
        if image.startswith(REMOTE_IMAGE_PREFIXES):
            return image

        path = Path(image)
        if not path.is_absolute():
            path = self.config.images_dir / path
        if not path.is_file():
            self._logger.warning(
                "Floor image not found",
                extra={"floor": floor, "image_path": str(path)},
            )
            return None
        return str(path)

    def _popup(self, node: Node, room: Optional[Room]) -> str:
        lines = [f"<b>{node_label(node, room)}</b>"]
        if room is not None:
            lines.append(f"Room: {room.room_id}")
        lines.append(f"ID: {node.id}")
        lines.append(f"Floor: {node.floor}")
        return "<br>".join(lines)

    def _draw_route(self, fmap: folium.Map, route: RouteResult, floor: int) -> None:
        drawn: List[Tuple[float, float]] = []
        for run in floor_runs(route, floor):
            if len(run) < 2:
                continue
            coords = [self.to_map_coords(node) for node in run]
            folium.PolyLine(coords, color=ROUTE_COLOR, weight=5, opacity=0.8).add_to(fmap)
            drawn.extend(coords)
        if drawn:
            lats = [lat for lat, _ in drawn]
            lngs = [lng for _, lng in drawn]
            fmap.fit_bounds([[min(lats), min(lngs)], [max(lats), max(lngs)]])

        for node, color in ((route.nodes[0], "green"), (route.nodes[-1], "red")):
            if node.floor != floor:
                continue
            folium.Marker(
                location=self.to_map_coords(node),
                tooltip=node.id,
                icon=folium.Icon(color=color),
            ).add_to(fmap)
