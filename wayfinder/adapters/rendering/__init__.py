"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumFloorPlanRenderer: Folium-based floor-plan rendering
"""

from .folium_adapter import FoliumFloorPlanRenderer

__all__ = ["FoliumFloorPlanRenderer"]
