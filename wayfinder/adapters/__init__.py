"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Static data files (graph and room JSON)
- Path finding (Dijkstra)
- Rendering engines (Folium)
- Caching systems (in-memory, null)
"""
