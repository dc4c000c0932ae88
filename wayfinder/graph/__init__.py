"""Graph-related utilities for representing the building's navigation network.

This subpackage contains the in-memory graph model built from the static
node and edge collections, and the path-finding algorithm run on top of it.
"""

from .dijkstra import PathResult, dijkstra, path_distance
from .model import Adjacency, Graph, build_graph

__all__ = ["Adjacency", "Graph", "build_graph", "PathResult", "dijkstra", "path_distance"]
