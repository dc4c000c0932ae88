"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- JSONGraphRepository: Loads the graph from a JSON file
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .json_repository import JSONGraphRepository

__all__ = ["JSONGraphRepository", "DijkstraRouteSolver"]
