"""JSON Graph Repository adapter.

Loads the navigation graph from ``graph.json``, a document shaped like
``{"nodes": [...], "edges": [...]}``, and keeps it for the lifetime of
the process.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import Node
from ...graph.model import Graph, build_graph


@dataclass
class JSONGraphRepository:
    """Graph repository that loads from a JSON file.

    This adapter implements GraphRepositoryPort. The graph is loaded on
    first use; a failed load is not cached, so the next call retries.

    Attributes:
        config: Graph configuration (data directory, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the navigation graph from JSON.

        Returns:
            The validated graph.

        Raises:
            GraphLoadError: If the file cannot be read or is inconsistent.
        """
        if self._graph is not None:
            return self._graph

        with self._lock:
            if self._graph is None:
                self._graph = self._load_graph_from_json()
        return self._graph

    def _load_graph_from_json(self) -> Graph:
        path = self.config.graph_path
        self._logger.debug("Loading graph", extra={"graph_path": str(path)})

        try:
            with path.open(encoding="utf-8") as f:
                document: Dict[str, Any] = json.load(f)
        except (OSError, ValueError) as e:
            self._logger.error(
                "Graph file unreadable",
                extra={"graph_path": str(path), "error": str(e)},
            )
            raise GraphLoadError(
                f"Failed to read graph: {path}",
                file_path=str(path),
                cause=e,
            )

        if not isinstance(document, dict):
            raise GraphLoadError(
                "Graph document must be a JSON object",
                file_path=str(path),
            )
        nodes = document.get("nodes", [])
        edges = document.get("edges", [])
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise GraphLoadError(
                "Graph 'nodes' and 'edges' must be JSON arrays",
                file_path=str(path),
            )

        try:
            graph = build_graph(nodes, edges)
        except GraphLoadError as e:
            e.file_path = str(path)
            self._logger.error(
                "Graph data inconsistent",
                extra={"graph_path": str(path), "error": str(e)},
            )
            raise

        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph.nodes), "edges": len(graph.edges)},
        )
        return graph

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.load().get_node(node_id)

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load rereads the file."""
        with self._lock:
            self._graph = None
        self._logger.debug("Graph cache cleared")
