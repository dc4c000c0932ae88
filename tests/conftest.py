"""Shared fixtures: small graphs, data files on disk and a wired container."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wayfinder.adapters.cache import NullCache
from wayfinder.adapters.graph import DijkstraRouteSolver
from wayfinder.config import AppConfig, GraphConfig, reset_config
from wayfinder.container import Container
from wayfinder.graph import Graph, build_graph
from wayfinder.services import RouteService

# A-B 5, B-C 3, A-C 10, C-D 2, and E with no edges.
EXAMPLE_NODES = [
    {"id": "A", "floor": 1, "x": 100, "y": 100, "type": "entrance"},
    {"id": "B", "floor": 1, "x": 200, "y": 100, "type": "door"},
    {"id": "C", "floor": 1, "x": 300, "y": 100, "type": "stairs"},
    {"id": "D", "floor": 2, "x": 300, "y": 100, "type": "room"},
    {"id": "E", "floor": 2, "x": 900, "y": 100, "type": "room"},
]
EXAMPLE_EDGES = [
    {"from": "A", "to": "B", "weight": 5},
    {"from": "B", "to": "C", "weight": 3},
    {"from": "A", "to": "C", "weight": 10},
    {"from": "C", "to": "D", "weight": 2},
]
EXAMPLE_ROOMS = [
    {"roomId": "D1", "nodeId": "D", "label": "Library", "floor": 2, "type": "library", "aliases": ["reading room"]},
    {"roomId": "E1", "nodeId": "E", "label": "Storage", "floor": 2, "type": "service", "aliases": []},
    {"roomId": "X9", "nodeId": "missing_node", "label": "Old Gym", "floor": 1, "type": "sport", "aliases": ["gym"]},
]


class StaticGraphRepository:
    """In-memory GraphRepositoryPort for service tests."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.loads = 0

    def load(self) -> Graph:
        self.loads += 1
        return self.graph

    def get_node(self, node_id):
        return self.graph.get_node(node_id)

    def clear_cache(self) -> None:
        pass


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def example_graph() -> Graph:
    return build_graph(EXAMPLE_NODES, EXAMPLE_EDGES)


@pytest.fixture
def repository(example_graph) -> StaticGraphRepository:
    return StaticGraphRepository(example_graph)


@pytest.fixture
def route_service(repository) -> RouteService:
    return RouteService(
        graph_repository=repository,
        route_solver=DijkstraRouteSolver(),
        cache=NullCache(),
    )


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "graph.json").write_text(
        json.dumps({"nodes": EXAMPLE_NODES, "edges": EXAMPLE_EDGES}), encoding="utf-8"
    )
    (tmp_path / "rooms.json").write_text(
        json.dumps({"rooms": EXAMPLE_ROOMS}), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def app_config(data_dir: Path) -> AppConfig:
    return AppConfig(graph=GraphConfig(data_dir=data_dir))


@pytest.fixture
def container(app_config: AppConfig) -> Container:
    return Container.create_default(app_config)
