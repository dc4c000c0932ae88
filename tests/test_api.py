"""Tests for the Flask HTTP API."""

import pytest

from wayfinder.api import create_app
from wayfinder.config import AppConfig, GraphConfig
from wayfinder.container import Container
from wayfinder.domain.errors import RenderingError
from wayfinder.ports.rendering import MapRendererPort


@pytest.fixture
def client(container):
    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_rooms(client):
    response = client.get("/api/rooms")

    rooms = response.get_json()["rooms"]
    assert [room["roomId"] for room in rooms] == ["D1", "E1", "X9"]
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_room_by_id(client):
    assert client.get("/api/rooms/D1").get_json()["label"] == "Library"


def test_room_not_found(client):
    response = client.get("/api/rooms/nope")

    assert response.status_code == 404
    assert response.get_json()["error"] == "Room not found"


def test_graph(client):
    payload = client.get("/api/graph").get_json()

    assert len(payload["nodes"]) == 5
    assert {"from": "A", "to": "B", "weight": 5.0} in payload["edges"]


def test_search(client):
    payload = client.get("/api/search?q=gym").get_json()

    assert payload["count"] == 1
    assert payload["query"] == "gym"
    assert payload["results"][0]["roomId"] == "X9"


def test_empty_search(client):
    assert client.get("/api/search?q=").get_json() == {"results": []}


def test_route(client):
    response = client.get("/api/route?from=A&to=D")

    assert response.status_code == 200
    assert response.get_json() == {
        "from": "A",
        "to": "D",
        "path": ["A", "B", "C", "D"],
        "distance": 10.0,
    }


def test_route_to_self(client):
    payload = client.get("/api/route?from=B&to=B").get_json()

    assert payload["path"] == ["B"]
    assert payload["distance"] == 0


@pytest.mark.parametrize("query", ["", "?from=A", "?to=A", "?from=&to=A"])
def test_route_missing_parameters(client, query):
    response = client.get(f"/api/route{query}")

    assert response.status_code == 400
    assert response.get_json()["kind"] == "InvalidInput"


def test_route_unknown_node(client):
    response = client.get("/api/route?from=A&to=Z")

    assert response.status_code == 404
    assert response.get_json()["kind"] == "UnknownNode"
    assert response.get_json()["nodes"] == ["Z"]


def test_route_no_path(client):
    response = client.get("/api/route?from=A&to=E")

    assert response.status_code == 404
    assert response.get_json()["kind"] == "NoPathFound"
    assert response.get_json()["error"] == "No route found between these points"


def test_route_points(client):
    payload = client.get("/api/route-points").get_json()

    assert [node["id"] for node in payload["special"]] == ["A", "C"]
    assert [room["roomId"] for room in payload["rooms"]] == ["D1", "E1"]


def test_floor_map(client):
    response = client.get("/map?floor=1&from=A&to=D")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert "L.polyline(" in response.get_data(as_text=True)


def test_floor_map_defaults_to_route_start_floor(client):
    response = client.get("/map?from=D&to=A")

    assert response.status_code == 200


def test_floor_map_unknown_floor(client):
    response = client.get("/map?floor=42")

    assert response.status_code == 400
    assert response.get_json()["kind"] == "UnknownFloor"
    assert response.get_json()["error"] == "Unknown floor: 42"


def test_floor_map_render_failure_is_a_server_error(container):
    class BrokenRenderer:
        def render_floor(self, graph, floor, route=None, rooms=()):
            raise RenderingError("Floor rendering failed", floor=floor, renderer_type="test")

    container.register(MapRendererPort, BrokenRenderer)
    client = create_app(container).test_client()

    response = client.get("/map?floor=1")

    assert response.status_code == 500
    assert response.get_json()["kind"] == "RenderingError"


def test_missing_data_refuses_routes(tmp_path):
    container = Container.create_default(AppConfig(graph=GraphConfig(data_dir=tmp_path)))
    client = create_app(container).test_client()

    response = client.get("/api/route?from=A&to=B")

    assert response.status_code == 503
    assert response.get_json()["kind"] == "GraphLoadError"
    assert client.get("/health").status_code == 200
