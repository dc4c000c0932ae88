"""Tests for the folium floor-plan renderer."""

import logging

import pytest

from wayfinder.adapters.rendering import FoliumFloorPlanRenderer
from wayfinder.adapters.rendering.folium_adapter import floor_runs, node_label
from wayfinder.config import MapConfig
from wayfinder.domain.errors import RenderingError, UnknownFloorError
from wayfinder.domain.models import Node, NodeType, Room, RouteResult


@pytest.fixture
def renderer():
    return FoliumFloorPlanRenderer(MapConfig())


def test_coordinates_are_inverted(renderer):
    node = Node(id="n", floor=1, x=300, y=100)

    assert renderer.to_map_coords(node) == (512 - 100 - 500, 300)


def test_render_floor_draws_nodes(renderer, example_graph):
    html = renderer.render_floor(example_graph, 1)

    assert "<html" in html.lower()
    assert html.count("L.circleMarker(") == 3
    assert "L.polyline(" not in html


def test_render_floor_with_route(renderer, example_graph, route_service):
    route = route_service.route("A", "D")

    html = renderer.render_floor(example_graph, 1, route=route)

    assert "L.polyline(" in html
    assert "L.marker(" in html


def test_render_uses_room_labels(renderer, example_graph):
    rooms = [Room(room_id="D1", node_id="D", label="Library", floor=2)]

    html = renderer.render_floor(example_graph, 2, rooms=rooms)

    assert "Library" in html


def test_unknown_floor(renderer, example_graph):
    with pytest.raises(UnknownFloorError) as excinfo:
        renderer.render_floor(example_graph, 9)

    assert excinfo.value.floor == 9
    assert excinfo.value.kind == "UnknownFloor"


def test_default_config_renders_without_floor_image(renderer, example_graph, caplog):
    with caplog.at_level(logging.WARNING, logger="wayfinder"):
        html = renderer.render_floor(example_graph, 1)

    assert "L.imageOverlay(" not in html
    assert any(
        record.getMessage() == "Floor image not found" for record in caplog.records
    )


def test_local_floor_image_is_embedded(tmp_path, example_graph):
    (tmp_path / "floor-1.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    renderer = FoliumFloorPlanRenderer(MapConfig(images_dir=tmp_path))

    html = renderer.render_floor(example_graph, 1)

    assert "L.imageOverlay(" in html
    assert "data:image/png;base64," in html


def test_remote_floor_image_is_linked(example_graph):
    template = "https://maps.example.edu/floor-{floor}.webp"
    renderer = FoliumFloorPlanRenderer(MapConfig(floor_image_template=template))

    html = renderer.render_floor(example_graph, 2)

    assert "https://maps.example.edu/floor-2.webp" in html


def test_folium_failure_is_not_an_unknown_floor(renderer, example_graph, monkeypatch):
    def broken_base_map(floor):
        raise RuntimeError("boom")

    monkeypatch.setattr(renderer, "_base_map", broken_base_map)

    with pytest.raises(RenderingError) as excinfo:
        renderer.render_floor(example_graph, 1)

    assert not isinstance(excinfo.value, UnknownFloorError)
    assert isinstance(excinfo.value.cause, RuntimeError)


def _nodes_on(*floors):
    return tuple(Node(id=f"n{i}", floor=floor) for i, floor in enumerate(floors))


def test_floor_runs_split_where_route_leaves_the_floor():
    nodes = _nodes_on(1, 1, 2, 1, 1)
    route = RouteResult(path=tuple(node.id for node in nodes), distance=4, nodes=nodes)

    runs = floor_runs(route, 1)

    assert [[node.id for node in run] for run in runs] == [["n0", "n1"], ["n3", "n4"]]


def test_route_returning_to_floor_draws_separate_lines(renderer, example_graph):
    nodes = _nodes_on(1, 1, 2, 1, 1)
    route = RouteResult(path=tuple(node.id for node in nodes), distance=4, nodes=nodes)

    html = renderer.render_floor(example_graph, 1, route=route)

    assert html.count("L.polyline(") == 2


@pytest.mark.parametrize(
    "node, expected",
    [
        (Node(id="node_304", floor=3, type=NodeType.ROOM), "Room 304"),
        (Node(id="d12", floor=1, type=NodeType.DOOR), "Door 12"),
        (Node(id="entrance", floor=1, type=NodeType.ENTRANCE), "Main entrance"),
        (Node(id="stairs_2", floor=1, type=NodeType.STAIRS), "Stairs 2"),
        (Node(id="w1", floor=1), "w1"),
    ],
)
def test_node_label(node, expected):
    assert node_label(node) == expected
