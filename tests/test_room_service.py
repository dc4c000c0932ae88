import pytest

from wayfinder.adapters.rooms import JSONRoomDirectory
from wayfinder.config import GraphConfig
from wayfinder.domain.errors import RoomNotFoundError
from wayfinder.services import RoomService


@pytest.fixture
def room_service(data_dir, repository):
    return RoomService(
        room_directory=JSONRoomDirectory(GraphConfig(data_dir=data_dir)),
        graph_repository=repository,
    )


def test_search_matches_label_case_insensitively(room_service):
    results = room_service.search("LIBR")
    assert [room.room_id for room in results] == ["D1"]


def test_search_matches_aliases(room_service):
    results = room_service.search("reading")
    assert [room.room_id for room in results] == ["D1"]


def test_search_matches_room_id(room_service):
    results = room_service.search("x9")
    assert [room.label for room in results] == ["Old Gym"]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_search_returns_nothing(room_service, query):
    assert room_service.search(query) == []


def test_search_without_match(room_service):
    assert room_service.search("swimming pool") == []


def test_get_room(room_service):
    assert room_service.get_room("E1").label == "Storage"


def test_get_unknown_room_raises(room_service):
    with pytest.raises(RoomNotFoundError) as excinfo:
        room_service.get_room("nope")
    assert excinfo.value.room_id == "nope"


def test_room_for_node(room_service):
    assert room_service.room_for_node("D").room_id == "D1"
    assert room_service.room_for_node("A") is None


def test_routable_rooms_skip_rooms_without_graph_node(room_service):
    assert [room.room_id for room in room_service.routable_rooms()] == ["D1", "E1"]


def test_special_points_are_entrances_then_stairs(room_service):
    assert [node.id for node in room_service.special_points()] == ["A", "C"]
