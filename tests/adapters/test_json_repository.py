"""Tests for the JSON graph repository adapter."""

import json

import pytest

from wayfinder.adapters.graph import JSONGraphRepository
from wayfinder.config import GraphConfig
from wayfinder.domain.errors import GraphLoadError


def _repository(data_dir):
    return JSONGraphRepository(GraphConfig(data_dir=data_dir))


class TestJSONGraphRepository:
    def test_load(self, data_dir):
        graph = _repository(data_dir).load()

        assert set(graph.nodes) == {"A", "B", "C", "D", "E"}
        assert len(graph.edges) == 4

    def test_load_is_cached(self, data_dir):
        repository = _repository(data_dir)

        assert repository.load() is repository.load()

    def test_clear_cache_rereads(self, data_dir):
        repository = _repository(data_dir)
        first = repository.load()
        repository.clear_cache()

        assert repository.load() is not first

    def test_get_node(self, data_dir):
        repository = _repository(data_dir)

        assert repository.get_node("D").floor == 2
        assert repository.get_node("Z") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(GraphLoadError) as excinfo:
            _repository(tmp_path).load()

        assert excinfo.value.file_path.endswith("graph.json")
        assert isinstance(excinfo.value.cause, OSError)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "graph.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(GraphLoadError):
            _repository(tmp_path).load()

    @pytest.mark.parametrize("document", [[], {"nodes": None, "edges": []}])
    def test_wrong_shape(self, tmp_path, document):
        (tmp_path / "graph.json").write_text(json.dumps(document), encoding="utf-8")

        with pytest.raises(GraphLoadError):
            _repository(tmp_path).load()

    def test_dangling_edge_reports_file(self, tmp_path):
        document = {
            "nodes": [{"id": "A", "floor": 1, "x": 0, "y": 0, "type": "room"}],
            "edges": [{"from": "A", "to": "ghost", "weight": 3}],
        }
        (tmp_path / "graph.json").write_text(json.dumps(document), encoding="utf-8")

        with pytest.raises(GraphLoadError) as excinfo:
            _repository(tmp_path).load()

        assert "ghost" in str(excinfo.value)
        assert excinfo.value.file_path.endswith("graph.json")

    def test_failed_load_is_retried(self, tmp_path, data_dir):
        empty_dir = tmp_path / "later"
        empty_dir.mkdir()
        repository = _repository(empty_dir)
        with pytest.raises(GraphLoadError):
            repository.load()

        (empty_dir / "graph.json").write_text(
            (data_dir / "graph.json").read_text(encoding="utf-8"), encoding="utf-8"
        )

        assert len(repository.load()) == 5
