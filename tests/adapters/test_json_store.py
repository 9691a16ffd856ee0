"""Tests for the JSON survey state store."""

import json

from src.adapters.storage.json_store import JsonSurveyStore
from src.ports.outbound import SurveyStorePort


class TestJsonSurveyStore:
    def test_implements_port(self, tmp_path):
        assert isinstance(JsonSurveyStore(str(tmp_path)), SurveyStorePort)

    def test_missing_user(self, tmp_path):
        assert JsonSurveyStore(str(tmp_path)).get_user_state("nobody") is None

    def test_round_trip(self, tmp_path):
        store = JsonSurveyStore(str(tmp_path))
        store.set_user_state("u1", {"answered_at": "2019-05-10T00:00:00+00:00"})
        store.set_user_state("u2", {"answered_at": "x"})
        reopened = JsonSurveyStore(str(tmp_path))
        assert reopened.get_user_state("u1") == {"answered_at": "2019-05-10T00:00:00+00:00"}
        assert reopened.get_user_state("u2") == {"answered_at": "x"}

    def test_corrupt_file_reads_empty(self, tmp_path):
        store = JsonSurveyStore(str(tmp_path))
        store.path.write_text("{not json", encoding="utf-8")
        assert store.get_user_state("u1") is None

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "dir"
        store = JsonSurveyStore(str(target))
        store.set_user_state("u1", {"a": 1})
        assert json.loads(store.path.read_text(encoding="utf-8")) == {"u1": {"a": 1}}
