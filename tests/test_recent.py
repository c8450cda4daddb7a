"""Tests for the recent-contexts tracker and its stores."""

import json

import pytest

from core.errors import RecentStoreError
from core.recent import (
    RECENT_CONTEXTS_KEY,
    JsonFileStore,
    MemoryStore,
    RecentContexts,
    create_recent_contexts,
)
from core.settings import load_settings
from models.context import ContextInfo


@pytest.fixture
def recent():
    return RecentContexts(MemoryStore(), max_items=5)


class TestRecentContexts:
    def test_starts_empty(self, recent):
        assert recent.get_recent_contexts() == []

    def test_most_recent_first(self, recent):
        recent.add_recent_context("a")
        recent.add_recent_context("b")
        assert recent.get_recent_contexts() == ["b", "a"]

    def test_cap_evicts_oldest(self, recent):
        for name in ["c1", "c2", "c3", "c4", "c5", "c6"]:
            recent.add_recent_context(name)
        assert recent.get_recent_contexts() == ["c6", "c5", "c4", "c3", "c2"]

    def test_readd_moves_to_front(self, recent):
        for name in ["a", "b", "c"]:
            recent.add_recent_context(name)
        assert recent.add_recent_context("a") == ["a", "c", "b"]
        assert len(recent.get_recent_contexts()) == 3

    def test_filters_unknown_names_lazily(self, recent):
        for name in ["gone", "dev", "prod"]:
            recent.add_recent_context(name)
        known = [ContextInfo("dev", "c", "u"), ContextInfo("prod", "c", "u")]
        assert recent.get_recent_contexts(known) == ["prod", "dev"]
        assert recent.get_recent_contexts(["dev"]) == ["dev"]
        # 저장된 값은 정리하지 않습니다.
        assert json.loads(recent.store.get(RECENT_CONTEXTS_KEY)) == ["prod", "dev", "gone"]

    def test_malformed_value_treated_as_empty(self):
        recent = RecentContexts(MemoryStore({RECENT_CONTEXTS_KEY: "{not json"}))
        assert recent.get_recent_contexts() == []
        assert recent.add_recent_context("a") == ["a"]

    def test_invalid_max(self):
        with pytest.raises(ValueError):
            RecentContexts(MemoryStore(), max_items=0)


class TestJsonFileStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "state.json"
        RecentContexts(JsonFileStore(str(path))).add_recent_context("dev")
        assert RecentContexts(JsonFileStore(str(path))).get_recent_contexts() == ["dev"]

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"other": "value"}))
        JsonFileStore(str(path)).set(RECENT_CONTEXTS_KEY, "[]")
        assert json.loads(path.read_text()) == {"other": "value", RECENT_CONTEXTS_KEY: "[]"}

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("not json")
        assert JsonFileStore(str(path)).get(RECENT_CONTEXTS_KEY) is None

    def test_write_failure_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = JsonFileStore(str(blocker / "state.json"))
        with pytest.raises(RecentStoreError):
            store.set(RECENT_CONTEXTS_KEY, "[]")

    def test_create_from_settings(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KUBE_CONTEXT_RECENT_MAX", "2")
        recent = create_recent_contexts(load_settings())
        for name in ["a", "b", "c"]:
            recent.add_recent_context(name)
        assert recent.max_items == 2
        assert create_recent_contexts().get_recent_contexts() == ["c", "b"]
        assert (tmp_path / "state" / "state.json").exists()
