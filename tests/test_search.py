"""Tests for context search, ranking and highlighting."""

import pytest

from core.search import (
    get_filter_options,
    highlight_matches,
    match_quality,
    score_context,
    search_contexts,
)
from models.context import ContextInfo, SearchFilters


@pytest.fixture
def contexts():
    return [
        ContextInfo("staging", "eu-cluster", "deployer", "qa"),
        ContextInfo("production-east", "us-east", "admin", None, current=True),
        ContextInfo("prod", "us-west", "admin", "payments"),
    ]


def names(results):
    return [r.context.name for r in results]


class TestMatchQuality:
    def test_levels(self):
        assert match_quality("prod", "PROD") == 100
        assert match_quality("production", "prod") == 75
        assert match_quality("my-prod", "prod") == 50
        assert match_quality("staging", "prod") == 0

    def test_empty_values(self):
        assert match_quality(None, "prod") == 0
        assert match_quality("", "prod") == 0
        assert match_quality("prod", "") == 0

    def test_query_longer_than_value(self):
        assert match_quality("dev", "development") == 0


class TestScoring:
    def test_exact_name_beats_prefix(self, contexts):
        results = search_contexts(contexts, SearchFilters(query="prod"))
        assert names(results) == ["prod", "production-east"]
        assert results[0].relevance_score > results[1].relevance_score

    def test_non_matching_excluded(self, contexts):
        results = search_contexts(contexts, SearchFilters(query="prod"))
        assert "staging" not in names(results)

    def test_matched_fields(self, contexts):
        results = search_contexts(contexts, SearchFilters(query="admin"))
        assert names(results) == ["prod", "production-east"]
        assert all(r.matched_fields == ["user"] for r in results)

    def test_field_weights(self):
        assert score_context(ContextInfo("x", "target", "u"), "target") == (80.0, ["cluster"])
        assert score_context(ContextInfo("x", "c", "target"), "target") == (80.0, ["user"])
        assert score_context(ContextInfo("x", "c", "u", "target"), "target") == (60.0, ["namespace"])
        assert score_context(ContextInfo("target", "c", "u"), "target") == (100.0, ["name"])

    def test_extra_fields_add_bonus(self):
        score, fields = score_context(ContextInfo("prod-1", "prod-cluster", "u"), "prod")
        assert fields == ["name", "cluster"]
        assert score == 80.0

    def test_score_capped_at_100(self):
        score, fields = score_context(ContextInfo("prod", "prod", "prod", "prod"), "prod")
        assert score == 100.0
        assert fields == ["name", "cluster", "user", "namespace"]

    def test_unset_namespace_is_not_default(self):
        results = search_contexts([ContextInfo("a", "c", "u", None)], SearchFilters(query="default"))
        assert results == []

    def test_ties_broken_by_name(self):
        ctxs = [ContextInfo("b-app", "c", "u"), ContextInfo("a-app", "c", "u")]
        results = search_contexts(ctxs, SearchFilters(query="app"))
        assert names(results) == ["a-app", "b-app"]
        assert results[0].relevance_score == results[1].relevance_score == 50.0

    def test_case_insensitive(self, contexts):
        assert names(search_contexts(contexts, SearchFilters(query="PROD"))) == ["prod", "production-east"]


class TestEmptyQuery:
    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_keeps_original_order(self, contexts, query):
        results = search_contexts(contexts, SearchFilters(query=query))
        assert names(results) == ["staging", "production-east", "prod"]
        assert {r.relevance_score for r in results} == {100.0}
        assert all(r.matched_fields == [] for r in results)

    def test_no_filters(self, contexts):
        assert len(search_contexts(contexts)) == 3


class TestHardFilters:
    def test_show_only_current(self, contexts):
        for query in ["", "prod", "admin"]:
            results = search_contexts(contexts, SearchFilters(query=query, show_only_current=True))
            assert names(results) == ["production-east"]

    def test_show_only_current_with_non_matching_query(self, contexts):
        assert search_contexts(contexts, SearchFilters(query="qa", show_only_current=True)) == []

    def test_show_only_with_namespace(self, contexts):
        results = search_contexts(contexts, SearchFilters(show_only_with_namespace=True))
        assert names(results) == ["staging", "prod"]

    def test_cluster_exact_match(self, contexts):
        assert names(search_contexts(contexts, SearchFilters(cluster="us-west"))) == ["prod"]
        assert search_contexts(contexts, SearchFilters(cluster="us")) == []

    def test_namespace_exact_match(self, contexts):
        assert names(search_contexts(contexts, SearchFilters(namespace="qa"))) == ["staging"]
        assert search_contexts(contexts, SearchFilters(namespace="pay")) == []

    def test_filters_combine(self, contexts):
        filters = SearchFilters(query="prod", cluster="us-west", show_only_with_namespace=True)
        assert names(search_contexts(contexts, filters)) == ["prod"]

    def test_input_not_modified(self, contexts):
        before = list(contexts)
        search_contexts(contexts, SearchFilters(query="prod", show_only_current=True))
        assert contexts == before


class TestHighlight:
    def test_empty_query_returns_input(self):
        assert highlight_matches("production", "") == "production"
        assert highlight_matches("production", "  ") == "production"
        assert highlight_matches("production", None) == "production"

    def test_wraps_match_preserving_case(self):
        assert highlight_matches("Prod-East", "prod") == "**Prod**-East"

    def test_all_occurrences(self):
        assert highlight_matches("prod-app-PROD", "prod") == "**prod**-app-**PROD**"

    def test_no_match_unchanged(self):
        assert highlight_matches("staging", "prod") == "staging"

    def test_regex_characters_are_literal(self):
        assert highlight_matches("a.b-axb", ".") == "a**.**b-axb"

    def test_custom_marker(self):
        assert highlight_matches("dev-cluster", "dev", marker="__") == "__dev__-cluster"


def test_filter_options(contexts):
    options = get_filter_options(contexts)
    assert options.clusters == ["eu-cluster", "us-east", "us-west"]
    assert options.namespaces == ["payments", "qa"]


def test_numeric_scalars_from_kubeconfig_are_searchable(tmp_path, monkeypatch):
    from core.context import get_contexts

    path = tmp_path / "numeric"
    path.write_text("contexts:\n- name: ci\n  context: {cluster: c, user: u, namespace: 2024}\n")
    monkeypatch.setenv("KUBECONFIG", str(path))
    results = search_contexts(get_contexts(), SearchFilters(query="202"))
    assert [(r.context.name, r.matched_fields) for r in results] == [("ci", ["namespace"])]
