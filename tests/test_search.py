"""Unit tests for the keyword index and search ranking."""

import pytest

from memegen_mcp.templates import get_keyword_index, template_metadata
from memegen_mcp.templates.search import KeywordIndex


@pytest.fixture
def index(search_metadata):
    return KeywordIndex(search_metadata)


class TestKeywordIndex:
    """Test index construction and lookups."""

    def test_keywords_are_lowercased_and_listed(self, index):
        assert "surprised" in index.all_keywords()
        assert index.all_keywords() == sorted(index.all_keywords())
        assert len(index) == 9

    def test_templates_for_keyword(self, index):
        assert index.templates_for_keyword("Surprise") == ["twist"]
        assert index.templates_for_keyword("missing") == []

    def test_every_catalog_keyword_is_indexed(self):
        index = get_keyword_index()
        for meta in template_metadata.values():
            for keyword in meta.keywords:
                assert meta.id in index.templates_for_keyword(keyword)


class TestSearch:
    """Test query matching and scoring."""

    def test_empty_query(self, index):
        assert index.search("") == []
        assert index.search("   ") == []

    def test_exact_hit_outranks_fuzzy_hit(self, index):
        results = index.search("surprised")

        assert [result.template_id for result in results] == ["shocked", "twist"]
        # shocked: exact + partial over 3; twist: fuzzy "surprise" over 5
        assert results[0].relevance == pytest.approx(3 / 3)
        assert results[1].relevance == pytest.approx(1 / 5)

    def test_fuzzy_match_in_both_directions(self, index):
        # "surprise" is contained in the keyword "surprised"
        ids = {result.template_id for result in index.search("surprise")}
        assert ids == {"shocked", "twist"}

        # the keyword "prefer" is contained in the term "preferred"
        assert [result.template_id for result in index.search("preferred")] == ["choice"]

    def test_usage_hits_add_to_score(self, index):
        with_usage = index.search("twist")[0]
        assert with_usage.template_id == "twist"
        # exact (2) + partial (1) + usage (0.5) over 5 keywords + 1
        assert with_usage.relevance == pytest.approx(3.5 / 5)

    def test_case_and_whitespace_insensitive(self, index):
        assert index.search("  SHOCKED ") == index.search("shocked")

    def test_no_match(self, index):
        assert index.search("zebra") == []

    def test_idempotent(self, index):
        assert index.search("surprise twist") == index.search("surprise twist")

    def test_results_sorted_descending(self):
        results = get_keyword_index().search("surprised confused choice")
        relevances = [result.relevance for result in results]
        assert relevances == sorted(relevances, reverse=True)
        assert all(relevance > 0 for relevance in relevances)

    def test_adding_a_matching_term_never_lowers_relevance(self, index):
        before = {result.template_id: result.relevance for result in index.search("choice")}
        after = {result.template_id: result.relevance for result in index.search("choice better")}
        assert after["choice"] >= before["choice"]
