"""Unit tests for the catalog discovery tools."""

import pytest

from memegen_mcp.discovery import browse_categories, get_template_details, search_by_category, search_by_keyword
from memegen_mcp.errors import NotFoundError, ValidationError

POPULARITY_RANK = {"high": 0, "medium": 1, "low": 2, None: 3}


class TestBrowseCategories:

    def test_lists_all_categories(self):
        result = browse_categories()

        assert len(result["categories"]) == 9
        assert result["total_templates"] == 90
        assert {"id", "name", "description", "count"} <= set(result["categories"][0])


class TestSearchByCategory:

    def test_sorted_by_popularity_then_name(self):
        result = search_by_category("comparisons")
        keys = [(POPULARITY_RANK[entry["popularity"]], entry["name"].lower()) for entry in result["templates"]]

        assert result["category"] == "comparisons"
        assert result["count"] == len(result["templates"])
        assert keys == sorted(keys)
        assert "drake" in [entry["id"] for entry in result["templates"]]

    def test_unknown_category(self):
        with pytest.raises(ValidationError) as exc_info:
            search_by_category("memes")
        assert exc_info.value.field == "category"


class TestSearchByKeyword:

    def test_results_are_enriched_and_rounded(self):
        result = search_by_keyword("surprised", limit=3)

        assert 0 < result["count"] <= 3
        for hit in result["results"]:
            assert hit["relevance"] == round(hit["relevance"], 2)
            assert {"id", "name", "usage", "slots", "category"} <= set(hit)

    def test_blank_query(self):
        with pytest.raises(ValidationError):
            search_by_keyword("   ")

    def test_non_positive_limit(self):
        with pytest.raises(ValidationError):
            search_by_keyword("surprised", limit=0)


class TestGetTemplateDetails:

    def test_details(self):
        result = get_template_details(["drake", "db"])

        assert result["count"] == 2
        drake = result["templates"][0]
        assert drake["slots"] == 2
        assert drake["category"] == "comparisons"
        assert "prefer" in drake["keywords"]

    def test_lists_every_unknown_id(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_template_details(["drake", "ghost", "phantom"])
        assert "ghost" in str(exc_info.value)
        assert "phantom" in str(exc_info.value)

    def test_empty_list(self):
        with pytest.raises(ValidationError):
            get_template_details([])
