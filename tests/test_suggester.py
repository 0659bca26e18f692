"""Unit tests for template scoring and suggestion ranking."""

import pytest

from memegen_mcp.analysis.suggester import (
    TemplateRule,
    confidence_for,
    score_template,
    suggest_templates,
    suggest_templates_batch,
)
from memegen_mcp.errors import ValidationError
from memegen_mcp.templates import get_metadata


class TestConfidence:
    """Test confidence buckets."""

    @pytest.mark.parametrize("score,expected", [
        (12, "high"), (5, "high"), (4.9, "medium"), (2, "medium"), (1.9, "low"), (0.5, "low"),
    ])
    def test_buckets(self, score, expected):
        assert confidence_for(score) == expected


class TestScoreTemplate:
    """Test the additive scoring of a single template."""

    def test_keywords_signals_and_rules_add_up(self, make_signals):
        score, reasons = score_template(get_metadata("drake"), "I prefer tabs", make_signals(preference=True))

        assert score == 8
        assert reasons == [
            "Keywords matched: prefer",
            "Content shows preference/comparison",
            "Strong preference/comparison pattern detected",
        ]

    def test_questions_scale_with_count(self, make_signals):
        signals = make_signals(question=True, question_count=2)

        score, reasons = score_template(get_metadata("keanu"), "hmm", signals)

        assert score == 4
        assert reasons == ["2 question(s) found"]

    def test_negative_question_applies_to_any_category(self, make_signals):
        signals = make_signals(question=True, question_count=1, has_negation=True)

        score, reasons = score_template(get_metadata("sparta"), "hmm", signals)

        assert score == 1
        assert reasons == ["Negative question pattern (expressing doubt)"]

    def test_tense_contrast_only_for_comparisons(self, make_signals):
        signals = make_signals(has_past_tense=True, has_present_tense=True)

        assert score_template(get_metadata("pooh"), "zzz", signals)[0] == 3
        assert score_template(get_metadata("sparta"), "zzz", signals)[0] == 0

    def test_popularity_fallback_only_when_nothing_matched(self, make_signals):
        assert score_template(get_metadata("wonka"), "zzz", make_signals()) == (0.5, ["Popular template"])
        assert score_template(get_metadata("glasses"), "zzz", make_signals())[0] == 0

    def test_custom_rule_table(self, make_signals):
        rules = (TemplateRule("sparta", lambda signals, lower: "shout" in lower, 7, "Shouting"),)

        score, reasons = score_template(get_metadata("sparta"), "I shout", make_signals(), rules)

        assert score == 7
        assert reasons == ["Shouting"]


class TestSuggestTemplatesValidation:
    """Test input bounds; these fail before any text is parsed."""

    @pytest.mark.parametrize("limit", [0, 11, -1])
    def test_limit_out_of_range(self, limit):
        with pytest.raises(ValidationError) as exc_info:
            suggest_templates("some content", limit)
        assert exc_info.value.field == "limit"

    def test_empty_content(self):
        with pytest.raises(ValidationError):
            suggest_templates("")


@pytest.mark.usefixtures("nlp_model")
class TestSuggestTemplates:
    """End-to-end suggestions over the real catalog."""

    def test_preference_with_before_after(self):
        report = suggest_templates("I used to write code by hand, but now I prefer AI")
        top = report.suggestions[0]

        assert top.template == "drake"
        assert top.confidence == "high"
        assert "Before/after temporal pattern detected" in top.reason
        assert report.signals.preference

    def test_tense_contrast_surfaces_a_comparison_template(self):
        report = suggest_templates("I used to use manual deployments, but now I use a CI/CD pipeline.")
        top_three = report.suggestions[:3]

        assert any(
            suggestion.category == "comparisons" and "Past/present tense contrast" in suggestion.reason
            for suggestion in top_three
        )
        assert top_three[0].template == "drake"

    def test_misidentification(self):
        report = suggest_templates("Is this a feature? No, it's clearly a bug.")

        assert report.suggestions[0].template == "pigeon"
        assert "Misidentification pattern detected" in report.suggestions[0].reason
        characters = [s.score for s in report.suggestions if s.category == "characters"]
        assert all(report.suggestions[0].score > score for score in characters)

    def test_limit_and_ordering(self):
        report = suggest_templates("I prefer winning over failing, obviously", limit=3)
        scores = [suggestion.score for suggestion in report.suggestions]

        assert len(report.suggestions) == 3
        assert scores == sorted(scores, reverse=True)
        assert all(score > 0 for score in scores)

    def test_report_shape(self):
        data = suggest_templates("Why does this keep happening?", limit=2).to_dict()

        assert data["count"] == len(data["suggestions"])
        assert data["analysis"]["word_count"] == 5
        assert data["analysis"]["nlp_analysis"]["question_count"] == 1
        assert set(data["suggestions"][0]) >= {"template", "name", "reason", "confidence", "usage", "slots"}

    def test_batch_isolates_bad_items(self):
        batch = suggest_templates_batch(["I prefer tea", ""], limit=2)

        assert batch.succeeded == 1
        assert batch.results[1].error["kind"] == "validation_error"
