"""
Template suggester.

Every template in the catalog is scored against the content by adding up
independent bonuses: keyword overlap, signal/category pairings, grammatical
patterns, and a small table of curated per-template rules. Each bonus records a
reason so the caller can see why a template was suggested.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

from ..batch import BatchResult, run_batch
from ..schemas import SuggestTemplatesBatchInput, SuggestTemplatesInput, validate_input
from ..templates import Category, TemplateMetadata, get_template, template_metadata
from .content import ContentSignals, analyze_content

logger = logging.getLogger(__name__)

HIGH_CONFIDENCE = 5
MEDIUM_CONFIDENCE = 2
POPULARITY_FALLBACK = 0.5


@dataclass(frozen=True)
class TemplateRule:
    """A curated heuristic that applies to one specific template."""

    template_id: str
    predicate: Callable[[ContentSignals, str], bool]
    delta: float
    reason: str


def _matches(pattern: str) -> Callable[[ContentSignals, str], bool]:
    regex = re.compile(pattern)
    return lambda signals, lower: bool(regex.search(lower))


TEMPLATE_RULES: tuple[TemplateRule, ...] = (
    TemplateRule(
        "drake",
        lambda s, lower: s.preference or s.comparison or s.irony,
        3, "Strong preference/comparison pattern detected",
    ),
    TemplateRule(
        "drake",
        lambda s, lower: (s.has_past_tense and s.has_present_tense)
        or bool(re.search(r"\b(used to|years|before|now|but now|instead)\b", lower)),
        4, "Before/after temporal pattern detected",
    ),
    TemplateRule(
        "db", _matches(r"\b(distract\w*|tempt\w*|focus\w*)\b"),
        3, "Distraction pattern detected",
    ),
    TemplateRule(
        "fry", lambda s, lower: s.confusion and s.question,
        3, "Uncertainty question pattern detected",
    ),
    TemplateRule(
        "fry",
        lambda s, lower: s.has_negation and bool(re.search(r"\b(not sure|uncertain)\b", lower)),
        2, "Negative uncertainty expression",
    ),
    TemplateRule(
        "cmm", lambda s, lower: s.confident,
        3, "Strong opinion/hot take detected",
    ),
    TemplateRule(
        "pigeon", _matches(r"\b(is this|confus\w*|wrong|mistak\w*)\b"),
        3, "Misidentification pattern detected",
    ),
    TemplateRule(
        "astronaut", lambda s, lower: s.surprise and s.irony,
        3, "Ironic revelation pattern detected",
    ),
    TemplateRule(
        "gru", _matches(r"\b(plan\w*|expect\w*|turns? out|backfire\w*)\b"),
        3, "Failed plan pattern detected",
    ),
    TemplateRule(
        "woman-cat", _matches(r"\b(yell\w*|argu\w*|angry|confus\w*|don't understand)\b"),
        3, "Argument/confusion pattern detected",
    ),
)


@dataclass(frozen=True)
class TemplateSuggestion:
    template: str
    name: str
    reason: str
    confidence: str
    usage: str
    slots: int
    category: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SuggestionReport:
    suggestions: list[TemplateSuggestion]
    content_length: int
    word_count: int
    signals: ContentSignals

    def to_dict(self) -> dict[str, Any]:
        return {
            "suggestions": [suggestion.to_dict() for suggestion in self.suggestions],
            "count": len(self.suggestions),
            "analysis": {
                "content_length": self.content_length,
                "word_count": self.word_count,
                "nlp_analysis": self.signals.to_dict(),
            },
        }


def confidence_for(score: float) -> str:
    if score >= HIGH_CONFIDENCE:
        return "high"
    if score >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def score_template(
    meta: TemplateMetadata,
    content: str,
    signals: ContentSignals,
    rules: tuple[TemplateRule, ...] = TEMPLATE_RULES,
) -> tuple[float, list[str]]:
    """Score one template; returns the score and the reasons in evaluation order."""
    lower = content.lower()
    score = 0.0
    reasons: list[str] = []

    keyword_matches = [keyword for keyword in meta.keywords if keyword.lower() in lower]
    if keyword_matches:
        score += len(keyword_matches) * 3
        reasons.append(f"Keywords matched: {', '.join(keyword_matches)}")

    category = meta.category
    if signals.preference and category == Category.COMPARISONS:
        score += 2
        reasons.append("Content shows preference/comparison")
    if signals.confusion and category == Category.QUESTIONING:
        score += 2
        reasons.append("Content expresses confusion/uncertainty")
    if signals.surprise and any("surprise" in keyword for keyword in meta.keywords):
        score += 2
        reasons.append("Content shows surprise")
    if signals.awkward and category == Category.SOCIAL:
        score += 2
        reasons.append("Content describes awkward situation")
    if signals.confident and any("opinion" in keyword for keyword in meta.keywords):
        score += 2
        reasons.append("Content expresses strong opinion")
    if signals.success and category == Category.SUCCESS_FAIL:
        score += 2
        reasons.append("Content mentions success/achievement")
    if signals.failure and category == Category.SUCCESS_FAIL:
        score += 2
        reasons.append("Content mentions failure/mistake")

    if signals.has_past_tense and signals.has_present_tense and category == Category.COMPARISONS:
        score += 3
        reasons.append("Past/present tense contrast detected (before/after pattern)")
    if signals.has_contrast and category == Category.COMPARISONS:
        score += 2
        reasons.append("Grammatical contrast pattern detected")
    if signals.question_count > 0 and category == Category.QUESTIONING:
        score += 2 * signals.question_count
        reasons.append(f"{signals.question_count} question(s) found")
    if signals.has_negation and signals.question_count > 0:
        score += 1
        reasons.append("Negative question pattern (expressing doubt)")

    for rule in rules:
        if rule.template_id == meta.id and rule.predicate(signals, lower):
            score += rule.delta
            reasons.append(rule.reason)

    if score == 0 and meta.popularity == "high":
        score += POPULARITY_FALLBACK
        reasons.append("Popular template")

    return score, reasons


def suggest_templates(content: str, limit: int | None = None) -> SuggestionReport:
    """
    Rank catalog templates against ``content``.

    Raises:
        ValidationError: if content is empty or limit is outside 1-10.
    """
    args = validate_input(SuggestTemplatesInput, content=content, limit=limit)
    signals = analyze_content(args.content)

    scored = []
    for template_id, meta in template_metadata.items():
        score, reasons = score_template(meta, args.content, signals)
        if score > 0:
            scored.append((template_id, score, reasons))

    scored.sort(key=lambda item: item[1], reverse=True)

    suggestions = []
    for template_id, score, reasons in scored[:args.limit]:
        meta = template_metadata[template_id]
        template = get_template(template_id)
        suggestions.append(TemplateSuggestion(
            template=template_id,
            name=template.name,
            reason="; ".join(reasons),
            confidence=confidence_for(score),
            usage=meta.usage,
            slots=template.slots,
            category=meta.category.value,
            score=score,
        ))

    logger.debug(f"Suggested {len(suggestions)} of {len(scored)} scoring templates")
    return SuggestionReport(
        suggestions=suggestions,
        content_length=len(args.content),
        word_count=len(args.content.split()),
        signals=signals,
    )


def suggest_templates_batch(contents: list[str], limit: int | None = None) -> BatchResult:
    """Run several suggestion requests; one failing item never affects the others."""
    args = validate_input(SuggestTemplatesBatchInput, contents=contents, limit=limit)
    return run_batch(
        args.contents,
        lambda content: suggest_templates(content, args.limit).to_dict(),
    )
