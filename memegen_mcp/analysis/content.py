"""
Content analysis: turns free-form text into a bundle of lexical and
grammatical signals consumed by the template suggester.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any

from . import nlp

NEGATION_RE = re.compile(r"\b(not|no|never)\b|n't\b", re.IGNORECASE)
TRANSITION_RE = re.compile(r"\b(but now|used to|before|after)\b", re.IGNORECASE)

SURPRISE_RE = re.compile(r"\b(shock\w*|surpris\w*|unexpected\w*|didn't expect|who knew|turns out)\b")
UNCERTAINTY_RE = re.compile(r"\b(confus\w*|not sure|uncertain|unclear|don't understand|what|huh)\b")
IRONY_RE = re.compile(r"\b(ironic\w*|actually|turns out|plot twist|wouldn't you know)\b")
PREFERENCE_RE = re.compile(r"\b(prefer\w*|rather|instead of|better than|vs|versus|reject\w*|choose|chose)\b")
COMPARISON_RE = re.compile(
    r"\b(vs|versus|compared to|rather than|instead of|while|whereas|old way|new way)\b"
)
SUCCESS_RE = re.compile(r"\b(success\w*|win|wins|won|achiev\w*|accomplish\w*|nailed|perfect)\b")
FAILURE_RE = re.compile(r"\b(fail\w*|mistake\w*|wrong|error\w*|oops|broke\w*)\b")
AWKWARD_RE = re.compile(r"\b(awkward\w*|uncomfortable|cringe\w*|embarrass\w*)\b")
CONFIDENT_RE = re.compile(r"\b(obviously|clearly|of course|definitely|change my mind)\b")


@dataclass(frozen=True)
class ContentSignals:
    # Sentiment
    surprise: bool
    confusion: bool
    irony: bool
    preference: bool
    comparison: bool
    question: bool
    success: bool
    failure: bool
    awkward: bool
    confident: bool

    # Grammar
    has_past_tense: bool
    has_present_tense: bool
    has_future_tense: bool
    has_negation: bool
    has_contrast: bool

    # Structure
    question_count: int
    exclamation_count: int
    sentence_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def analyze_content(text: str) -> ContentSignals:
    """Analyze text for sentiment flags and grammatical structure."""
    doc = nlp.parse(text)
    lower = text.lower()

    question_count = nlp.question_count(doc)
    has_negation = nlp.has_negation(doc) or bool(NEGATION_RE.search(text))
    has_contrast = nlp.has_contrast_conjunction(doc) or bool(TRANSITION_RE.search(lower))

    return ContentSignals(
        surprise=bool(SURPRISE_RE.search(lower)),
        confusion=question_count > 0 and bool(UNCERTAINTY_RE.search(lower)),
        irony=has_contrast and bool(IRONY_RE.search(lower)),
        preference=bool(PREFERENCE_RE.search(lower)),
        comparison=has_contrast or bool(COMPARISON_RE.search(lower)),
        question=question_count > 0,
        success=bool(SUCCESS_RE.search(lower)),
        failure=bool(FAILURE_RE.search(lower)),
        awkward=bool(AWKWARD_RE.search(lower)),
        confident=bool(CONFIDENT_RE.search(lower)),
        has_past_tense=nlp.has_past_tense(doc),
        has_present_tense=nlp.has_present_tense(doc),
        has_future_tense=nlp.has_future_tense(doc),
        has_negation=has_negation,
        has_contrast=has_contrast,
        question_count=question_count,
        exclamation_count=text.count("!"),
        sentence_count=len(nlp.sentences(doc)),
    )
