"""
Quote extraction: finds short, punchy, meme-worthy lines in longer text.

Sentences are scored on length, position, punctuation patterns, emotional
vocabulary, and grammatical features. Word n-grams from the whole text are
added as low-scoring filler candidates, then everything is deduplicated
case-insensitively and ranked.
"""

import logging
import math
import re
from dataclasses import asdict, dataclass
from typing import Any

from spacy.tokens import Span

from ..schemas import ExtractQuotesInput, validate_input
from . import nlp

logger = logging.getLogger(__name__)

NGRAM_SIZES = (3, 5)
VERY_SHORT_NGRAM = 40

CONTRAST_RE = re.compile(r"\b(but|however|yet|although|while|whereas|instead)\b", re.IGNORECASE)
DIRECT_STATEMENT_RE = re.compile(r"^(i |you |we |they |this |that )", re.IGNORECASE)
MEME_WORDS_RE = re.compile(r"\b(literally|actually|basically|obviously|clearly)\b", re.IGNORECASE)
IMPERATIVE_RE = re.compile(r"^(stop|start|never|always|don't|do)\b", re.IGNORECASE)
QUOTE_MARKS = ('"', "'", "“", "”")

EMOTIONAL_WORDS = (
    "love", "hate", "amazing", "terrible", "shocking",
    "surprising", "ironic", "ridiculous", "absurd", "perfect",
)


@dataclass(frozen=True)
class ExtractedQuote:
    text: str
    score: float
    reason: str
    position: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QuoteReport:
    quotes: list[ExtractedQuote]
    content_length: int
    sentence_count: int
    average_sentence_length: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "quotes": [quote.to_dict() for quote in self.quotes],
            "count": len(self.quotes),
            "analysis": {
                "content_length": self.content_length,
                "sentence_count": self.sentence_count,
                "average_sentence_length": self.average_sentence_length,
            },
        }


def classify_position(index: int, total: int) -> str:
    relative = index / total
    if relative < 0.33:
        return "beginning"
    if relative > 0.66:
        return "end"
    return "middle"


def score_sentence(sentence: Span, index: int, total: int, max_length: int) -> tuple[float, list[str]]:
    """Score one sentence for meme-worthiness."""
    text = sentence.text.strip()
    lower = text.lower()
    length = len(text)
    score = 0.0
    reasons: list[str] = []

    if length <= max_length:
        if length <= 50:
            score += 5
            reasons.append("Very concise")
        elif length <= 80:
            score += 3
            reasons.append("Concise")
        else:
            score += 1
            reasons.append("Acceptable length")
    else:
        score -= 2

    relative = index / total
    if index == 0:
        score += 2
        reasons.append("Opening hook")
    elif index == total - 1:
        score += 3
        reasons.append("Closing punchline")
    elif relative < 0.2:
        score += 1
        reasons.append("Near beginning")
    elif relative > 0.8:
        score += 2
        reasons.append("Near end")

    if "?" in text:
        score += 2
        reasons.append("Question")
    if "!" in text:
        score += 1
        reasons.append("Exclamation")
    if CONTRAST_RE.search(lower):
        score += 2
        reasons.append("Contains contrast")
    if DIRECT_STATEMENT_RE.match(text):
        score += 1
        reasons.append("Direct statement")
    if any(mark in text for mark in QUOTE_MARKS):
        score += 1
        reasons.append("Contains quote")
    if any(word in lower for word in EMOTIONAL_WORDS):
        score += 2
        reasons.append("Emotional language")
    if MEME_WORDS_RE.search(lower):
        score += 1
        reasons.append("Meme-friendly language")
    if IMPERATIVE_RE.match(lower):
        score += 1
        reasons.append("Imperative/actionable")

    verbs = nlp.count_verbs(sentence)
    if verbs:
        score += verbs * 0.5
        reasons.append(f"{verbs} verb(s)")
    adjectives = nlp.count_adjectives(sentence)
    if adjectives:
        score += adjectives * 0.3
        reasons.append(f"{adjectives} adjective(s)")
    if nlp.has_proper_noun(sentence):
        score += 1
        reasons.append("Contains proper noun(s)")
    if nlp.is_question(sentence):
        score += 2
        reasons.append("Grammatical question")
    if nlp.has_negation(sentence):
        score += 1
        reasons.append("Contains negation")

    return score, reasons


def extract_ngrams(text: str, n: int, max_length: int) -> list[str]:
    words = text.split()
    ngrams = []
    for i in range(len(words) - n + 1):
        ngram = " ".join(words[i:i + n])
        if len(ngram) <= max_length:
            ngrams.append(ngram)
    return ngrams


def _ngram_quote(ngram: str) -> ExtractedQuote:
    score = 1
    reasons = ["N-gram extract"]
    if len(ngram) <= VERY_SHORT_NGRAM:
        score += 2
        reasons.append("Very short")
    return ExtractedQuote(text=ngram, score=score, reason=", ".join(reasons), position="middle")


def extract_key_quotes(content: str, max_length: int | None = None, limit: int | None = None) -> QuoteReport:
    """
    Extract the most meme-worthy quotes from ``content``.

    Raises:
        ValidationError: if content is empty, max_length is outside 10-200,
            or limit is outside 1-20.
    """
    args = validate_input(ExtractQuotesInput, content=content, max_length=max_length, limit=limit)
    doc = nlp.parse(args.content)
    sentences = nlp.sentences(doc)
    total = len(sentences)

    candidates: list[ExtractedQuote] = []
    for index, sentence in enumerate(sentences):
        score, reasons = score_sentence(sentence, index, total, args.max_length)
        text = sentence.text.strip()
        if score > 0 and len(text) <= args.max_length:
            candidates.append(ExtractedQuote(
                text=text,
                score=score,
                reason=", ".join(reasons),
                position=classify_position(index, total),
            ))

    for n in NGRAM_SIZES:
        candidates.extend(_ngram_quote(ngram) for ngram in extract_ngrams(args.content, n, args.max_length))

    unique: dict[str, ExtractedQuote] = {}
    for candidate in candidates:
        unique.setdefault(candidate.text.lower(), candidate)

    quotes = sorted(unique.values(), key=lambda quote: quote.score, reverse=True)[:args.limit]

    lengths = [len(sentence.text.strip()) for sentence in sentences]
    average = sum(lengths) / total if total else 0
    logger.debug(f"Extracted {len(quotes)} quotes from {total} sentences")
    return QuoteReport(
        quotes=quotes,
        content_length=len(args.content),
        sentence_count=total,
        average_sentence_length=math.floor(average + 0.5),
    )
