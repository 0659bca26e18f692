"""
Grammatical analysis backend built on spaCy.

The language model is loaded lazily once per process and only read afterwards.
Helpers below take already-parsed ``Doc``/``Span`` objects; text is parsed once
at the entry points of the analyzers.
"""

import logging

import spacy
from spacy.language import Language
from spacy.tokens import Doc, Span

from ..config import SPACY_MODEL

logger = logging.getLogger(__name__)

WH_TAGS = {"WDT", "WP", "WP$", "WRB"}
QUESTION_STARTERS = {
    "do", "does", "did", "is", "are", "was", "were", "am", "can", "could", "will",
    "would", "should", "shall", "may", "might", "must", "have", "has", "had",
}
CONTRAST_CONJUNCTIONS = {"but", "however", "yet", "although", "while", "whereas", "instead"}
SUBJECT_POS = {"PRON", "PROPN", "NOUN"}
SUBJECT_DEPS = {"nsubj", "nsubjpass", "expl"}


class NLPManager:
    """Process-wide holder of the spaCy pipeline."""

    _instance: Language | None = None
    _model_name: str = SPACY_MODEL

    @classmethod
    def get_nlp(cls) -> Language:
        """
        Load the spaCy model on first access.

        Raises:
            RuntimeError: If the model is not installed and cannot be downloaded.
        """
        if cls._instance is None:
            logger.info(f"Loading spaCy model: {cls._model_name}")
            try:
                cls._instance = spacy.load(cls._model_name)
            except OSError:
                try:
                    from spacy.cli import download
                    download(cls._model_name)
                    cls._instance = spacy.load(cls._model_name)
                except Exception as e:
                    raise RuntimeError(
                        f"spaCy model '{cls._model_name}' not found and could not be downloaded. "
                        f"Install it with: python -m spacy download {cls._model_name}. Error: {e}"
                    ) from e
        return cls._instance


def parse(text: str) -> Doc:
    return NLPManager.get_nlp()(text)


def sentences(doc: Doc) -> list[Span]:
    """Non-empty sentence spans."""
    return [sent for sent in doc.sents if sent.text.strip()]


def is_question(span: Span) -> bool:
    """
    A sentence is a question if it ends with '?', or if it opens with a
    wh-word, or with an inverted auxiliary directly followed by its subject
    ("do you", "will the build"), and has no other closing punctuation.
    Imperatives such as "Don't touch prod" have no subject after the auxiliary.
    """
    text = span.text.strip()
    if text.endswith("?"):
        return True
    if not len(span) or text.endswith((".", "!")):
        return False
    first = span[0]
    if first.tag_ in WH_TAGS:
        return True
    if first.lower_ not in QUESTION_STARTERS or len(span) < 2:
        return False
    second = span[1]
    return second.pos_ in SUBJECT_POS or (second.pos_ == "DET" and second.head.dep_ in SUBJECT_DEPS)


def question_count(doc: Doc) -> int:
    return sum(1 for sent in sentences(doc) if is_question(sent))


def _tenses(tokens) -> set[str]:
    found = set()
    for token in tokens:
        if token.pos_ in ("VERB", "AUX"):
            found.update(token.morph.get("Tense"))
    return found


def has_past_tense(tokens) -> bool:
    return "Past" in _tenses(tokens)


def has_present_tense(tokens) -> bool:
    return "Pres" in _tenses(tokens)


def has_future_tense(tokens) -> bool:
    """Modal will/shall, or a "going to" + verb construction."""
    tokens = list(tokens)
    for i, token in enumerate(tokens):
        if token.tag_ == "MD" and token.lower_ in ("will", "shall", "'ll", "wo"):
            return True
        if (
            token.lower_ == "going"
            and i + 2 < len(tokens)
            and tokens[i + 1].lower_ == "to"
            and tokens[i + 2].pos_ in ("VERB", "AUX")
        ):
            return True
    return False


def has_negation(tokens) -> bool:
    return any(token.dep_ == "neg" for token in tokens)


def has_contrast_conjunction(tokens) -> bool:
    return any(token.lower_ in CONTRAST_CONJUNCTIONS for token in tokens)


def count_verbs(tokens) -> int:
    """Main verbs plus copulas/auxiliaries acting as the clause head."""
    return sum(
        1 for token in tokens
        if token.pos_ == "VERB" or (token.pos_ == "AUX" and token.dep_ == "ROOT")
    )


def count_adjectives(tokens) -> int:
    return sum(1 for token in tokens if token.pos_ == "ADJ")


def has_proper_noun(tokens) -> bool:
    return any(token.pos_ == "PROPN" for token in tokens)
