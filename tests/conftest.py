"""Shared fixtures for the meme tool tests."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from memegen_mcp.analysis.content import ContentSignals
from memegen_mcp.analysis.nlp import NLPManager
from memegen_mcp.templates.metadata import Category, TemplateMetadata

NEUTRAL_SIGNALS = ContentSignals(
    surprise=False,
    confusion=False,
    irony=False,
    preference=False,
    comparison=False,
    question=False,
    success=False,
    failure=False,
    awkward=False,
    confident=False,
    has_past_tense=False,
    has_present_tense=False,
    has_future_tense=False,
    has_negation=False,
    has_contrast=False,
    question_count=0,
    exclamation_count=0,
    sentence_count=1,
)


@pytest.fixture(scope="session")
def nlp_model():
    """The spaCy pipeline; tests that parse text are skipped without it."""
    try:
        return NLPManager.get_nlp()
    except RuntimeError as e:
        pytest.skip(f"spaCy model unavailable: {e}")


@pytest.fixture
def make_signals():
    """Build a signal bundle with everything off except the given fields."""
    def _make(**overrides):
        return replace(NEUTRAL_SIGNALS, **overrides)
    return _make


@pytest.fixture
def search_metadata():
    """A small metadata table with known keywords for search tests."""
    entries = [
        TemplateMetadata(
            id="shocked",
            usage="Reacting to something shocking",
            category=Category.REACTIONS,
            keywords=("surprised", "shocked"),
            popularity="high",
        ),
        TemplateMetadata(
            id="twist",
            usage="A plot twist nobody saw coming",
            category=Category.REACTIONS,
            keywords=("surprise", "twist", "reveal", "unexpected"),
            popularity="medium",
        ),
        TemplateMetadata(
            id="choice",
            usage="Picking one option over another",
            category=Category.COMPARISONS,
            keywords=("choice", "prefer", "better"),
        ),
    ]
    return {meta.id: meta for meta in entries}


def make_response(status_code=200, content=b"", text="", headers=None, reason="OK"):
    """A stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.content = content
    response.text = text
    response.headers = headers or {}
    return response
