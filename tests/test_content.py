"""Unit tests for content signal analysis (requires the spaCy model)."""

import pytest
from spacy.tokens import Doc
from spacy.vocab import Vocab

from memegen_mcp.analysis import analyze_content
from memegen_mcp.analysis import nlp


def _sentence(words, pos, heads=None, deps=None):
    """A hand-tagged sentence span, independent of any trained model."""
    return Doc(Vocab(), words=words, pos=pos, heads=heads, deps=deps)[:]


@pytest.mark.usefixtures("nlp_model")
class TestAnalyzeContent:

    def test_surprise_and_exclamations(self):
        signals = analyze_content("I was shocked! Totally unexpected!")

        assert signals.surprise
        assert signals.exclamation_count == 2
        assert signals.has_past_tense

    def test_confusion_needs_a_question(self):
        assert analyze_content("I am so confused. What is happening?").confusion
        assert not analyze_content("I am so confused.").confusion

    def test_before_after_contrast(self):
        signals = analyze_content("I used to write tests, but now I just pray.")

        assert signals.has_contrast
        assert signals.comparison
        assert signals.has_past_tense
        assert signals.has_present_tense

    def test_negation(self):
        assert analyze_content("This is not fine.").has_negation
        assert analyze_content("It doesn't work.").has_negation
        assert not analyze_content("This is fine.").has_negation

    def test_future_tense(self):
        assert analyze_content("We will ship it tomorrow.").has_future_tense
        assert analyze_content("I am going to fix it.").has_future_tense
        assert not analyze_content("We shipped it yesterday.").has_future_tense

    def test_questions_counted_per_sentence(self):
        signals = analyze_content("Why is this broken? Who wrote this? It works now.")

        assert signals.question
        assert signals.question_count == 2
        assert signals.sentence_count == 3

    def test_keyword_flags(self):
        signals = analyze_content("Obviously we won, no mistakes. So awkward.")

        assert signals.confident
        assert signals.success
        assert signals.failure
        assert signals.awkward

    def test_deterministic(self):
        text = "I prefer cats over dogs, but my landlord does not."
        assert analyze_content(text) == analyze_content(text)


@pytest.mark.usefixtures("nlp_model")
class TestQuestionDetection:

    def test_question_mark(self):
        doc = nlp.parse("Is it done?")
        assert nlp.is_question(nlp.sentences(doc)[0])

    def test_wh_word_without_punctuation(self):
        doc = nlp.parse("what is going on")
        assert nlp.is_question(nlp.sentences(doc)[0])

    def test_statement(self):
        doc = nlp.parse("What a day.")
        assert not nlp.is_question(nlp.sentences(doc)[0])


class TestInvertedAuxiliary:
    """Unpunctuated sentences opening with an auxiliary need a subject next to it."""

    def test_auxiliary_then_pronoun(self):
        assert nlp.is_question(_sentence(["Do", "you", "know"], ["AUX", "PRON", "VERB"]))

    def test_auxiliary_then_determiner_of_subject(self):
        sentence = _sentence(
            ["Will", "the", "build", "pass"],
            ["AUX", "DET", "NOUN", "VERB"],
            heads=[3, 2, 3, 3],
            deps=["aux", "det", "nsubj", "ROOT"],
        )
        assert nlp.is_question(sentence)

    def test_negative_imperative(self):
        assert not nlp.is_question(_sentence(["Do", "n't", "touch", "prod"], ["AUX", "PART", "VERB", "NOUN"]))

    def test_imperative_with_object(self):
        sentence = _sentence(
            ["Do", "the", "dishes"],
            ["VERB", "DET", "NOUN"],
            heads=[0, 2, 0],
            deps=["ROOT", "det", "dobj"],
        )
        assert not nlp.is_question(sentence)


@pytest.mark.usefixtures("nlp_model")
class TestNLPManager:

    def test_model_loaded_once(self):
        assert nlp.NLPManager.get_nlp() is nlp.NLPManager.get_nlp()

    def test_imperatives_do_not_count_as_questions(self):
        assert analyze_content("Don't touch prod").question_count == 0
