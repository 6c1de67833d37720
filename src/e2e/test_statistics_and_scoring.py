# src/e2e/test_statistics_and_scoring.py

import math
import pytest

from textcheck.normalize import tokenize
from textcheck.scoring import (
    SentenceFeatures, char_entropy, extract_features, round_half_up, score_sentence,
)
from textcheck.stats import DocumentStatistics


def test_bigram_tables_span_the_whole_document():
    st = DocumentStatistics.build([["a", "b", "a", "b"], ["a", "b"]])
    # flattened: a b a b a b -> (a,b) x3, (b,a) x2
    assert st.bigrams[("a", "b")] == 3
    assert st.bigrams[("b", "a")] == 2
    assert st.unigrams["a"] == 3
    assert st.repeated_bigrams == 2
    assert st.repeated_bigram_ratio == 1.0
    assert st.mean_length == 3.0
    assert st.std_length == pytest.approx(1.0)


def test_variance_floor_for_single_and_empty_documents():
    single = DocumentStatistics.build([["x", "y"]])
    assert single.repeated_bigram_ratio == 0.0
    assert single.std_length == pytest.approx(math.sqrt(0.0001))

    empty = DocumentStatistics.build([])
    assert empty.mean_length == 0.0
    assert empty.repeated_bigram_ratio == 0.0
    assert empty.std_length > 0


def test_sentence_repetition_fraction():
    st = DocumentStatistics.build([["a", "b", "a", "b"], ["a", "b"]])
    assert st.sentence_repetition(["a", "b", "c"]) == 0.5
    assert st.sentence_repetition(["a"]) == 0.0


def test_char_entropy_and_rounding():
    assert char_entropy("") == 0.0
    assert char_entropy("aaaa") == 0.0
    assert char_entropy("ab") == pytest.approx(1.0)
    assert char_entropy("abcd") == pytest.approx(2.0)
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2


def test_weights_sum_to_one_and_digit_penalty():
    ones = SentenceFeatures(1, 1, 1, 1, 1, 1, 1, 1, 0)
    assert ones.weighted_sum() == pytest.approx(1.0)
    assert ones.score() == pytest.approx(1.0)
    penalized = SentenceFeatures(1, 1, 1, 1, 1, 1, 1, 1, 1)
    assert penalized.score() == pytest.approx(0.92)
    zeros = SentenceFeatures(0, 0, 0, 0, 0, 0, 0, 0, 1)
    assert zeros.score() == 0.0


def test_feature_extraction_for_a_plain_sentence():
    text = "The cat sat on the mat."
    toks = tokenize(text)
    st = DocumentStatistics.build([toks])
    f = extract_features(text, toks, st)
    assert f.burstiness == 1.0
    assert f.type_token == pytest.approx(1 - 5 / 6)
    assert f.stopword_mid == pytest.approx(1 - 0.05 / 0.45)
    assert f.word_length == 0.0
    assert f.punctuation == 0.0
    assert f.digit_density == 0.0
    assert f.doc_repetition == 0.0
    assert f.sentence_repetition == 0.0
    assert 0.0 <= f.char_entropy <= 1.0


def test_punctuation_and_digit_features():
    st = DocumentStatistics.build([["one", "two", "three"]])
    f = extract_features("one, two; three", ["one", "two", "three"], st)
    assert f.punctuation == pytest.approx(0.25)

    text = "In 2023 we sold 123456 units"
    f = extract_features(text, tokenize(text), DocumentStatistics.build([tokenize(text)]))
    assert f.digit_density == 1.0


def test_score_sentence_is_an_int_percentage():
    for text in ["a", "!!!", "The cat sat on the mat.", "Numbers 1 2 3 4 5 6 7 8 9."]:
        toks = tokenize(text)
        ai = score_sentence(text, toks, DocumentStatistics.build([toks]))
        assert isinstance(ai, int)
        assert 0 <= ai <= 100
