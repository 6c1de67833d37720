# src/e2e/test_segment_and_tokenize.py

import pytest

from textcheck.normalize import clamp_ngram, ngrams, segment_sentences, tokenize, tokenize_latin


def test_empty_and_whitespace_yield_no_sentences():
    assert segment_sentences("") == []
    assert segment_sentences("   \n\t ") == []


def test_splits_on_terminal_punctuation_before_capital_or_digit():
    text = "Hello world. This is it! Is it? 42 apples were sold."
    assert segment_sentences(text) == [
        "Hello world.", "This is it!", "Is it?", "42 apples were sold.",
    ]


def test_no_split_before_lowercase_or_inside_numbers():
    assert segment_sentences("Dr. smith went home.") == ["Dr. smith went home."]
    assert segment_sentences("Version 1.5 is out now.") == ["Version 1.5 is out now."]


def test_splits_before_brackets_and_opening_quotes():
    assert segment_sentences("First one. (Second one) ok.") == ["First one.", "(Second one) ok."]
    assert segment_sentences("He left. “Why?” she asked.") == ["He left.", "“Why?” she asked."]


def test_accented_capital_starts_a_sentence():
    assert segment_sentences("Il pleut. Échec total.") == ["Il pleut.", "Échec total."]


def test_sentinel_character_in_input_does_not_split():
    assert segment_sentences("left\x1eright side.") == ["left right side."]


def test_tokenize_lowercases_and_keeps_apostrophes_and_digits():
    assert tokenize("Don't STOP, 2 times!") == ["don't", "stop", "2", "times"]


def test_tokenize_unicode_letters():
    assert tokenize("Café naïve") == ["café", "naïve"]
    assert tokenize("Привет, мир") == ["привет", "мир"]


def test_latin_fallback_ignores_non_latin_scripts():
    assert tokenize_latin("Привет мир") == []
    assert tokenize_latin("Café naïve") == ["café", "naïve"]


@pytest.mark.parametrize("text", [
    "Hello, world_ok: it's 3 o'clock.",
    "The quick brown fox jumps over the lazy dog.",
    "x=1; y=22 -- (z) [w] {v} #tag @user 99%",
])
def test_both_tokenizer_paths_agree_on_ascii(text):
    assert tokenize(text) == tokenize_latin(text)


def test_ngrams_and_clamp():
    assert ngrams(["a", "b", "c", "d"], 3) == {("a", "b", "c"), ("b", "c", "d")}
    assert ngrams(["a", "b"], 3) == set()
    assert clamp_ngram(None) == 5
    assert clamp_ngram(1) == 3
    assert clamp_ngram(4) == 4
    assert clamp_ngram(10) == 7


def test_latin_mode_compiles_the_fallback_pattern():
    import textcheck.normalize as N
    pat = N._compile_word_pattern("latin")
    assert pat.pattern == N._WORD_LATIN
    assert pat.findall("привет café") == ["café"]


def test_unicode_pattern_failing_the_check_falls_back(monkeypatch, caplog):
    import logging
    import textcheck.normalize as N
    # ASCII-only letters cannot tokenize Cyrillic or Greek whole
    monkeypatch.setattr(N, "_WORD_UNICODE", r"[a-z']+")
    with caplog.at_level(logging.WARNING, logger="textcheck.normalize"):
        pat = N._compile_word_pattern("unicode")
    assert pat.pattern == N._WORD_LATIN
    assert any("Latin fallback" in r.getMessage() for r in caplog.records)


def test_unicode_mode_passes_the_check():
    import textcheck.normalize as N
    assert N._compile_word_pattern("unicode").pattern == N._WORD_UNICODE
