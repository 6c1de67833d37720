# src/e2e/test_analyze_report.py

import pytest

from textcheck import analyze
from textcheck.models import SentenceScore
from textcheck.report import aggregate

VARIED = [
    "Morning fog drifted slowly across the quiet harbor.",
    "Fishermen repaired torn nets beside weathered wooden boats.",
    "A stray dog barked twice.",
    "Children raced bicycles along the narrow cobblestone street near the old bakery.",
    "Rain began falling.",
    "Merchants opened colorful stalls selling spices and bright ceramic bowls.",
    "The lighthouse keeper climbed his spiral staircase.",
    "Seagulls circled overhead.",
    "An elderly couple shared warm bread on a bench facing the restless grey water.",
    "Thunder rumbled far away.",
    "Tourists photographed crumbling stone walls built centuries ago by forgotten kings.",
    "Bells rang at noon.",
    "A young painter captured sunlight glinting off distant copper rooftops.",
    "Waves crashed against jagged rocks.",
    "Shopkeepers swept dusty doorsteps while humming old folk songs from their childhood.",
    "Evening arrived quietly.",
    "Lanterns flickered inside small taverns where sailors traded exaggerated stories.",
    "Cats slept on warm windowsills.",
    "Somewhere a violin played a melancholy tune that drifted through open shutters.",
    "Night settled over the town.",
]

COPIED = "Alpha beta gamma delta epsilon zeta eta theta."


def test_empty_text_returns_zero_report():
    r = analyze("")
    assert r.ai_score == 0 and r.plagiarism == 0 and r.sentences == []
    assert r.to_dict() == {"aiScore": 0, "plagiarism": 0, "sentences": []}
    assert analyze("   \n ").to_dict() == {"aiScore": 0, "plagiarism": 0, "sentences": []}


def test_repeated_sentence_is_an_internal_duplicate():
    s = "The quick brown fox jumps over the lazy dog."
    r = analyze(f"{s} {s}")
    assert len(r.sentences) == 2
    for sc in r.sentences:
        assert sc.plagiarism >= 95
        assert sc.source is None


def test_sentence_copied_from_corpus_names_its_source():
    text = f"{COPIED} Something entirely different here now."
    r = analyze(text, corpus=[{"name": "ref.txt", "text": COPIED.lower()}])
    first, second = r.sentences
    assert first.plagiarism >= 90
    assert first.source == "ref.txt"
    assert second.source is None


def test_unrelated_corpus_document_leaves_source_unset():
    r = analyze(COPIED, corpus=[{"name": "other.txt", "text": "Nothing in common with that line at all."}])
    assert r.sentences[0].source is None
    assert r.sentences[0].plagiarism == 0
    assert "source" not in r.to_dict()["sentences"][0]


def test_ngram_option_is_clamped():
    # a 3-token sentence only fingerprints at n=3; asking for n=1 clamps to 3
    r = analyze("One two three. One two three.", ngram=1)
    assert all(s.plagiarism == 100 for s in r.sentences)
    r = analyze("One two three. One two three.", ngram=99)
    assert all(s.plagiarism == 0 for s in r.sentences)


def test_plagiarism_is_95th_percentile_not_mean():
    scores = [SentenceScore(sentence=f"s{i}", ai=50, plagiarism=v) for i, v in enumerate(range(0, 101, 10))]
    r = aggregate(scores)
    assert r.plagiarism == 90
    assert r.ai_score == 50


def test_ai_score_mean_rounds_half_up():
    r = aggregate([SentenceScore("a", 0, 0), SentenceScore("b", 1, 0)])
    assert r.ai_score == 1


@pytest.mark.parametrize("text", [
    "a",
    "!!!",
    "1. 2. 3.",
    "Ünïcödé text — with dashes… and “quotes”. Второе предложение здесь!",
    " ".join(VARIED),
    "word " * 300,
])
def test_all_scores_within_bounds(text):
    r = analyze(text, corpus=[{"name": "c.txt", "text": text}])
    assert 0 <= r.ai_score <= 100
    assert 0 <= r.plagiarism <= 100
    for s in r.sentences:
        assert 0 <= s.ai <= 100
        assert 0 <= s.plagiarism <= 100


def test_repetitive_document_scores_higher_than_varied():
    repetitive = analyze(" ".join([VARIED[0]] * 20))
    varied = analyze(" ".join(VARIED))
    assert len(repetitive.sentences) == 20
    assert len(varied.sentences) == 20

    assert repetitive.plagiarism > varied.plagiarism

    def mean_ai(r):
        return sum(s.ai for s in r.sentences) / len(r.sentences)

    assert mean_ai(repetitive) > mean_ai(varied)


def test_sentence_order_is_preserved():
    r = analyze(" ".join(VARIED[:5]))
    assert [s.sentence for s in r.sentences] == VARIED[:5]
