from __future__ import annotations
import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from . import config as CFG
from .stats import DocumentStatistics

# /* ~~~ punctuation that human writers scatter more than models do ~~~ */
_PUNCT = re.compile(r"[,:;\-—()\[\]“”\"'…]")
_DIGIT = re.compile(r"[0-9]")


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def round_half_up(x: float) -> int:
    """Round .5 away from zero for non-negative x (JS Math.round semantics)."""
    return int(math.floor(x + 0.5))


def char_entropy(s: str) -> float:
    """Shannon entropy of `s` in bits per character."""
    if not s:
        return 0.0
    n = len(s)
    return -sum((c / n) * math.log2(c / n) for c in Counter(s).values())


@dataclass(frozen=True)
class SentenceFeatures:
    """Nine per-sentence features, each normalized to [0, 1]."""
    burstiness: float
    type_token: float
    stopword_mid: float
    word_length: float
    char_entropy: float
    doc_repetition: float
    sentence_repetition: float
    punctuation: float
    digit_density: float

    def weighted_sum(self) -> float:
        return (
            CFG.W_BURSTINESS * self.burstiness
            + CFG.W_TYPE_TOKEN * self.type_token
            + CFG.W_STOPWORD_MID * self.stopword_mid
            + CFG.W_WORD_LENGTH * self.word_length
            + CFG.W_CHAR_ENTROPY * self.char_entropy
            + CFG.W_DOC_REPETITION * self.doc_repetition
            + CFG.W_SENTENCE_REPETITION * self.sentence_repetition
            + CFG.W_PUNCTUATION * self.punctuation
        )

    def score(self) -> float:
        """Weighted sum minus the digit-density penalty, clamped to [0, 1]."""
        return _clamp01(max(0.0, self.weighted_sum() - CFG.DIGIT_PENALTY * self.digit_density))


def extract_features(text: str, tokens: Sequence[str], stats: DocumentStatistics) -> SentenceFeatures:
    n = len(tokens)
    if n:
        ttr = len(set(tokens)) / n
        stop_ratio = sum(1 for t in tokens if t in CFG.STOPWORDS) / n
        avg_len = sum(len(t) for t in tokens) / n
    else:
        ttr = stop_ratio = avg_len = 0.0

    deviation = abs(n - stats.mean_length) / stats.std_length
    entropy = char_entropy(text)

    return SentenceFeatures(
        burstiness=1.0 - min(1.0, deviation),
        type_token=1.0 - ttr,
        stopword_mid=1.0 - min(1.0, abs(stop_ratio - CFG.STOPWORD_CENTER) / CFG.STOPWORD_CENTER),
        word_length=_clamp01((avg_len - CFG.WORD_LENGTH_BASE) / CFG.WORD_LENGTH_SPAN),
        char_entropy=1.0 - min(1.0, abs(entropy - CFG.ENTROPY_CENTER) / CFG.ENTROPY_CENTER),
        doc_repetition=_clamp01(stats.repeated_bigram_ratio),
        sentence_repetition=stats.sentence_repetition(tokens),
        punctuation=min(1.0, len(_PUNCT.findall(text)) / CFG.PUNCTUATION_SATURATION),
        digit_density=min(1.0, len(_DIGIT.findall(text)) / CFG.DIGIT_SATURATION),
    )


def score_sentence(text: str, tokens: Sequence[str], stats: DocumentStatistics) -> int:
    """AI-likelihood of one sentence as an integer percentage."""
    return round_half_up(100 * extract_features(text, tokens, stats).score())
