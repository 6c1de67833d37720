from __future__ import annotations
import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence, Tuple

from . import config as CFG

Bigram = Tuple[str, str]


@dataclass(frozen=True)
class DocumentStatistics:
    """
    Document-wide frequency tables and sentence-length moments.

    Built once per analysis call and passed by reference to the scorer;
    never cached or shared between calls.

    Attributes
    ----------
    unigrams : Counter
        token -> occurrences over the whole document.
    bigrams : Counter
        (token, next_token) -> occurrences over the flattened token stream
        (bigrams may cross sentence boundaries).
    repeated_bigrams : int
        Number of distinct bigrams seen more than once.
    repeated_bigram_ratio : float
        repeated_bigrams / distinct bigrams, 0.0 when there are none.
    mean_length, std_length : float
        Mean and population standard deviation of sentence token counts.
        Variance is floored so std is never zero.
    """
    unigrams: Counter
    bigrams: Counter
    repeated_bigrams: int
    repeated_bigram_ratio: float
    mean_length: float
    std_length: float

    @classmethod
    def build(cls, sentence_tokens: Sequence[Sequence[str]]) -> "DocumentStatistics":
        flat = [tok for toks in sentence_tokens for tok in toks]
        unigrams = Counter(flat)
        bigrams = Counter(zip(flat, flat[1:]))

        repeated = sum(1 for c in bigrams.values() if c > 1)
        ratio = repeated / len(bigrams) if bigrams else 0.0

        lengths = [len(toks) for toks in sentence_tokens]
        n = len(lengths) or 1
        mean = sum(lengths) / n
        var = sum((x - mean) ** 2 for x in lengths) / n
        std = math.sqrt(max(var, CFG.VARIANCE_FLOOR))

        return cls(
            unigrams=unigrams,
            bigrams=bigrams,
            repeated_bigrams=repeated,
            repeated_bigram_ratio=ratio,
            mean_length=mean,
            std_length=std,
        )

    def sentence_repetition(self, tokens: Sequence[str]) -> float:
        """Fraction of the sentence's own bigrams that repeat across the document."""
        pairs = list(zip(tokens, tokens[1:]))
        if not pairs:
            return 0.0
        return sum(1 for bg in pairs if self.bigrams.get(bg, 0) > 1) / len(pairs)
