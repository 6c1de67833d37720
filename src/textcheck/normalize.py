from __future__ import annotations
import logging
import re
from typing import List, Sequence

from . import config as CFG
from .models import NGram

log = logging.getLogger(__name__)

# Split marker inserted after sentence-final punctuation (no lookbehind needed)
_SENTINEL = "\x1e"

# /* ~~~ terminal punctuation + whitespace, followed by an uppercase letter,
#        a digit, an opening quote or an opening bracket ~~~ */
_BOUNDARY = re.compile(r"([.!?])\s+(?=[A-ZÀ-ÖØ-Þ0-9“\"«‘(\[])")

_WORD_UNICODE = r"(?:[^\W_]|')+"
_WORD_LATIN = r"[A-Za-zÀ-ÖØ-öø-ÿ0-9']+"


def segment_sentences(text: str) -> List[str]:
    """
    Split raw text into trimmed, non-empty sentences, in document order.
    Boundaries are heuristic: "Dr. Smith" is split like any other sentence end.
    """
    if not text or not text.strip():
        return []
    marked = _BOUNDARY.sub(r"\1" + _SENTINEL, text.replace(_SENTINEL, " "))
    return [s.strip() for s in marked.split(_SENTINEL) if s.strip()]


def _compile_word_pattern(mode: str) -> re.Pattern:
    if mode == "latin":
        return re.compile(_WORD_LATIN)
    try:
        pat = re.compile(_WORD_UNICODE)
    except re.error as e:  # pragma: no cover - stdlib re always supports \w
        log.warning("Unicode tokenizer unavailable (%s); using Latin fallback", e)
        return re.compile(_WORD_LATIN)
    # probe: a Cyrillic word and a Greek digit-free word must come out whole
    if pat.findall("слово λέξη") != ["слово", "λέξη"]:
        log.warning("Unicode tokenizer failed probe; using Latin fallback")
        return re.compile(_WORD_LATIN)
    return pat


_WORD_RE = _compile_word_pattern(CFG.TOKENIZER)
_LATIN_RE = re.compile(_WORD_LATIN)


def tokenize(sentence: str) -> List[str]:
    """Lowercase letter/digit/apostrophe runs of `sentence`."""
    return _WORD_RE.findall(sentence.lower())


def tokenize_latin(sentence: str) -> List[str]:
    """ASCII + Latin-1 tokenizer (the fallback path), exposed for callers and tests."""
    return _LATIN_RE.findall(sentence.lower())


def clamp_ngram(n: int | None) -> int:
    if n is None:
        return CFG.NGRAM_DEFAULT
    return max(CFG.NGRAM_MIN, min(CFG.NGRAM_MAX, int(n)))


def ngrams(tokens: Sequence[str], n: int) -> set[NGram]:
    """Return distinct n-grams of tokens (empty when fewer than n tokens)."""
    if n <= 0 or len(tokens) < n:
        return set()
    return {tuple(tokens[i:i + n]) for i in range(len(tokens) - n + 1)}
