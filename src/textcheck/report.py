from __future__ import annotations
import logging
import math
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from . import config as CFG
from .models import CorpusDocument, Report, ReferenceDocument, Sentence, SentenceScore
from .normalize import clamp_ngram, segment_sentences, tokenize
from .scoring import round_half_up, score_sentence
from .similarity import SimilarityIndex
from .stats import DocumentStatistics

log = logging.getLogger(__name__)

CorpusItem = Union[CorpusDocument, Mapping[str, str]]


def percentile_index(count: int, q: float = CFG.PLAGIARISM_PERCENTILE) -> int:
    return int(math.floor(q * (count - 1)))


def aggregate(scores: Sequence[SentenceScore]) -> Report:
    """
    Document-level scores from per-sentence scores.
      - aiScore: mean of sentence `ai`, rounded half up
      - plagiarism: 95th percentile (nearest-rank, floor index) of sentence
        `plagiarism`, so one heavily duplicated sentence dominates
    """
    if not scores:
        return Report(ai_score=0, plagiarism=0, sentences=[])
    ai = round_half_up(sum(s.ai for s in scores) / len(scores))
    plg = sorted(s.plagiarism for s in scores)
    return Report(
        ai_score=max(0, min(100, ai)),
        plagiarism=plg[percentile_index(len(plg))],
        sentences=list(scores),
    )


def _doc_fields(doc: CorpusItem) -> tuple[str, str]:
    if isinstance(doc, Mapping):
        return str(doc["name"]), str(doc.get("text") or "")
    return doc.name, doc.text


def build_references(corpus: Iterable[CorpusItem], n: int) -> List[ReferenceDocument]:
    refs = []
    for doc in corpus:
        name, text = _doc_fields(doc)
        refs.append(SimilarityIndex.reference(name, tokenize(text), n))
    return refs


def split_document(text: str) -> List[Sentence]:
    return [Sentence(index=i, text=s, tokens=tuple(tokenize(s)))
            for i, s in enumerate(segment_sentences(text))]


def analyze(text: str, *, corpus: Optional[Iterable[CorpusItem]] = None,
            ngram: Optional[int] = None) -> Report:
    """
    Score a document for AI-likelihood and n-gram plagiarism.

    `corpus` is an iterable of reference documents, either CorpusDocument
    rows or mappings with "name" and "text"; it is read once, up front.
    `ngram` is clamped to [3, 7] (default 5).
    """
    n = clamp_ngram(ngram)
    sentences = split_document(text or "")
    if not sentences:
        return Report(ai_score=0, plagiarism=0, sentences=[])

    token_lists = [s.tokens for s in sentences]
    stats = DocumentStatistics.build(token_lists)
    index = SimilarityIndex(token_lists, n, build_references(corpus or (), n))

    scores: List[SentenceScore] = []
    for s in sentences:
        ai = score_sentence(s.text, s.tokens, stats)
        internal = index.internal(s.index)
        external, best_source = index.external(s.index)
        plagiarism = round_half_up(100 * max(internal, external))
        source = best_source if external >= CFG.SOURCE_MIN_SIMILARITY else None
        scores.append(SentenceScore(
            sentence=s.text,
            ai=max(0, min(100, ai)),
            plagiarism=max(0, min(100, plagiarism)),
            source=source,
        ))

    report = aggregate(scores)
    log.info("Analyzed %d sentences (n=%d, references=%d): ai=%d plagiarism=%d",
             len(scores), n, len(index.references), report.ai_score, report.plagiarism)
    return report
