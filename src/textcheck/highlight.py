from __future__ import annotations
import logging
import math
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from . import config as CFG
from .models import HighlightGroup, HighlightSpan, Report

log = logging.getLogger(__name__)

# (pattern, style) per term, longest term first
_Term = Tuple[re.Pattern, str]


def _flatten(groups: Iterable[HighlightGroup]) -> List[_Term]:
    items: List[Tuple[str, str]] = []
    for g in groups:
        for t in g.terms:
            t = (t or "").strip()
            if t:
                items.append((t, g.style))
    # stable: equal lengths keep group/term order
    items.sort(key=lambda it: len(it[0]), reverse=True)
    return [(re.compile(re.escape(t), re.IGNORECASE), style) for t, style in items]


def _choose_better(cur: Optional[tuple], cand: tuple) -> tuple:
    """Earliest start wins; at equal start the longer match wins; else keep cur."""
    if cur is None:
        return cand
    if cand[0] < cur[0]:
        return cand
    if cand[0] == cur[0] and (cand[1] - cand[0]) > (cur[1] - cur[0]):
        return cand
    return cur


def _resolve(text: str, terms: Sequence[_Term]) -> List[HighlightSpan]:
    if not text:
        return []
    spans: List[HighlightSpan] = []
    # next known occurrence per term; None = no occurrence at or after cursor
    nxt: List[Optional[re.Match]] = [p.search(text) for p, _ in terms]
    cursor = 0

    while cursor < len(text):
        best: Optional[tuple] = None  # (start, end, style)
        for k, (pat, style) in enumerate(terms):
            m = nxt[k]
            if m is None:
                continue
            if m.start() < cursor:
                m = nxt[k] = pat.search(text, cursor)
                if m is None:
                    continue
            best = _choose_better(best, (m.start(), m.end(), style))
        if best is None:
            break
        start, end, style = best
        if start > cursor:
            spans.append(HighlightSpan(text[cursor:start]))
        spans.append(HighlightSpan(text[start:end], style))
        cursor = end

    if cursor < len(text):
        spans.append(HighlightSpan(text[cursor:]))
    return spans


def resolve_highlights(text: str, groups: Iterable[HighlightGroup]) -> List[HighlightSpan]:
    """
    Partition `text` into plain and highlighted spans.

    Case-insensitive literal search; scanning left to right, the earliest
    occurrence of any term wins, and at the same start the longest term wins
    ("hello world" over "hello"). Spans never overlap and their texts
    concatenate back to `text` exactly.
    """
    return _resolve(text, _flatten(groups))


def resolve_blocks(blocks: Sequence[str], groups: Iterable[HighlightGroup],
                   max_units: int = CFG.MAX_HIGHLIGHT_UNITS) -> List[List[HighlightSpan]]:
    """
    Bounded multi-block variant: highlight at most `max_units` non-blank blocks.
    Blocks past the cap are returned unscanned, as one plain span each.
    """
    terms = _flatten(groups)
    out: List[List[HighlightSpan]] = []
    processed = 0
    capped = False
    for block in blocks:
        if not block:
            out.append([])
            continue
        if not block.strip() or capped:
            out.append([HighlightSpan(block)])
            continue
        if processed >= max_units:
            capped = True
            log.warning("Highlight cap reached after %d blocks; remaining text left unscanned", processed)
            out.append([HighlightSpan(block)])
            continue
        out.append(_resolve(block, terms))
        processed += 1
    return out


# ---- Groups from a report ----

def _unique(items: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for s in items:
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return out


def _pick(report: Report, attr: str, thresholds: Sequence[int]) -> List[str]:
    scores = report.sentences
    for th in thresholds:
        terms = _unique(s.sentence for s in scores if getattr(s, attr) >= th)
        if terms:
            return terms
    if not scores:
        return []
    top = max(1, math.ceil(len(scores) * CFG.HIGHLIGHT_TOP_FRACTION))
    ranked = sorted(scores, key=lambda s: getattr(s, attr), reverse=True)
    return _unique(s.sentence for s in ranked[:top])


def report_groups(report: Report, ai_style: str = "ai",
                  plagiarism_style: str = "plagiarism") -> List[HighlightGroup]:
    """
    Highlight groups for rendering a report over its source text.
    AI: sentences with ai >= 70, else >= 50, else the top 10% (at least one).
    Plagiarism: >= 50, else >= 40, else the top 10%; nothing when the
    document plagiarism score is 0.
    """
    ai_terms = _pick(report, "ai", CFG.AI_HIGHLIGHT_THRESHOLDS)
    plg_terms = _pick(report, "plagiarism", CFG.PLAGIARISM_HIGHLIGHT_THRESHOLDS)
    if report.plagiarism <= 0:
        plg_terms = []
    return [HighlightGroup.of(ai_terms, ai_style), HighlightGroup.of(plg_terms, plagiarism_style)]
