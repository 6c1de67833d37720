"""
Document integrity scoring engine.

Splits text into sentences and scores each one for AI-likelihood (stylometric
heuristics) and plagiarism (n-gram Jaccard overlap within the document and
against a reference corpus), then aggregates a document report. A separate
resolver turns prioritized search terms into non-overlapping highlight spans.

Everything here is synchronous, deterministic and offline.

Example Usage:
    from textcheck import analyze, resolve_highlights, HighlightGroup

    report = analyze(text, corpus=[{"name": "ref.txt", "text": ref}], ngram=5)
    print(report.ai_score, report.plagiarism)

    spans = resolve_highlights(text, [HighlightGroup.of(["hello world"], "x")])
"""

# src/textcheck/__init__.py
from .engine import Engine
from .extract import UnsupportedFormat, extract, extract_bytes
from .highlight import report_groups, resolve_blocks, resolve_highlights
from .models import HighlightGroup, HighlightSpan, Report, SentenceScore
from .report import analyze

__version__ = "1.0.0"
__all__ = [
    "analyze", "resolve_highlights", "resolve_blocks", "report_groups",
    "Engine", "Report", "SentenceScore", "HighlightGroup", "HighlightSpan",
    "UnsupportedFormat", "extract", "extract_bytes",
]
