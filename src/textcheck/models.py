from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

NGram = Tuple[str, ...]

@dataclass(frozen=True)
class Sentence:
    index: int                # 0-based position in the document
    text: str                 # trimmed sentence text as segmented
    tokens: Tuple[str, ...]   # lowercase word/number tokens

@dataclass(frozen=True)
class ReferenceDocument:
    name: str
    ngrams: frozenset

@dataclass(frozen=True)
class SentenceScore:
    sentence: str
    ai: int                   # 0..100
    plagiarism: int           # 0..100
    source: Optional[str] = None

    def to_dict(self) -> dict:
        d = {"sentence": self.sentence, "ai": self.ai, "plagiarism": self.plagiarism}
        if self.source is not None:
            d["source"] = self.source
        return d

@dataclass
class Report:
    ai_score: int
    plagiarism: int
    sentences: List[SentenceScore] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "aiScore": self.ai_score,
            "plagiarism": self.plagiarism,
            "sentences": [s.to_dict() for s in self.sentences],
        }

@dataclass(frozen=True)
class HighlightGroup:
    terms: Tuple[str, ...]
    style: str

    @classmethod
    def of(cls, terms: Iterable[str], style: str) -> "HighlightGroup":
        return cls(terms=tuple(terms), style=style)

@dataclass(frozen=True)
class HighlightSpan:
    text: str
    style: Optional[str] = None   # None for plain text

    def to_dict(self) -> dict:
        if self.style is None:
            return {"text": self.text}
        return {"text": self.text, "style": self.style}

@dataclass(frozen=True)
class CorpusDocument:
    id: int
    name: str
    text: str
    added_at: float           # epoch seconds
