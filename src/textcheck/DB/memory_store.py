# textcheck/DB/memory_store.py
from __future__ import annotations
import time
from typing import Dict, List
from .api import CorpusStore
from ..models import CorpusDocument

class MemoryStore(CorpusStore):
    """Simple in-memory corpus (useful for tests or ephemeral runs)."""
    def __init__(self) -> None:
        self._rows: Dict[int, CorpusDocument] = {}
        self._next_id = 1

    # C
    def add(self, name: str, text: str) -> int:
        if not name:
            raise ValueError("corpus document name must not be empty")
        doc_id = self._next_id
        self._rows[doc_id] = CorpusDocument(id=doc_id, name=name, text=text or "", added_at=time.time())
        self._next_id += 1
        return doc_id

    # R
    def list(self) -> List[CorpusDocument]:
        return sorted(self._rows.values(), key=lambda d: (d.added_at, d.id))

    def count(self) -> int:
        return len(self._rows)

    # D
    def clear(self) -> None:
        self._rows.clear()

    def close(self) -> None:
        self._rows.clear()
