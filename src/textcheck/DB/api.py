# textcheck/DB/api.py
from __future__ import annotations
import os
from typing import List, Protocol

from ..models import CorpusDocument


class CorpusStore(Protocol):
    """Reference corpus collaborator. The scoring core only ever calls list()."""
    # Create
    def add(self, name: str, text: str) -> int: ...
    # Read
    def list(self) -> List[CorpusDocument]: ...
    def count(self) -> int: ...
    # Delete
    def clear(self) -> None: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str) -> CorpusStore:
    """
    Factory:
      - sqlite:///path -> SQLiteStore (file and parent folder created if missing)
      - memory://      -> MemoryStore
    """
    if dsn.startswith("sqlite:///"):
        path = dsn.removeprefix("sqlite:///")
        if not path:
            raise ValueError("sqlite DSN requires a file path: sqlite:///path/to/corpus.sqlite")
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        # Lazy import to avoid a circular import
        from .sqlite_store import SQLiteStore
        return SQLiteStore(path)

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise ValueError(f"Unsupported store DSN: {dsn}")
