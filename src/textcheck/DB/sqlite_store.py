# textcheck/DB/sqlite_store.py
from __future__ import annotations
import logging
import sqlite3
import time
from typing import List
from .api import CorpusStore
from ..models import CorpusDocument

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS documents (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL,
  text TEXT NOT NULL,
  added_at REAL NOT NULL
);
CREATE INDEX IF NOT EXISTS documents_added_at ON documents(added_at);
"""

class SQLiteStore(CorpusStore):
    """Corpus persisted in a single SQLite file."""
    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        self.conn: sqlite3.Connection = sqlite3.connect(db_path, check_same_thread=False)
        self.conn.executescript(_SCHEMA)
        log.info("Opened corpus store %s (%d documents)", db_path, self.count())

    # ---- Create ----
    def add(self, name: str, text: str) -> int:
        if not name:
            raise ValueError("corpus document name must not be empty")
        cur = self.conn.execute(
            "INSERT INTO documents(name, text, added_at) VALUES (?,?,?)",
            (name, text or "", time.time()),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    # ---- Read ----
    def list(self) -> List[CorpusDocument]:
        rows = self.conn.execute(
            "SELECT id, name, text, added_at FROM documents ORDER BY added_at, id"
        ).fetchall()
        return [CorpusDocument(id=int(r[0]), name=r[1], text=r[2], added_at=float(r[3])) for r in rows]

    def count(self) -> int:
        return int(self.conn.execute("SELECT COUNT(*) FROM documents").fetchone()[0])

    # ---- Delete ----
    def clear(self) -> None:
        self.conn.execute("DELETE FROM documents")
        self.conn.commit()

    # ---- lifecycle ----
    def close(self) -> None:
        self.conn.close()
