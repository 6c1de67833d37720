# textcheck/engine.py
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from . import config as CFG
from .DB.api import CorpusStore, make_store
from .extract import extract
from .highlight import resolve_highlights
from .models import CorpusDocument, HighlightGroup, HighlightSpan, Report
from .report import analyze

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the reference corpus via a CorpusStore (SQLite or in-memory),
      - text extraction for uploaded files,
      - the scoring core (report.analyze) and highlight resolver.

    Public API (used by CLI/Flask):
      * analyze(text, ngram=None, use_corpus=True): score a document
      * highlight(text, groups): non-overlapping span list
      * add_document / add_file / clear_corpus / corpus_count / corpus_names / corpus_documents
      * shutdown(): close underlying resources

    Storage DSNs (via textcheck.DB.api.make_store):
      - "sqlite:///path/to/corpus.sqlite"
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(self, db_dsn: Optional[str] = None, *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["TEXTCHECK_VERBOSE"] = "1"

        dsn = db_dsn or CFG.DEFAULT_DB
        log.info("Initializing corpus store: %s", dsn)
        self._store: Optional[CorpusStore] = make_store(dsn)

    @property
    def store(self) -> CorpusStore:
        if self._store is None:
            raise RuntimeError("Engine has been shut down.")
        return self._store

    # ------------- analysis -------------

    # /* ~~~ Read the corpus once, then score the document ~~~ */
    def analyze(self, text: str, *, ngram: Optional[int] = None, use_corpus: bool = True) -> Report:
        store = self.store
        corpus: List[CorpusDocument] = []
        if use_corpus:
            try:
                corpus = store.list()
            except Exception as e:  # degrade to internal-only detection
                log.warning("Corpus unavailable, continuing without it: %s", e)
                corpus = []
        return analyze(text, corpus=corpus, ngram=ngram)

    def analyze_file(self, path: str, **kwargs) -> Report:
        return self.analyze(extract(path), **kwargs)

    def highlight(self, text: str, groups: Iterable[HighlightGroup]) -> List[HighlightSpan]:
        return resolve_highlights(text, groups)

    # ------------- corpus -------------

    def add_document(self, name: str, text: str) -> int:
        doc_id = self.store.add(name, text)
        log.info("Added corpus document %r (id=%d)", name, doc_id)
        return doc_id

    def add_file(self, path: str, name: Optional[str] = None) -> int:
        return self.add_document(name or os.path.basename(path), extract(path))

    def clear_corpus(self) -> None:
        self.store.clear()
        log.info("Corpus cleared")

    def corpus_count(self) -> int:
        return self.store.count()

    def corpus_documents(self) -> List[CorpusDocument]:
        return self.store.list()

    def corpus_names(self) -> List[str]:
        return [d.name for d in self.store.list()]

    # ------------- teardown -------------

    # /* ~~~ Close underlying resources (DB handles, etc.) ~~~ */
    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            log.info("Engine shutdown complete")
