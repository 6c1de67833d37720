from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
from textcheck import config as CFG
from textcheck.engine import Engine
from textcheck.extract import UnsupportedFormat, extract_bytes
from textcheck.highlight import report_groups, resolve_highlights
from textcheck.models import HighlightGroup

log = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 16 * 1024 * 1024
_engine: Engine | None = None


class BadRequest(ValueError):
    pass


def _eng() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("expected a JSON object body")
    return data


def _ngram_arg(value):
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequest(f"ngram must be an integer, got {value!r}")


def _flag_arg(value, default: bool = True) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("1", "true", "yes", "on"):
        return True
    if isinstance(value, str) and value.lower() in ("0", "false", "no", "off"):
        return False
    raise BadRequest(f"use_corpus must be a boolean, got {value!r}")


def _parse_groups(raw) -> list[HighlightGroup]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise BadRequest("groups must be a list of {terms, style}")
    groups = []
    for g in raw:
        if not isinstance(g, dict) or not isinstance(g.get("terms", []), list):
            raise BadRequest("each group needs a 'terms' list and a 'style'")
        groups.append(HighlightGroup.of((str(t) for t in g.get("terms", [])), str(g.get("style", ""))))
    return groups


def _uploaded_text() -> tuple[str, str] | None:
    """(filename, text) for a multipart `file` upload, or None when absent."""
    f = request.files.get("file")
    if f is None:
        return None
    name = secure_filename(f.filename or "")
    return name, extract_bytes(name, f.read())


@app.errorhandler(UnsupportedFormat)
def _unsupported(e: UnsupportedFormat):
    return jsonify({"error": str(e)}), 415


@app.errorhandler(BadRequest)
def _bad_request(e: BadRequest):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(413)
def _too_large(e):
    return jsonify({"error": f"request body exceeds {app.config['MAX_CONTENT_LENGTH']} bytes"}), 413

# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True, "corpus": _eng().corpus_count()})


@app.post("/api/analyze")
def api_analyze():
    upload = _uploaded_text()
    if upload is not None:
        text = upload[1]
        ngram = _ngram_arg(request.form.get("ngram"))
        use_corpus = _flag_arg(request.form.get("use_corpus"))
    else:
        data = _json_body()
        text = data.get("text", "")
        if not isinstance(text, str):
            raise BadRequest("text must be a string")
        ngram = _ngram_arg(data.get("ngram"))
        use_corpus = _flag_arg(data.get("use_corpus"))
    report = _eng().analyze(text, ngram=ngram, use_corpus=use_corpus)
    return jsonify(report.to_dict())


@app.post("/api/highlight")
def api_highlight():
    data = _json_body()
    text = data.get("text", "")
    if not isinstance(text, str):
        raise BadRequest("text must be a string")
    spans = resolve_highlights(text, _parse_groups(data.get("groups")))
    return jsonify([s.to_dict() for s in spans])


@app.post("/api/report/highlight")
def api_report_highlight():
    data = _json_body()
    text = data.get("text", "")
    if not isinstance(text, str):
        raise BadRequest("text must be a string")
    report = _eng().analyze(text, ngram=_ngram_arg(data.get("ngram")))
    spans = resolve_highlights(text, report_groups(report))
    return jsonify({"report": report.to_dict(), "spans": [s.to_dict() for s in spans]})


@app.get("/api/corpus")
def api_corpus_list():
    docs = _eng().corpus_documents()
    return jsonify({
        "count": len(docs),
        "documents": [{"id": d.id, "name": d.name, "added_at": d.added_at} for d in docs],
    })


@app.post("/api/corpus")
def api_corpus_add():
    upload = _uploaded_text()
    if upload is not None:
        name, text = upload
    else:
        data = _json_body()
        name, text = data.get("name"), data.get("text", "")
        if not isinstance(name, str) or not name or not isinstance(text, str):
            raise BadRequest("corpus document needs a non-empty 'name' and a 'text' string")
    doc_id = _eng().add_document(name, text)
    return jsonify({"id": doc_id}), 201


@app.delete("/api/corpus")
def api_corpus_clear():
    _eng().clear_corpus()
    return jsonify({"ok": True})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask JSON API on top of Engine")
    ap.add_argument("--db", dest="db", default=CFG.DEFAULT_DB)  # DSN: "sqlite:///path" or "memory://"
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(args.db, verbose=args.verbose)
    log.info("Serving on http://%s:%d", args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
