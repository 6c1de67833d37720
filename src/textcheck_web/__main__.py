from __future__ import annotations
import argparse, json, sys
from textcheck import config as CFG
from textcheck.engine import Engine
from textcheck.extract import UnsupportedFormat, extract
from textcheck.models import HighlightGroup, HighlightSpan, Report

def _print_report(report: Report) -> None:
    print(f"AI score:    {report.ai_score}%")
    print(f"Plagiarism:  {report.plagiarism}%")
    if not report.sentences:
        print("(no sentences)"); return
    print("#   AI   Plg  Source               Sentence")
    for i, s in enumerate(report.sentences, 1):
        src = s.source or "-"
        print(f"{i:<3} {s.ai:<4} {s.plagiarism:<4} {src:<20} {s.sentence}")

def _render_spans(spans: list[HighlightSpan]) -> str:
    # plain text with [[style:...]] around highlighted runs
    return "".join(s.text if s.style is None else f"[[{s.style}:{s.text}]]" for s in spans)

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Document integrity checker (Engine-backed)")
    p.add_argument("--db", default=CFG.DEFAULT_DB, help='Corpus DSN: "sqlite:///path" or "memory://"')
    p.add_argument("--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("analyze", help="Score a .txt/.pdf/.docx document")
    a.add_argument("path")
    a.add_argument("--ngram", type=int, default=None, help="N-gram size (3-7, default 5)")
    a.add_argument("--no-corpus", action="store_true", help="Skip the reference corpus")
    a.add_argument("--json", action="store_true", help="Emit the report as JSON")

    h = sub.add_parser("highlight", help="Mark terms in a document")
    h.add_argument("path")
    h.add_argument("--terms", nargs="+", required=True)
    h.add_argument("--style", default="mark")
    h.add_argument("--json", action="store_true", help="Emit spans as JSON")

    c = sub.add_parser("corpus", help="Manage the reference corpus")
    csub = c.add_subparsers(dest="corpus_cmd", required=True)
    ca = csub.add_parser("add", help="Add documents to the corpus")
    ca.add_argument("paths", nargs="+")
    csub.add_parser("list", help="List corpus documents")
    csub.add_parser("clear", help="Remove every corpus document")

    args = p.parse_args(argv)

    eng = Engine(args.db, verbose=args.verbose)
    try:
        if args.cmd == "analyze":
            report = eng.analyze_file(args.path, ngram=args.ngram, use_corpus=not args.no_corpus)
            if args.json:
                print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
            else:
                _print_report(report)

        elif args.cmd == "highlight":
            text = extract(args.path)
            spans = eng.highlight(text, [HighlightGroup.of(args.terms, args.style)])
            if args.json:
                print(json.dumps([s.to_dict() for s in spans], ensure_ascii=False, indent=2))
            else:
                print(_render_spans(spans))

        elif args.corpus_cmd == "add":
            for path in args.paths:
                doc_id = eng.add_file(path)
                print(f"added {path} (id={doc_id})")
        elif args.corpus_cmd == "list":
            docs = eng.corpus_documents()
            for d in docs:
                print(f"{d.id:<5} {d.name}")
            print(f"{len(docs)} document(s)")
        else:
            eng.clear_corpus()
            print("corpus cleared")
        return 0
    except UnsupportedFormat as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
