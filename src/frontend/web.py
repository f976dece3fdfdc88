from __future__ import annotations
import argparse
from dataclasses import asdict

from flask import Flask, request, jsonify

from quill.engine import Engine
from quill.errors import InvalidArgumentError
from quill.config import MAX_SUGGESTIONS

app = Flask(__name__)
_engine: Engine | None = None


def _eng() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Run main() or assign web._engine first.")
    return _engine


def _json_body() -> dict:
    return request.get_json(silent=True) or {}


@app.errorhandler(InvalidArgumentError)
def _bad_argument(err: InvalidArgumentError):
    return jsonify({"error": str(err)}), 400


# ---------- API ----------
@app.get("/health")
def health():
    eng = _engine
    words = len(eng.dictionary) if eng and eng.dictionary is not None else 0
    return jsonify({"ok": True, "words": words})


@app.post("/api/check")
def api_check():
    text = _json_body().get("text", "")
    if not isinstance(text, str):
        return jsonify({"error": "text must be a string"}), 400
    rows = _eng().check(text)
    return jsonify([asdict(r) for r in rows])


@app.get("/api/suggest")
def api_suggest():
    w = request.args.get("w", "", type=str)
    k = request.args.get("k", MAX_SUGGESTIONS, type=int)
    return jsonify(_eng().suggest(w, k))


@app.post("/api/chunk")
def api_chunk():
    body = _json_body()
    text = body.get("text", "")
    if not isinstance(text, str):
        return jsonify({"error": "text must be a string"}), 400
    chunks = _eng().chunk(text, header=body.get("header"), ooc=bool(body.get("ooc", False)))
    return jsonify([dict(asdict(c), complete_text=c.complete_text) for c in chunks])


@app.post("/api/dictionary")
def api_add_word():
    word = str(_json_body().get("word", "")).strip()
    if not word:
        return jsonify({"error": "word is required"}), 400
    return jsonify({"word": word.lower(), "added": _eng().add_word(word)})


@app.delete("/api/dictionary")
def api_remove_word():
    word = str(_json_body().get("word", "") or request.args.get("word", "")).strip()
    if not word:
        return jsonify({"error": "word is required"}), 400
    return jsonify({"word": word.lower(), "removed": _eng().remove_word(word)})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the quill JSON API")
    ap.add_argument("--dict", nargs="+", required=True, help="Word-list files or folders")
    ap.add_argument("--word", action="append", default=[], help="Extra custom dictionary entry")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.load(args.dict, custom=args.word, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
