from __future__ import annotations
import argparse, json, sys
from dataclasses import asdict

from .engine import Engine
from .config import MAX_SUGGESTIONS


def _print_corrections(eng: Engine, text: str, k: int, as_json: bool) -> None:
    rows = []
    for c in eng.check(text):
        rows.append({"index": c.index, "original": c.original,
                     "suggestions": eng.suggest(c.original, k)})
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return
    if not rows:
        print("(no misspellings)"); return
    print("#   Index  Word                 Suggestions")
    for i, r in enumerate(rows, 1):
        print(f"{i:<3} {r['index']:<6} {r['original']:<20} {', '.join(r['suggestions'])}")


def _print_chunks(eng: Engine, text: str, header: str | None, ooc: bool, as_json: bool) -> None:
    chunks = eng.chunk(text, header=header, ooc=ooc)
    if as_json:
        print(json.dumps([dict(asdict(c), complete_text=c.complete_text) for c in chunks],
                         ensure_ascii=False, indent=2))
        return
    for c in chunks:
        print(c.complete_text)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="quill: spell check and chunk chat messages")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--check", metavar="TEXT", help="Spell check TEXT ('-' reads stdin)")
    g.add_argument("--suggest", metavar="WORD", help="Suggest replacements for WORD")
    g.add_argument("--chunk", metavar="TEXT", help="Split TEXT into chat chunks ('-' reads stdin)")

    p.add_argument("--dict", nargs="+", default=[], help="Word-list files or folders")
    p.add_argument("--word", action="append", default=[], help="Extra custom dictionary entry")
    p.add_argument("--header", default=None, help="Chat header (default: detect from text)")
    p.add_argument("--ooc", action="store_true", help="Wrap chunks in OOC tags")
    p.add_argument("--budget", type=int, default=None, help="Byte budget per message")
    p.add_argument("--mark-last", action="store_true", help="Put a continuation marker on the last chunk too")
    p.add_argument("-k", type=int, default=MAX_SUGGESTIONS, help="Maximum suggestions")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    def read(value: str) -> str:
        return sys.stdin.read() if value == "-" else value

    eng = Engine()
    try:
        if args.budget is not None:
            eng.configure(byte_budget=args.budget)
        if args.mark_last:
            eng.configure(mark_last_chunk=True)

        if args.chunk is not None:
            _print_chunks(eng, read(args.chunk), args.header, args.ooc, args.json)
            return 0

        if not args.dict and not args.word:
            p.error("--check/--suggest require --dict or --word")
        eng.load(args.dict, words=[] if not args.dict else None, custom=args.word, verbose=args.verbose)

        if args.check is not None:
            _print_corrections(eng, read(args.check), args.k, args.json)
        else:
            rows = eng.suggest(args.suggest, args.k)
            if args.json:
                print(json.dumps(rows, ensure_ascii=False))
            else:
                print("\n".join(rows) if rows else "(no suggestions)")
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
