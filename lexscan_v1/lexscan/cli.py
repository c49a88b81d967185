
from __future__ import annotations
import argparse, logging, sys
from .lexer import Source, lex
from .keywords import DEFAULT_KEYWORDS, find_keywords
from .emitter import render, render_kinds, render_json, summarize

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
RAW_BYTES = "bytes"

class SourceError(Exception): pass

def read_source(p: str, encoding: str = DEFAULT_ENCODING) -> Source:
    try:
        if p == "-":
            raw = sys.stdin.buffer.read()
        else:
            with open(p, "rb") as f:
                raw = f.read()
    except OSError as e:
        raise SourceError(f"cannot read {p}: {e.strerror or e}") from e
    logger.debug("read %d bytes from %s", len(raw), p)
    if encoding == RAW_BYTES:
        return raw
    try:
        return raw.decode(encoding)
    except LookupError as e:
        raise SourceError(f"unknown encoding {encoding!r}") from e
    except UnicodeDecodeError as e:
        raise SourceError(f"{p} is not valid {encoding} at byte {e.start}") from e

def _emit(text: str):
    if text:
        print(text)

def cmd_tokens(args) -> int:
    toks = lex(read_source(args.src, args.encoding))
    if args.json:
        print(render_json(toks))
    elif args.kinds:
        _emit(render_kinds(toks))
    else:
        _emit(render(toks))
    if args.stats:
        stats = summarize(toks)
        print(" ".join(f"{k}={v}" for k, v in stats.items()), file=sys.stderr)
    return 0

def cmd_keywords(args) -> int:
    found = find_keywords(read_source(args.src, args.encoding), args.keyword or DEFAULT_KEYWORDS)
    if found:
        _emit(render(found))
    else:
        print("No keywords found.")
    return 0

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="lexscan", description="Split text into word, number and symbol tokens.")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="cmd", required=True)

    t = sub.add_parser("tokens", help="print one token per line")
    t.add_argument("src", help="input file, or - for stdin")
    fmt = t.add_mutually_exclusive_group()
    fmt.add_argument("--kinds", action="store_true", help="show kind and span of each token")
    fmt.add_argument("--json", action="store_true")
    t.add_argument("--stats", action="store_true", help="print token counts to stderr")
    t.add_argument("--encoding", default=DEFAULT_ENCODING,
                   help=f"input encoding, or '{RAW_BYTES}' to scan raw 8-bit input")
    t.set_defaults(func=cmd_tokens)

    k = sub.add_parser("keywords", help="list keyword occurrences")
    k.add_argument("src")
    k.add_argument("-k", "--keyword", action="append",
                   help=f"keyword to look for (repeatable, default: {' '.join(DEFAULT_KEYWORDS)})")
    k.add_argument("--encoding", default=DEFAULT_ENCODING)
    k.set_defaults(func=cmd_keywords)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    try:
        return args.func(args)
    except SourceError as e:
        print(f"[source error] {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
