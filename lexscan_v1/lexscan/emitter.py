
from __future__ import annotations
import json
from collections import Counter
from typing import Dict, Iterable, List, Union
from .lexer import Tok, KINDS

# symbols str.splitlines() breaks on; whitespace never reaches a token
LINE_BREAK_SYMBOLS = frozenset("\x1c\x1d\x1e\x85\u2028\u2029")

def _text(t: Union[Tok, str]) -> str:
    return t.text if isinstance(t, Tok) else t

def _shown(text: str) -> str:
    return repr(text)[1:-1] if text in LINE_BREAK_SYMBOLS else text

def render(tokens: Iterable[Union[Tok, str]]) -> str:
    """
    One token per line, verbatim. Only "\\n" separates tokens; a symbol in
    LINE_BREAK_SYMBOLS is written as is, so split the result on "\\n" rather
    than with str.splitlines().
    """
    return "\n".join(_text(t) for t in tokens)

def render_kinds(toks: Iterable[Tok]) -> str:
    return "\n".join(f"{t.kind}\t{t.start}:{t.end}\t{_shown(t.text)}" for t in toks)

def render_json(toks: Iterable[Tok]) -> str:
    rows = [{"kind": t.kind, "text": t.text, "start": t.start, "end": t.end} for t in toks]
    return json.dumps(rows, indent=2, ensure_ascii=False)

def summarize(toks: List[Tok]) -> Dict[str, int]:
    counts = Counter(t.kind for t in toks)
    out = {k: counts.get(k, 0) for k in KINDS}
    out["total"] = len(toks)
    return out
