
from __future__ import annotations
from typing import Iterable, List, Union
from .lexer import Tok, Source, WORD, NUM, lex

DEFAULT_KEYWORDS = ("int", "float", "double", "char")

def find_keywords(src: Source, keywords: Union[str, Iterable[str]] = DEFAULT_KEYWORDS) -> List[Tok]:
    """
    Word tokens of src that spell one of keywords, in order of appearance.

    keywords may be a single keyword string or an iterable of them.

    Only whole words count: a word glued to the number in front of it
    ("9int") is part of a longer identifier-like run and is skipped.
    Word boundaries follow the ASCII character classes, so a non-ASCII
    letter next to a keyword is a symbol and does not join the word:
    "inté" reports "int".
    """
    if isinstance(keywords, str):
        keywords = (keywords,)
    wanted = set(keywords)
    found: List[Tok] = []
    prev = None
    for t in lex(src):
        if t.kind == WORD and t.text in wanted:
            if not (prev is not None and prev.kind == NUM and prev.end == t.start):
                found.append(t)
        prev = t
    return found
