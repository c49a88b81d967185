
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Union
from .charclass import is_space, is_digit, is_word_start, is_word_part

logger = logging.getLogger(__name__)

WORD = "WORD"
NUM = "NUM"
SYM = "SYM"
KINDS = (WORD, NUM, SYM)

Source = Union[str, bytes, bytearray, memoryview]

@dataclass(frozen=True)
class Tok:
    kind: str
    text: str
    start: int
    end: int

def as_text(src: Source) -> str:
    """Return src as a str with one character per input byte for binary input."""
    if isinstance(src, str):
        return src
    if isinstance(src, (bytes, bytearray, memoryview)):
        # latin-1 maps byte n to code point n, so nothing is rejected
        return bytes(src).decode("latin-1")
    raise TypeError(f"expected str or bytes, got {type(src).__name__}")

def lex(src: Source) -> List[Tok]:
    src = as_text(src)
    i, n = 0, len(src)
    out: List[Tok] = []
    while i < n:
        ch = src[i]
        if is_space(ch):
            i += 1; continue
        if is_word_start(ch):
            j = i+1
            while j < n and is_word_part(src[j]):
                j += 1
            out.append(Tok(WORD, src[i:j], i, j)); i = j; continue
        if is_digit(ch):
            j = i+1
            while j < n and is_digit(src[j]):
                j += 1
            out.append(Tok(NUM, src[i:j], i, j)); i = j; continue
        # no multi-char operators: "==" is two symbols
        out.append(Tok(SYM, ch, i, i+1)); i += 1
    logger.debug("scanned %d chars into %d tokens", n, len(out))
    return out

def tokenize(src: Source) -> List[str]:
    """Split src into word, number and single-character symbol strings, dropping whitespace."""
    return [t.text for t in lex(src)]
