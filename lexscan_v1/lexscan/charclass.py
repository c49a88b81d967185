
from __future__ import annotations

# C locale
SPACE = frozenset(" \t\n\v\f\r")

def is_space(ch: str) -> bool:
    return ch in SPACE

def is_digit(ch: str) -> bool:
    o = ord(ch)
    return 48 <= o <= 57

def is_alpha(ch: str) -> bool:
    o = ord(ch)
    return (65 <= o <= 90) or (97 <= o <= 122)

def is_alnum(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)

def is_word_start(ch: str) -> bool:
    return ch == "_" or is_alpha(ch)

def is_word_part(ch: str) -> bool:
    return ch == "_" or is_alnum(ch)
