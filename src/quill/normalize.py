from __future__ import annotations
from typing import Iterable

from . import config as CFG


def unwrap(text: str) -> str:
    """
    Remove the editor's soft-wrap markers:
      * spaced marker + newline   -> single space
      * no-space marker + newline -> nothing
    The spaced marker contains the no-space one, so it is replaced first.
    """
    return (
        text.replace(CFG.SPACED_WRAP_MARKER + "\n", " ")
        .replace(CFG.NOSPACE_WRAP_MARKER + "\n", "")
    )


def trim_bounds(text: str, start: int, end: int, punctuation: Iterable[str]) -> tuple[int, int, bool]:
    """
    Trim punctuation from both ends of text[start:end].

    Returns (core_start, core_end, hyphen_terminated). hyphen_terminated is the
    hyphen status of the LAST character trimmed from the back, so "word-."
    is hyphen terminated while "word.-" is not.
    """
    punct = punctuation if isinstance(punctuation, (set, frozenset)) else set(punctuation)
    lo = start
    while lo < end and text[lo] in punct:
        lo += 1

    hi = end
    hyphen = False
    while hi > lo and text[hi - 1] in punct:
        hyphen = text[hi - 1] == "-"
        hi -= 1
    return lo, hi, hyphen


def strip_punctuation(token: str, punctuation: Iterable[str]) -> tuple[str, bool]:
    """Convenience: the punctuation-free core of a token plus its hyphen flag."""
    lo, hi, hyphen = trim_bounds(token, 0, len(token), punctuation)
    return token[lo:hi], hyphen


def byte_len(s: str) -> int:
    """UTF-8 size of s; chat limits count bytes, not characters."""
    return len(s.encode("utf-8"))


def capitalize_first(s: str) -> str:
    # Only the first character changes; the rest is kept as-is
    return s[:1].upper() + s[1:]


def fix_spacing(s: str) -> str:
    """Collapse runs of spaces into one."""
    while "  " in s:
        s = s.replace("  ", " ")
    return s
