from __future__ import annotations
from typing import Iterable, List

from . import config as CFG
from .models import Word
from .normalize import trim_bounds, unwrap


def tokenize(text: str, punctuation: Iterable[str] = CFG.PUNCTUATION) -> List[Word]:
    """
    Split `text` into Word spans, left to right.

    Runs of whitespace (including newlines and wrap control characters) are
    skipped; every remaining run up to the next whitespace or the end of the
    buffer is one token. The letters-only core is found by trimming members of
    `punctuation` from both ends of the token.

    Wrap markers must already be normalized away; see words().
    """
    punct = set(punctuation)
    out: List[Word] = []
    n = len(text)
    i = 0
    while i < n:
        if text[i].isspace():
            i += 1
            continue

        start = i
        while i < n and not text[i].isspace():
            i += 1
        end = i

        lo, hi, hyphen = trim_bounds(text, start, end, punct)
        out.append(Word(
            start_index=start,
            end_index=end,
            word_index=lo,
            word_length=hi - lo,
            hyphen_terminated=hyphen,
        ))
    return out


def words(text: str, punctuation: Iterable[str] = CFG.PUNCTUATION) -> List[Word]:
    """Unwrap soft-wrap markers, then tokenize. Spans refer to unwrap(text)."""
    return tokenize(unwrap(text), punctuation)
