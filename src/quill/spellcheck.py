from __future__ import annotations
import logging
import re
from typing import Iterable, List

from . import config as CFG
from .dictionary import Dictionary
from .errors import InvalidArgumentError
from .models import WordCorrection
from .normalize import strip_punctuation, trim_bounds, unwrap

log = logging.getLogger(__name__)

_NUMBER = re.compile(CFG.NUMBER_PATTERN)
_DATE = re.compile(CFG.DATE_PATTERN)
_TIME = re.compile(CFG.TIME_PATTERN, re.IGNORECASE)
_ORDINAL = re.compile(r"(?:%s)$" % "|".join(CFG.ORDINAL_SUFFIXES), re.IGNORECASE)


def _is_number(s: str) -> bool:
    return bool(_NUMBER.match(s))


def _is_ordinal(s: str) -> bool:
    # 21st, 2nd, 100th ...
    return _is_number(_ORDINAL.sub("", s, count=1))


def _compound_known(word: str, dictionary: Dictionary) -> bool:
    """A hyphenated compound is correct only when every part is a word."""
    parts = [p for p in word.split("-") if p]
    return bool(parts) and all(dictionary.contains(p) for p in parts)


def _is_known(word: str, dictionary: Dictionary) -> bool:
    if dictionary.contains(word):
        return True
    if _is_ordinal(word):
        return True
    if word.lower().endswith("'s") and dictionary.contains(word[:-2]):
        return True
    if "-" in word and _compound_known(word, dictionary):
        return True
    return False


def _split_lines(text: str) -> List[List[str]]:
    """The naive split correction indices are counted against."""
    return [line.split(" ") for line in unwrap(text).split("\n")]


def check(
    text: str,
    dictionary: Dictionary,
    *,
    punctuation: Iterable[str] = CFG.PUNCTUATION,
    ignore_hyphen_terminated: bool = CFG.IGNORE_WORDS_ENDING_IN_HYPHEN,
) -> List[WordCorrection]:
    """
    Return the misspelled tokens of `text`, top to bottom, left to right.

    Each line is split on single spaces and every token, empty ones included,
    advances the running index, so indices stay valid for replace_word().
    Numbers, ordinals, dates and times are never reported.
    """
    punct = set(punctuation)
    results: List[WordCorrection] = []
    index = 0

    for tokens in _split_lines(text):
        if not any(t.strip() for t in tokens):
            index += len(tokens)
            continue

        for tok in tokens:
            pos = index
            index += 1

            if not tok or _is_number(tok):
                continue

            word, hyphen = strip_punctuation(tok, punct)
            if not word:
                continue
            if ignore_hyphen_terminated and (hyphen or word.endswith("-")):
                continue
            if _DATE.match(word) or _TIME.match(word):
                continue

            if not _is_known(word, dictionary):
                results.append(WordCorrection(original=word, index=pos))

    log.debug("spell check: %d token(s), %d correction(s)", index, len(results))
    return results


def replace_word(
    text: str,
    correction: WordCorrection,
    replacement: str,
    *,
    punctuation: Iterable[str] = CFG.PUNCTUATION,
) -> str:
    """
    Replace the token at `correction.index` with `replacement`, keeping any
    punctuation around the token ("wrold," -> "world,").
    The text comes back unwrapped; wrap markers are an editor concern.
    """
    lines = _split_lines(text)
    index = correction.index
    for tokens in lines:
        if index < len(tokens):
            tok = tokens[index]
            lo, hi, _ = trim_bounds(tok, 0, len(tok), set(punctuation))
            tokens[index] = tok[:lo] + replacement + tok[hi:]
            return "\n".join(" ".join(t) for t in lines)
        index -= len(tokens)
    raise InvalidArgumentError(f"no token at index {correction.index}")
