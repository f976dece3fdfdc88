from __future__ import annotations
import logging
from dataclasses import replace
from typing import Iterable, List

from . import config as CFG
from .errors import InvalidArgumentError
from .models import TextChunk
from .normalize import byte_len

log = logging.getLogger(__name__)


def effective_budget(
    header: str,
    continuation_template: str,
    byte_budget_base: int,
    wrap_in_brackets: bool,
    start_tag: str = CFG.OOC_OPENING_TAG,
    end_tag: str = CFG.OOC_CLOSING_TAG,
) -> int:
    """
    Bytes left for user text in every chunk. Computed once per request from
    the raw marker template, not from each rendered marker.
    """
    budget = byte_budget_base - byte_len(f"{header} ") - byte_len(continuation_template)
    if wrap_in_brackets:
        budget -= byte_len(start_tag + end_tag)
    return budget


def render_marker(template: str, ordinal: int, total: int) -> str:
    """'(#c/#m)' -> '(2/5)'"""
    return template.replace("#c", str(ordinal)).replace("#m", str(total))


def substring_by_byte_count(
    text: str,
    start: int,
    byte_limit: int,
    *,
    break_on_sentence: bool = CFG.BREAK_ON_SENTENCE,
    sentence_terminators: Iterable[str] = CFG.SENTENCE_TERMINATORS,
    encapsulation_chars: Iterable[str] = CFG.ENCAPSULATION_CHARACTERS,
) -> str:
    """
    Longest piece of text[start:] that fits `byte_limit` UTF-8 bytes, cut at
    a sensible boundary.

    Preference when the piece has to be cut:
      1) the character right after the cut is a space
      2) the last sentence break (space after a terminator, or after an
         encapsulation character that follows a terminator), if enabled
      3) the last space
      4) a hard mid-word cut (at least one character, even if it alone is
         wider than the budget)
    A newline always ends the piece.
    """
    if start < 0 or start >= len(text):
        raise InvalidArgumentError(f"start index {start} is outside the text (length {len(text)})")
    if byte_limit < 1:
        raise InvalidArgumentError(f"byte limit must be positive, got {byte_limit}")

    terminators = set(sentence_terminators)
    encaps = set(encapsulation_chars)
    remaining = len(text) - start
    last_space = -1
    last_sentence = -1
    size = 0

    for length in range(1, remaining + 1):
        size += byte_len(text[start + length - 1])
        if size > byte_limit:
            length -= 1
            if length == 0:
                return text[start:start + 1]
            if text[start + length] == " ":
                return text[start:start + length]
            if break_on_sentence and last_sentence > 0:
                return text[start:start + last_sentence]
            if last_space > 0:
                return text[start:start + last_space]
            return text[start:start + length]

        if length == remaining:
            break

        ch = text[start + length]
        if ch == "\n":
            return text[start:start + length]
        if ch == " ":
            last_space = length
            prev = text[start + length - 1]
            if prev in terminators:
                last_sentence = length
            elif length >= 2 and prev in encaps and text[start + length - 2] in terminators:
                last_sentence = length

    return text[start:]


def chunk(
    header: str,
    text: str,
    wrap_in_brackets: bool = False,
    continuation_template: str = CFG.CONTINUATION_MARKER,
    mark_last: bool = CFG.MARK_LAST_CHUNK,
    byte_budget_base: int = CFG.BYTE_BUDGET,
    break_on_sentence: bool = CFG.BREAK_ON_SENTENCE,
    sentence_terminators: Iterable[str] = CFG.SENTENCE_TERMINATORS,
    encapsulation_chars: Iterable[str] = CFG.ENCAPSULATION_CHARACTERS,
    *,
    start_tag: str = CFG.OOC_OPENING_TAG,
    end_tag: str = CFG.OOC_CLOSING_TAG,
) -> List[TextChunk]:
    """
    Split `text` into chat-sized TextChunks.

    Every chunk carries the header and, when `wrap_in_brackets`, the OOC tags.
    With more than one chunk, each but the last gets the rendered
    continuation marker; the last one too when `mark_last`.
    """
    budget = effective_budget(header, continuation_template, byte_budget_base,
                              wrap_in_brackets, start_tag, end_tag)
    if budget < 1:
        raise InvalidArgumentError(
            f"byte budget {byte_budget_base} leaves no room for text after header and marker"
        )

    open_tag = start_tag if wrap_in_brackets else ""
    close_tag = end_tag if wrap_in_brackets else ""

    results: List[TextChunk] = []
    offset = 0
    while offset < len(text):
        piece = substring_by_byte_count(
            text, offset, budget,
            break_on_sentence=break_on_sentence,
            sentence_terminators=sentence_terminators,
            encapsulation_chars=encapsulation_chars,
        )
        body = piece.strip()
        if body:
            results.append(TextChunk(
                header=header,
                text=body,
                out_of_character_start_tag=open_tag,
                out_of_character_end_tag=close_tag,
                start_index=offset + (len(piece) - len(piece.lstrip())),
            ))
        offset += len(piece)

    if len(results) > 1:
        total = len(results)
        marked = total if mark_last else total - 1
        results = [
            replace(c, continuation_marker=render_marker(continuation_template, i + 1, total)) if i < marked else c
            for i, c in enumerate(results)
        ]

    log.debug("chunked %d char(s) into %d chunk(s), budget=%d bytes", len(text), len(results), budget)
    return results
