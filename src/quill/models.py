# src/quill/models.py
"""
Data models for quill.

This module defines the small, immutable value records passed between the
tokenizer, the spell checker, the chunker and their callers:

- Word: a span descriptor over a text buffer (token + letters-only core).
- WordCorrection: a misspelled token and its position in the checked text.
- TextChunk: one outgoing, byte-bounded message unit.
- HeaderData: the chat-route header recognised at the front of a text.

These classes do not contain business logic beyond trivial derived views;
they only structure the data so that tokenizing, checking and chunking stay
simple and predictable.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import config as CFG


@dataclass(frozen=True, slots=True)
class Word:
    """
    One whitespace-delimited token inside a text buffer.

    Attributes
    ----------
    start_index : int
        Index of the first character of the token, punctuation included.
    end_index : int
        Index one past the last character of the token.
    word_index : int
        Index where the letters-only core starts (after leading punctuation).
    word_length : int
        Length of the core. 0 means the token was all punctuation and there
        is nothing to check.
    hyphen_terminated : bool
        True when the last character trimmed from the back was a hyphen,
        which usually marks an interrupted word rather than a misspelling.
    in_dictionary : Optional[bool]
        Spell check result; None until a checker has looked at the word.
    """
    start_index: int
    end_index: int
    word_index: int
    word_length: int
    hyphen_terminated: bool = False
    in_dictionary: Optional[bool] = None

    @property
    def word_end_index(self) -> int:
        return self.word_index + self.word_length

    def text(self, buffer: str) -> str:
        """The whole token, punctuation included."""
        return buffer[self.start_index:self.end_index]

    def word(self, buffer: str) -> str:
        """The letters-only core, or "" when there is none."""
        if self.word_length <= 0:
            return ""
        return buffer[self.word_index:self.word_end_index]


@dataclass(frozen=True, slots=True)
class WordCorrection:
    """
    A misspelled token found by the spell checker.

    Attributes
    ----------
    original : str
        The token as written, with leading/trailing punctuation stripped.
    index : int
        Ordinal of the token among all space-split tokens of the checked
        text, counted across lines. replace_word() uses the same split.
    """
    original: str
    index: int


@dataclass(frozen=True, slots=True)
class TextChunk:
    """
    One outgoing message unit produced by the chunker.

    Attributes
    ----------
    header : str
        Chat-route prefix placed before the text (e.g. "/say").
    text : str
        The user content assigned to this chunk.
    out_of_character_start_tag / out_of_character_end_tag : str
        Optional bracketing literals around the text, "" when unused.
    continuation_marker : str
        Rendered trailer such as "(1/3)", "" on an unmarked chunk.
    start_index : int
        Offset of `text` inside the input that was chunked.
    """
    header: str = ""
    text: str = ""
    out_of_character_start_tag: str = ""
    out_of_character_end_tag: str = ""
    continuation_marker: str = ""
    start_index: int = -1

    @property
    def complete_text(self) -> str:
        body = (
            self.text.replace(CFG.SPACED_WRAP_MARKER, " ")
            .replace(CFG.NOSPACE_WRAP_MARKER, "")
            .replace("\n", "")
            .strip()
        )
        head = f"{self.header} " if self.header else ""
        tail = f" {self.continuation_marker}" if self.continuation_marker else ""
        return f"{head}{self.out_of_character_start_tag}{body}{self.out_of_character_end_tag}{tail}"


class ChatType(Enum):
    NONE = 0
    EMOTE = 1
    REPLY = 2
    SAY = 3
    PARTY = 4
    FC = 5
    SHOUT = 6
    YELL = 7
    TELL = 8
    ECHO = 9
    LINKSHELL = 10
    CROSSWORLD_LINKSHELL = 11


@dataclass(frozen=True, slots=True)
class HeaderData:
    """
    Result of header parsing. `headstring` is the exact prefix found at the
    front of the text (including its trailing separator and, for tells, the
    target); an empty headstring means no usable header.
    """
    chat_type: ChatType = ChatType.NONE
    headstring: str = ""
    tell_target: str = ""
    linkshell: int = 0
    cross_world: bool = False

    @property
    def valid(self) -> bool:
        return len(self.headstring) > 0
