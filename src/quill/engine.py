# quill/engine.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from . import config as CFG
from .chunker import chunk as chunk_text
from .dictionary import Dictionary
from .headers import split_header
from .loader import load_dictionary
from .models import TextChunk, WordCorrection
from .normalize import fix_spacing, unwrap
from .spellcheck import check as check_text, replace_word
from .suggest import SuggestionGenerator

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the Dictionary (loaded from word lists + custom entries),
      - spell checking and suggestion generation,
      - header detection and chunking for the chat channel.

    Public API (used by CLI/Flask):
      * load(paths, words=..., custom=...): build the dictionary
      * check(text):           misspelled tokens as WordCorrection
      * suggest(word, k):      ranked replacements
      * chunk(text, ...):      byte-bounded TextChunks
      * add_word / remove_word: custom dictionary entries
      * shutdown():            stop the suggestion worker pool

    All settings come from one Settings value (config-as-value).
    """

    # ------------- lifecycle -------------

    def __init__(self, settings: Optional[CFG.Settings] = None) -> None:
        self.settings = settings or CFG.Settings()
        self.dictionary: Optional[Dictionary] = None
        self._suggester: Optional[SuggestionGenerator] = None

    # /* ~~~ Build the dictionary from word-list files and/or given words ~~~ */
    def load(
        self,
        paths: Optional[Iterable[str]] = None,
        *,
        words: Optional[Iterable[str]] = None,
        custom: Optional[Iterable[str]] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        paths = list(paths or [])
        if not paths and words is None:
            raise ValueError("load(): at least one word-list path or a words iterable is required")

        if paths:
            log.info("Loading word lists from %s", paths)
            dictionary = load_dictionary(paths, verbose=verbose or None)
        else:
            dictionary = Dictionary()
        if words is not None:
            dictionary.update(words)
        for w in custom or ():
            dictionary.add(w)

        # Swap in the new dictionary and a generator bound to it
        if self._suggester is not None:
            self._suggester.close()
        self.dictionary = dictionary
        self._suggester = SuggestionGenerator(dictionary, away_depth=self.settings.away_depth)
        log.info("Engine load() complete: words=%d custom=%d", len(dictionary), len(dictionary.custom_entries))

    def configure(self, **changes) -> CFG.Settings:
        """Return and keep a copy of the settings with `changes` applied."""
        self.settings = replace(self.settings, **changes)
        if self._suggester is not None:
            self._suggester.away_depth = self.settings.away_depth
        return self.settings

    # ------------- spelling -------------

    # /* ~~~ Spell check a text and return the misspelled tokens ~~~ */
    def check(self, text: str) -> List[WordCorrection]:
        d = self._require_dictionary()
        return check_text(
            text, d,
            punctuation=self.settings.punctuation,
            ignore_hyphen_terminated=self.settings.ignore_hyphen_terminated,
        )

    def suggest(self, word: str, max_results: Optional[int] = None) -> List[str]:
        self._require_dictionary()
        k = self.settings.max_suggestions if max_results is None else max_results
        return self._suggester.suggest(word, k)  # type: ignore[union-attr]

    def replace(self, text: str, correction: WordCorrection, replacement: str) -> str:
        return replace_word(text, correction, replacement, punctuation=self.settings.punctuation)

    def add_word(self, word: str) -> bool:
        added = self._require_dictionary().add(word)
        if added:
            log.info("Added %r to the custom dictionary", word.strip().lower())
        return added

    def remove_word(self, word: str) -> bool:
        removed = self._require_dictionary().remove(word)
        if removed:
            log.info("Removed %r from the dictionary", word.strip().lower())
        return removed

    # ------------- chunking -------------

    # /* ~~~ Split text into chat-sized chunks; detect the header if not given ~~~ */
    def chunk(self, text: str, *, header: Optional[str] = None, ooc: bool = False) -> List[TextChunk]:
        s = self.settings
        body = unwrap(text).strip()
        if header is None:
            data, body = split_header(body, s.header_aliases)
            header = data.headstring.strip()
        if s.replace_double_spaces:
            body = fix_spacing(body)
        if not body.strip():
            return []
        return chunk_text(
            header, body,
            ooc,
            s.continuation_marker,
            s.mark_last_chunk,
            s.byte_budget,
            s.break_on_sentence,
            s.sentence_terminators,
            s.encapsulation_chars,
            start_tag=s.ooc_opening_tag,
            end_tag=s.ooc_closing_tag,
        )

    # ------------- teardown -------------

    # /* ~~~ Stop the worker pool ~~~ */
    def shutdown(self) -> None:
        try:
            if self._suggester:
                self._suggester.close()
        finally:
            self._suggester = None
            self.dictionary = None
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_dictionary(self) -> Dictionary:
        if self.dictionary is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
        return self.dictionary
