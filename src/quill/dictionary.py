# quill/dictionary.py
from __future__ import annotations
from typing import Iterable, Iterator, Optional, Set


def parse_word_list(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield lowercase entries from word-list lines.
    Lines starting with '#' are comments; a line holding several words
    (e.g. "ice cream") contributes each of them.
    """
    for line in lines:
        if line.startswith("#") or not line.strip():
            continue
        for w in line.split():
            yield w.lower()


class Dictionary:
    """
    Set of known lowercase words: a base list plus user-added custom entries.

    Lookups are O(1). add()/remove() are idempotent; custom entries are
    tracked on their own so the caller can persist them.
    """
    def __init__(self, words: Optional[Iterable[str]] = None, custom: Optional[Iterable[str]] = None) -> None:
        self._words: Set[str] = set()
        self._custom: Set[str] = set()
        if words:
            self.update(words)
        for w in custom or ():
            self.add(w)

    # C
    def update(self, words: Iterable[str]) -> int:
        """Bulk-add base words. Returns how many were new."""
        before = len(self._words)
        self._words.update(w.strip().lower() for w in words if w.strip())
        return len(self._words) - before

    def add(self, word: str) -> bool:
        """
        Add a custom entry. An entry holding several words ("ice cream")
        adds each of them. True if any of them was not known before.
        """
        added = False
        for key in word.lower().split():
            if key in self._words:
                continue
            self._words.add(key)
            self._custom.add(key)
            added = True
        return added

    # R
    def contains(self, word: str, lowercase: bool = True) -> bool:
        return (word.lower() if lowercase else word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def custom_entries(self) -> list[str]:
        return sorted(self._custom)

    # D
    def remove(self, word: str) -> bool:
        key = word.strip().lower()
        self._custom.discard(key)
        if key in self._words:
            self._words.discard(key)
            return True
        return False
