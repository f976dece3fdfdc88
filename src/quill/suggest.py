from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Set

from . import config as CFG
from .dictionary import Dictionary
from .errors import InvalidArgumentError
from .normalize import capitalize_first

log = logging.getLogger(__name__)

LETTERS = "abcdefghijklmnopqrstuvwxyz"
VOWELS = "aeiouy"


class SuggestionGenerator:
    """
    Proposes replacements for a misspelled word.

    Four candidate strategies run side by side on a small thread pool:
      * transpose - swap adjacent letters          ("cta"  -> "cat")
      * away      - substitute / add a letter, up to `away_depth` edits
      * splits    - break into two words           ("alot" -> "a lot")
      * deletes   - drop one letter                ("catt" -> "cat")
    Results are merged in that order whatever order the tasks finish in.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        *,
        away_depth: int = CFG.AWAY_DEPTH,
        max_workers: int = CFG.SUGGEST_WORKERS,
    ) -> None:
        self.dictionary = dictionary
        self.away_depth = away_depth
        self._pool: Optional[ThreadPoolExecutor] = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="quill-suggest"
        )

    # ------------- public -------------

    def suggest(self, word: str, max_results: int = CFG.MAX_SUGGESTIONS) -> List[str]:
        if not word:
            raise InvalidArgumentError("suggest(): word must not be empty")
        if max_results < 0:
            raise InvalidArgumentError("suggest(): max_results must be >= 0")
        if self._pool is None:
            raise RuntimeError("SuggestionGenerator is closed")
        if max_results == 0:
            return []

        is_capped = word[0].isupper()
        w = word.lower()

        # Away is by far the slowest, start it first
        away = self._pool.submit(self.generate_away, w, self.away_depth, False)
        transpose = self._pool.submit(self.generate_transpose, w, True)
        splits = self._pool.submit(self.generate_splits, w)
        deletes = self._pool.submit(self.generate_deletes, w, True)

        results: List[str] = []
        seen: Set[str] = {w}
        for fut in (transpose, away, splits, deletes):
            for cand in fut.result():
                if len(results) >= max_results:
                    break
                if cand in seen or not self._is_word(cand):
                    continue
                seen.add(cand)
                results.append(cand)

        log.debug("suggest(%r): %d candidate(s)", word, len(results))
        return [capitalize_first(r) for r in results] if is_capped else results

    def close(self) -> None:
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    # ------------- strategies -------------

    def _is_word(self, candidate: str) -> bool:
        # A split suggestion is valid when both halves are
        return all(self.dictionary.contains(p) for p in candidate.split(" "))

    def generate_transpose(self, word: str, filtered: bool = True) -> List[str]:
        results: List[str] = []
        for x in range(len(word) - 1):
            test = word[:x] + word[x + 1] + word[x] + word[x + 2:]
            if not filtered or self.dictionary.contains(test):
                results.append(test)
        return results

    def generate_deletes(self, word: str, filtered: bool = True) -> List[str]:
        results: List[str] = []
        for i in range(len(word)):
            test = word[:i] + word[i + 1:]
            if not filtered or self.dictionary.contains(test):
                results.append(test)
        return results

    def generate_splits(self, word: str) -> List[str]:
        results: List[str] = []
        for i in range(1, len(word) - 1):
            left, right = word[:i], word[i:]
            if self.dictionary.contains(left) and self.dictionary.contains(right):
                results.append(f"{left} {right}")
        return results

    def generate_away(self, word: str, depth: int = CFG.AWAY_DEPTH, filtered: bool = False) -> List[str]:
        """
        Single-letter substitutions and end insertions, ranked in two passes:
          pass 0: every letter at each vowel position
          pass 1: a letter added at the front, every letter at each
                  consonant position, then a letter added at the end
        With depth > 1 the same step is applied to every depth-1 candidate;
        the nested calls filter only when depth > 2.
        """
        results: List[str] = []
        seen: Set[str] = set()

        def add(test: str) -> None:
            if (not filtered or self.dictionary.contains(test)) and test not in seen:
                seen.add(test)
                results.append(test)

        for z in (0, 1):
            if z == 1:
                for letter in LETTERS:
                    add(letter + word)
            for x in range(len(word)):
                if (word[x] in VOWELS) != (z == 0):
                    continue
                for letter in LETTERS:
                    add(word[:x] + letter + word[x + 1:])
            if z == 1:
                for letter in LETTERS:
                    add(word + letter)

        if depth > 1:
            for parent in list(results):
                results.extend(self.generate_away(parent, depth - 1, depth > 2))
        return results
