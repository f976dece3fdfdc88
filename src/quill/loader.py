from __future__ import annotations
import logging
import os
from typing import Iterable, List, Optional

from .config import WORD_LIST_EXTS
from .dictionary import Dictionary, parse_word_list

log = logging.getLogger(__name__)

# Progress logging: pass verbose=True or set QUILL_VERBOSE=1
PROGRESS_EVERY_FILES = 50


def _verbose_from_env() -> bool:
    return os.environ.get("QUILL_VERBOSE") == "1"


def _iter_word_files(paths: Iterable[str]) -> Iterable[str]:
    """Yield word-list files: plain files as given, folders scanned recursively."""
    for p in paths:
        p = os.path.abspath(p)
        if os.path.isfile(p):
            yield p
            continue
        if not os.path.isdir(p):
            raise FileNotFoundError(p)
        for dirpath, _, filenames in os.walk(p):
            for fn in sorted(filenames):
                if os.path.splitext(fn)[1].lower() in WORD_LIST_EXTS:
                    yield os.path.join(dirpath, fn)


def read_word_list(path: str) -> List[str]:
    """Read one word-list file into lowercase entries."""
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return list(parse_word_list(ln.rstrip("\r\n") for ln in f))


def load_dictionary(
    paths: List[str],
    custom: Iterable[str] | None = None,
    verbose: Optional[bool] = None,
) -> Dictionary:
    """
    Build a Dictionary from word-list files or folders of them, then add the
    user's custom entries on top. `verbose=None` falls back to QUILL_VERBOSE.
    """
    if verbose is None:
        verbose = _verbose_from_env()

    d = Dictionary()
    file_count = 0
    for path in _iter_word_files(paths):
        d.update(read_word_list(path))
        file_count += 1
        if verbose and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%s", f"{file_count:,}")

    for w in custom or ():
        d.add(w)

    if verbose:
        log.info("[done] files=%s words=%s", f"{file_count:,}", f"{len(d):,}")
    return d
