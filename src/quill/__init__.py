"""
quill - chat message preparation

Prepares free-form text for a byte-limited chat channel and helps catch
misspellings before sending:

- Tokenizer: word spans over text with punctuation, wrap markers, hyphens
- Dictionary / SpellChecker: misspelled tokens with stable indices
- SuggestionGenerator: ranked replacements (transpose, away, splits, deletes)
- Chunker: byte-bounded chunks with header, OOC tags and continuation markers

Example Usage:
    from quill import Engine

    eng = Engine()
    eng.load(["/path/to/lang_en.txt"])
    for c in eng.check("helo world"):
        print(c.original, eng.suggest(c.original))
    for chunk in eng.chunk("/say " + long_text):
        print(chunk.complete_text)
    eng.shutdown()
"""

# src/quill/__init__.py
from .chunker import chunk
from .dictionary import Dictionary
from .engine import Engine
from .errors import InvalidArgumentError
from .headers import parse_header, split_header
from .models import ChatType, HeaderData, TextChunk, Word, WordCorrection
from .spellcheck import check, replace_word
from .suggest import SuggestionGenerator
from .tokenizer import tokenize, words

__version__ = "1.0.0"
__all__ = [
    "Engine", "Dictionary", "SuggestionGenerator", "InvalidArgumentError",
    "Word", "WordCorrection", "TextChunk", "HeaderData", "ChatType",
    "tokenize", "words", "check", "replace_word", "chunk",
    "parse_header", "split_header",
]
