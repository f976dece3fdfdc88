from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

# /* ~~~ soft-wrap markers left in the buffer by the editor ~~~ */
SPACED_WRAP_MARKER: str = "\r\r"     # join with a space
NOSPACE_WRAP_MARKER: str = "\r"      # join with nothing

# Characters trimmed from both ends of a token before a dictionary lookup
PUNCTUATION: str = ",.'*\"-(){}[]!?<>`~♥@#$%^&_=+\\/«»“”‹›"

# Words like "interr-" are usually cut off on purpose
IGNORE_WORDS_ENDING_IN_HYPHEN: bool = True

# Spell check skip patterns
NUMBER_PATTERN: str = r"^[+-]?[\d,]*\.?\d+$"
ORDINAL_SUFFIXES: tuple[str, ...] = ("st", "nd", "rd", "th")
DATE_PATTERN: str = r"^\d{1,4}[/.-]\d{1,2}(?:[/.-]\d{1,4})?$"
TIME_PATTERN: str = r"^\d{1,2}:\d{2}(?::\d{2})?(?:[ap]\.?m\.?)?$"

# Chunking
BYTE_BUDGET: int = 490               # 500 byte chat limit minus a safety zone
BREAK_ON_SENTENCE: bool = True
SENTENCE_TERMINATORS: str = ".?!"
ENCAPSULATION_CHARACTERS: str = "\"'*-"
CONTINUATION_MARKER: str = "(#c/#m)"  # #c -> chunk number, #m -> chunk count
MARK_LAST_CHUNK: bool = False
OOC_OPENING_TAG: str = "(( "
OOC_CLOSING_TAG: str = " ))"
REPLACE_DOUBLE_SPACES: bool = True

# Suggestions
MAX_SUGGESTIONS: int = 5
AWAY_DEPTH: int = 2
SUGGEST_WORKERS: int = 4

# /* ~~~ user header aliases: "/alias" -> chat type name ~~~ */
HEADER_ALIASES: Dict[str, str] = {}

# Word list files picked up when a folder is given to the loader
WORD_LIST_EXTS = [".txt", ".dic", ".lst"]


@dataclass(frozen=True)
class Settings:
    """
    Configuration values threaded through every operation.
    Defaults mirror the module constants above; build a new value with
    dataclasses.replace() to change a setting.
    """
    punctuation: str = PUNCTUATION
    ignore_hyphen_terminated: bool = IGNORE_WORDS_ENDING_IN_HYPHEN
    byte_budget: int = BYTE_BUDGET
    break_on_sentence: bool = BREAK_ON_SENTENCE
    sentence_terminators: str = SENTENCE_TERMINATORS
    encapsulation_chars: str = ENCAPSULATION_CHARACTERS
    continuation_marker: str = CONTINUATION_MARKER
    mark_last_chunk: bool = MARK_LAST_CHUNK
    ooc_opening_tag: str = OOC_OPENING_TAG
    ooc_closing_tag: str = OOC_CLOSING_TAG
    replace_double_spaces: bool = REPLACE_DOUBLE_SPACES
    max_suggestions: int = MAX_SUGGESTIONS
    away_depth: int = AWAY_DEPTH
    header_aliases: Dict[str, str] = field(default_factory=lambda: dict(HEADER_ALIASES))
