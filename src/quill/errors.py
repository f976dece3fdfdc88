from __future__ import annotations


class InvalidArgumentError(ValueError):
    """
    A caller broke an operation's precondition (empty word, chunk offset past
    the end of the text, byte budget too small for the header and marker).

    Kept distinct from an empty result: "no misspellings" or "no suggestions"
    are valid answers and come back as empty lists.
    """
