"""
Error taxonomy and input checks for the engine.

The engine expects already-validated five-letter lowercase words. When it is
handed something else it raises one of the exceptions below at the call
boundary instead of scoring a malformed word.

  - InvalidWordLength : not exactly WORD_LENGTH letters (after stripping)
  - InvalidAlphabet   : characters outside a–z (after lowercasing)
  - InvalidFeedback   : feedback of the wrong length or with unknown symbols
  - EmptyHistory      : undo on a history with no rounds

An empty candidate set is NOT an error; rankers and selectors return empty
results for it.
"""

from typing import Iterable, Set

from wordle_entropy.config import ALPHABET, WORD_LENGTH


class WordleEntropyError(Exception):
    """Base class for every error raised by this package."""


class InvalidWord(WordleEntropyError, ValueError):
    def __init__(self, word, message: str):
        super().__init__(message)
        self.word = word


class InvalidWordLength(InvalidWord):
    pass


class InvalidAlphabet(InvalidWord):
    pass


class InvalidFeedback(WordleEntropyError, ValueError):
    pass


class EmptyHistory(WordleEntropyError, IndexError):
    pass


def validate_word(word, N: int = WORD_LENGTH) -> str:
    """
    Return the normalised (stripped, lowercased) word or raise.

    Raises:
      InvalidAlphabet   if `word` is not a string or has non a–z characters
      InvalidWordLength if it is not exactly N characters long
    """
    if not isinstance(word, str):
        raise InvalidAlphabet(word, f"word must be a string, got {type(word).__name__}")

    w = word.strip().lower()

    if len(w) != N:
        raise InvalidWordLength(word, f"{word!r} has {len(w)} letters; expected {N}")
    if not set(w) <= ALPHABET:
        bad = sorted(set(w) - ALPHABET)
        raise InvalidAlphabet(word, f"{word!r} contains characters outside a-z: {bad}")
    return w


def validate_words(words: Iterable[str], N: int = WORD_LENGTH) -> list:
    """Validate every word, preserving order. Fails on the first bad one."""
    return [validate_word(w, N) for w in words]


def validate_guess(word: str, allowed: Iterable[str], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a well-formed word that appears in `allowed`.

    Unlike validate_word this never raises; it is meant for UI-level checks.
    """
    try:
        w = validate_word(word, N)
    except InvalidWord:
        return False

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
