"""
Wordle-style feedback for a single (guess, answer) pair.

Conventions (LetterResult values double as display glyphs):
  - 'G' : CORRECT = correct letter in the correct position
  - 'Y' : PRESENT = letter occurs elsewhere in the answer
  - '-' : ABSENT  = letter not present (or present fewer times than guessed)

A Feedback is a 5-tuple of LetterResult. Its canonical key is the
concatenation of the values, e.g. "GY--G", which is what `score` returns and
what the ranker groups by.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all CORRECT positions and counts the remaining
     (unmatched) letters of the answer.
  2) Second pass marks PRESENT only while the letter still has remaining
     count, scanning the guess left to right; otherwise ABSENT.

The order matters for repeated letters: guessing two 'e's against an answer
with one unmatched 'e' yields exactly one PRESENT.
"""

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple, Union

from wordle_entropy.config import WORD_LENGTH
from .validation import InvalidFeedback, validate_word


class LetterResult(str, Enum):
    # declaration order is the display order: CORRECT, PRESENT, ABSENT
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    def __str__(self) -> str:
        return self.value


Feedback = Tuple[LetterResult, ...]

_BY_VALUE = {r.value: r for r in LetterResult}

# Symbols accepted by parse_feedback (lowercased before lookup)
_ALIASES = {
    "g": LetterResult.CORRECT,
    "y": LetterResult.PRESENT,
    "-": LetterResult.ABSENT,
    "b": LetterResult.ABSENT,
    "x": LetterResult.ABSENT,
    ".": LetterResult.ABSENT,
    "_": LetterResult.ABSENT,
}

SOLVED_KEY = LetterResult.CORRECT.value * WORD_LENGTH


def _score_unchecked(guess: str, answer: str) -> str:
    """Two-pass scoring on already-normalised words; returns the pattern key."""
    pattern = ["-"] * len(guess)

    # Pass 1: mark greens and collect leftover counts from the answer.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows only while the letter still has remaining availability.
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1  # consume one instance

    return "".join(pattern)


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback key of `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return _score_unchecked(validate_word(guess), validate_word(answer))


def classify(guess: str, answer: str) -> Feedback:
    """Compute the Feedback tuple of `guess` against `answer`."""
    return tuple(_BY_VALUE[ch] for ch in score(guess, answer))


def feedback_key(feedback: Iterable[LetterResult]) -> str:
    """Canonical string key for grouping/hashing, e.g. "GY--G"."""
    return "".join(_parse_symbol(r).value for r in feedback)


def _parse_symbol(sym) -> LetterResult:
    if isinstance(sym, LetterResult):
        return sym
    if isinstance(sym, str):
        s = sym.strip()
        if s.upper() in LetterResult.__members__:
            return LetterResult[s.upper()]
        if s.lower() in _ALIASES:
            return _ALIASES[s.lower()]
    raise InvalidFeedback(f"unknown feedback symbol: {sym!r}")


def parse_feedback(value: Union[str, Iterable], N: int = WORD_LENGTH) -> Feedback:
    """
    Build a Feedback from a key string ("GY--G"), a sequence of LetterResult,
    or a sequence of member names (["CORRECT", "ABSENT", ...]).

    Raises InvalidFeedback on the wrong length or an unknown symbol.
    """
    if isinstance(value, str):
        symbols = list(value.strip())
    else:
        symbols = list(value)

    if len(symbols) != N:
        raise InvalidFeedback(f"feedback {value!r} has {len(symbols)} positions; expected {N}")
    return tuple(_parse_symbol(s) for s in symbols)


def is_solved(feedback: Iterable[LetterResult]) -> bool:
    return feedback_key(feedback) == SOLVED_KEY
