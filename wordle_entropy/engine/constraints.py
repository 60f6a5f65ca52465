"""
Candidate filtering given game history.

Given:
  - a dictionary of words
  - a history of (guess, feedback) rounds, asserted by the caller

Return:
  - the words that would have produced exactly the recorded feedback for
    EVERY round, i.e. the words that could still be the answer.

Each round is an independent predicate, so the order in which rounds are
applied does not change the result.
"""

import logging
from typing import Iterable, List, NamedTuple

from wordle_entropy.config import WORD_LENGTH
from .feedback import Feedback, _score_unchecked, feedback_key, parse_feedback
from .validation import validate_word

log = logging.getLogger(__name__)


class HistoryEntry(NamedTuple):
    """One accepted round: the word guessed and the feedback it received."""
    guess: str
    feedback: Feedback

    @classmethod
    def of(cls, guess: str, feedback) -> "HistoryEntry":
        """Validate and normalise a (guess, feedback) pair."""
        return cls(validate_word(guess), parse_feedback(feedback))

    @property
    def key(self) -> str:
        return feedback_key(self.feedback)


def filter_candidates(words: Iterable[str], history: Iterable, N: int = WORD_LENGTH) -> List[str]:
    """
    Keep only words that reproduce every recorded feedback.

    Args:
      words   : the dictionary (iteration order is preserved in the result)
      history : iterable of HistoryEntry or plain (guess, feedback) pairs;
                feedback may be a Feedback tuple or a key string like "GY--G"
      N       : expected word length

    Raises:
      InvalidWordLength / InvalidAlphabet for a malformed word or guess,
      InvalidFeedback for malformed feedback.
    """
    # Validate and reduce the history to (guess, key) once, up front.
    rounds = [(validate_word(g, N), feedback_key(parse_feedback(f, N))) for g, f in history]

    out: List[str] = []
    for w in words:
        w = validate_word(w, N)

        # If scoring this candidate against a past guess doesn't reproduce the
        # recorded pattern, the candidate is out.
        if all(_score_unchecked(g, w) == key for g, key in rounds):
            out.append(w)

    log.debug("filter_candidates: %d round(s) -> %d candidate(s)", len(rounds), len(out))
    return out
