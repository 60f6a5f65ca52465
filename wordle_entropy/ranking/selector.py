"""
Ordering and picking among ranked suggestions.

  - select      : sort by bits (descending), ties by guess (ascending),
                  then keep the top k
  - most_likely : the "best current guess among remaining candidates",
                  currently the lexicographically-first candidate
"""

from typing import Iterable, List, NamedTuple, Optional

from wordle_entropy.config import DEFAULT_TOP_K


class Suggestion(NamedTuple):
    guess: str
    bits: float


def select(suggestions: Iterable[Suggestion], k: Optional[int] = DEFAULT_TOP_K) -> List[Suggestion]:
    """
    Return the top-k suggestions, highest expected information first.

    `k=None` returns the full ordering. A negative k raises ValueError.
    """
    if k is not None and k < 0:
        raise ValueError(f"k must be non-negative; got {k}")

    ordered = sorted(suggestions, key=lambda s: (-s.bits, s.guess))
    return ordered if k is None else ordered[:k]


def most_likely(candidates: Iterable[str]) -> Optional[str]:
    # TODO: weight candidates by a word-frequency prior instead of spelling.
    return min(candidates, default=None)
