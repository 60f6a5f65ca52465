"""
Entropy ranking (expected information gain).

For each candidate guess g:
  - partition the CURRENT candidates by the feedback key g would receive
    against each of them,
  - compute Shannon entropy H over those buckets (bits).

Only words inside the candidate set are evaluated as guesses, and every
remaining candidate is assumed equally likely to be the answer.

Bounds: 0 <= H <= log2(n). With a single candidate H is 0 for every guess.

Bucket counts are summed in sorted order so that two guesses inducing the
same partition shape get bit-identical entropies; the selector's
lexicographic tie-break relies on that.

Parallelism: the outer loop is independent per guess, so `rank` can fan the
guesses out to a process pool in contiguous chunks and concatenate results
in candidate order.
"""

import logging
import time
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor
from contextlib import contextmanager
from math import log2
from typing import Dict, Iterator, List, Optional, Sequence

from wordle_entropy.engine.feedback import _score_unchecked
from wordle_entropy.engine.validation import validate_words
from .selector import Suggestion

log = logging.getLogger(__name__)


@contextmanager
def time_section(name: str, loglevel: int = logging.DEBUG) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log(loglevel, "%s took %.3f s", name, time.perf_counter() - start)


def pattern_distribution(guess: str, candidates: Sequence[str]) -> Dict[str, int]:
    """Map feedback key -> number of candidates producing it for `guess`."""
    buckets: Dict[str, int] = defaultdict(int)
    # localize for speed
    _score = _score_unchecked
    for ans in candidates:
        buckets[_score(guess, ans)] += 1
    return dict(buckets)


def entropy_bits(dist: Dict[str, int]) -> float:
    """Shannon entropy (bits) of a bucket-count distribution."""
    n = sum(dist.values())
    if n == 0:
        return 0.0

    H = 0.0
    for c in sorted(dist.values()):
        p = c / n
        H += p * log2(1 / p)   # == -p*log2(p)
    return H


def entropy_of_guess(guess: str, candidates: Sequence[str]) -> float:
    if len(candidates) <= 1:
        return 0.0
    return entropy_bits(pattern_distribution(guess, candidates))


def _rank_chunk(guesses: Sequence[str], candidates: Sequence[str]) -> List[Suggestion]:
    return [Suggestion(g, entropy_of_guess(g, candidates)) for g in guesses]


def _chunks(seq: Sequence[str], parts: int) -> List[Sequence[str]]:
    size = -(-len(seq) // parts)  # ceil
    return [seq[i:i + size] for i in range(0, len(seq), size)]


def rank(candidates: Sequence[str], workers: Optional[int] = None) -> List[Suggestion]:
    """
    Score every candidate as the next guess against the whole candidate set.

    Args:
      candidates : the current candidate set (order is kept in the output)
      workers    : None/0/1 for a serial run; >1 to use a process pool

    Returns:
      One Suggestion per candidate, in candidate order (unsorted; ordering
      is `select`'s job). Empty input gives an empty list.
    """
    cands = validate_words(candidates)
    if not cands:
        return []

    with time_section(f"rank({len(cands)} candidates, workers={workers or 1})"):
        if not workers or workers <= 1 or len(cands) < 2 * workers:
            return _rank_chunk(cands, cands)

        parts = _chunks(cands, workers)
        out: List[Suggestion] = []
        with ProcessPoolExecutor(max_workers=workers) as executor:
            for chunk_result in executor.map(_rank_chunk, parts, [cands] * len(parts)):
                out.extend(chunk_result)
        return out
