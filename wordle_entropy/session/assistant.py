"""
Assistant: a thin caller-side facade over the engine.

It owns a dictionary (fixed, deduplicated, validated once) and a History,
and re-derives candidates and suggestions from scratch on every query.
Nothing derived is cached, so undo/reset never need invalidation.

Typical use:
    a = Assistant(load_wordlist("words_5.txt"))
    a.apply("crane", "-Y--G")
    snap = a.snapshot(k=10)
    snap.candidates, snap.suggestions, snap.most_likely
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

from wordle_entropy.config import DEFAULT_TOP_K
from wordle_entropy.engine import HistoryEntry, filter_candidates, validate_word
from wordle_entropy.ranking import Suggestion, most_likely, rank, select
from .history import History

log = logging.getLogger(__name__)


class Snapshot(NamedTuple):
    history: Tuple[HistoryEntry, ...]
    candidates: List[str]
    suggestions: List[Suggestion]
    most_likely: Optional[str]
    wordlist_size: int


class Assistant:
    def __init__(self, dictionary: Iterable[str], history: Optional[History] = None,
                 workers: Optional[int] = None):
        # dict.fromkeys: stable dedupe, first occurrence wins
        self.dictionary: Tuple[str, ...] = tuple(dict.fromkeys(validate_word(w) for w in dictionary))
        self.history = history if history is not None else History()
        self.workers = workers
        log.debug("Assistant ready with %d word(s)", len(self.dictionary))

    def apply(self, guess: str, feedback) -> HistoryEntry:
        return self.history.apply(guess, feedback)

    def undo(self) -> HistoryEntry:
        return self.history.undo()

    def reset(self) -> None:
        self.history.reset()

    def candidates(self) -> List[str]:
        return filter_candidates(self.dictionary, self.history)

    def suggestions(self, k: Optional[int] = DEFAULT_TOP_K, workers: Optional[int] = None) -> List[Suggestion]:
        """Top-k ranked guesses; `workers` overrides the pool size set at construction."""
        return select(rank(self.candidates(), workers=workers or self.workers), k)

    def most_likely(self) -> Optional[str]:
        return most_likely(self.candidates())

    def snapshot(self, k: Optional[int] = DEFAULT_TOP_K) -> Snapshot:
        """Everything a display needs, derived from one candidate computation."""
        cands = self.candidates()
        return Snapshot(
            history=self.history.entries,
            candidates=cands,
            suggestions=select(rank(cands, workers=self.workers), k),
            most_likely=most_likely(cands),
            wordlist_size=len(self.dictionary),
        )
