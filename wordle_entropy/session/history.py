"""
Caller-owned record of accepted rounds.

History is a stack, most recent round first:
  - push / apply : add a round at the front
  - undo         : remove and return the most recent round
  - reset        : drop every round

It stores rounds only; candidate sets and suggestions are always derived
from it on demand.
"""

from typing import Iterator, List, Tuple

from wordle_entropy.engine.constraints import HistoryEntry
from wordle_entropy.engine.validation import EmptyHistory


class History:
    def __init__(self, entries=()):
        self._entries: List[HistoryEntry] = []
        # `entries` is given most-recent-first, like iteration order
        for e in reversed(list(entries)):
            self.push(e)

    def push(self, entry) -> HistoryEntry:
        # a hand-built HistoryEntry is unchecked, so every entry goes through .of()
        entry = HistoryEntry.of(*entry)
        self._entries.insert(0, entry)
        return entry

    def apply(self, guess: str, feedback) -> HistoryEntry:
        return self.push((guess, feedback))

    def undo(self) -> HistoryEntry:
        if not self._entries:
            raise EmptyHistory("nothing to undo")
        return self._entries.pop(0)

    def reset(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def chronological(self) -> List[HistoryEntry]:
        """Oldest round first."""
        return list(reversed(self._entries))

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, i) -> HistoryEntry:
        return self._entries[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        rounds = ", ".join(f"{e.guess}:{e.key}" for e in self._entries)
        return f"History([{rounds}])"
