"""
Offline self-play harness for the suggestion policy.

- run_case:  play one puzzle (one hidden answer) by always taking the top
             entropy suggestion.
- run_batch: run many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Each turn rebuilds the candidate set from the full dictionary and the whole
history, exactly as an interactive caller would.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Sequence

from tqdm import tqdm

from wordle_entropy.config import MAX_TURNS
from wordle_entropy.engine import classify, feedback_key, filter_candidates, is_solved, validate_word
from wordle_entropy.ranking import rank, select
from wordle_entropy.session import History

log = logging.getLogger(__name__)


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS} for Wordle-like rules; got {max_turns}")


def next_guess(candidates: Sequence[str], workers: int | None = None) -> str | None:
    """Top entropy suggestion; None once no candidate is left."""
    top = select(rank(candidates, workers=workers), 1)
    return top[0].guess if top else None


def run_case(
        answer: str,
        *,
        dictionary: Sequence[str],
        max_turns: int = MAX_TURNS,
        workers: int | None = None,
) -> Dict:
    """
    Execute one game until solved, the candidates run out, or the turn
    budget is exhausted.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, key)] oldest first), answer (str)
    """
    _assert_wordle_turns(max_turns)
    answer = validate_word(answer)

    history = History()
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        candidates = filter_candidates(dictionary, history)
        guess = next_guess(candidates, workers)
        if guess is None:
            # answer is not in the dictionary; nothing left to try
            log.warning("no candidates left for %r after %d turn(s)", answer, turn - 1)
            break

        fb = classify(guess, answer)
        history.apply(guess, fb)
        log.debug("turn %d: %s -> %s (%d candidates)", turn, guess, feedback_key(fb), len(candidates))

        if is_solved(fb):
            success = True
            break

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": [(e.guess, e.key) for e in history.chronological()],
    }


def run_batch(
        answers: Iterable[str],
        *,
        dictionary: Sequence[str],
        max_turns: int = MAX_TURNS,
        sample: int | None = None,
        workers: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is provided, only the first K
    answers are used to speed up quick experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc="Running", unit="game") if progress else pool

    out: List[Dict] = []
    for ans in iterator:
        out.append(run_case(ans, dictionary=dictionary, max_turns=max_turns, workers=workers))
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over solved games."""
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
    }
