"""
Interactive Wordle entropy assistant.

Enter each round as "<guess> <feedback>", where feedback uses one symbol per
letter: G = correct spot, Y = elsewhere in the word, - (or B/X/./_) = absent.

    > crane -Y--G
    > undo
    > reset
    > quit

After every change the assistant shows the history (most recent first), the
remaining candidates, the most likely pick and the top next guesses by bits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wordle_entropy.cli.args import non_negative_int, positive_int
from wordle_entropy.config import CANDIDATE_DISPLAY_LIMIT, DEFAULT_TOP_K, DEFAULT_WORDLIST
from wordle_entropy.datasets import load_wordlist
from wordle_entropy.engine import LetterResult, WordleEntropyError, validate_guess
from wordle_entropy.session import Assistant, Snapshot

log = logging.getLogger(__name__)

EMOJI = {
    LetterResult.CORRECT: "🟩",
    LetterResult.PRESENT: "🟨",
    LetterResult.ABSENT: "⬜",
}

HELP = (
    "commands: <guess> <feedback>  (e.g. 'crane -Y--G'; G=correct, Y=present, -=absent)\n"
    "          undo | reset | show | help | quit"
)


def render(console: Console, snap: Snapshot, top: int = DEFAULT_TOP_K) -> None:
    console.print(f"Wordlist size: [bold]{snap.wordlist_size}[/]   "
                  f"Candidates: [bold]{len(snap.candidates)}[/]")

    console.print("[bold]History (most recent first)[/]")
    if not snap.history:
        console.print("  [dim](no history yet)[/]")
    for e in snap.history:
        console.print(f"  {e.guess}  {''.join(EMOJI[r] for r in e.feedback)}")

    shown = snap.candidates[:CANDIDATE_DISPLAY_LIMIT]
    console.print(f"[bold]Candidates ({len(snap.candidates)})[/]")
    if shown:
        console.print("  " + " ".join(shown))
    if len(snap.candidates) > CANDIDATE_DISPLAY_LIMIT:
        console.print(f"  [dim]... {len(snap.candidates) - CANDIDATE_DISPLAY_LIMIT} more[/]")

    table = Table(title=f"Top {top} Next Guesses")
    table.add_column("Guess")
    table.add_column("Bits", justify="right")
    for s in snap.suggestions:
        table.add_row(s.guess, f"{s.bits:.3f}")
    if not snap.suggestions:
        table.add_row("[dim]No suggestions (empty candidate set)[/]", "")
    console.print(f"Most likely: [bold]{snap.most_likely or '-'}[/]")
    console.print(table)


def handle_command(assistant: Assistant, line: str, console: Console, top: int = DEFAULT_TOP_K) -> bool:
    """
    Apply one line of user input. Returns False when the session should end.

    A two-token line is always a round, so real words like "reset" can be
    guessed; bare commands are single tokens. Engine errors (bad word, bad
    feedback, nothing to undo) are reported and the session continues.
    """
    parts: List[str] = line.split()
    if not parts:
        return True

    cmd = parts[0].lower() if len(parts) == 1 else None
    try:
        if cmd in ("quit", "exit", "q"):
            return False
        if cmd == "help":
            console.print(HELP)
            return True
        if cmd == "undo":
            e = assistant.undo()
            console.print(f"undid {e.guess} {e.key}")
        elif cmd == "reset":
            assistant.reset()
        elif cmd == "show":
            pass
        elif len(parts) == 2:
            e = assistant.apply(parts[0], parts[1])
            if not validate_guess(e.guess, assistant.dictionary):
                console.print(f"[yellow]note:[/] {e.guess} is not in the word list")
        else:
            console.print(f"[red]unrecognised input:[/] {escape(repr(line.strip()))}")
            console.print(HELP)
            return True
    except WordleEntropyError as e:
        console.print(f"[red]error:[/] {escape(str(e))}")
        return True

    render(console, assistant.snapshot(top), top)
    return True


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-entropy — interactive next-guess assistant")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST, help="path to a 5-letter word list")
    ap.add_argument("--top", type=non_negative_int, default=DEFAULT_TOP_K, help="number of suggestions to show")
    ap.add_argument("--workers", type=positive_int, default=None,
                    help="process-pool size for ranking (default: serial)")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console()
    try:
        words = load_wordlist(args.wordlist)
    except FileNotFoundError as e:
        console.print(f"[red]word list not found:[/] {escape(str(e))}")
        return 2
    log.info("Loaded %d words from %s", len(words), args.wordlist)

    assistant = Assistant(words, workers=args.workers)
    console.print(HELP)
    render(console, assistant.snapshot(args.top), args.top)

    while True:
        try:
            line = console.input("[bold]> [/]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not handle_command(assistant, line, console, args.top):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
