"""
CLI entry point for batch self-play runs.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads it and picks the answers to play (all, or a seeded sample).
  3) Plays every answer with the top-entropy policy, with a progress bar, and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word-list hash, git commit and summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List

from wordle_entropy.cli.args import positive_int
from wordle_entropy.config import DEFAULT_WORDLIST, MAX_TURNS
from wordle_entropy.datasets import load_wordlist, pretty_summary, validate_wordlist
from wordle_entropy.engine import WordleEntropyError
from wordle_entropy.harness import run_batch, summarize, write_csv, write_manifest
from wordle_entropy.harness.io import git_commit_or_unknown, timestamp_id

log = logging.getLogger(__name__)


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-entropy — self-play evaluation")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST, help="path to a 5-letter word list")
    ap.add_argument("--sample", type=positive_int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--workers", type=positive_int, default=None,
                    help="process-pool size for ranking (default: serial)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal).",
    )
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate and summarise the word list
    rep = validate_wordlist(args.wordlist)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Load and choose cases (deterministic sample by seed)
    words = load_wordlist(args.wordlist)
    cases = list(words)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())

    # 3) Play
    try:
        results = run_batch(cases, dictionary=words, workers=args.workers, progress=progress)
    except WordleEntropyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), max_turns=MAX_TURNS)
    manifest_path = write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "summary": summary,
    }, str(outdir / f"run_{run_id}_manifest.json"))

    print(f"Solved {summary['wins']}/{summary['games']} ({100.0 * summary['win_rate']:.1f}%), "
          f"mean guesses {summary['mean_guesses']:.3f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
