"""
Report writers for self-play runs.

A run produces one CSV row per game (see `flatten_result`) and one JSON
manifest describing how the run was made. Feedback keys start with '-' for
absent letters, which spreadsheets read as a formula, so CSV cells carry a
leading apostrophe.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import logging
import subprocess
from pathlib import Path
from typing import Dict, Iterable, List

from wordle_entropy.config import MAX_TURNS

log = logging.getLogger(__name__)

RESULT_FIELDS = ["answer", "success", "guesses", "time_ms"]


def report_fields(max_turns: int = MAX_TURNS) -> List[str]:
    turns = [(f"guess_{t}", f"patt_{t}") for t in range(1, max_turns + 1)]
    return RESULT_FIELDS + [name for pair in turns for name in pair]


def flatten_result(result: Dict, max_turns: int = MAX_TURNS) -> Dict:
    """One run_case() result -> one CSV row; unplayed turns are blank."""
    row = {name: "" for name in report_fields(max_turns)}
    row.update(
        answer=result["answer"],
        success=result["success"],
        guesses=result["guesses"],
        time_ms=round(float(result["time_ms"]), 3),
    )
    for t, (guess, key) in enumerate(result["history"][:max_turns], start=1):
        row[f"guess_{t}"] = guess
        row[f"patt_{t}"] = f"'{key}"
    return row


def write_csv(results: Iterable[Dict], path: str, max_turns: int = MAX_TURNS) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=report_fields(max_turns))
        writer.writeheader()
        writer.writerows(flatten_result(r, max_turns) for r in results)
    log.info("wrote %s", p)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump run metadata (config, word-list report, summary) as indented JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    log.info("wrote %s", p)
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        log.debug("not a git checkout; recording commit as unknown")
        return "unknown"
    return out.decode().strip()
