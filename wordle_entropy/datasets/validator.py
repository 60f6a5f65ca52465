"""
Word-list validator.

What this module does:
- Validate a word list file (one word per line) for length N.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordle_entropy.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordle_entropy/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple

from wordle_entropy.config import WORD_LENGTH
from .io import word_regex


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z (surrounding whitespace is tolerated)
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    rx = word_regex(N)
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if rx.match(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word list for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) whose `passed`
        flag is strict: file exists, non-empty, no invalid lines and no
        duplicates. `issues` lists every problem found.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordlistReport(N, path, False, 0, "", 0, 0, False, issues))

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique,
        invalid_lines=invalid,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
