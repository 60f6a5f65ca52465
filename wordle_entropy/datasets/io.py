from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

from wordle_entropy.config import WORD_LENGTH


def word_regex(N: int = WORD_LENGTH) -> re.Pattern:
    return re.compile(rf"^[a-z]{{{N}}}$")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def clean_words(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Trim and lowercase each line, keep only N-letter a–z words, and drop
    duplicates (first occurrence wins, order preserved).
    """
    rx = word_regex(N)
    cleaned = (ln.strip().lower() for ln in lines)
    return list(dict.fromkeys(w for w in cleaned if rx.match(w)))


def load_wordlist(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """Read a newline-separated word list into a clean, deduplicated list."""
    return clean_words(read_lines(p), N)
