"""
Defaults shared by the engine, the harness and the CLIs.

The CLIs expose most of these as argparse defaults.
"""

import os
import string
from pathlib import Path

# Wordle rules
WORD_LENGTH = 5
ALPHABET = frozenset(string.ascii_lowercase)
MAX_TURNS = 6

# Presentation
DEFAULT_TOP_K = 10
CANDIDATE_DISPLAY_LIMIT = 500

# Bundled word list; point WORDLE_ENTROPY_WORDLIST at another file to override.
BUNDLED_WORDLIST = Path(__file__).resolve().parent / "datasets" / "data" / "words_5.txt"
DEFAULT_WORDLIST = os.environ.get("WORDLE_ENTROPY_WORDLIST", str(BUNDLED_WORDLIST))
