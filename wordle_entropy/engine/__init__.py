from .feedback import LetterResult, Feedback, score, classify, feedback_key, parse_feedback, is_solved
from .constraints import HistoryEntry, filter_candidates
from .validation import (
    WordleEntropyError,
    InvalidWord,
    InvalidWordLength,
    InvalidAlphabet,
    InvalidFeedback,
    EmptyHistory,
    validate_word,
    validate_guess,
)

__all__ = [
    "LetterResult", "Feedback", "score", "classify", "feedback_key", "parse_feedback", "is_solved",
    "HistoryEntry", "filter_candidates",
    "WordleEntropyError", "InvalidWord", "InvalidWordLength", "InvalidAlphabet",
    "InvalidFeedback", "EmptyHistory", "validate_word", "validate_guess",
]
