from .selector import Suggestion, select, most_likely
from .entropy import pattern_distribution, entropy_bits, entropy_of_guess, rank

__all__ = [
    "Suggestion", "select", "most_likely",
    "pattern_distribution", "entropy_bits", "entropy_of_guess", "rank",
]
