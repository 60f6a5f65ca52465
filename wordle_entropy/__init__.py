"""Entropy-ranked next-guess assistant for Wordle."""

__version__ = "0.1.0"
