from .core import run_case, run_batch, next_guess, summarize
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "next_guess", "summarize", "write_csv", "write_manifest"]
