"""argparse `type=` helpers shared by the console commands."""

import argparse


def _int_at_least(minimum: int):
    def parse(value: str) -> int:
        n = int(value)
        if n < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {n}")
        return n
    parse.__name__ = f"int>={minimum}"
    return parse


non_negative_int = _int_at_least(0)
positive_int = _int_at_least(1)
