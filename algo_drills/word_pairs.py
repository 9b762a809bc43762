"""Count how often each pair of adjacent words occurs in a text."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter
from collections.abc import Mapping, Sequence
from itertools import pairwise

_LETTERS = frozenset(string.ascii_letters)


def strip_non_alpha(word: str) -> str:
    """Drop leading and trailing characters that are not ASCII letters."""
    start = next((i for i, c in enumerate(word) if c in _LETTERS), None)
    if start is None:
        return ""
    end = next(i for i in range(len(word) - 1, -1, -1) if word[i] in _LETTERS)
    return word[start : end + 1]


def count_word_pairs(text: str) -> Counter[tuple[str, str]]:
    """Count adjacent word pairs; a token with no letters breaks the chain."""
    words = [strip_non_alpha(token) for token in text.split()]
    return Counter((a, b) for a, b in pairwise(words) if a and b)


def format_counts(counts: Mapping[tuple[str, str], int]) -> str:
    """Render pairs as ``first second:count`` lines, most frequent first."""
    ordered = sorted(counts.items(), key=lambda entry: -entry[1])
    return "".join(f"{first} {second}:{count}\n" for (first, second), count in ordered)


def main(argv: Sequence[str] | None = None) -> int:
    """Count word pairs of a file and write the ranked result to another."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="./sample-text2.txt")
    parser.add_argument("output", nargs="?", default="./count-result.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("cannot open file", file=sys.stderr)
        return 1

    report = format_counts(count_word_pairs(text))

    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(report)
    except OSError:
        print("cannot operate file", file=sys.stderr)
        return 1
    return 0