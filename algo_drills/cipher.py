"""Substitution cipher and a letter-frequency attack on it."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections import Counter
from collections.abc import Sequence

ALPHABET = string.ascii_lowercase

# English letters ordered from least to most frequent.
FREQUENCY_ORDER = "zqxjkvbpygfwmucldrhsnioate"


def _check_key(key: str) -> None:
    if len(key) != len(ALPHABET) or any(c not in ALPHABET for c in key):
        raise ValueError("key must be 26 lowercase ASCII letters")


def random_key(rng: random.Random | None = None) -> str:
    """Return a random permutation of the lowercase alphabet."""
    rng = rng if rng is not None else random.Random()
    letters = list(ALPHABET)
    rng.shuffle(letters)
    return "".join(letters)


def encrypt(text: str, key: str) -> str:
    """Replace each ASCII letter by the key letter at its position, keeping case."""
    _check_key(key)
    table = str.maketrans(ALPHABET + ALPHABET.upper(), key + key.upper())
    return text.translate(table)


def letter_counts(text: str) -> list[int]:
    """Count each ASCII letter of ``text`` case-insensitively, in alphabet order."""
    counts = Counter(c.lower() for c in text if c in string.ascii_letters)
    return [counts[letter] for letter in ALPHABET]


def frequency_key(counts: Sequence[int]) -> str:
    """Build a key mapping the rarest letters to the rarest English letters."""
    if len(counts) != len(ALPHABET):
        raise ValueError("counts must hold one entry per letter")
    by_rarity = sorted(range(len(ALPHABET)), key=lambda i: counts[i])
    mapping = dict(zip(by_rarity, FREQUENCY_ORDER))
    return "".join(mapping[i] for i in range(len(ALPHABET)))


def decrypt(text: str) -> str:
    """Guess the plain text by matching letter frequencies with English."""
    return encrypt(text, frequency_key(letter_counts(text)))


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt or decrypt a text file line by line."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("mode", choices=("encrypt", "decrypt"))
    parser.add_argument("input")
    parser.add_argument("output")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("cannot open file", file=sys.stderr)
        return 1

    if args.mode == "encrypt":
        key = random_key(random.Random(args.seed))
        converted = encrypt(text, key)
    else:
        converted = decrypt(text)

    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in _lines(converted))
    except OSError:
        print("cannot operate file", file=sys.stderr)
        return 1
    return 0