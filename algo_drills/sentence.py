"""Reverse the order of words in a sentence."""


def reverse_words(sentence: str) -> str:
    """Reverse word order, keeping every space in mirrored position."""
    return " ".join(reversed(sentence.split(" ")))