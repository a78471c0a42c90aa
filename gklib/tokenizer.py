"""Splitting of strings into tokens separated by runs of delimiter characters."""

from __future__ import annotations


def tokenize(line: str, delim: str) -> list[str]:
    """Split ``line`` at every run of characters found in ``delim``.

    Leading, trailing and repeated delimiters produce no empty tokens.
    """
    separators = set(delim)
    tokens: list[str] = []
    current: list[str] = []
    for ch in line:
        if ch in separators:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens