# symbol_clusters/classify.py
"""Decides which symbol clusters a window contributes to.

A window is the up-to-three characters starting at one offset of a line.
Its first character may count as a single symbol, the first two as a pair
and all three as a triple. Letters never count, digits only count as
singles, and a whitespace middle character still allows a triple.
"""
from typing import Tuple


def is_letter(c: str) -> bool:
    return c.isalpha()


def is_letter_or_digit(c: str) -> bool:
    return c.isalpha() or c.isdecimal()


def classify(window: str) -> Tuple[str, ...]:
    """Returns the clusters to increment for ``window``, shortest first."""
    if not window:
        return ()

    first = window[0]
    if is_letter(first):
        return ()
    clusters = [first]

    # --- Pair ---
    if first.isdecimal() or len(window) < 2:
        return tuple(clusters)
    second = window[1]
    if is_letter_or_digit(second):
        return tuple(clusters)
    if not second.isspace():
        clusters.append(first + second)

    # --- Triple ---
    if len(window) < 3:
        return tuple(clusters)
    third = window[2]
    if is_letter_or_digit(third):
        return tuple(clusters)
    if first.isspace() or third.isspace():
        return tuple(clusters)
    clusters.append(first + second + third)
    return tuple(clusters)
