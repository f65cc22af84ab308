"""Exhaustive enumeration of board completions."""

from itertools import combinations
from math import comb
from typing import Iterator, Sequence

from .cards import Card


def enumerate_completions(
    remaining: Sequence[Card],
    k: int,
) -> Iterator[tuple[Card, ...]]:
    """
    Lazily yield every k-card subset of the remaining deck exactly once.

    Subsets come out in lexicographic order of their positions in
    `remaining`, so the same input order always gives the same sequence.

    Args:
        remaining: Cards still in the deck (no duplicates)
        k: Number of cards to draw

    Raises:
        ValueError: if k is negative or larger than the deck
    """
    if k < 0 or k > len(remaining):
        raise ValueError(
            f"Cannot choose {k} cards from a deck of {len(remaining)}"
        )
    return combinations(remaining, k)


def count_completions(deck_size: int, k: int) -> int:
    """Number of k-card subsets of a deck_size deck (n choose k)."""
    return comb(deck_size, k)
