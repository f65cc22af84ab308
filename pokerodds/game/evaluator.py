"""
Hand category evaluation.

Classifies a 5-7 card set into the best of ten hand categories. Only the
category is computed; kickers and tie-breaks between hands of the same
category are not needed for category odds.
"""

from enum import IntEnum
from typing import Optional, Sequence

from .cards import Card, Rank, Suit


class HandTooSmallError(ValueError):
    """Fewer than five cards were given to the evaluator."""


class HandCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        """Display name, e.g. 'Three of a Kind'."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}

MIN_CARDS = 5
MAX_CARDS = 7


def straight_high(present: Sequence[bool]) -> Optional[int]:
    """
    Highest card of the best straight among the present ranks.

    Args:
        present: 13 flags indexed by rank ordinal (TWO=0 .. ACE=12)

    Returns:
        Strength of the straight's top card (5 for the wheel, 14 for
        broadway), or None if there is no run of five.
    """
    # Strengths 1..14, with the ace also counted low as 1
    values = [present[12]] + list(present)
    best = None
    run = 0
    for i, has_rank in enumerate(values):
        if has_rank:
            run += 1
            if run >= 5:
                best = i + 1
        else:
            run = 0
    return best


def evaluate(cards: Sequence[Card]) -> HandCategory:
    """
    Classify 5 to 7 distinct cards into their best hand category.

    The result depends only on which cards are present, not their order.

    Raises:
        HandTooSmallError: fewer than 5 cards
        ValueError: more than 7 cards
    """
    if len(cards) < MIN_CARDS:
        raise HandTooSmallError(
            f"Need at least {MIN_CARDS} cards to evaluate, got {len(cards)}"
        )
    if len(cards) > MAX_CARDS:
        raise ValueError(f"Cannot evaluate more than {MAX_CARDS} cards, got {len(cards)}")

    rank_counts = [0] * 13
    suit_counts = [0] * 4
    for card in cards:
        rank_counts[card.rank - 2] += 1
        suit_counts[card.suit] += 1

    flush_suit = None
    for suit in Suit:
        if suit_counts[suit] >= 5:
            flush_suit = suit
            break

    if flush_suit is not None:
        flush_present = [False] * 13
        for card in cards:
            if card.suit == flush_suit:
                flush_present[card.rank - 2] = True
        flush_high = straight_high(flush_present)
        if flush_high == Rank.ACE:
            return HandCategory.ROYAL_FLUSH
        if flush_high is not None:
            return HandCategory.STRAIGHT_FLUSH

    pairs = 0
    trips = 0
    quads = False
    for count in rank_counts:
        if count == 4:
            quads = True
        if count >= 3:
            trips += 1
        elif count == 2:
            pairs += 1

    if quads:
        return HandCategory.FOUR_OF_A_KIND
    # A second set of trips plays as the pair
    if trips and (pairs or trips >= 2):
        return HandCategory.FULL_HOUSE
    if flush_suit is not None:
        return HandCategory.FLUSH
    if straight_high([c > 0 for c in rank_counts]) is not None:
        return HandCategory.STRAIGHT
    if trips:
        return HandCategory.THREE_OF_A_KIND
    if pairs >= 2:
        return HandCategory.TWO_PAIR
    if pairs == 1:
        return HandCategory.PAIR
    return HandCategory.HIGH_CARD
