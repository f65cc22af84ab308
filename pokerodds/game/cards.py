"""Card, deck and known-card utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

from treys import Card as TreysCard


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def strength(self) -> int:
        return int(self)

    @property
    def ordinal(self) -> int:
        """Zero-based index, TWO=0 .. ACE=12."""
        return self - 2


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

CardLike = Union["Card", str]


class DuplicateCardError(ValueError):
    """The same card was supplied more than once among the known cards."""

    def __init__(self, card: "Card"):
        super().__init__(f"Duplicate card: {card} appears more than once")
        self.card = card


@dataclass(frozen=True)
class Card:
    """A playing card. Equality is by (rank, suit) only."""
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'. '10h' is accepted too."""
        s = s.strip()
        if s[:2] == "10":
            s = "T" + s[2:]
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=Rank(STR_RANK[rank_char]), suit=Suit(STR_SUIT[suit_char]))

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def parse_cards(cards: Union[str, Iterable[CardLike]]) -> list[Card]:
    """
    Parse cards from a string or an iterable of strings/Cards.

    Examples:
        "AsKh"        -> [As, Kh]
        "Qs Js, 2d"   -> [Qs, Js, 2d]
        ["As", Card(Rank.KING, Suit.HEARTS)] -> [As, Kh]
    """
    if isinstance(cards, str):
        text = cards.replace(",", " ").replace("10", "T")
        tokens = []
        for chunk in text.split():
            if len(chunk) % 2:
                raise ValueError(f"Invalid card string: {chunk}")
            tokens.extend(chunk[i:i + 2] for i in range(0, len(chunk), 2))
        return [Card.from_string(t) for t in tokens]

    return [c if isinstance(c, Card) else Card.from_string(c) for c in cards]


def full_deck() -> list[Card]:
    """All 52 cards, suits outer (clubs first) and ranks inner (two first)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def check_distinct(cards: Iterable[Card]) -> None:
    """Raise DuplicateCardError if any card occurs twice."""
    seen: set[Card] = set()
    for card in cards:
        if card in seen:
            raise DuplicateCardError(card)
        seen.add(card)


def remaining_deck(known: Iterable[Card]) -> list[Card]:
    """
    The full deck minus the known cards, in full_deck() order.

    Raises:
        DuplicateCardError: if known contains the same card twice
    """
    known = list(known)
    check_distinct(known)
    dead = set(known)
    return [c for c in full_deck() if c not in dead]
