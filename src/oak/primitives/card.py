"""Card, Rank, Suit representations for Oak."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Suit(enum.IntEnum):
    """Playing card suit. Ordered Clubs < Diamonds < Hearts < Spades."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(enum.IntEnum):
    """Playing card rank, Aces high."""

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
    def char(self) -> str:
        return _RANK_CHARS[self]

    def __str__(self) -> str:
        return self.char

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """One of the 52 standard playing cards.

    Field order matters: cards sort by suit first, then by rank.
    """

    suit: Suit
    rank: Rank

    @classmethod
    def new(cls, suit: Suit, rank: Rank) -> Card:
        return cls(suit=suit, rank=rank)

    def __str__(self) -> str:
        return f"{self.rank.char}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self})"


def make_deck() -> list[Card]:
    """Return all 52 cards in sorted order."""
    return [Card(suit=s, rank=r) for s in Suit for r in Rank]
