"""Dense encodings of cards and seats for numerical consumers."""

from __future__ import annotations

import operator
from collections.abc import Iterable

import numpy as np

from oak.primitives.card import Card, Rank, Suit
from oak.primitives.seats import HandIdentifier

NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
NUM_CARDS = NUM_RANKS * NUM_SUITS
NUM_SEATS = len(HandIdentifier)
CARD_DIM = NUM_RANKS + NUM_SUITS  # rank one-hot + suit one-hot = 17

_LOWEST_RANK = min(Rank)


def card_index(card: Card) -> int:
    """Integer encoding: suit * 13 + rank position. Range 0..51, sorts like Card."""
    return card.suit.value * NUM_RANKS + (card.rank.value - _LOWEST_RANK)


def card_from_index(index: int) -> Card:
    index = operator.index(index)
    if not 0 <= index < NUM_CARDS:
        raise ValueError(f"Card index out of range: {index!r}")
    suit, rank = divmod(index, NUM_RANKS)
    return Card(suit=Suit(suit), rank=Rank(rank + _LOWEST_RANK))


def encode_card(card: Card) -> np.ndarray:
    """Encode a card as rank one-hot + suit one-hot (17 dims)."""
    vec = np.zeros(CARD_DIM, dtype=np.float32)
    vec[card.rank - _LOWEST_RANK] = 1.0
    vec[NUM_RANKS + card.suit] = 1.0
    return vec


def encode_hand(cards: Iterable[Card]) -> np.ndarray:
    """Encode a collection of cards as a 52-slot multi-hot vector."""
    vec = np.zeros(NUM_CARDS, dtype=np.float32)
    for card in cards:
        vec[card_index(card)] = 1.0
    return vec


def decode_hand(vec: np.ndarray) -> list[Card]:
    """Inverse of encode_hand. Returns cards in sorted order."""
    vec = np.asarray(vec)
    if vec.shape != (NUM_CARDS,):
        raise ValueError(f"Expected hand vector of shape ({NUM_CARDS},), got {vec.shape}")
    return [card_from_index(int(i)) for i in np.flatnonzero(vec)]


def encode_seat(seat: HandIdentifier) -> np.ndarray:
    vec = np.zeros(NUM_SEATS, dtype=np.float32)
    vec[seat.position] = 1.0
    return vec


def relative_seat(seat: HandIdentifier, viewer: HandIdentifier) -> int:
    """Number of turns from viewer until seat plays: 0 self, 1 left, 2 partner, 3 right."""
    return (seat.position - viewer.position) % NUM_SEATS
