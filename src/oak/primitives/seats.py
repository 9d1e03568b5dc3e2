"""Seats at the table and the two players who control them."""

from __future__ import annotations

import enum
from functools import total_ordering


@total_ordering
class HandIdentifier(enum.Enum):
    """One of the four hands in an Oak game, in turn order."""

    NORTH = "north"  # dummy partner of the user
    EAST = "east"  # dummy partner of the opponent
    SOUTH = "south"  # always the user
    WEST = "west"  # always the opponent

    @property
    def position(self) -> int:
        """Index in turn order, North = 0."""
        return _POSITIONS[self]

    def next(self) -> HandIdentifier:
        """Return the seat that plays after this one."""
        return _NEXT[self]

    def partner(self) -> HandIdentifier:
        """Return the seat across the table."""
        return _PARTNERS[self]

    def player_name(self) -> PlayerName:
        return _PLAYERS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandIdentifier):
            return NotImplemented
        return self.position < other.position

    def __str__(self) -> str:
        return self.name.title()


class PlayerName(enum.Enum):
    """Identifies one of the two players participating in a round."""

    USER = "user"
    OPPONENT = "opponent"

    def primary_hand(self) -> HandIdentifier:
        """Return the hand this player sees at the start of the auction.

        Also the hand which leads the first trick of a round when this player
        is the declarer.
        """
        return _PRIMARY_HANDS[self]


_POSITIONS = {
    HandIdentifier.NORTH: 0,
    HandIdentifier.EAST: 1,
    HandIdentifier.SOUTH: 2,
    HandIdentifier.WEST: 3,
}

_NEXT = {
    HandIdentifier.NORTH: HandIdentifier.EAST,
    HandIdentifier.EAST: HandIdentifier.SOUTH,
    HandIdentifier.SOUTH: HandIdentifier.WEST,
    HandIdentifier.WEST: HandIdentifier.NORTH,
}

_PARTNERS = {
    HandIdentifier.NORTH: HandIdentifier.SOUTH,
    HandIdentifier.EAST: HandIdentifier.WEST,
    HandIdentifier.SOUTH: HandIdentifier.NORTH,
    HandIdentifier.WEST: HandIdentifier.EAST,
}

_PLAYERS = {
    HandIdentifier.NORTH: PlayerName.USER,
    HandIdentifier.EAST: PlayerName.OPPONENT,
    HandIdentifier.SOUTH: PlayerName.USER,
    HandIdentifier.WEST: PlayerName.OPPONENT,
}

_PRIMARY_HANDS = {
    PlayerName.USER: HandIdentifier.SOUTH,
    PlayerName.OPPONENT: HandIdentifier.WEST,
}
