from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .errors import ParseError


class Rank(Enum):
    """Card ranks, valued 1 (Ace) through 13 (King)."""
    ACE = 1
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

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self.value - 1]

    @classmethod
    def from_symbol(cls, ch: str) -> 'Rank':
        if len(ch) != 1 or not ch.isascii():
            raise ParseError(ch, f"unknown rank {ch!r}")
        idx = _RANK_SYMBOLS.find(ch.upper())
        if idx < 0:
            raise ParseError(ch, f"unknown rank {ch!r}")
        return cls(idx + 1)

    def is_sequential(self, other: 'Rank') -> bool:
        """True when the ranks differ by one, wrapping King to Ace."""
        a, b = self.value, other.value
        return (a + 1) % 13 == b % 13 or (b + 1) % 13 == a % 13


class Suit(Enum):
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, ch: str) -> 'Suit':
        if not ch.isascii():
            raise ParseError(ch, f"unknown suit {ch!r}")
        try:
            return cls(ch.upper())
        except ValueError:
            raise ParseError(ch, f"unknown suit {ch!r}") from None


_RANK_SYMBOLS = 'A23456789TJQK'


@dataclass(frozen=True)
class Card:
    """A playing card. Two cards are equal when rank and suit match."""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, token: str) -> 'Card':
        """Parses a 2-character token such as '7h' or 'TS' (case-insensitive)."""
        if not isinstance(token, str) or len(token) != 2:
            raise ParseError(token, f"invalid card {token!r}: expected rank and suit")
        try:
            rank = Rank.from_symbol(token[0])
            suit = Suit.from_symbol(token[1])
        except ParseError:
            raise ParseError(token, f"invalid card {token!r}") from None
        return cls(rank, suit)

    @property
    def token(self) -> str:
        return self.rank.symbol + self.suit.symbol

    def is_sequential(self, other: 'Card') -> bool:
        return self.rank.is_sequential(other.rank)

    def __str__(self) -> str:
        return self.token


def full_deck() -> List[Card]:
    """All 52 cards, suit by suit, Ace to King."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]
