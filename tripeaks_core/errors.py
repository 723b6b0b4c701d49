from __future__ import annotations

from typing import Any


class DealError(ValueError):
    """Base class for problems with the input deal. Raised before any search runs."""


class ParseError(DealError):
    """A token could not be read as a card."""

    def __init__(self, token: Any, message: str = '') -> None:
        self.token = token
        super().__init__(message or f"invalid card {token!r}")


class DuplicateCardError(DealError):
    def __init__(self, card: Any) -> None:
        self.card = card
        super().__init__(f"card {card} is duplicated")


class InsufficientCardsError(DealError):
    def __init__(self, count: int, needed: int = 52) -> None:
        self.count = count
        self.needed = needed
        super().__init__(f"not enough cards provided: got {count}, need {needed}")


class IllegalMoveError(ValueError):
    """A move was replayed in a position where it is not allowed."""
