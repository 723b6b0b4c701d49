from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .cards import Card

STOCK_SIZE = 24

# Bottom card first; the last card is the waste top.
Stock = Tuple[Card, ...]


def waste_top(stock: Stock) -> Optional[Card]:
    return stock[-1] if stock else None


def can_draw(stock: Stock) -> bool:
    """A draw needs a card underneath the current waste top."""
    return len(stock) > 1


def draw(stock: Stock) -> Stock:
    """Discards the waste top, exposing the next card."""
    if not stock:
        raise IndexError('draw from empty stock')
    return stock[:-1]


def replace_top(stock: Stock, card: Card) -> Stock:
    """Puts a card played from the board onto the waste in place of the top."""
    if not stock:
        raise IndexError('no waste top to cover')
    return stock[:-1] + (card,)


def stock_from_draw_order(cards: Sequence[Card]) -> Stock:
    """Builds a stock from cards in draw order (first card is the waste top)."""
    return tuple(reversed(cards))


def format_stock(stock: Stock) -> str:
    return '[' + ', '.join(str(c) for c in stock) + ']'
