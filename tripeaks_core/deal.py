from __future__ import annotations

import logging
import re
from typing import Iterable, List, Set, Tuple

from .board import BOARD_SIZE, TriPeaksBoard
from .cards import Card
from .errors import DuplicateCardError, InsufficientCardsError
from .stock import STOCK_SIZE, Stock, format_stock, stock_from_draw_order

DECK_SIZE = BOARD_SIZE + STOCK_SIZE

logger = logging.getLogger(__name__)


def split_tokens(text: str) -> List[str]:
    """Splits free text on whitespace and commas."""
    return [t for t in re.split(r'[\s,]+', text) if t]


def parse_deal(tokens: Iterable[str]) -> Tuple[TriPeaksBoard, Stock]:
    """
    Reads a deal of 52 card tokens. The first 28 fill board slots 0..27 in order,
    the remaining 24 are the stock in draw order: the first of them is the
    initial waste top. Tokens beyond the 52nd are ignored.
    """
    seen: Set[Card] = set()
    cards: List[Card] = []
    extra = 0
    for token in tokens:
        if len(cards) == DECK_SIZE:
            extra += 1
            continue
        card = Card.parse(token)
        if card in seen:
            raise DuplicateCardError(card)
        seen.add(card)
        cards.append(card)
    if len(cards) < DECK_SIZE:
        raise InsufficientCardsError(len(cards), DECK_SIZE)
    if extra:
        logger.warning("ignoring %d tokens after the first %d", extra, DECK_SIZE)

    board = TriPeaksBoard.from_cards(cards[:BOARD_SIZE])
    stock = stock_from_draw_order(cards[BOARD_SIZE:])
    logger.debug("parsed deal:\n%s\n%s", board.pretty(), format_stock(stock))
    return board, stock


def parse_deal_text(text: str) -> Tuple[TriPeaksBoard, Stock]:
    return parse_deal(split_tokens(text))
