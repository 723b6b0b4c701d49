from __future__ import annotations

# Facade module that re-exports the TriPeaks core API.
# Run directly to solve a deal: python tripeaks.py 3H 9C ...

from tripeaks_core.board import BOARD_SIZE, TriPeaksBoard, covering_slots
from tripeaks_core.cards import Card, Rank, Suit, full_deck
from tripeaks_core.deal import DECK_SIZE, parse_deal, parse_deal_text, split_tokens
from tripeaks_core.errors import (
    DealError,
    DuplicateCardError,
    IllegalMoveError,
    InsufficientCardsError,
    ParseError,
)
from tripeaks_core.moves import (
    BoardMove,
    Move,
    StockMove,
    apply_move,
    legal_moves,
    move_to_json,
    replay,
)
from tripeaks_core.solver import (
    SolveResult,
    run_solver,
    solve,
    solve_deal,
    solve_with_progress,
)
from tripeaks_core.stock import Stock, format_stock, waste_top
from tripeaks_core.cli import main

__all__ = [
    'BOARD_SIZE', 'DECK_SIZE', 'TriPeaksBoard', 'covering_slots',
    'Card', 'Rank', 'Suit', 'full_deck',
    'parse_deal', 'parse_deal_text', 'split_tokens',
    'DealError', 'DuplicateCardError', 'IllegalMoveError', 'InsufficientCardsError', 'ParseError',
    'BoardMove', 'Move', 'StockMove', 'apply_move', 'legal_moves', 'move_to_json', 'replay',
    'SolveResult', 'run_solver', 'solve', 'solve_deal', 'solve_with_progress',
    'Stock', 'format_stock', 'waste_top', 'main',
]


if __name__ == '__main__':
    raise SystemExit(main())
