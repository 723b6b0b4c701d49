from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple, Union

from .board import TriPeaksBoard
from .cards import Card
from .errors import IllegalMoveError
from .stock import Stock, can_draw, draw, replace_top, waste_top


@dataclass(frozen=True)
class BoardMove:
    """A board card played onto the waste."""
    card: Card

    kind = 'board'

    def describe(self) -> str:
        return f"Move {self.card} onto the stock"


@dataclass(frozen=True)
class StockMove:
    """A draw; `card` is the card the draw exposes."""
    card: Card

    kind = 'stock'

    def describe(self) -> str:
        return f"Reveal {self.card} from the stock"


Move = Union[BoardMove, StockMove]


def move_to_json(move: Move) -> Dict[str, Any]:
    return {'kind': move.kind, 'card': str(move.card), 'text': move.describe()}


def playable_indices(board: TriPeaksBoard, stock: Stock) -> List[int]:
    """Free slots whose card may go onto the current waste top, in search order."""
    top = waste_top(stock)
    if top is None:
        return []
    return [i for i in board.free_card_indices() if board.cards[i].is_sequential(top)]


def legal_moves(board: TriPeaksBoard, stock: Stock) -> List[Move]:
    """Lists every legal move, board moves first, in the order the solver tries them."""
    moves: List[Move] = [BoardMove(board.cards[i]) for i in playable_indices(board, stock)]
    if can_draw(stock):
        moves.append(StockMove(stock[-2]))
    return moves


def apply_move(board: TriPeaksBoard, stock: Stock, move: Move) -> Tuple[TriPeaksBoard, Stock]:
    """Applies a move and returns the new (board, stock). Raises IllegalMoveError if not legal."""
    if isinstance(move, StockMove):
        if not can_draw(stock):
            raise IllegalMoveError(f"cannot draw {move.card}: stock is exhausted")
        stock = draw(stock)
        if stock[-1] != move.card:
            raise IllegalMoveError(f"draw exposes {stock[-1]}, not {move.card}")
        return board, stock
    for i in playable_indices(board, stock):
        if board.cards[i] == move.card:
            return board.without(i), replace_top(stock, move.card)
    raise IllegalMoveError(f"{move.card} is not a free card sequential to {waste_top(stock)}")


def replay(board: TriPeaksBoard, stock: Stock, moves: Iterable[Move]) -> Tuple[TriPeaksBoard, Stock]:
    """Applies moves in order, checking each one, and returns the final position."""
    for move in moves:
        board, stock = apply_move(board, stock, move)
    return board, stock
