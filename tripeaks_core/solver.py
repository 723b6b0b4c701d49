from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .board import TriPeaksBoard
from .deal import parse_deal
from .moves import BoardMove, Move, StockMove
from .stock import Stock, can_draw, draw, replace_top

logger = logging.getLogger(__name__)

# Called with (explored, total) for the candidates of the current root-level node.
ProgressFn = Callable[[int, int], None]


@dataclass
class SearchStats:
    nodes: int = 0


@dataclass
class SolveResult:
    """Outcome of a search from a given deal."""
    solved: bool
    board: TriPeaksBoard
    stock: Stock
    moves: List[Move] = field(default_factory=list)
    nodes: int = 0
    elapsed: float = 0.0


def _search(
    board: TriPeaksBoard,
    stock: Stock,
    moves: List[Move],
    stats: SearchStats,
    on_progress: Optional[ProgressFn] = None,
) -> bool:
    """
    Depth first search with chronological backtracking.
    Board moves are tried first, in free_card_indices() order, then a single draw.
    Each call works on its own board and stock; only `moves` is shared, and every
    append is matched by a pop when the branch fails.
    """
    stats.nodes += 1
    if board.is_cleared():
        return True
    if not stock:
        return False

    top = stock[-1]
    free = board.free_card_indices()
    for i, pos in enumerate(free):
        if on_progress is not None:
            on_progress(i, len(free))
        card = board.cards[pos]
        if not card.is_sequential(top):
            continue
        moves.append(BoardMove(card))
        # Only the chain of draws from the root reports progress.
        if _search(board.without(pos), replace_top(stock, card), moves, stats):
            return True
        moves.pop()
    if on_progress is not None:
        on_progress(len(free), len(free))

    if not can_draw(stock):
        return False
    rest = draw(stock)
    moves.append(StockMove(rest[-1]))
    if _search(board, rest, moves, stats, on_progress):
        return True
    moves.pop()
    return False


def solve(board: TriPeaksBoard, stock: Stock, moves: List[Move]) -> bool:
    """
    Searches for a sequence of moves that clears the board.
    On success `moves` holds the winning path; otherwise it is left as it was.
    """
    return _search(board, stock, moves, SearchStats())


def solve_with_progress(
    board: TriPeaksBoard,
    stock: Stock,
    moves: List[Move],
    on_progress: ProgressFn,
) -> bool:
    """Same as solve(), reporting how many root-level candidates have been tried."""
    return _search(board, stock, moves, SearchStats(), on_progress)


def run_solver(board: TriPeaksBoard, stock: Stock, on_progress: Optional[ProgressFn] = None) -> SolveResult:
    stats = SearchStats()
    moves: List[Move] = []
    start = time.perf_counter()
    solved = _search(board, stock, moves, stats, on_progress)
    elapsed = time.perf_counter() - start
    logger.debug("search %s after %d nodes in %.3fs", 'solved' if solved else 'exhausted', stats.nodes, elapsed)
    return SolveResult(solved=solved, board=board, stock=stock, moves=moves, nodes=stats.nodes, elapsed=elapsed)


def solve_deal(tokens: Iterable[str]) -> Optional[List[Move]]:
    """Parses a 52-card deal and returns the winning moves, or None when there are none."""
    board, stock = parse_deal(tokens)
    result = run_solver(board, stock)
    return result.moves if result.solved else None
