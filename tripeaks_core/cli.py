from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, TextIO

from .deal import parse_deal, split_tokens
from .errors import DealError
from .log import configure
from .moves import move_to_json
from .solver import ProgressFn, run_solver
from .stock import format_stock

BAR_WIDTH = 10


def progress_bar(stream: TextIO) -> ProgressFn:
    """Returns a callback drawing a [====      ] bar, rewritten in place with carriage returns."""
    def _draw(explored: int, total: int) -> None:
        filled = BAR_WIDTH if total == 0 else explored * BAR_WIDTH // total
        stream.write(f"[{'=' * filled}{' ' * (BAR_WIDTH - filled)}]\r")
        stream.flush()
    return _draw


def _read_tokens(args: argparse.Namespace) -> List[str]:
    if args.cards:
        return list(args.cards)
    if args.file and args.file != '-':
        with open(args.file, 'r', encoding='utf-8') as fh:
            return split_tokens(fh.read())
    return split_tokens(sys.stdin.read())


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='TriPeaks solitaire solver')
    parser.add_argument('cards', nargs='*', help='52 card tokens: 28 board slots, then the stock in draw order')
    parser.add_argument('--file', default=None, help="Read the deal from a file ('-' for stdin)")
    parser.add_argument('--no-progress', action='store_true', help='Do not draw the progress bar')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--debug', action='store_true', help='Log search statistics (same as TRIPEAKS_DEBUG=1)')
    args = parser.parse_args(argv)
    if args.cards and args.file:
        parser.error('give the cards either as arguments or with --file, not both')
    configure(debug=args.debug)

    try:
        board, stock = parse_deal(_read_tokens(args))
    except (DealError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not args.json:
        print(f"{board.pretty()}\n\n{format_stock(stock)}")

    on_progress = None if (args.no_progress or args.json) else progress_bar(sys.stderr)
    result = run_solver(board, stock, on_progress)
    if on_progress is not None:
        sys.stderr.write('\n')

    if args.json:
        print(json.dumps({
            'solved': result.solved,
            'moves': [move_to_json(m) for m in result.moves],
            'nodes': result.nodes,
        }))
    elif result.solved:
        for move in result.moves:
            print(move.describe())
    else:
        print('No solution found')
    return 0 if result.solved else 1
