"""
TriPeaks solver core package.

Pure-logic modules used by the command line and the Flask API.
Modules:
- cards.py: Card, Rank, Suit, cyclic rank adjacency
- board.py: TriPeaksBoard and the free-slot geometry
- stock.py: stock/waste helpers
- moves.py: BoardMove, StockMove, legal_moves, apply_move, replay
- deal.py: parse_deal and input validation
- solver.py: the backtracking search
"""
