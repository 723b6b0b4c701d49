from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from tripeaks_core.board import TriPeaksBoard
from tripeaks_core.deal import parse_deal, split_tokens
from tripeaks_core.errors import DealError
from tripeaks_core.log import configure
from tripeaks_core.moves import legal_moves, move_to_json
from tripeaks_core.solver import run_solver
from tripeaks_core.stock import Stock, waste_top

configure()
app = Flask(__name__)


def _board_to_json(b: TriPeaksBoard) -> Dict[str, Any]:
    return {
        "slots": [str(c) if c is not None else None for c in b.cards],
        "free": b.free_card_indices(),
        "text": b.pretty(),
    }


def _stock_to_json(s: Stock) -> Dict[str, Any]:
    top = waste_top(s)
    return {"cards": [str(c) for c in s], "wasteTop": str(top) if top is not None else None}


def _tokens_from_body(body: Dict[str, Any]) -> Optional[List[str]]:
    cards = body.get("cards")
    if isinstance(cards, list):
        return [str(x) for x in cards]
    deal = body.get("deal")
    if isinstance(deal, str):
        return split_tokens(deal)
    return None


def _error(message: str, kind: str, status: int = 400) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message, "kind": kind}), status


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/deal")
def api_deal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    tokens = _tokens_from_body(body) if isinstance(body, dict) else None
    if tokens is None:
        return _error("cards or deal required", "BadRequest")
    try:
        board, stock = parse_deal(tokens)
    except DealError as e:
        return _error(str(e), type(e).__name__)
    return jsonify({
        "ok": True,
        "board": _board_to_json(board),
        "stock": _stock_to_json(stock),
        "legalMoves": [move_to_json(m) for m in legal_moves(board, stock)],
    })


@app.post("/api/solve")
def api_solve() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    tokens = _tokens_from_body(body) if isinstance(body, dict) else None
    if tokens is None:
        return _error("cards or deal required", "BadRequest")
    try:
        board, stock = parse_deal(tokens)
    except DealError as e:
        return _error(str(e), type(e).__name__)
    result = run_solver(board, stock)
    return jsonify({
        "ok": True,
        "solved": result.solved,
        "moves": [move_to_json(m) for m in result.moves],
        "nodes": result.nodes,
    })


if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
