from __future__ import annotations

import logging
import os
import uuid
from collections import OrderedDict
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    Board,
    Game,
    GameMode,
    GameState,
    IllegalMove,
    InvalidStateTransition,
    OthelloError,
    OutOfBounds,
    get_strategy,
    parse_player,
    player_name,
)
from othello_core.log import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = os.getenv("OTHELLO_AI_STRATEGY", "greedy")
MAX_GAMES = int(os.getenv("OTHELLO_MAX_GAMES", "256"))

app = Flask(__name__)

# In-memory sessions, oldest first. Nothing is persisted.
_GAMES: "OrderedDict[str, Game]" = OrderedDict()


class ApiError(Exception):
    def __init__(self, message: str, status: int = 400) -> None:
        super().__init__(message)
        self.status = status


def _register_game(game: Game) -> str:
    gid = uuid.uuid4().hex
    _GAMES[gid] = game
    while len(_GAMES) > max(1, MAX_GAMES):
        old, _ = _GAMES.popitem(last=False)
        logger.debug("evicted game %s", old)
    return gid


def _get_game(body: Dict[str, Any]) -> Game:
    gid = body.get("gameId")
    if not isinstance(gid, str) or not gid:
        raise ApiError("gameId required")
    game = _GAMES.get(gid)
    if game is None:
        raise ApiError(f"unknown game {gid}", status=404)
    return game


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _parse_move(raw: Any) -> tuple:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ApiError("move must be [row, col]")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in raw):
        raise ApiError("move must be [row, col]")
    return raw[0], raw[1]


def _moves_to_json(moves) -> List[List[int]]:
    return [[int(r), int(c)] for (r, c) in moves]


def state_to_json(s: GameState, legal: Optional[List] = None) -> Dict[str, Any]:
    black, white = s.score()
    result = None
    if s.result is not None:
        result = {
            "blackCount": s.result.black_count,
            "whiteCount": s.result.white_count,
            "winner": player_name(s.result.winner),
            "draw": s.result.is_draw,
        }
    return {
        "board": s.board.rows(),
        "currentPlayer": player_name(s.current_player),
        "mode": s.mode.value,
        "computerPlayer": player_name(s.computer_player) if s.mode == GameMode.PVC else None,
        "score": {"black": black, "white": white},
        "legalMoves": _moves_to_json(legal or []),
        "over": s.is_over,
        "result": result,
    }


def _game_json(game: Game) -> Dict[str, Any]:
    return state_to_json(game.state, game.legal_moves())


def _new_game(body: Dict[str, Any]) -> Game:
    mode = GameMode.parse(body.get("mode", "pvp"))
    computer = parse_player(body.get("computer", "white"))
    strategy = get_strategy(str(body.get("strategy", DEFAULT_STRATEGY)))
    return Game(mode=mode, computer_player=computer, strategy=strategy)


# ---------- Error handling ----------

@app.errorhandler(ApiError)
def _handle_api_error(e: ApiError) -> Any:
    return jsonify({"ok": False, "error": str(e)}), e.status


@app.errorhandler(OthelloError)
def _handle_game_error(e: OthelloError) -> Any:
    status = 409 if isinstance(e, InvalidStateTransition) else 400
    logger.debug("rejected: %s", e)
    return jsonify({"ok": False, "error": str(e)}), status


@app.errorhandler(ValueError)
def _handle_value_error(e: ValueError) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    game = _new_game(_body())
    gid = _register_game(game)
    return jsonify({"ok": True, "gameId": gid, "state": _game_json(game)})


@app.post("/api/new_from")
def api_new_from() -> Any:
    body = _body()
    rows = body.get("board")
    if not isinstance(rows, list):
        raise ApiError("board required")
    board = Board.from_rows(rows)
    game = Game.from_position(
        board,
        current_player=parse_player(body.get("turn", "black")),
        mode=GameMode.parse(body.get("mode", "pvp")),
        computer_player=parse_player(body.get("computer", "white")),
        strategy=get_strategy(str(body.get("strategy", DEFAULT_STRATEGY))),
    )
    gid = _register_game(game)
    return jsonify({"ok": True, "gameId": gid, "state": _game_json(game)})


@app.post("/api/state")
def api_state() -> Any:
    game = _get_game(_body())
    return jsonify({"ok": True, "state": _game_json(game)})


@app.post("/api/legal")
def api_legal() -> Any:
    game = _get_game(_body())
    return jsonify({"ok": True, "legalMoves": _moves_to_json(game.legal_moves())})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    game = _get_game(body)
    move = _parse_move(body.get("move"))
    try:
        events = game.attempt_move(*move)
    except (IllegalMove, OutOfBounds) as e:
        return jsonify({"ok": False, "error": str(e), "legalMoves": _moves_to_json(game.legal_moves())}), 400
    return jsonify({
        "ok": True,
        "events": [ev.to_json() for ev in events],
        "state": _game_json(game),
    })


@app.post("/api/ai")
def api_ai() -> Any:
    game = _get_game(_body())
    events = game.play_computer_move()
    move = events[0].placed
    return jsonify({
        "ok": True,
        "move": [int(move[0]), int(move[1])],
        "events": [ev.to_json() for ev in events],
        "state": _game_json(game),
    })


@app.post("/api/reset")
def api_reset() -> Any:
    body = _body()
    game = _get_game(body)
    if "computer" in body:
        game.start_game(body.get("mode", game.state.mode), parse_player(body["computer"]))
    else:
        game.reset(body.get("mode"))
    return jsonify({"ok": True, "state": _game_json(game)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
