from __future__ import annotations

import logging
import os
import sys
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        BoardEngine,
        ConfigurationError,
        Direction,
        MoveResult,
        PRESETS,
        coord_from_json,
        engine_to_json,
        layout_from_json,
        layout_names,
    )
    from .pegfield_core.config import configure_logging, load_settings  # type: ignore
except ImportError:
    from game import (  # type: ignore
        BoardEngine,
        ConfigurationError,
        Direction,
        MoveResult,
        PRESETS,
        coord_from_json,
        engine_to_json,
        layout_from_json,
        layout_names,
    )
    from pegfield_core.config import configure_logging, load_settings  # type: ignore

LOG = logging.getLogger("pegfield.app")

SETTINGS = load_settings()

app = Flask(__name__)


@dataclass
class _Game:
    engine: BoardEngine
    # Held for the whole request so one game's operations never overlap
    lock: threading.Lock = field(default_factory=threading.Lock)


# One engine per game id; engines themselves are never shared between games
_games: "OrderedDict[str, _Game]" = OrderedDict()
_games_lock = threading.Lock()


def _store_game(engine: BoardEngine) -> str:
    game_id = uuid.uuid4().hex
    with _games_lock:
        _games[game_id] = _Game(engine)
        while len(_games) > SETTINGS.max_sessions:
            old_id, _ = _games.popitem(last=False)
            LOG.info("evicted game %s (session cap %d)", old_id, SETTINGS.max_sessions)
    return game_id


def _lookup_game(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[_Game]]:
    game_id = body.get("gameId")
    if not isinstance(game_id, str):
        return None, None
    with _games_lock:
        game = _games.get(game_id)
        if game is not None:
            _games.move_to_end(game_id)
    return game_id, game


def _json_body() -> Optional[Dict[str, Any]]:
    """Request body as a dict; an empty body is {} and a non-object body is None."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        return None
    return body


def _bad_body() -> Any:
    return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400


def _missing_game(game_id: Optional[str]) -> Any:
    return jsonify({"ok": False, "error": f"unknown game: {game_id}"}), 404


def _move_response(engine: BoardEngine, result: MoveResult) -> Any:
    if not result.applied:
        return jsonify({
            "ok": False,
            "error": result.reason.value,
            "state": engine_to_json(engine),
        }), 400
    return jsonify({
        "ok": True,
        "won": result.just_won,
        "jumped": list(result.midpoint) if result.midpoint else None,
        "state": engine_to_json(engine),
    })


@app.get("/")
def index() -> Any:
    return jsonify({"ok": True, "name": "pegfield", "layouts": list(layout_names())})


@app.get("/api/layouts")
def api_layouts() -> Any:
    return jsonify({"ok": True, "layouts": {name: list(PRESETS[name]) for name in layout_names()}})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        layout, voids = layout_from_json(body, default_layout=SETTINGS.default_layout)
        engine = BoardEngine(layout, voids)
    except ConfigurationError as e:
        return jsonify({"ok": False, "error": f"bad layout: {e}"}), 400
    game_id = _store_game(engine)
    LOG.debug("new game %s on %dx%d board", game_id, engine.size, engine.size)
    return jsonify({"ok": True, "gameId": game_id, "state": engine_to_json(engine)})


@app.post("/api/state")
def api_state() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    game_id, game = _lookup_game(body)
    if game is None:
        return _missing_game(game_id)
    with game.lock:
        return jsonify({"ok": True, "state": engine_to_json(game.engine)})


@app.post("/api/select")
def api_select() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    game_id, game = _lookup_game(body)
    if game is None:
        return _missing_game(game_id)
    try:
        cell = coord_from_json(body.get("cell"))
    except ConfigurationError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    with game.lock:
        game.engine.select_or_deselect(cell)
        return jsonify({"ok": True, "state": engine_to_json(game.engine)})


@app.post("/api/swipe")
def api_swipe() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    game_id, game = _lookup_game(body)
    if game is None:
        return _missing_game(game_id)
    try:
        direction = Direction.parse(str(body.get("direction", "")))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    with game.lock:
        return _move_response(game.engine, game.engine.attempt_move_direction(direction))


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    game_id, game = _lookup_game(body)
    if game is None:
        return _missing_game(game_id)
    try:
        target = coord_from_json(body.get("target"))
    except ConfigurationError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    with game.lock:
        return _move_response(game.engine, game.engine.attempt_move(target))


@app.post("/api/reset")
def api_reset() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    game_id, game = _lookup_game(body)
    if game is None:
        return _missing_game(game_id)
    try:
        if "layout" in body or "cells" in body:
            layout, voids = layout_from_json(body)
        else:
            layout, voids = None, None
        with game.lock:
            game.engine.reset(layout, voids)
            return jsonify({"ok": True, "state": engine_to_json(game.engine)})
    except ConfigurationError as e:
        return jsonify({"ok": False, "error": f"bad layout: {e}"}), 400


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging(SETTINGS.log_level)
    app.run(host="0.0.0.0", port=SETTINGS.port, debug=SETTINGS.debug)
