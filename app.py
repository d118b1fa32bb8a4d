from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

from game import (
    BLACK,
    BOTH,
    PHASES,
    PLAYERS,
    VIEWING_OBSERVATION,
    WHITE,
    Board,
    Cell,
    EngineError,
    IllegalActionError,
    Pending,
    Rules,
    Session,
    TieRule,
    find_five_in_row,
    new_session,
    next_probability,
    observe,
    place,
    reset,
    revert,
    rules_from_env,
    skip,
)

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

# Defaults for /api/new, from QGOMOKU_* environment variables
DEFAULT_RULES = rules_from_env()


# ---------- JSON encoding ----------

def cell_to_json(cell: Cell) -> Any:
    if isinstance(cell, Pending):
        return {"player": cell.player, "probability": cell.probability}
    return cell


def cell_from_json(obj: Any) -> Cell:
    if obj is None:
        return None
    if isinstance(obj, str):
        if obj not in PLAYERS:
            raise ValueError(f"unknown stone {obj!r}")
        return obj
    player = str(obj["player"])
    if player not in PLAYERS:
        raise ValueError(f"unknown player {player!r}")
    return Pending(player, float(obj["probability"]))


def board_to_json(board: Board) -> List[Any]:
    return [cell_to_json(c) for c in board]


def board_from_json(cells: List[Any], size: int) -> Board:
    if len(cells) != size * size:
        raise ValueError(f"expected {size * size} cells, got {len(cells)}")
    return tuple(cell_from_json(c) for c in cells)


def _pair(values: Optional[Tuple[int, int]]) -> Optional[Dict[str, int]]:
    if values is None:
        return None
    return {BLACK: int(values[0]), WHITE: int(values[1])}


def _unpair(obj: Optional[Dict[str, Any]], what: str) -> Optional[Tuple[int, int]]:
    if obj is None:
        return None
    pair = int(obj[BLACK]), int(obj[WHITE])
    if min(pair) < 0:
        raise ValueError(f"{what} must be >= 0, got {pair!r}")
    return pair


def rules_to_json(rules: Rules) -> Dict[str, Any]:
    return {
        "boardSize": rules.board_size,
        "tieRule": rules.tie_rule.value,
        "observationLimit": rules.observation_limit,
        "blackCycle": list(rules.black_cycle),
        "whiteCycle": list(rules.white_cycle),
    }


def rules_from_json(obj: Dict[str, Any]) -> Rules:
    limit = obj.get("observationLimit")
    return Rules(
        board_size=int(obj.get("boardSize", DEFAULT_RULES.board_size)),
        tie_rule=TieRule(obj.get("tieRule", DEFAULT_RULES.tie_rule.value)),
        observation_limit=None if limit is None else int(limit),
        black_cycle=tuple(float(p) for p in obj.get("blackCycle", DEFAULT_RULES.black_cycle)),
        white_cycle=tuple(float(p) for p in obj.get("whiteCycle", DEFAULT_RULES.white_cycle)),
    )


def state_to_json(s: Session) -> Dict[str, Any]:
    return {
        "rules": rules_to_json(s.rules),
        "board": board_to_json(s.board),
        "currentPlayer": s.current_player,
        "phase": s.phase,
        "stoneIndex": _pair(s.stone_index),
        "observationsLeft": _pair(s.observations_left),
        "winner": s.winner,
        "snapshot": None if s.snapshot is None else board_to_json(s.snapshot),
        "log": list(s.log),
        "nextProbability": next_probability(s),
    }


def json_to_state(obj: Dict[str, Any]) -> Session:
    rules_in = obj.get("rules", {})
    if not isinstance(rules_in, dict):
        raise ValueError("rules must be an object")
    rules = rules_from_json(rules_in)
    size = rules.board_size
    phase = str(obj.get("phase", PHASES[0]))
    if phase not in PHASES:
        raise ValueError(f"unknown phase {phase!r}")
    current = str(obj.get("currentPlayer", BLACK))
    if current not in PLAYERS:
        raise ValueError(f"unknown player {current!r}")
    winner = obj.get("winner")
    if winner is not None and winner not in PLAYERS + (BOTH,):
        raise ValueError(f"unknown winner {winner!r}")
    snap = obj.get("snapshot")
    if phase == VIEWING_OBSERVATION and snap is None:
        raise ValueError("snapshot required while viewing an observation")
    return Session(
        rules=rules,
        board=board_from_json(obj["board"], size),
        current_player=current,
        phase=phase,
        stone_index=_unpair(obj.get("stoneIndex"), "stoneIndex") or (0, 0),
        observations_left=_unpair(obj.get("observationsLeft"), "observationsLeft"),
        winner=winner,
        snapshot=None if snap is None else board_from_json(snap, size),
        log=tuple(str(m) for m in obj.get("log", [])),
    )


def _winning_line(s: Session) -> List[int]:
    line: List[int] = []
    for color in PLAYERS:
        run = find_five_in_row(s.board, s.size, color)
        if run:
            line.extend(run)
    return line


def _reply(s: Session) -> Any:
    return jsonify({"ok": True, "state": state_to_json(s), "winningLine": _winning_line(s)})


def _reject(message: str) -> Any:
    app.logger.info("rejected %s: %s", request.path, message)
    return jsonify({"ok": False, "error": message}), 400


def _json_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _load_state(body: Dict[str, Any]) -> Session:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return json_to_state(s_in)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _reject("request body must be a JSON object")
    try:
        limit = body.get("observationLimit", DEFAULT_RULES.observation_limit)
        rules = Rules(
            board_size=int(body.get("size", DEFAULT_RULES.board_size)),
            tie_rule=TieRule(body.get("tieRule", DEFAULT_RULES.tie_rule.value)),
            observation_limit=None if limit is None else int(limit),
        )
    except (TypeError, ValueError) as e:
        return _reject(f"bad rules: {e}")
    return _reply(new_session(rules))


def _apply(action, *args) -> Any:
    body = _json_body()
    if body is None:
        return _reject("request body must be a JSON object")
    try:
        state = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _reject(f"bad state: {e}")
    try:
        return _reply(action(state, *args))
    except (IllegalActionError, EngineError) as e:
        return _reject(str(e))


@app.post("/api/place")
def api_place() -> Any:
    body = _json_body()
    if body is None:
        return _reject("request body must be a JSON object")
    index = body.get("index")
    if isinstance(index, bool) or not isinstance(index, int):
        return _reject("index required")
    return _apply(place, index)


@app.post("/api/skip")
def api_skip() -> Any:
    return _apply(skip)


@app.post("/api/observe")
def api_observe() -> Any:
    body = _json_body()
    if body is None:
        return _reject("request body must be a JSON object")
    seed = body.get("seed")
    if seed is None:
        draw = random.random
    elif isinstance(seed, bool) or not isinstance(seed, int):
        return _reject(f"bad seed: expected an integer, got {seed!r}")
    else:
        draw = random.Random(seed).random
    return _apply(observe, draw)


@app.post("/api/revert")
def api_revert() -> Any:
    return _apply(revert)


@app.post("/api/reset")
def api_reset() -> Any:
    return _apply(reset)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
