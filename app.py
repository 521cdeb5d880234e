from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request, send_from_directory

from game import (
    CanonicalBoard,
    CellValue,
    GameState,
    MODE_DESCRIPTIONS,
    MODE_LABELS,
    Mode,
    active_mask,
    apply_move,
    echo_cells,
    legal_moves,
    map_to_canonical,
    new_game,
    parse_mode,
    reduce,
    status_text,
    Reset,
    SetMode,
)

DEBUG = os.getenv("TOPOTTT_DEBUG", os.getenv("FLASK_DEBUG", "0")).lower() in ("1", "true", "yes", "on")
DEFAULT_MODE = parse_mode(os.getenv("TOPOTTT_DEFAULT_MODE", Mode.TORUS.value))

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO,
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


# ---------- JSON <-> state ----------

def _cell_to_json(cell: CellValue) -> Optional[str]:
    return cell.value


def _cell_from_json(v: Any) -> CellValue:
    return CellValue(v if v is None else str(v))


def board_to_json(b: CanonicalBoard) -> List[List[Optional[str]]]:
    return [[_cell_to_json(c) for c in row] for row in b.rows()]


def board_from_json(rows: Any) -> CanonicalBoard:
    if not isinstance(rows, list):
        raise ValueError("board must be a list of rows")
    for row in rows:
        if not isinstance(row, list) or len(row) != 3:
            raise ValueError("each board row must be a list of 3 cells")
    return CanonicalBoard.from_rows([_cell_from_json(v) for v in row] for row in rows)


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "mode": s.mode.value,
        "board": board_to_json(s.board),
        "turn": s.turn.value,
        "lastMove": [int(s.last_move[0]), int(s.last_move[1])] if s.last_move is not None else None,
    }


def json_to_state(obj: Any) -> GameState:
    if not isinstance(obj, dict):
        raise ValueError("state must be an object")
    turn = _cell_from_json(obj.get("turn", "X"))
    if turn is CellValue.EMPTY:
        raise ValueError("turn must be 'X' or 'O'")
    lm = obj.get("lastMove")
    last_move = None
    if lm is not None:
        if not isinstance(lm, list) or len(lm) != 2:
            raise ValueError("lastMove must be [col, row] or null")
        last_move = (int(lm[0]), int(lm[1]))
        if not (0 <= last_move[0] <= 2 and 0 <= last_move[1] <= 2):
            raise ValueError("lastMove out of range")
    return GameState(
        mode=parse_mode(obj["mode"]),
        board=board_from_json(obj["board"]),
        turn=turn,
        last_move=last_move,
    )


def view_to_json(s: GameState) -> Dict[str, Any]:
    """Everything the front end needs to draw the 9x9 display."""
    res = s.result
    echo = sorted(echo_cells(s.last_move, s.mode)) if s.last_move is not None else []
    return {
        "grid": [[_cell_to_json(c) for c in row] for row in s.visual_grid],
        "active": [list(row) for row in active_mask(s.mode)],
        "winner": res.winner.value if res else None,
        "line": [[gx, gy] for (gx, gy) in res.line] if res else None,
        "draw": s.is_draw,
        "status": status_text(s),
        "echo": [[gx, gy] for (gx, gy) in echo],
        "legalMoves": [[gx, gy] for (gx, gy) in legal_moves(s)],
    }


def _ok_state(s: GameState) -> Any:
    return jsonify({"ok": True, "state": state_to_json(s), "view": view_to_json(s)})


def _bad_request(msg: str, **extra: Any) -> Any:
    logger.debug("bad request: %s", msg)
    body: Dict[str, Any] = {"ok": False, "error": msg}
    body.update(extra)
    return jsonify(body), 400


def _request_body() -> Optional[Dict[str, Any]]:
    """The JSON request body, {} when absent, None when it is not an object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _state_from_body(body: Dict[str, Any]) -> GameState:
    return json_to_state(body.get("state"))


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


# ---------- Game API (used by main.js) ----------

@app.get("/api/modes")
def api_modes() -> Any:
    return jsonify({
        "ok": True,
        "modes": [
            {"value": m.value, "label": MODE_LABELS[m], "description": MODE_DESCRIPTIONS[m]}
            for m in Mode
        ],
        "default": DEFAULT_MODE.value,
    })


@app.post("/api/new")
def api_new() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        mode = parse_mode(body["mode"]) if body.get("mode") else DEFAULT_MODE
    except ValueError as e:
        return _bad_request(str(e))
    logger.info("new game in %s mode", mode.value)
    return _ok_state(new_game(mode))


@app.post("/api/view")
def api_view() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        state = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return _ok_state(state)


@app.post("/api/move")
def api_move() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        state = _state_from_body(body)
        gx, gy = (int(v) for v in body["move"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")
    legal = legal_moves(state)
    if (gx, gy) not in legal:
        return _bad_request("Illegal move", legalMoves=[[x, y] for (x, y) in legal])
    next_state = apply_move(state, gx, gy)
    logger.debug("%s played (%d, %d) -> center %s", state.turn.value, gx, gy, next_state.last_move)
    return _ok_state(next_state)


@app.post("/api/mode")
def api_mode() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        state = _state_from_body(body)
        mode = parse_mode(body["mode"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")
    return _ok_state(reduce(state, SetMode(mode)))


@app.post("/api/reset")
def api_reset() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        state = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return _ok_state(reduce(state, Reset()))


@app.post("/api/map")
def api_map() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        mode = parse_mode(body["mode"])
        gx, gy = (int(v) for v in body["cell"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")
    if not (0 <= gx <= 8 and 0 <= gy <= 8):
        return _bad_request("cell out of range")
    target = map_to_canonical(gx, gy, mode)
    return jsonify({"ok": True, "canonical": list(target) if target is not None else None})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")), debug=DEBUG)
