import itertools
import logging
import os
import threading
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from .board import Board
from .config import DEFAULT_CONFIG, GameConfig
from .geometry import Direction
from .lexicon import Lexicon, LexiconLike, load_dictionary
from .move_generator import ScoredMove, best_moves
from .tiles import parse_rack

logger = logging.getLogger(__name__)

MAX_TOP = 100


def _move_json(board: Board, move: ScoredMove) -> Dict[str, Any]:
    word = move.word
    r, c = word.start.coords
    placed = []
    for p, ch in zip(word.positions(), word.text):
        if board.get(p) is None:
            placed.append({"row": p.row, "col": p.col, "letter": ch})
    return {
        "word": word.text,
        "row": r,
        "col": c,
        "dir": word.direction.value,
        "score": move.score,
        "placed": placed,
    }


def _board_from_request(data: Dict[str, Any], size: int) -> Board:
    board_string = data.get("boardString")
    board = Board.from_string(str(board_string)) if board_string else Board(size)
    moves = data.get("moves") or []
    if not isinstance(moves, list):
        raise TypeError("moves must be a list")
    for m in moves:
        if not isinstance(m, dict):
            raise TypeError("each move must be an object")
        board.make_move(int(m["row"]), int(m["col"]), str(m["word"]).upper(), Direction.parse(str(m["dir"])))
    return board


def create_app(dictionary_path: Optional[str] = None, lexicon: Optional[LexiconLike] = None) -> Flask:
    app = Flask(__name__)
    dict_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../dictionaries"))
    app.config["DICTIONARY_PATH"] = (
        dictionary_path
        or os.environ.get("SUPERSCRABBLE_DICT")
        or os.path.join(dict_dir, "en_small.txt")
    )

    _dict_lock = threading.Lock()
    _dict_cache: Dict[str, Lexicon] = {}
    if lexicon is not None:
        _dict_cache["lexicon"] = Lexicon.from_words(lexicon)

    def _lexicon() -> Lexicon:
        with _dict_lock:
            if "lexicon" not in _dict_cache:
                _dict_cache["lexicon"] = load_dictionary(app.config["DICTIONARY_PATH"])
            return _dict_cache["lexicon"]

    def _config(data: Dict[str, Any]) -> GameConfig:
        return DEFAULT_CONFIG.replace(
            bonus_length=data.get("bonusLength"),
            bonus_score=data.get("bonusScore"),
            require_new_tile=data.get("requireNewTile"),
            require_center_on_empty=data.get("requireCenter"),
            dedupe_candidates=data.get("dedupe"),
        )

    def _json_body() -> Optional[Dict[str, Any]]:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        return data if isinstance(data, dict) else None

    def _ranked(data: Dict[str, Any], top: int):
        rack_text = data.get("rack")
        if not isinstance(rack_text, str) or not rack_text.strip():
            return None, (jsonify({"error": "rack is required"}), 400)
        try:
            config = _config(data)
            rack = parse_rack(rack_text)
            board = _board_from_request(data, config.board_size)
        except (AttributeError, KeyError, TypeError, ValueError, IndexError) as exc:
            return None, (jsonify({"error": f"invalid request: {exc}"}), 400)
        try:
            lex = _lexicon()
        except OSError as exc:
            logger.error("Dictionary unavailable: %s", exc)
            return None, (jsonify({"error": f"dictionary not available: {app.config['DICTIONARY_PATH']}"}), 500)
        moves: List[ScoredMove] = list(itertools.islice(best_moves(board, rack, lex, config), top))
        return [_move_json(board, m) for m in moves], None

    @app.get("/api/health")
    def health():
        try:
            words = len(_lexicon())
        except OSError:
            return jsonify({"ok": False, "words": 0}), 503
        return jsonify({"ok": True, "words": words})

    @app.post("/api/move/best")
    def api_best_move():
        data = _json_body()
        if data is None:
            return jsonify({"error": "request body must be a JSON object"}), 400
        moves, error = _ranked(data, 1)
        if error is not None:
            return error
        return jsonify({"move": moves[0] if moves else None})

    @app.post("/api/moves")
    def api_moves():
        data = _json_body()
        if data is None:
            return jsonify({"error": "request body must be a JSON object"}), 400
        try:
            top = int(data.get("top", 10))
        except (TypeError, ValueError):
            return jsonify({"error": "top must be an integer"}), 400
        if not (1 <= top <= MAX_TOP):
            return jsonify({"error": f"top must be between 1 and {MAX_TOP}"}), 400
        moves, error = _ranked(data, top)
        if error is not None:
            return error
        return jsonify({"moves": moves})

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="127.0.0.1", port=8765, debug=True)
