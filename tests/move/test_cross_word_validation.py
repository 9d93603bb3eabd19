import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from superscrabble.board import Board, Word
from superscrabble.config import DEFAULT_CONFIG
from superscrabble.geometry import Direction
from superscrabble.move_generator import best_move
from superscrabble.tiles import parse_rack
from superscrabble.validator import verify_move


def _rust_radical_board():
    board = Board()
    board.make_move(11, 11, "RUST", Direction.RIGHT)
    board.make_move(11, 11, "RADICAL", Direction.DOWN)
    return board


def test_rust_one_row_above_crossing_is_rejected():
    board = _rust_radical_board()
    lexicon = {"RUST", "RADICAL"}
    # R would sit on top of RADICAL, forming RRADICAL down column 11
    assert not verify_move(board, Word.at(10, 11, Direction.RIGHT, "RUST"), lexicon)


def test_replaying_a_word_in_place_is_legal_unless_a_new_tile_is_required():
    board = _rust_radical_board()
    lexicon = {"RUST", "RADICAL"}
    in_place = Word.at(11, 11, Direction.RIGHT, "RUST")
    assert verify_move(board, in_place, lexicon)

    strict = DEFAULT_CONFIG.replace(require_new_tile=True)
    assert not verify_move(board, in_place, lexicon, strict)


def test_covering_part_of_a_played_word_is_legal():
    board = Board()
    board.make_move(11, 11, "HELLO", Direction.RIGHT)
    board.make_move(5, 13, "RADICAL", Direction.DOWN)
    # AL lies on RADICAL's last two tiles; the full run is RADICAL itself
    covered = Word.at(10, 13, Direction.DOWN, "AL")
    assert verify_move(board, covered, {"AL"})
    assert not verify_move(board, covered, {"AL"}, DEFAULT_CONFIG.replace(require_new_tile=True))


def test_parallel_placement_needs_valid_cross_words():
    board = _rust_radical_board()
    # "US" under "UST": U(12,12) below U, S(12,13) below S -> "UU" and "SS"
    candidate = Word.at(12, 12, Direction.RIGHT, "US")
    assert not verify_move(board, candidate, {"US"})
    # with both cross words allowed the only remaining run across row 12 is "AUS"
    assert not verify_move(board, candidate, {"US", "UU", "SS"})
    assert verify_move(board, candidate, {"AUS", "UU", "SS"})


def test_best_move_rejects_invalid_cross_words():
    # Existing board letters:
    # - D at (5,3)
    # - A at (6,3)
    # - R at (7,4)
    # Candidate main word: ANOR anchored on R, down from (4,4) or across from (7,1).
    # Down creates cross words like "DN" and "AO", across creates "DAO"; none are valid.
    board = Board.from_string(
        "\n".join(
            [
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
                "...D...........",
                "...A...........",
                "....R..........",
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
            ]
        )
    )

    dictionary = {"ANOR"}
    move = best_move(board, parse_rack("ANO"), dictionary)
    assert move is None
