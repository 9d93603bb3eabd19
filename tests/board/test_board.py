import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from superscrabble.board import Board, Word
from superscrabble.geometry import Direction
from superscrabble.tiles import Tile


def _occupied(board):
    return {p for p, _ in board.enumerate_letters()}


def _covered_by_moves(board):
    covered = set()
    for w in board.moves:
        covered.update(w.positions())
    return covered


def test_new_board_is_empty():
    board = Board(Board.DEFAULT_SIZE)
    assert board.size == 21
    assert board.is_empty()
    assert board.moves == ()
    assert board.center == board.position(10, 10)


def test_make_move_writes_tiles_and_history():
    board = Board()
    word = board.make_move(11, 11, "HELLO", Direction.RIGHT)
    assert board.get_at(11, 11) is Tile.H
    assert board.get_at(11, 15) is Tile.O
    assert board.get_at(12, 11) is None
    # the committed word is recorded from its first letter
    assert word.start == board.position(11, 11)
    assert board.moves == (word,)


def test_committed_words_match_occupied_squares():
    board = Board()
    board.make_move(11, 11, "HELLO", Direction.RIGHT)
    board.make_move(5, 13, "RADICAL", Direction.DOWN)
    assert _occupied(board) == _covered_by_moves(board)
    for w in board.moves:
        for p, ch in zip(w.positions(), w.text):
            assert board.get(p) is Tile.from_char(ch)


def test_commit_rejects_conflicts_without_writing():
    board = Board()
    board.make_move(11, 11, "HELLO", Direction.RIGHT)
    with pytest.raises(ValueError):
        board.make_move(11, 11, "HELD", Direction.RIGHT)
    assert board.get_at(11, 14) is Tile.L
    assert len(board.moves) == 1


def test_commit_rejects_words_off_the_board():
    board = Board()
    with pytest.raises(ValueError):
        board.make_move(0, 19, "HELLO", Direction.RIGHT)
    with pytest.raises(ValueError):
        board.make_move(18, 0, "HELLO", Direction.DOWN)
    assert board.is_empty()


def test_word_positions_report_off_board_letters():
    word = Word.at(0, 19, Direction.RIGHT, "HEY", 21)
    positions = word.positions()
    assert positions[0] is not None and positions[1] is not None
    assert positions[2] is None
    assert not word.fits()


def test_from_string_records_runs_as_moves():
    board = Board.from_string("\n".join([
        ".......",
        "..C....",
        "..AT...",
        "..T....",
        ".......",
        ".....Q.",
        ".......",
    ]))
    assert board.size == 7
    texts = sorted(w.text for w in board.moves)
    assert texts == ["AT", "CAT", "Q"]
    assert _occupied(board) == _covered_by_moves(board)


def test_to_string_round_trip():
    rows = [
        ".....",
        ".HI..",
        "..?..",
        ".....",
        ".....",
    ]
    board = Board.from_string("\n".join(rows))
    assert board.get_at(2, 2) is Tile.BLANK
    assert board.to_string() == "\n".join(rows)


def test_from_string_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_string("...\n..")
    with pytest.raises(ValueError):
        Board.from_string("...\n.a.\n...")


def test_copy_is_independent():
    board = Board()
    board.make_move(11, 11, "HELLO", Direction.RIGHT)
    other = board.copy()
    other.make_move(11, 15, "OX", Direction.DOWN)
    assert board.get_at(12, 15) is None
    assert len(board.moves) == 1
    assert len(other.moves) == 2
