import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from superscrabble.board import Board, Word
from superscrabble.config import DEFAULT_CONFIG
from superscrabble.geometry import Direction
from superscrabble.lexicon import EmptyLexicon, LexiconUnset
from superscrabble.move_generator import best_move, best_moves
from superscrabble.tiles import parse_rack
from superscrabble.validator import verify_move


def test_best_move_rejects_invalid_extended_main_word():
    # Board has an existing horizontal word FANEZ.
    # Playing ZAMU across from the existing Z would actually form FANEZAMU,
    # which must be dictionary-valid. It is not, so only the downward ZAMU is legal.
    board = Board.from_string(
        "\n".join(
            [
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
                "...............",
                ".......FANEZ...",
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

    dictionary = {"ZAMU"}
    across = Word.at(7, 11, Direction.RIGHT, "ZAMU", 15)
    assert not verify_move(board, across, dictionary)

    move = best_move(board, parse_rack("A?MELNR"), dictionary)
    assert move is not None
    assert move.word == Word.at(7, 11, Direction.DOWN, "ZAMU", 15)
    # Z is already on the board: face value, no premiums on this plain board
    assert move.score == 10 + 1 + 3 + 1
    assert all(m.word.direction is Direction.DOWN for m in best_moves(board, parse_rack("A?MELNR"), dictionary))


def test_extension_through_existing_tiles_uses_full_run():
    board = Board()
    board.make_move(11, 11, "HELL", Direction.RIGHT)
    candidate = Word.at(11, 14, Direction.RIGHT, "LO")
    assert verify_move(board, candidate, {"LO", "HELLO"})
    assert not verify_move(board, candidate, {"LO"})


def test_previously_played_words_may_be_formed_again():
    board = Board()
    board.make_move(11, 11, "HELL", Direction.RIGHT)
    board.make_move(3, 3, "HELLO", Direction.RIGHT)
    # HELLO is not in the lexicon but already stands on the board
    assert verify_move(board, Word.at(11, 14, Direction.RIGHT, "LO"), {"LO"})


def test_out_of_bounds_candidates_are_illegal_not_errors():
    board = Board()
    board.make_move(11, 11, "RUST", Direction.RIGHT)
    lexicon = {"RUST", "TRUST"}
    assert not verify_move(board, Word.at(11, 18, Direction.RIGHT, "RUST"), lexicon)
    assert not verify_move(board, Word.at(0, 20, Direction.RIGHT, "RUST"), lexicon)
    assert not verify_move(board, Word.at(19, 3, Direction.DOWN, "RUST"), lexicon)


def test_conflicting_letters_are_illegal():
    board = Board()
    board.make_move(11, 11, "HELLO", Direction.RIGHT)
    assert not verify_move(board, Word.at(11, 11, Direction.RIGHT, "HELD"), {"HELD"})


def test_any_in_bounds_opening_word_is_legal():
    board = Board()
    assert verify_move(board, Word.at(10, 8, Direction.RIGHT, "HELLO"), {"HELLO"})
    assert verify_move(board, Word.at(0, 0, Direction.RIGHT, "HELLO"), {"HELLO"})


def test_opening_word_must_cover_centre_when_required():
    board = Board()
    centre_rule = DEFAULT_CONFIG.replace(require_center_on_empty=True)
    assert verify_move(board, Word.at(10, 8, Direction.RIGHT, "HELLO"), {"HELLO"}, centre_rule)
    assert not verify_move(board, Word.at(0, 0, Direction.RIGHT, "HELLO"), {"HELLO"}, centre_rule)


def test_missing_lexicon_is_reported():
    board = Board()
    board.make_move(11, 11, "HELLO", Direction.RIGHT)
    with pytest.raises(LexiconUnset):
        verify_move(board, Word.at(11, 12, Direction.DOWN, "EH"), None)
    with pytest.raises(LexiconUnset):
        best_moves(board, parse_rack("ABC"), None)
    with pytest.raises(EmptyLexicon):
        best_moves(board, parse_rack("ABC"), [])
