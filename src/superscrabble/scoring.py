from typing import List, Optional, Tuple

from .board import Board, Word
from .config import DEFAULT_CONFIG, GameConfig
from .geometry import Position
from .overlay import BoardOverlay, find_boundary_word
from .tiles import Tile


def _word_sum(board: Board, word: Word, premium_square: Optional[Position] = None) -> int:
    """Letter sum times word multiplier for one word.

    Premiums count only on squares still empty on the real board. With
    ``premium_square`` set, that square is the only one allowed to use them.
    """
    premiums = board.premiums
    total = 0
    word_mult = 1
    for p, ch in zip(word.positions(), word.text):
        value = Tile.from_char(ch).score
        if p is None:
            total += value
            continue
        if board.get(p) is None and (premium_square is None or p == premium_square):
            value *= premiums.letter_at(p)
            word_mult *= premiums.word_at(p)
        total += value
    return total * word_mult


def cross_words(board: Board, word: Word) -> List[Tuple[Position, Word]]:
    """Perpendicular words completed by newly placed letters, keyed by that letter's square."""
    overlay = BoardOverlay(board, word)
    across = word.direction.opposite()
    found = []
    for p in word.positions():
        if p is None or board.get(p) is not None:
            continue
        cross = find_boundary_word(overlay, p, across)
        if cross is not None:
            found.append((p, cross))
    return found


def get_score(
    board: Board,
    word: Word,
    secondary: Optional[Position] = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> int:
    """Points for playing ``word`` on ``board``. The board is never modified.

    Without ``secondary`` this scores a primary play: the word itself, plus every
    cross word formed by a newly placed letter (each scored with premiums from
    that letter's square only, outside the primary word multiplier), plus the
    length bonus.

    With ``secondary`` it scores ``word`` as a cross word triggered by the letter
    on that square; cross words never spawn further cross words.
    """
    if secondary is not None:
        return _word_sum(board, word, premium_square=secondary)

    total = _word_sum(board, word)
    for shared, cross in cross_words(board, word):
        total += _word_sum(board, cross, premium_square=shared)

    if len(word.text) == config.bonus_length:
        total += config.bonus_score
    return total
