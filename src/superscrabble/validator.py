from typing import AbstractSet, Optional

from .board import Board, Word
from .config import DEFAULT_CONFIG, GameConfig
from .lexicon import Lexicon, LexiconLike, require_lexicon
from .overlay import BoardOverlay, find_boundary_word
from .tiles import Tile


def _acceptable(text: str, lexicon: Lexicon, played: AbstractSet[str]) -> bool:
    # Words already on the board may always be formed again.
    return text in lexicon or text in played


def verify_move(
    board: Board,
    word: Word,
    lexicon: Optional[LexiconLike],
    config: GameConfig = DEFAULT_CONFIG,
) -> bool:
    """Return True if ``word`` can legally be played on ``board``.

    Checks:
    * every letter lands on the grid (no wrapping onto another row),
    * no letter overwrites a different tile,
    * the full run along the word's direction, including tiles already touching
      either end, is in the lexicon or was played before,
    * every perpendicular run through a newly placed letter is too.

    ``config`` may add the new-tile and centre-square house rules.

    The board is read through a :class:`BoardOverlay`; it is never modified.
    Pass a :class:`Lexicon` when calling this in a loop: any other collection
    is copied into one on every call.
    """
    lexicon = require_lexicon(lexicon)

    if word.start.size != board.size or not word.fits():
        return False

    positions = word.positions()
    new_squares = []
    for p, ch in zip(positions, word.text):
        existing = board.get(p)
        if existing is None:
            new_squares.append(p)
        elif existing != Tile.from_char(ch):
            return False

    if config.require_new_tile and not new_squares:
        return False
    if config.require_center_on_empty and board.is_empty() and board.center not in positions:
        return False

    played = board.played_texts()
    overlay = BoardOverlay(board, word)

    main = find_boundary_word(overlay, word.start, word.direction)
    main_text = main.text if main is not None else word.text
    if not _acceptable(main_text, lexicon, played):
        return False

    across = word.direction.opposite()
    for p in new_squares:
        cross = find_boundary_word(overlay, p, across)
        if cross is not None and not _acceptable(cross.text, lexicon, played):
            return False

    return True
