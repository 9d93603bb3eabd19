"""What-if reads: the real board as it would look with one candidate word applied."""

from typing import Dict, Optional, Protocol

from .board import Board, Word
from .geometry import Direction, Position
from .tiles import Tile


class TileView(Protocol):
    def get(self, position: Position) -> Optional[Tile]:
        ...


class BoardOverlay:
    """Read-only view of ``board`` with ``word`` laid on top.

    Squares covered by the candidate read the candidate's letter; every other
    square reads the real board. Letters of the candidate that fall off the grid
    are simply not part of the view.
    """

    def __init__(self, board: Board, word: Word):
        self.board = board
        self.word = word
        self._placed: Dict[int, Tile] = {}
        for p, ch in zip(word.positions(), word.text):
            if p is not None:
                self._placed[p.index] = Tile.from_char(ch)

    def get(self, position: Position) -> Optional[Tile]:
        tile = self._placed.get(position.index)
        if tile is not None:
            return tile
        return self.board.get(position)


def find_boundary_word(view: TileView, position: Position, direction: Direction) -> Optional[Word]:
    """Return the full run of tiles through ``position`` along ``direction``.

    Scans backwards then forwards until an empty square or the edge. Returns None
    if ``position`` is empty or has no neighbour on that axis.
    """
    if view.get(position) is None:
        return None

    start = position
    while True:
        prev = start.step(direction, -1)
        if prev is None or view.get(prev) is None:
            break
        start = prev

    end = position
    while True:
        nxt = end.step(direction, 1)
        if nxt is None or view.get(nxt) is None:
            break
        end = nxt

    if start == end:
        return None

    chars = []
    cur = start
    while True:
        chars.append(view.get(cur).to_char())
        if cur == end:
            break
        cur = cur.step(direction, 1)
    return Word(start, direction, "".join(chars))
