import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from .geometry import Direction, Position
from .premiums import DEFAULT_SIZE, PremiumTables, default_premiums
from .tiles import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Word:
    """A word laid from ``start`` along ``direction``: a candidate or a committed play."""

    start: Position
    direction: Direction
    text: str

    @staticmethod
    def at(row: int, col: int, direction: Direction, text: str, size: int = DEFAULT_SIZE) -> "Word":
        return Word(Position.from_coords(row, col, size), direction, text)

    def positions(self) -> List[Optional[Position]]:
        """Square of each letter; None for letters that fall off the grid."""
        return [self.start.step(self.direction, i) for i in range(len(self.text))]

    @property
    def end(self) -> Optional[Position]:
        return self.start.step(self.direction, len(self.text) - 1)

    def fits(self) -> bool:
        return len(self.text) > 0 and self.end is not None

    def covers(self, position: Position) -> Optional[int]:
        """Index of the letter landing on ``position``, or None."""
        if position.size != self.start.size:
            return None
        dr, dc = self.direction.delta
        i = (position.row - self.start.row) if dr else (position.col - self.start.col)
        if not (0 <= i < len(self.text)):
            return None
        if self.start.step(self.direction, i) != position:
            return None
        return i

    def __str__(self) -> str:
        r, c = self.start.coords
        return f"{self.text} at ({r},{c}) {self.direction.name}"


class Board:
    """A ``size`` x ``size`` grid of tiles plus the log of committed words.

    Every tile on the grid belongs to at least one committed word; the grid only
    changes through :meth:`commit` (or :meth:`make_move`).
    """

    DEFAULT_SIZE = DEFAULT_SIZE

    def __init__(self, size: int = DEFAULT_SIZE, premiums: Optional[PremiumTables] = None):
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        if premiums is None:
            premiums = default_premiums(size)
        if premiums.size != size:
            raise ValueError(f"Premium tables are {premiums.size}x{premiums.size}, board is {size}x{size}")
        self._size = size
        self._premiums = premiums
        self._cells: List[Optional[Tile]] = [None] * (size * size)
        self._moves: List[Word] = []

    @property
    def size(self) -> int:
        return self._size

    @property
    def premiums(self) -> PremiumTables:
        return self._premiums

    @property
    def moves(self) -> Sequence[Word]:
        return tuple(self._moves)

    @property
    def center(self) -> Position:
        return self.position(self._size // 2, self._size // 2)

    def position(self, row: int, col: int) -> Position:
        return Position.from_coords(row, col, self._size)

    def get(self, position: Position) -> Optional[Tile]:
        return self._cells[position.index]

    def get_at(self, row: int, col: int) -> Optional[Tile]:
        return self.get(self.position(row, col))

    def set(self, position: Position, tile: Optional[Tile]) -> None:
        # Only commit() writes the grid; validation never does.
        self._cells[position.index] = tile

    def is_empty(self) -> bool:
        return all(cell is None for cell in self._cells)

    def enumerate_letters(self) -> Iterator[Tuple[Position, Tile]]:
        for index, tile in enumerate(self._cells):
            if tile is not None:
                yield Position(index, self._size), tile

    def played_texts(self) -> FrozenSet[str]:
        return frozenset(w.text for w in self._moves)

    def commit(self, word: Word) -> Word:
        if word.start.size != self._size:
            raise ValueError(f"{word} belongs to a {word.start.size}x{word.start.size} grid")
        positions = word.positions()
        if not word.text or any(p is None for p in positions):
            raise ValueError(f"{word} does not fit on the board")
        tiles = [Tile.from_char(ch) for ch in word.text]
        for p, tile in zip(positions, tiles):
            existing = self.get(p)
            if existing is not None and existing != tile:
                raise ValueError(f"{word} conflicts with {existing.to_char()!r} at {p.coords}")
        for p, tile in zip(positions, tiles):
            self.set(p, tile)
        self._moves.append(word)
        logger.debug("Committed %s", word)
        return word

    def make_move(self, row: int, col: int, text: str, direction: Direction) -> Word:
        return self.commit(Word(self.position(row, col), direction, text))

    def copy(self) -> "Board":
        other = Board(self._size, self._premiums)
        other._cells = list(self._cells)
        other._moves = list(self._moves)
        return other

    @staticmethod
    def from_string(multiline: str, premiums: Optional[PremiumTables] = None) -> "Board":
        """Build a board from rows of '.' (empty), 'A'-'Z' and '?' (blank).

        Every maximal run of tiles is recorded as a committed word; a tile with
        no neighbour becomes a one-letter word.
        """
        rows = [line.strip() for line in multiline.strip().splitlines() if line.strip()]
        size = len(rows)
        if size == 0 or any(len(r) != size for r in rows):
            raise ValueError(f"Board string must be {size} lines of {size} characters")
        grid: List[List[Optional[str]]] = []
        for r in rows:
            row: List[Optional[str]] = []
            for ch in r:
                if ch == '.':
                    row.append(None)
                elif 'A' <= ch <= 'Z' or ch == '?':
                    row.append(' ' if ch == '?' else ch)
                else:
                    raise ValueError(f"Invalid board character: {ch}")
            grid.append(row)

        board = Board(size, premiums)
        covered = set()
        for direction in (Direction.RIGHT, Direction.DOWN):
            for line in range(size):
                cells = [(line, i) if direction is Direction.RIGHT else (i, line) for i in range(size)]
                run: List[Tuple[int, int]] = []
                for rc in cells + [None]:
                    if rc is not None and grid[rc[0]][rc[1]] is not None:
                        run.append(rc)
                        continue
                    if len(run) >= 2:
                        text = "".join(grid[r][c] for r, c in run)
                        board.make_move(run[0][0], run[0][1], text, direction)
                        covered.update(run)
                    run = []
        for r in range(size):
            for c in range(size):
                if grid[r][c] is not None and (r, c) not in covered:
                    board.make_move(r, c, grid[r][c], Direction.RIGHT)
        return board

    def to_string(self) -> str:
        lines = []
        for r in range(self._size):
            row = self._cells[r * self._size:(r + 1) * self._size]
            lines.append("".join('.' if t is None else ('?' if t is Tile.BLANK else t.to_char()) for t in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()
