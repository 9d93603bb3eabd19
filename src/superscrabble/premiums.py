from dataclasses import dataclass

import numpy as np

from .geometry import Position

DEFAULT_SIZE = 21

# Super Scrabble layouts, 21x21. '.' is 1 (no bonus), digits are multipliers.
WORD_LAYOUT = """
4......3.....3......4
.2......2...2......2.
..2......2.2......2..
...3......3......3...
....2...........2....
.....2.........2.....
......2.......2......
3......2.....2......3
.2.................2.
..2...............2..
...3......2......3...
..2...............2..
.2.................2.
3......2.....2......3
......2.......2......
.....2.........2.....
....2...........2....
...3......3......3...
..2......2.2......2..
.2......2...2......2.
4......3.....3......4
"""

LETTER_LAYOUT = """
...2......2......2...
....3...........3....
.....4.........4.....
2.....2.......2.....2
.3......3...3......3.
..4......2.2......4..
...2......2......2...
.....................
....3...3...3...3....
.....2...2.2...2.....
2.....2.......2.....2
.....2...2.2...2.....
....3...3...3...3....
.....................
...2......2......2...
..4......2.2......4..
.3......3...3......3.
2.....2.......2.....2
.....4.........4.....
....3...........3....
...2......2......2...
"""


def parse_layout(layout: str) -> np.ndarray:
    rows = [line.strip() for line in layout.strip().splitlines() if line.strip()]
    size = len(rows)
    if any(len(r) != size for r in rows):
        raise ValueError(f"Premium layout must be {size} lines of {size} characters")
    grid = np.ones((size, size), dtype=np.int8)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == '.':
                continue
            if not ch.isdigit() or ch == '0':
                raise ValueError(f"Invalid premium character: {ch}")
            grid[r, c] = int(ch)
    return _frozen(grid)


def _frozen(grid: np.ndarray) -> np.ndarray:
    grid = np.array(grid, dtype=np.int8)
    grid.setflags(write=False)
    return grid


@dataclass(frozen=True, eq=False)
class PremiumTables:
    """Letter and word multiplier grids, read-only for the process lifetime."""

    letter: np.ndarray
    word: np.ndarray

    def __post_init__(self) -> None:
        letter = _frozen(self.letter)
        word = _frozen(self.word)
        if letter.ndim != 2 or letter.shape[0] != letter.shape[1]:
            raise ValueError("Premium grids must be square")
        if letter.shape != word.shape:
            raise ValueError("Letter and word premium grids must have the same shape")
        if (letter < 1).any() or (word < 1).any():
            raise ValueError("Premiums must be positive")
        object.__setattr__(self, "letter", letter)
        object.__setattr__(self, "word", word)

    @property
    def size(self) -> int:
        return int(self.letter.shape[0])

    def letter_at(self, position: Position) -> int:
        return int(self.letter.flat[position.index])

    def word_at(self, position: Position) -> int:
        return int(self.word.flat[position.index])

    @staticmethod
    def plain(size: int) -> "PremiumTables":
        ones = np.ones((size, size), dtype=np.int8)
        return PremiumTables(ones, ones)

    @staticmethod
    def from_layouts(letter_layout: str, word_layout: str) -> "PremiumTables":
        return PremiumTables(parse_layout(letter_layout), parse_layout(word_layout))


SUPER_SCRABBLE_PREMIUMS = PremiumTables.from_layouts(LETTER_LAYOUT, WORD_LAYOUT)


def default_premiums(size: int = DEFAULT_SIZE) -> PremiumTables:
    """Return the Super Scrabble layout for 21x21, plain tables otherwise."""
    if size != DEFAULT_SIZE:
        return PremiumTables.plain(size)
    return SUPER_SCRABBLE_PREMIUMS
